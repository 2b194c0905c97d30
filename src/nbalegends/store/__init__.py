"""Fixed record store for the seeded legends."""

from .legends import LEGENDS, iter_players, known_keys, lookup, normalize_name

__all__ = ["LEGENDS", "iter_players", "known_keys", "lookup", "normalize_name"]
