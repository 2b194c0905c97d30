"""Archetype-based generation of synthetic player records."""

from .archetypes import ARCHETYPES, TEAM_POOL, Archetype, StatRange, display_name, generate_player

__all__ = ["ARCHETYPES", "TEAM_POOL", "Archetype", "StatRange", "display_name", "generate_player"]
