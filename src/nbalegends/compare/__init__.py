"""Category comparison across player records."""

from .categories import (
    CATEGORIES,
    INSUFFICIENT_PLAYERS_MESSAGE,
    Category,
    compare_players,
    pick_winner,
)

__all__ = [
    "CATEGORIES",
    "INSUFFICIENT_PLAYERS_MESSAGE",
    "Category",
    "compare_players",
    "pick_winner",
]
