"""Shared data models."""

from .player import CareerStats, Player
from .results import CategoryResult, ChatTurn, ComparisonResult

__all__ = ["CareerStats", "Player", "CategoryResult", "ChatTurn", "ComparisonResult"]
