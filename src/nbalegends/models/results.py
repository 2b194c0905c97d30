"""Per-request result payloads for comparisons and chat turns."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from .player import Player


class CategoryResult(BaseModel):
    winner: str
    stats: Dict[str, float]

    model_config = ConfigDict(frozen=True)


class ComparisonResult(BaseModel):
    """Resolved players plus the winner of every statistical category."""

    comparison: str
    players: List[Player] = Field(default_factory=list)
    categories: Dict[str, CategoryResult] = Field(default_factory=dict)
    ok: bool = True

    model_config = ConfigDict(frozen=True)


class ChatTurn(BaseModel):
    response: str
    context: Optional[str] = None
    suggestions: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
