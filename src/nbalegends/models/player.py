"""Canonical player records shared by the store, generator and API layers."""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


_RECORD_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class CareerStats(BaseModel):
    """Career averages for a single player."""

    games_played: int = Field(..., ge=0)
    points_per_game: float = Field(..., ge=0.0)
    rebounds_per_game: float = Field(..., ge=0.0)
    assists_per_game: float = Field(..., ge=0.0)
    field_goal_percentage: float = Field(..., ge=0.0, le=100.0)
    free_throw_percentage: float = Field(..., ge=0.0, le=100.0)
    three_point_percentage: Optional[float] = Field(default=None, ge=0.0, le=100.0)

    model_config = _RECORD_CONFIG


class Player(BaseModel):
    """Immutable athlete profile; enrichment goes through ``model_copy``."""

    name: str = Field(..., min_length=1)
    position: str
    height: str
    weight: int = Field(..., ge=0)
    years_active: str
    teams: Tuple[str, ...]
    career_stats: CareerStats
    achievements: Tuple[str, ...] = ()
    championships: int = Field(..., ge=0)
    toughness_of_league_index: Optional[float] = Field(default=None, ge=1.0, le=10.0)
    strength_of_team_stats: Optional[float] = Field(default=None, ge=1.0, le=10.0)
    image_url: Optional[str] = None
    generated: bool = False

    model_config = _RECORD_CONFIG

    @property
    def key(self) -> str:
        return self.name.lower()
