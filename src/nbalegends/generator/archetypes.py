"""Synthesize plausible career records for names missing from the store."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Tuple

from nbalegends.models import CareerStats, Player


logger = logging.getLogger("uvicorn.error")

_UNKNOWN_FIRST = "Unknown"
_UNKNOWN_LAST = "Player"

_CHAMPIONSHIP_RANGE = (0, 6)
_GAMES_RANGE = (800, 1400)
_START_YEAR_RANGE = (1970, 2010)
_CAREER_LENGTH_RANGE = (12, 20)
_MVP_PROBABILITY = 0.3
_TOUGHNESS_RANGE = (5.0, 10.0)
_TEAM_STRENGTH_RANGE = (3.0, 10.0)
_INDEX_BOUNDS = (1.0, 10.0)

TEAM_POOL: Tuple[str, ...] = (
    "Lakers",
    "Celtics",
    "Bulls",
    "Warriors",
    "Spurs",
    "Heat",
    "Knicks",
    "Pistons",
    "Rockets",
    "Suns",
    "Nuggets",
    "Trail Blazers",
    "Kings",
    "Hawks",
    "Mavericks",
    "Nets",
    "Cavaliers",
    "Magic",
    "Thunder",
)

STAT_FIELDS: Tuple[str, ...] = (
    "points_per_game",
    "rebounds_per_game",
    "assists_per_game",
    "field_goal_percentage",
    "free_throw_percentage",
    "three_point_percentage",
)


@dataclass(frozen=True)
class StatRange:
    base: float
    spread: float

    def sample(self, rng: random.Random) -> float:
        return self.base + rng.random() * self.spread


@dataclass(frozen=True)
class Archetype:
    """Statistical template a generated player is drawn from."""

    name: str
    position: str
    height: str
    weight: int
    stats: Mapping[str, StatRange]

    def sample_stats(self, rng: random.Random) -> dict[str, float]:
        return {field: round(self.stats[field].sample(rng), 1) for field in STAT_FIELDS}


def _ranges(**pairs: Tuple[float, float]) -> Mapping[str, StatRange]:
    return {field: StatRange(base, spread) for field, (base, spread) in pairs.items()}


ARCHETYPES: Tuple[Archetype, ...] = (
    Archetype(
        name="Scorer",
        position="Shooting Guard",
        height="6'6\"",
        weight=220,
        stats=_ranges(
            points_per_game=(25, 10),
            rebounds_per_game=(4, 4),
            assists_per_game=(4, 3),
            field_goal_percentage=(42, 8),
            free_throw_percentage=(80, 10),
            three_point_percentage=(30, 10),
        ),
    ),
    Archetype(
        name="Point Guard",
        position="Point Guard",
        height="6'3\"",
        weight=200,
        stats=_ranges(
            points_per_game=(15, 10),
            rebounds_per_game=(3, 3),
            assists_per_game=(8, 4),
            field_goal_percentage=(45, 8),
            free_throw_percentage=(85, 10),
            three_point_percentage=(35, 10),
        ),
    ),
    Archetype(
        name="Big Man",
        position="Center",
        height="7'0\"",
        weight=280,
        stats=_ranges(
            points_per_game=(18, 8),
            rebounds_per_game=(10, 5),
            assists_per_game=(2, 2),
            field_goal_percentage=(50, 10),
            free_throw_percentage=(60, 20),
            three_point_percentage=(10, 20),
        ),
    ),
    Archetype(
        name="Small Forward",
        position="Small Forward",
        height="6'8\"",
        weight=240,
        stats=_ranges(
            points_per_game=(20, 10),
            rebounds_per_game=(6, 4),
            assists_per_game=(5, 3),
            field_goal_percentage=(46, 8),
            free_throw_percentage=(75, 15),
            three_point_percentage=(32, 8),
        ),
    ),
)


def display_name(raw_name: str) -> str:
    """Capitalize the first two whitespace tokens, padding with placeholders."""

    tokens = raw_name.split()
    first = tokens[0] if tokens else _UNKNOWN_FIRST
    last = tokens[1] if len(tokens) > 1 else _UNKNOWN_LAST
    return f"{_capitalize(first)} {_capitalize(last)}"


def _capitalize(token: str) -> str:
    return token[:1].upper() + token[1:]


def _clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def _achievements(stats: Mapping[str, float], championships: int, rng: random.Random) -> list[str]:
    achievements: list[str] = []
    if stats["points_per_game"] > 28:
        achievements.append("Multiple Scoring Champion")
    if stats["assists_per_game"] > 10:
        achievements.append("Multiple Assist Leader")
    if stats["rebounds_per_game"] > 12:
        achievements.append("Multiple Rebounding Champion")
    if championships > 2:
        achievements.append(f"{championships}× NBA Champion")
    if championships > 0:
        achievements.append("Finals MVP")
    achievements.append("NBA All-Star")
    achievements.append("Hall of Fame Inductee")
    if rng.random() < _MVP_PROBABILITY:
        achievements.append("NBA MVP")
    return achievements


def _sample_teams(rng: random.Random, pool: Sequence[str] = TEAM_POOL) -> list[str]:
    count = rng.randint(1, 3)
    return rng.sample(list(pool), count)


def generate_player(raw_name: str, rng: Optional[random.Random] = None) -> Player:
    """Build a generated :class:`Player` for ``raw_name``.

    Every call draws fresh values; nothing is cached. Pass a seeded
    ``random.Random`` to get repeatable output.
    """

    rng = rng or random.Random()
    archetype = rng.choice(ARCHETYPES)
    stats = archetype.sample_stats(rng)
    championships = rng.randrange(*_CHAMPIONSHIP_RANGE)
    games = rng.randrange(*_GAMES_RANGE)
    start_year = rng.randrange(*_START_YEAR_RANGE)
    end_year = start_year + rng.randrange(*_CAREER_LENGTH_RANGE)
    achievements = _achievements(stats, championships, rng)
    teams = _sample_teams(rng)
    toughness = _clamp(rng.uniform(*_TOUGHNESS_RANGE), *_INDEX_BOUNDS)
    team_strength = _clamp(rng.uniform(*_TEAM_STRENGTH_RANGE), *_INDEX_BOUNDS)

    name = display_name(raw_name)
    logger.debug("Generated %s from the %s archetype", name, archetype.name)
    return Player(
        name=name,
        position=archetype.position,
        height=archetype.height,
        weight=archetype.weight,
        years_active=f"{start_year}-{end_year}",
        teams=tuple(teams),
        career_stats=CareerStats(games_played=games, **stats),
        achievements=tuple(achievements),
        championships=championships,
        toughness_of_league_index=round(toughness, 1),
        strength_of_team_stats=round(team_strength, 1),
        generated=True,
    )
