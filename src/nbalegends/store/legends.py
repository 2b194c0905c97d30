"""Seed records for the legends served without generation."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

from nbalegends.models import CareerStats, Player


def _player(**kwargs) -> Player:
    stats = CareerStats(**kwargs.pop("career_stats"))
    return Player(career_stats=stats, **kwargs)


_SEED_PLAYERS = (
    _player(
        name="Michael Jordan",
        position="Shooting Guard",
        height="6'6\"",
        weight=218,
        years_active="1984-1993, 1995-1998, 2001-2003",
        teams=("Chicago Bulls", "Washington Wizards"),
        career_stats=dict(
            games_played=1072,
            points_per_game=30.1,
            rebounds_per_game=6.2,
            assists_per_game=5.3,
            field_goal_percentage=49.7,
            free_throw_percentage=83.5,
            three_point_percentage=32.7,
        ),
        achievements=(
            "6× NBA Champion",
            "6× Finals MVP",
            "5× NBA MVP",
            "14× NBA All-Star",
            "10× Scoring Champion",
            "NBA Rookie of the Year",
            "NBA Defensive Player of the Year",
        ),
        championships=6,
        toughness_of_league_index=8.5,
        strength_of_team_stats=8.0,
    ),
    _player(
        name="LeBron James",
        position="Small Forward",
        height="6'9\"",
        weight=250,
        years_active="2003-Present",
        teams=("Cleveland Cavaliers", "Miami Heat", "Los Angeles Lakers"),
        career_stats=dict(
            games_played=1421,
            points_per_game=27.2,
            rebounds_per_game=7.5,
            assists_per_game=7.3,
            field_goal_percentage=50.6,
            free_throw_percentage=73.6,
            three_point_percentage=34.7,
        ),
        achievements=(
            "4× NBA Champion",
            "4× Finals MVP",
            "4× NBA MVP",
            "19× NBA All-Star",
            "NBA Rookie of the Year",
            "All-time leading scorer",
        ),
        championships=4,
        toughness_of_league_index=8.0,
        strength_of_team_stats=7.5,
    ),
    _player(
        name="Kobe Bryant",
        position="Shooting Guard",
        height="6'6\"",
        weight=212,
        years_active="1996-2016",
        teams=("Los Angeles Lakers",),
        career_stats=dict(
            games_played=1346,
            points_per_game=25.0,
            rebounds_per_game=5.2,
            assists_per_game=4.7,
            field_goal_percentage=44.7,
            free_throw_percentage=83.7,
            three_point_percentage=32.9,
        ),
        achievements=(
            "5× NBA Champion",
            "2× Finals MVP",
            "1× NBA MVP",
            "18× NBA All-Star",
            "2× Scoring Champion",
            "81-point game",
        ),
        championships=5,
        toughness_of_league_index=8.0,
        strength_of_team_stats=8.5,
    ),
    _player(
        name="Magic Johnson",
        position="Point Guard",
        height="6'9\"",
        weight=215,
        years_active="1979-1991, 1996",
        teams=("Los Angeles Lakers",),
        career_stats=dict(
            games_played=906,
            points_per_game=19.5,
            rebounds_per_game=7.2,
            assists_per_game=11.2,
            field_goal_percentage=52.0,
            free_throw_percentage=84.8,
            three_point_percentage=30.3,
        ),
        achievements=(
            "5× NBA Champion",
            "3× Finals MVP",
            "3× NBA MVP",
            "12× NBA All-Star",
            "4× Assist Leader",
            "NBA Rookie of the Year",
        ),
        championships=5,
        toughness_of_league_index=9.0,
        strength_of_team_stats=9.0,
    ),
    _player(
        name="Larry Bird",
        position="Small Forward",
        height="6'9\"",
        weight=220,
        years_active="1979-1992",
        teams=("Boston Celtics",),
        career_stats=dict(
            games_played=897,
            points_per_game=24.3,
            rebounds_per_game=10.0,
            assists_per_game=6.3,
            field_goal_percentage=49.6,
            free_throw_percentage=88.6,
            three_point_percentage=37.6,
        ),
        achievements=(
            "3× NBA Champion",
            "2× Finals MVP",
            "3× NBA MVP",
            "12× NBA All-Star",
            "NBA Rookie of the Year",
            "3× Three-Point Contest Champion",
        ),
        championships=3,
        toughness_of_league_index=9.0,
        strength_of_team_stats=8.5,
    ),
    _player(
        name="Shaquille O'Neal",
        position="Center",
        height="7'1\"",
        weight=325,
        years_active="1992-2011",
        teams=(
            "Orlando Magic",
            "Los Angeles Lakers",
            "Miami Heat",
            "Phoenix Suns",
            "Cleveland Cavaliers",
            "Boston Celtics",
        ),
        career_stats=dict(
            games_played=1207,
            points_per_game=23.7,
            rebounds_per_game=10.9,
            assists_per_game=2.5,
            field_goal_percentage=58.2,
            free_throw_percentage=52.7,
            three_point_percentage=4.5,
        ),
        achievements=(
            "4× NBA Champion",
            "3× Finals MVP",
            "1× NBA MVP",
            "15× NBA All-Star",
            "2× Scoring Champion",
            "NBA Rookie of the Year",
        ),
        championships=4,
        toughness_of_league_index=7.5,
        strength_of_team_stats=8.0,
    ),
)

_LEGENDS: Dict[str, Player] = {player.key: player for player in _SEED_PLAYERS}

# Read-only view handed out to callers.
LEGENDS: Mapping[str, Player] = MappingProxyType(_LEGENDS)


def normalize_name(name: str) -> str:
    """Return the canonical lookup key for a user-supplied name."""

    return name.strip().lower()


def lookup(name: str) -> Optional[Player]:
    """Exact, case-insensitive match against the seed records."""

    return _LEGENDS.get(normalize_name(name))


def iter_players() -> Iterable[Player]:
    return _LEGENDS.values()


def known_keys() -> tuple[str, ...]:
    return tuple(_LEGENDS)
