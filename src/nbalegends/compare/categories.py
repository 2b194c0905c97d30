"""Per-category winner selection across resolved players."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional, Sequence, Tuple

from nbalegends.models import CategoryResult, ComparisonResult, Player


INSUFFICIENT_PLAYERS_MESSAGE = "Please provide at least 2 valid player names to compare."
COMPARISON_COMPLETE_MESSAGE = "Comparison completed successfully"
DEFAULT_INDEX_VALUE = 5.0


@dataclass(frozen=True)
class Category:
    name: str
    extract: Callable[[Player], float]


def _index_or_default(value: Optional[float]) -> float:
    return DEFAULT_INDEX_VALUE if value is None else value


CATEGORIES: Tuple[Category, ...] = (
    Category("Scoring", lambda p: p.career_stats.points_per_game),
    Category("Rebounding", lambda p: p.career_stats.rebounds_per_game),
    Category("Assists", lambda p: p.career_stats.assists_per_game),
    Category("Efficiency", lambda p: p.career_stats.field_goal_percentage),
    Category("Championships", lambda p: float(p.championships)),
    Category("League Toughness", lambda p: _index_or_default(p.toughness_of_league_index)),
    Category("Team Strength", lambda p: _index_or_default(p.strength_of_team_stats)),
)


def pick_winner(stats: Mapping[str, float]) -> str:
    """Return the leading name; earlier entries keep the lead on exact ties."""

    names = iter(stats)
    winner = next(names)
    for name in names:
        if stats[name] > stats[winner]:
            winner = name
    return winner


def compare_players(players: Sequence[Player]) -> ComparisonResult:
    """Compute the winner of each category.

    Fewer than two players is reported through ``ok=False`` with an empty
    category map instead of an exception.
    """

    players = list(players)
    if len(players) < 2:
        return ComparisonResult(comparison=INSUFFICIENT_PLAYERS_MESSAGE, players=players, ok=False)

    categories: Dict[str, CategoryResult] = {}
    for category in CATEGORIES:
        stats = {player.name: category.extract(player) for player in players}
        categories[category.name] = CategoryResult(winner=pick_winner(stats), stats=stats)

    return ComparisonResult(
        comparison=COMPARISON_COMPLETE_MESSAGE,
        players=players,
        categories=categories,
    )
