import pytest

from nbalegends import store
from nbalegends.compare import CATEGORIES, INSUFFICIENT_PLAYERS_MESSAGE, compare_players, pick_winner


def _legend(name: str):
    player = store.lookup(name)
    assert player is not None
    return player


def test_category_table_order():
    assert [category.name for category in CATEGORIES] == [
        "Scoring",
        "Rebounding",
        "Assists",
        "Efficiency",
        "Championships",
        "League Toughness",
        "Team Strength",
    ]


def test_compare_seeded_legends():
    result = compare_players([_legend("michael jordan"), _legend("magic johnson"), _legend("shaquille o'neal")])

    assert result.ok
    assert result.comparison == "Comparison completed successfully"
    winners = {name: category.winner for name, category in result.categories.items()}
    assert winners["Scoring"] == "Michael Jordan"
    assert winners["Rebounding"] == "Shaquille O'Neal"
    assert winners["Assists"] == "Magic Johnson"
    assert winners["Efficiency"] == "Shaquille O'Neal"
    assert winners["Championships"] == "Michael Jordan"
    assert winners["League Toughness"] == "Magic Johnson"
    assert winners["Team Strength"] == "Magic Johnson"
    assert result.categories["Scoring"].stats == {
        "Michael Jordan": 30.1,
        "Magic Johnson": 19.5,
        "Shaquille O'Neal": 23.7,
    }


def test_scoring_tie_goes_to_first_player():
    first = _legend("kobe bryant")
    stats = first.career_stats.model_copy(update={"points_per_game": 30.1})
    twin = first.model_copy(update={"name": "Kobe Twin", "career_stats": stats})
    jordan = _legend("michael jordan")

    assert compare_players([jordan, twin]).categories["Scoring"].winner == "Michael Jordan"
    assert compare_players([twin, jordan]).categories["Scoring"].winner == "Kobe Twin"


def test_missing_indices_default_to_five():
    bird = _legend("larry bird")
    blank = bird.model_copy(
        update={"name": "No Index", "toughness_of_league_index": None, "strength_of_team_stats": None}
    )
    low = bird.model_copy(update={"name": "Low Index", "toughness_of_league_index": 4.0, "strength_of_team_stats": 4.0})

    result = compare_players([low, blank])

    assert result.categories["League Toughness"].stats["No Index"] == 5.0
    assert result.categories["League Toughness"].winner == "No Index"
    assert result.categories["Team Strength"].winner == "No Index"


@pytest.mark.parametrize("count", [0, 1])
def test_insufficient_players_is_a_value_not_an_error(count):
    players = [_legend("larry bird")][:count]

    result = compare_players(players)

    assert result.ok is False
    assert result.comparison == INSUFFICIENT_PLAYERS_MESSAGE
    assert result.categories == {}
    assert len(result.players) == count


def test_pick_winner_requires_strictly_greater():
    assert pick_winner({"a": 1.0, "b": 1.0, "c": 0.5}) == "a"
    assert pick_winner({"a": 1.0, "b": 2.0, "c": 2.0}) == "b"
