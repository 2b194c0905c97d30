import json

import pytest

from nbalegends import cli


def _run(capsys: pytest.CaptureFixture[str], *argv: str):
    cli.main(list(argv))
    return json.loads(capsys.readouterr().out)


def test_list(capsys):
    payload = _run(capsys, "list")
    assert [player["name"] for player in payload][-1] == "Shaquille O'Neal"


def test_player_lookup(capsys):
    payload = _run(capsys, "player", "kobe", "bryant")
    assert payload["name"] == "Kobe Bryant"
    assert payload["careerStats"]["gamesPlayed"] == 1346


def test_player_generation_is_seeded(capsys):
    first = _run(capsys, "--seed", "9", "player", "jane", "doe")
    second = _run(capsys, "--seed", "9", "player", "jane", "doe")
    assert first == second
    assert first["generated"] is True


def test_player_no_generate_exits():
    with pytest.raises(SystemExit, match="not found"):
        cli.main(["player", "jane", "doe", "--no-generate"])


def test_compare(capsys):
    payload = _run(capsys, "compare", "larry bird", "magic johnson")
    assert payload["categories"]["Rebounding"]["winner"] == "Larry Bird"


def test_compare_needs_two_names():
    with pytest.raises(SystemExit, match="at least 2"):
        cli.main(["compare", "larry bird"])


def test_chat(capsys):
    payload = _run(capsys, "chat", "hello", "there")
    assert len(payload["suggestions"]) == 3
    assert payload["context"] is None
