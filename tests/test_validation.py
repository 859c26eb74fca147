import pytest

from swisspairing.utils.validation import (
    validate_player_names,
    validate_score,
    validate_tournament_name,
)


@pytest.mark.parametrize(
    "name, is_valid, sanitized",
    [
        ("Open", True, "Open"),
        ("  Club Night  ", True, "Club Night"),
        ("", False, None),
        ("   ", False, None),
        (None, False, None),
    ],
)
def test_validate_tournament_name(name, is_valid, sanitized):
    result = validate_tournament_name(name)

    assert bool(result) is is_valid
    assert result.sanitized_value == sanitized


def test_validate_player_names_drops_blanks():
    result = validate_player_names(["Alice", " ", "Bob ", ""])

    assert result
    assert result.sanitized_value == ["Alice", "Bob"]


def test_validate_player_names_minimum():
    result = validate_player_names(["Alice", "Bob"], min_players=3)

    assert not result
    assert result.error_message == (
        "You need at least 3 players to start a tournament (got 2)"
    )


@pytest.mark.parametrize(
    "score, expected",
    [("2-0", (2, 0)), ("1 - 1", (1, 1)), (" 0-2", (0, 2))],
)
def test_validate_score(score, expected):
    assert validate_score(score).sanitized_value == expected


@pytest.mark.parametrize("score", ["", None, "2", "2-1-0", "x-1"])
def test_validate_score_rejects(score):
    result = validate_score(score)

    assert not result
    assert result.error_message
    assert "INVALID" in repr(result)
