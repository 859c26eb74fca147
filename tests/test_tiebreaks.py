import pytest

from swisspairing.models import Player
from swisspairing.tournament import TiebreakCalculator


def _player(player_id, points=0, games_played=0, byes=0, opponent_ids=()):
    return Player(
        id=player_id,
        name=f"P{player_id}",
        points=points,
        games_played=games_played,
        byes=byes,
        opponent_ids=list(opponent_ids),
    )


@pytest.mark.parametrize(
    "points, games_played, byes, expected",
    [
        (0, 0, 0, 0.0),
        (0, 3, 0, 0.33),
        (1, 1, 0, 1 / 3),
        (3, 1, 1, 0.5),
        (9, 2, 1, 1.0),
    ],
)
def test_match_win_percentage(points, games_played, byes, expected):
    player = _player(0, points=points, games_played=games_played, byes=byes)

    mwp = TiebreakCalculator().calculate_match_win_percentage(player)

    assert mwp == pytest.approx(expected)


def test_sosos_waits_for_every_sos():
    # Player 0 comes first in the dict but depends on player 1's SOS,
    # which in turn depends on player 2
    players = {
        0: _player(0, points=3, games_played=1, opponent_ids=[1]),
        1: _player(1, points=3, games_played=2, opponent_ids=[0, 2]),
        2: _player(2, points=0, games_played=1, opponent_ids=[1]),
    }

    TiebreakCalculator().calculate_all_tiebreaks(players)

    assert [players[i].tiebreakers.strength_of_schedule for i in range(3)] == [3, 3, 3]
    assert [
        players[i].tiebreakers.sum_of_opponent_strength_of_schedule for i in range(3)
    ] == [3, 6, 3]


def test_missing_opponents_are_skipped():
    players = {0: _player(0, points=3, games_played=2, opponent_ids=[1, 7])}
    players[1] = _player(1, points=1, games_played=1, opponent_ids=[0])

    TiebreakCalculator().calculate_all_tiebreaks(players)

    assert players[0].tiebreakers.strength_of_schedule == 1
    assert players[1].tiebreakers.sum_of_opponent_strength_of_schedule == 1
