import copy
import logging
import random

from swisspairing.constants import BYE, DRAW
from swisspairing.models import Match, MatchScore, Round
from swisspairing.pairing import generate_pairings


def _result(table, player1_id, player2_id, games1, games2):
    if games1 > games2:
        winner = player1_id
    elif games2 > games1:
        winner = player2_id
    else:
        winner = DRAW
    return Match(
        table=table,
        player1_id=player1_id,
        player2_id=player2_id,
        result=MatchScore(games1, games2),
        winner_id=winner,
    )


def _pairs(matches):
    return [(m.player1_id, m.player2_id) for m in matches]


def _assert_everyone_seated_once(matches, player_count):
    seated = []
    for match in matches:
        seated.append(match.player1_id)
        if not match.is_bye:
            seated.append(match.player2_id)
    assert sorted(seated) == list(range(player_count))


def test_first_round_with_eight_players(make_players, no_shuffle):
    matches = generate_pairings(make_players(8), [], rng=no_shuffle)

    assert len(matches) == 4
    assert not any(m.is_bye for m in matches)
    assert [m.table for m in matches] == [1, 2, 3, 4]
    assert all(m.result is None and m.winner_id is None for m in matches)
    assert _pairs(matches) == [(0, 1), (2, 3), (4, 5), (6, 7)]


def test_first_round_with_five_players_has_one_bye(make_players, no_shuffle):
    matches = generate_pairings(make_players(5), [], rng=no_shuffle)

    assert len(matches) == 3
    regular, bye = matches[:2], matches[2]
    assert _pairs(regular) == [(0, 1), (2, 3)]
    assert bye.is_bye
    assert bye.player1_id == 4
    assert bye.player2_id == BYE
    assert bye.winner_id == BYE
    assert bye.result == MatchScore(2, 0)
    assert bye.table == 3


def test_shuffle_source_is_used(make_players, reverse_shuffle):
    matches = generate_pairings(make_players(8), [], rng=reverse_shuffle)

    assert _pairs(matches) == [(7, 6), (5, 4), (3, 2), (1, 0)]


def test_bye_goes_to_lowest_player_without_one(make_players, no_shuffle):
    rounds = [
        Round(1, [_result(1, 0, 1, 2, 0), Match.bye(2, 2)]),
        Round(2, [_result(1, 2, 0, 2, 1), Match.bye(2, 1)]),
    ]

    matches = generate_pairings(make_players(3), rounds, rng=no_shuffle)

    # Standings are 2, 0, 1; player 1 already had a bye, and player 2
    # floats down out of the six-point group
    assert _pairs(matches) == [(1, 2), (0, BYE)]


def test_bye_falls_back_to_last_place_when_all_had_one(make_players, no_shuffle):
    rounds = [
        Round(1, [_result(1, 1, 2, 2, 0), Match.bye(2, 0)]),
        Round(2, [_result(1, 0, 2, 2, 0), Match.bye(2, 1)]),
        Round(3, [_result(1, 0, 1, 2, 0), Match.bye(2, 2)]),
    ]

    matches = generate_pairings(make_players(3), rounds, rng=no_shuffle)

    assert matches[-1].is_bye
    assert matches[-1].player1_id == 2
    assert _pairs(matches[:-1]) == [(1, 0)]


def test_previous_opponents_are_skipped(make_players, no_shuffle):
    rounds = [Round(1, [_result(1, 0, 1, 1, 1), _result(2, 2, 3, 1, 1)])]

    matches = generate_pairings(make_players(4), rounds, rng=no_shuffle)

    assert _pairs(matches) == [(0, 2), (1, 3)]


def test_rematch_is_forced_when_nothing_else_is_left(
    make_players, no_shuffle, caplog
):
    rounds = [Round(1, [_result(1, 0, 1, 2, 0)])]

    with caplog.at_level(logging.DEBUG, logger="swisspairing"):
        matches = generate_pairings(make_players(2), rounds, rng=no_shuffle)

    assert _pairs(matches) == [(1, 0)]
    assert "repeating against" in caplog.text


def test_odd_group_floats_down(make_players, no_shuffle):
    rounds = [
        Round(
            1,
            [
                _result(1, 0, 1, 2, 0),
                _result(2, 2, 3, 1, 1),
                _result(3, 4, 5, 0, 0),
            ],
        )
    ]

    matches = generate_pairings(make_players(6), rounds, rng=no_shuffle)

    # Player 0 floats through the one-point group (it is appended last and
    # popped again) and is then forced into a rematch with player 1
    assert _pairs(matches) == [(2, 4), (3, 5), (1, 0)]


def test_pairing_does_not_modify_inputs(make_players):
    players = make_players(5)
    rounds = [Round(1, [_result(1, 0, 1, 2, 1), _result(2, 2, 3, 0, 2), Match.bye(3, 4)])]
    players_before = copy.deepcopy(players)
    rounds_before = copy.deepcopy(rounds)

    generate_pairings(players, rounds, rng=random.Random(1))

    assert players == players_before
    assert rounds == rounds_before


def test_same_seed_same_pairings(make_players):
    players = make_players(10)
    rounds = [Round(1, generate_pairings(players, [], rng=random.Random(4)))]
    rounds[0] = Round(
        1,
        [
            m.with_result(MatchScore(2, 0), m.player1_id)
            for m in rounds[0].pairings
        ],
    )

    first = generate_pairings(players, rounds, rng=random.Random(99))
    second = generate_pairings(players, rounds, rng=random.Random(99))

    assert first == second


def test_random_rounds_seat_everyone_once(make_players):
    rng = random.Random(2024)
    players = make_players(11)
    rounds = []
    for round_number in range(1, 6):
        matches = generate_pairings(players, rounds, rng=rng)
        _assert_everyone_seated_once(matches, 11)
        assert sum(1 for m in matches if m.is_bye) == 1
        assert [m.table for m in matches] == list(range(1, len(matches) + 1))
        reported = [
            m if m.is_bye else m.with_result(MatchScore(2, 1), m.player1_id)
            for m in matches
        ]
        rounds.append(Round(round_number, reported))

    bye_counts = {}
    for round_data in rounds:
        for match in round_data.pairings:
            if match.is_bye:
                bye_counts[match.player1_id] = bye_counts.get(match.player1_id, 0) + 1
    assert max(bye_counts.values()) == 1
