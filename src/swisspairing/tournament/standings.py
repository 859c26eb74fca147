"""Standings calculation.

Standings are always rebuilt from scratch out of the full round history,
so the result is the same no matter what derived values the input players
carry. Nothing passed in is modified; ranked copies are returned.
"""

# Swiss Pairing
# Copyright (C) 2025  Swiss Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from swisspairing.constants import (
    BYE,
    BYE_POINTS,
    DRAW,
    DRAW_POINTS,
    LOSS_POINTS,
    OUTCOME_DRAW,
    OUTCOME_LOSS,
    OUTCOME_PENDING,
    OUTCOME_WIN,
    WIN_POINTS,
)
from swisspairing.models.match import Match, MatchScore
from swisspairing.models.player import Player
from swisspairing.models.round_data import Round
from swisspairing.tournament.tiebreak_calculator import TiebreakCalculator
from swisspairing.type_hints import MatchOutcome, OpponentId, PlayerId
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


def standings_sort_key(player: Player) -> Tuple[int, int, int, PlayerId]:
    """Sort key giving best-to-worst order.

    Points, then SOS, then SOSOS, all descending; the player id breaks
    whatever ties remain, so the order is always total.
    """
    return (
        -player.points,
        -player.tiebreakers.strength_of_schedule,
        -player.tiebreakers.sum_of_opponent_strength_of_schedule,
        player.id,
    )


def calculate_standings(
    players: Sequence[Player], rounds: Iterable[Round]
) -> List[Player]:
    """Rank players from the complete round history.

    Args:
        players: Tournament roster; only ``id`` and ``name`` are read
        rounds: Every round played so far, in order

    Returns:
        New Player objects with points, records and tiebreakers filled in,
        sorted best to worst
    """
    standings: Dict[PlayerId, Player] = {p.id: p.copy_reset() for p in players}

    for round_data in rounds:
        for match in round_data.pairings:
            _apply_match(match, standings)

    TiebreakCalculator().calculate_all_tiebreaks(standings)

    return sorted(standings.values(), key=standings_sort_key)


def _apply_match(match: Match, standings: Dict[PlayerId, Player]) -> None:
    """Add one match to the running records."""
    if match.is_bye:
        player = standings.get(match.player1_id)
        if player is None:
            logger.debug("Ignoring bye for unknown player %s", match.player1_id)
            return
        player.points += BYE_POINTS
        player.byes += 1
        return

    if not match.is_reported:
        # Pending tables count neither as a game nor as a meeting yet
        return

    player1 = standings.get(match.player1_id)
    player2 = standings.get(match.player2_id)
    if player1 is None or player2 is None:
        logger.debug(
            "Ignoring table %s: %s vs %s not both on the roster",
            match.table,
            match.player1_id,
            match.player2_id,
        )
        return

    player1.opponent_ids.append(player2.id)
    player2.opponent_ids.append(player1.id)
    player1.games_played += 1
    player2.games_played += 1

    if match.winner_id == player1.id:
        player1.points += WIN_POINTS
        player2.points += LOSS_POINTS
    elif match.winner_id == player2.id:
        player1.points += LOSS_POINTS
        player2.points += WIN_POINTS
    elif match.winner_id == DRAW:
        player1.points += DRAW_POINTS
        player2.points += DRAW_POINTS


# ========== Match History ==========


@dataclass(frozen=True)
class MatchHistoryEntry:
    """One round of a player's record, seen from that player's side.

    Attributes
    ----------
    round_number : int
        Round the match was played in.
    opponent_id : int or "bye"
        Who the player faced.
    outcome : str
        ``"Win"``, ``"Loss"``, ``"Draw"`` or ``"Pending"``.
    score : str or None
        Games as ``"<own>-<opponent>"``; byes always read ``"2-0"``.
    """

    round_number: int
    opponent_id: OpponentId
    outcome: MatchOutcome
    score: Optional[str]


def player_match_history(
    player_id: PlayerId, rounds: Iterable[Round]
) -> List[MatchHistoryEntry]:
    """List the matches of ``player_id``, one per round they appear in.

    Args:
        player_id: Player to report on
        rounds: Round history

    Returns:
        Entries in round order
    """
    history = []
    for round_data in rounds:
        match = round_data.match_for(player_id)
        if match is None:
            continue
        history.append(_history_entry(player_id, round_data.round_number, match))
    return history


def _history_entry(
    player_id: PlayerId, round_number: int, match: Match
) -> MatchHistoryEntry:
    in_first_seat = match.player1_id == player_id
    opponent_id = match.player2_id if in_first_seat else match.player1_id

    if match.winner_id is None:
        outcome = OUTCOME_PENDING
    elif match.winner_id in (player_id, BYE):
        outcome = OUTCOME_WIN
    elif match.winner_id == DRAW:
        outcome = OUTCOME_DRAW
    else:
        outcome = OUTCOME_LOSS

    score: Optional[MatchScore] = match.result
    if score is not None and not in_first_seat:
        score = score.reversed()

    return MatchHistoryEntry(
        round_number=round_number,
        opponent_id=opponent_id,
        outcome=outcome,
        score=str(score) if score is not None else None,
    )
