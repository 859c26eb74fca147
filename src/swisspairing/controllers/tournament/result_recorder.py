"""Result recording and validation for tournaments.

This module handles recording match results with proper validation and error checking.
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

from typing import Tuple

from swisspairing.constants import BYE, DRAW, STATUS_IN_PROGRESS
from swisspairing.exceptions import (
    InvalidResultException,
    ResultNotFoundException,
    TournamentStateException,
)
from swisspairing.models import Match, MatchScore, Round, Tournament
from swisspairing.tournament import calculate_standings
from swisspairing.type_hints import WinnerId
from swisspairing.utils import setup_logger
from swisspairing.utils.validation import validate_score

logger = setup_logger(__name__)


def parse_score(score: str) -> MatchScore:
    """Turn a score such as ``"2-1"`` into a :class:`MatchScore`.

    Raises:
        InvalidResultException: If the text is not two non-negative integers
    """
    result = validate_score(score)
    if not result:
        raise InvalidResultException(result.error_message)
    return MatchScore(*result.sanitized_value)


def decide_winner(match: Match, score: MatchScore) -> WinnerId:
    """Work out who took ``match`` with the given game score."""
    if match.is_bye:
        return BYE
    if score.player1_score > score.player2_score:
        return match.player1_id
    if score.player2_score > score.player1_score:
        return match.player2_id
    return DRAW


class ResultRecorder:
    """Handles recording and validating match results.

    This class is responsible for:
    - Parsing score entries
    - Deriving the winner together with the result
    - Keeping bye results fixed
    - Refreshing standings after every entry
    """

    def record_result(
        self, tournament: Tournament, match_index: int, score: str
    ) -> Tournament:
        """Record the score of one match of the latest round.

        Entering a score for a match that already has one replaces it.

        Args:
            tournament: Tournament snapshot
            match_index: Position of the match in the round (0-indexed)
            score: Score as ``"<player 1 games>-<player 2 games>"``

        Returns:
            New snapshot with the result stored and standings refreshed

        Raises:
            TournamentStateException: If the tournament is not in progress
            ResultNotFoundException: If there is no such match
            InvalidResultException: If the score cannot be parsed, or the match is a bye
        """
        if tournament.status != STATUS_IN_PROGRESS:
            raise TournamentStateException(
                f"Tournament {tournament.name!r} is {tournament.status}, not in progress"
            )

        round_data, match = self._locate_match(tournament, match_index)

        if match.is_bye:
            raise InvalidResultException(
                f"Table {match.table} is a bye; its result is fixed"
            )

        match_score = parse_score(score)
        winner_id = decide_winner(match, match_score)

        if match.is_reported:
            logger.info(
                "Round %s table %s: replacing result %s with %s",
                round_data.round_number,
                match.table,
                match.result,
                match_score,
            )
        else:
            logger.info(
                "Round %s table %s: recorded %s",
                round_data.round_number,
                match.table,
                match_score,
            )

        updated_round = round_data.with_match(
            match_index, match.with_result(match_score, winner_id)
        )
        rounds = tournament.rounds[:-1] + [updated_round]
        return tournament.evolve(
            rounds=rounds,
            players=calculate_standings(tournament.players, rounds),
        )

    def _locate_match(
        self, tournament: Tournament, match_index: int
    ) -> Tuple[Round, Match]:
        round_data = tournament.current_round
        if round_data is None:
            raise ResultNotFoundException("No round has been paired yet")
        if not 0 <= match_index < len(round_data.pairings):
            raise ResultNotFoundException(
                f"Round {round_data.round_number} has no match at index {match_index}"
            )
        return round_data, round_data.pairings[match_index]
