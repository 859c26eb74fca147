"""Round management for tournaments.

This module handles all round-related operations including pairing generation,
round progression, and regenerating a round that has not started yet.
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

import random
from typing import List, Optional

from swisspairing.constants import STATUS_IN_PROGRESS
from swisspairing.exceptions import (
    ResultsPendingException,
    RoundLimitException,
    RoundNotFoundException,
    TournamentStateException,
)
from swisspairing.models import Round, Tournament
from swisspairing.pairing import generate_pairings
from swisspairing.tournament import calculate_standings
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


class RoundManager:
    """Manages round progression and pairing generation for tournaments.

    This class is responsible for:
    - Generating pairings for the next round
    - Refusing to move on while results are missing
    - Replacing the latest round before any of its results are in

    Each operation takes a tournament snapshot and returns a new one.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """Initialize the round manager.

        Args:
            rng: Shuffle source handed to the pairing engine. When omitted,
                each round gets its own source derived from the
                tournament's ``config.seed`` and the round number.
        """
        self.rng = rng

    def get_round(self, tournament: Tournament, round_number: int) -> Optional[Round]:
        """Get data for a specific round.

        Args:
            tournament: Tournament snapshot
            round_number: The round number (1-indexed)

        Returns:
            Round for the specified round, or None if invalid round number
        """
        if 1 <= round_number <= len(tournament.rounds):
            return tournament.rounds[round_number - 1]
        return None

    def create_next_round(self, tournament: Tournament) -> Tournament:
        """Pair the next round.

        Args:
            tournament: Tournament snapshot

        Returns:
            New snapshot with the round appended and standings refreshed

        Raises:
            TournamentStateException: If the tournament is not in progress
            ResultsPendingException: If the latest round still has pending matches
            RoundLimitException: If the configured number of rounds is reached
        """
        self._require_in_progress(tournament)

        current = tournament.current_round
        if current is not None and not current.is_complete:
            logger.warning(
                "Refusing to pair round %s: %s result(s) missing in round %s",
                current.round_number + 1,
                len(current.pending_matches),
                current.round_number,
            )
            raise ResultsPendingException(
                "Please enter all results for the current round "
                f"(round {current.round_number}) first"
            )

        limit = tournament.config.num_rounds
        if limit is not None and len(tournament.rounds) >= limit:
            raise RoundLimitException(
                f"Cannot create more rounds: already at {limit} rounds"
            )

        round_number = len(tournament.rounds) + 1
        logger.info(
            "Creating round %s with %s players", round_number, len(tournament.players)
        )
        new_round = self._pair_round(tournament, tournament.rounds, round_number)
        return self._with_rounds(tournament, tournament.rounds + [new_round])

    def regenerate_current_round(self, tournament: Tournament) -> Tournament:
        """Throw away the latest round's pairings and pair it again.

        The new pairing is computed exactly as if the discarded round had
        never existed.

        Args:
            tournament: Tournament snapshot

        Returns:
            New snapshot with the latest round replaced

        Raises:
            TournamentStateException: If not in progress or results are recorded
            RoundNotFoundException: If no round has been paired yet
        """
        self._require_in_progress(tournament)

        current = tournament.current_round
        if current is None:
            raise RoundNotFoundException("There is no round to regenerate")
        if current.has_reported_results:
            logger.warning(
                "Cannot regenerate round %s: results already recorded",
                current.round_number,
            )
            raise TournamentStateException(
                f"Round {current.round_number} already has results and cannot be "
                "regenerated"
            )

        previous_rounds = tournament.rounds[:-1]
        new_round = self._pair_round(tournament, previous_rounds, current.round_number)
        logger.info("Regenerated round %s", current.round_number)
        return self._with_rounds(tournament, previous_rounds + [new_round])

    def _pair_round(
        self, tournament: Tournament, history: List[Round], round_number: int
    ) -> Round:
        matches = generate_pairings(
            tournament.players, history, rng=self._rng_for(tournament, round_number)
        )
        return Round(round_number=round_number, pairings=matches)

    def _rng_for(self, tournament: Tournament, round_number: int) -> random.Random:
        if self.rng is not None:
            return self.rng
        seed = tournament.config.seed
        if seed is None:
            return random.Random()
        return random.Random(f"{seed}:{round_number}")

    def _with_rounds(self, tournament: Tournament, rounds: List[Round]) -> Tournament:
        return tournament.evolve(
            rounds=rounds,
            players=calculate_standings(tournament.players, rounds),
        )

    def _require_in_progress(self, tournament: Tournament) -> None:
        if tournament.status != STATUS_IN_PROGRESS:
            raise TournamentStateException(
                f"Tournament {tournament.name!r} is {tournament.status}, not in progress"
            )
