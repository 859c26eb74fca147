"""Tournament controller - drives a tournament from registration to the end.

This is the primary interface for running a tournament, coordinating the
round manager and result recorder around immutable tournament snapshots.
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
from dataclasses import replace
from typing import Iterable, List, Optional

from swisspairing.constants import STATUS_COMPLETED, STATUS_IN_PROGRESS
from swisspairing.controllers.tournament.result_recorder import ResultRecorder
from swisspairing.controllers.tournament.round_manager import RoundManager
from swisspairing.exceptions import (
    InvalidTournamentDataException,
    NotEnoughPlayersException,
    ResultsPendingException,
    TournamentStateException,
)
from swisspairing.models import Player, Tournament, TournamentConfig
from swisspairing.tournament import (
    MatchHistoryEntry,
    calculate_standings,
    player_match_history,
)
from swisspairing.type_hints import PlayerId
from swisspairing.utils import setup_logger
from swisspairing.utils.validation import (
    validate_player_names,
    validate_tournament_name,
)

logger = setup_logger(__name__)


class TournamentController:
    """Main tournament management class.

    This class coordinates all tournament operations through specialized managers:
    - RoundManager: handles round creation, regeneration and pairing
    - ResultRecorder: manages result entry and validation

    Every method takes a :class:`Tournament` snapshot and returns a new one,
    so a caller can keep older snapshots around (for undo, for display)
    without them changing underneath it.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        """Initialize the controller.

        Args:
            rng: Shuffle source for pairings. When omitted, every round is
                shuffled from the tournament's own ``config.seed``.
        """
        self.round_manager = RoundManager(rng)
        self.result_recorder = ResultRecorder()

    # ========== Lifecycle ==========

    def start(
        self,
        name: str,
        player_names: Iterable[str],
        config: Optional[TournamentConfig] = None,
    ) -> Tournament:
        """Register the players and open the tournament.

        Args:
            name: Tournament name
            player_names: Player names in registration order; blanks are dropped
            config: Optional settings; ``config.name`` is replaced by ``name``

        Returns:
            A tournament in progress with no rounds yet

        Raises:
            InvalidTournamentDataException: If the name is empty
            NotEnoughPlayersException: If fewer than ``config.min_players`` remain
            InvalidConfigurationException: If the config is invalid
        """
        config = config or TournamentConfig()
        config.validate()

        name_check = validate_tournament_name(name)
        if not name_check:
            raise InvalidTournamentDataException(name_check.error_message)

        roster_check = validate_player_names(player_names, config.min_players)
        if not roster_check:
            logger.warning("Cannot start %r: %s", name, roster_check.error_message)
            raise NotEnoughPlayersException(roster_check.error_message)

        config = replace(config, name=name_check.sanitized_value)

        players = [
            Player.create(index, player_name)
            for index, player_name in enumerate(roster_check.sanitized_value)
        ]
        logger.info(
            "Tournament %r started with %s players", config.name, len(players)
        )
        return Tournament(
            name=config.name,
            players=players,
            rounds=[],
            status=STATUS_IN_PROGRESS,
            config=config,
        )

    def finish(self, tournament: Tournament) -> Tournament:
        """Close the tournament once the latest round is fully reported.

        Raises:
            TournamentStateException: If the tournament is not in progress
            ResultsPendingException: If results are still missing
        """
        if tournament.status != STATUS_IN_PROGRESS:
            raise TournamentStateException(
                f"Tournament {tournament.name!r} is {tournament.status}, not in progress"
            )
        current = tournament.current_round
        if current is not None and not current.is_complete:
            raise ResultsPendingException(
                f"Round {current.round_number} still has pending results"
            )

        logger.info("Tournament %r completed", tournament.name)
        return tournament.evolve(
            status=STATUS_COMPLETED,
            players=self.standings(tournament),
        )

    # ========== Rounds and Results ==========

    def generate_round(self, tournament: Tournament) -> Tournament:
        """Pair the next round. See :meth:`RoundManager.create_next_round`."""
        return self.round_manager.create_next_round(tournament)

    def regenerate_round(self, tournament: Tournament) -> Tournament:
        """Re-pair the latest round. See :meth:`RoundManager.regenerate_current_round`."""
        return self.round_manager.regenerate_current_round(tournament)

    def record_result(
        self, tournament: Tournament, match_index: int, score: str
    ) -> Tournament:
        """Enter a score. See :meth:`ResultRecorder.record_result`."""
        return self.result_recorder.record_result(tournament, match_index, score)

    # ========== Queries ==========

    def standings(self, tournament: Tournament) -> List[Player]:
        """Current standings, best first."""
        return calculate_standings(tournament.players, tournament.rounds)

    def match_history(
        self, tournament: Tournament, player_id: PlayerId
    ) -> List[MatchHistoryEntry]:
        """Every match of one player, in round order."""
        return player_match_history(player_id, tournament.rounds)
