"""Tiebreak calculation for tournaments.

This module handles calculation of the tiebreak systems used to order
players who finish on the same number of match points.
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

from typing import Dict, List

from swisspairing.constants import MWP_FLOOR, WIN_POINTS
from swisspairing.models.player import Player
from swisspairing.type_hints import PlayerId
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


class TiebreakCalculator:
    """Calculates tiebreak scores for tournament standings.

    This class implements:

    - Match Win Percentage (MWP): points earned over points available,
      never below 0.33 once a round has been played
    - Strength of Schedule (SOS): sum of opponents' points
    - Sum of Opponents' Strength of Schedule (SOSOS): sum of opponents' SOS

    SOSOS reads every opponent's SOS, so all SOS values must be final before
    the first SOSOS is computed. :meth:`calculate_all_tiebreaks` runs the
    three passes over the whole field in that order.
    """

    def calculate_all_tiebreaks(self, players: Dict[PlayerId, Player]) -> None:
        """Calculate all tiebreaks for all players.

        Points, games played, byes and opponent lists must already be
        filled in. Tiebreak values are written onto the given players.

        Args:
            players: Dictionary of all players (id -> Player)
        """
        for player in players.values():
            player.tiebreakers.match_win_percentage = (
                self.calculate_match_win_percentage(player)
            )

        for player in players.values():
            player.tiebreakers.strength_of_schedule = (
                self.calculate_strength_of_schedule(player, players)
            )

        for player in players.values():
            player.tiebreakers.sum_of_opponent_strength_of_schedule = (
                self.calculate_sum_of_opponent_sos(player, players)
            )

    def calculate_match_win_percentage(self, player: Player) -> float:
        """Calculate Match Win Percentage.

        Byes count as rounds played (and as wins, through their points).

        Args:
            player: The player to calculate for

        Returns:
            ``max(0.33, points / (rounds * 3))``, or 0 before the first round
        """
        rounds_played = player.rounds_played
        if rounds_played == 0:
            return 0.0
        return max(MWP_FLOOR, player.points / (rounds_played * WIN_POINTS))

    def calculate_strength_of_schedule(
        self, player: Player, all_players: Dict[PlayerId, Player]
    ) -> int:
        """Calculate Strength of Schedule.

        An opponent met twice contributes twice.

        Args:
            player: The player to calculate for
            all_players: Dictionary of all players for opponent lookups

        Returns:
            Sum of opponent points
        """
        return sum(opp.points for opp in self._opponents(player, all_players))

    def calculate_sum_of_opponent_sos(
        self, player: Player, all_players: Dict[PlayerId, Player]
    ) -> int:
        """Calculate Sum of Opponents' Strength of Schedule.

        Args:
            player: The player to calculate for
            all_players: Dictionary of all players, with SOS already final

        Returns:
            Sum of opponent SOS values
        """
        return sum(
            opp.tiebreakers.strength_of_schedule
            for opp in self._opponents(player, all_players)
        )

    def _opponents(
        self, player: Player, all_players: Dict[PlayerId, Player]
    ) -> List[Player]:
        """Opponents of ``player`` in play order, skipping unknown ids."""
        opponents = []
        for opp_id in player.opponent_ids:
            opponent = all_players.get(opp_id)
            if opponent is None:
                logger.debug(
                    "Opponent %s of player %s is not on the roster", opp_id, player.id
                )
                continue
            opponents.append(opponent)
        return opponents
