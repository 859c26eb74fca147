"""Record of who has already been paired with whom."""

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

from dataclasses import dataclass, field
from typing import Iterable, Set

from swisspairing.models.round_data import Round
from swisspairing.type_hints import PlayerId


@dataclass
class PairingHistory:
    """
    Tracks historical pairings to prevent repeat matches.

    Attributes
    ----------
    previous_matches : set of frozenset of int
        Set containing frozensets of player ID pairs representing
        matches that have already been paired. Byes are never recorded.
    """

    previous_matches: Set[frozenset] = field(default_factory=set)

    @classmethod
    def from_rounds(cls, rounds: Iterable[Round]) -> "PairingHistory":
        """Build the history of every non-bye pairing in ``rounds``.

        Pending matches count: the two players were already seated together.
        """
        history = cls()
        for round_data in rounds:
            for match in round_data.pairings:
                if not match.is_bye:
                    history.add_pairing(match.player1_id, match.player2_id)
        return history

    def add_pairing(self, player1_id: PlayerId, player2_id: PlayerId) -> None:
        """Record that two players have been paired."""
        self.previous_matches.add(frozenset({player1_id, player2_id}))

    def have_played(self, player1_id: PlayerId, player2_id: PlayerId) -> bool:
        """Check if two players have previously played each other."""
        return frozenset({player1_id, player2_id}) in self.previous_matches
