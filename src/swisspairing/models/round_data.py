"""Data model for tournament round."""

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
from typing import Any, Dict, List, Optional

from swisspairing.models.match import Match
from swisspairing.type_hints import PlayerId


@dataclass
class Round:
    """Container for all matches of a single tournament round.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    pairings : list of Match
        Matches in table order, the bye (if any) last.
    """

    round_number: int
    pairings: List[Match] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        """Whether every match, byes included, has a winner."""
        return all(match.is_reported for match in self.pairings)

    @property
    def has_reported_results(self) -> bool:
        """Whether any regular match already has a result.

        Byes are decided at pairing time and do not count.
        """
        return any(
            match.is_reported for match in self.pairings if not match.is_bye
        )

    @property
    def pending_matches(self) -> List[Match]:
        return [match for match in self.pairings if not match.is_reported]

    def match_for(self, player_id: PlayerId) -> Optional[Match]:
        """The match ``player_id`` sits at in this round, if any."""
        for match in self.pairings:
            if match.involves(player_id):
                return match
        return None

    def with_match(self, index: int, match: Match) -> "Round":
        """Return a copy with the match at ``index`` replaced."""
        pairings = list(self.pairings)
        pairings[index] = match
        return Round(round_number=self.round_number, pairings=pairings)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "round_number": self.round_number,
            "pairings": [m.to_dict() for m in self.pairings],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Round":
        """Deserialize round data from dictionary."""
        return cls(
            round_number=data["round_number"],
            pairings=[Match.from_dict(m) for m in data.get("pairings", [])],
        )
