"""Player and tiebreaker data classes."""

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
from typing import Any, Dict, List

from swisspairing.constants import (
    TB_MATCH_WIN_PERCENTAGE,
    TB_STRENGTH_OF_SCHEDULE,
    TB_SUM_OF_OPPONENT_SOS,
)
from swisspairing.type_hints import PlayerId


@dataclass
class Tiebreakers:
    """Tiebreak values derived from the round history.

    Attributes
    ----------
    match_win_percentage : float
        Share of available match points earned, floored at 0.33 once the
        player has played a round. Display only, never used to sort.
    strength_of_schedule : int
        Sum of the points of every opponent faced, once per meeting.
    sum_of_opponent_strength_of_schedule : int
        Sum of the strength of schedule of every opponent faced.
    """

    match_win_percentage: float = 0.0
    strength_of_schedule: int = 0
    sum_of_opponent_strength_of_schedule: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tiebreakers to dictionary."""
        return {
            TB_MATCH_WIN_PERCENTAGE: self.match_win_percentage,
            TB_STRENGTH_OF_SCHEDULE: self.strength_of_schedule,
            TB_SUM_OF_OPPONENT_SOS: self.sum_of_opponent_strength_of_schedule,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tiebreakers":
        """Deserialize tiebreakers from dictionary."""
        return cls(
            match_win_percentage=data.get(TB_MATCH_WIN_PERCENTAGE, 0.0),
            strength_of_schedule=data.get(TB_STRENGTH_OF_SCHEDULE, 0),
            sum_of_opponent_strength_of_schedule=data.get(TB_SUM_OF_OPPONENT_SOS, 0),
        )


@dataclass
class Player:
    """A registered participant and the standings derived for them.

    Only ``id`` and ``name`` are owned by the registration. Every other
    field is rebuilt from the complete round history on each standings
    pass and should be treated as a read-only snapshot.

    Attributes
    ----------
    id : int
        Stable identity, the player's registration index.
    name : str
        Display name.
    points : int
        Match points (3 per win or bye, 1 per draw).
    games_played : int
        Reported matches against a real opponent.
    byes : int
        Byes received.
    opponent_ids : list of int
        Opponents in the order they were played, repeats included.
    tiebreakers : Tiebreakers
        Derived tiebreak values.
    """

    id: PlayerId
    name: str
    points: int = 0
    games_played: int = 0
    byes: int = 0
    opponent_ids: List[PlayerId] = field(default_factory=list)
    tiebreakers: Tiebreakers = field(default_factory=Tiebreakers)

    @classmethod
    def create(cls, player_id: PlayerId, name: str) -> "Player":
        """Register a new player with an empty record."""
        return cls(id=player_id, name=name)

    @property
    def rounds_played(self) -> int:
        """Rounds the player took part in, byes included."""
        return self.games_played + self.byes

    def copy_reset(self) -> "Player":
        """Return a copy keeping only the registration fields."""
        return Player(id=self.id, name=self.name)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "points": self.points,
            "games_played": self.games_played,
            "byes": self.byes,
            "opponent_ids": list(self.opponent_ids),
            "tiebreakers": self.tiebreakers.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            points=data.get("points", 0),
            games_played=data.get("games_played", 0),
            byes=data.get("byes", 0),
            opponent_ids=list(data.get("opponent_ids", [])),
            tiebreakers=Tiebreakers.from_dict(data.get("tiebreakers", {})),
        )

    def __repr__(self) -> str:
        return f"Player({self.id}, {self.name!r}, points={self.points})"
