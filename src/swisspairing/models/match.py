"""Match data classes."""

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

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from swisspairing.constants import BYE, BYE_RESULT
from swisspairing.type_hints import OpponentId, PlayerId, WinnerId


@dataclass(frozen=True)
class MatchScore:
    """Games won by each seat of a match.

    Attributes
    ----------
    player1_score : int
        Games won by the player in the first seat.
    player2_score : int
        Games won by the player in the second seat.
    """

    player1_score: int
    player2_score: int

    def reversed(self) -> "MatchScore":
        """The same score seen from the second seat."""
        return MatchScore(self.player2_score, self.player1_score)

    def __str__(self) -> str:
        return f"{self.player1_score}-{self.player2_score}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize score to dictionary."""
        return {
            "player1_score": self.player1_score,
            "player2_score": self.player2_score,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchScore":
        """Deserialize score from dictionary."""
        return cls(
            player1_score=data["player1_score"],
            player2_score=data["player2_score"],
        )


@dataclass(frozen=True)
class Match:
    """A single table of a round.

    ``result`` and ``winner_id`` are only ever set together. A bye match
    carries ``BYE`` as its second seat and winner, and a fixed 2-0 score.

    Attributes
    ----------
    table : int
        Table number within the round, 1-based.
    player1_id : int
        Player in the first seat.
    player2_id : int or "bye"
        Player in the second seat, or the bye.
    result : MatchScore or None
        Reported game score, None while pending.
    winner_id : int, "draw", "bye" or None
        Match winner, None while pending.
    """

    table: int
    player1_id: PlayerId
    player2_id: OpponentId
    result: Optional[MatchScore] = None
    winner_id: WinnerId = None

    @classmethod
    def pending(cls, table: int, player1_id: PlayerId, player2_id: PlayerId) -> "Match":
        """A regular match awaiting its result."""
        return cls(table=table, player1_id=player1_id, player2_id=player2_id)

    @classmethod
    def bye(cls, table: int, player_id: PlayerId) -> "Match":
        """A bye for ``player_id``, already decided."""
        return cls(
            table=table,
            player1_id=player_id,
            player2_id=BYE,
            result=MatchScore(*BYE_RESULT),
            winner_id=BYE,
        )

    @property
    def is_bye(self) -> bool:
        return self.player2_id == BYE

    @property
    def is_reported(self) -> bool:
        return self.winner_id is not None

    def involves(self, player_id: PlayerId) -> bool:
        """Check whether ``player_id`` sits at this table."""
        return player_id in (self.player1_id, self.player2_id)

    def with_result(self, result: MatchScore, winner_id: WinnerId) -> "Match":
        """Return a copy with the result and winner recorded."""
        return replace(self, result=result, winner_id=winner_id)

    def with_table(self, table: int) -> "Match":
        return replace(self, table=table)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "table": self.table,
            "player1_id": self.player1_id,
            "player2_id": self.player2_id,
            "result": self.result.to_dict() if self.result else None,
            "winner_id": self.winner_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        result = data.get("result")
        return cls(
            table=data["table"],
            player1_id=data["player1_id"],
            player2_id=data["player2_id"],
            result=MatchScore.from_dict(result) if result else None,
            winner_id=data.get("winner_id"),
        )
