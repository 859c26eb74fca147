"""Tournament aggregate data class."""

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

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from swisspairing.constants import STATUS_SETUP
from swisspairing.models.player import Player
from swisspairing.models.round_data import Round
from swisspairing.models.tournament_config import TournamentConfig
from swisspairing.type_hints import PlayerId, TournamentStatus


@dataclass(frozen=True)
class Tournament:
    """Snapshot of a whole tournament.

    Every change produces a new snapshot; controllers never modify one in
    place. ``status`` belongs to the controllers, the pairing and standings
    engine never looks at it.

    Attributes
    ----------
    name : str
        Tournament name.
    players : list of Player
        Roster, in the order last returned by a standings pass.
    rounds : list of Round
        Rounds in play order.
    status : str
        ``"setup"``, ``"in_progress"`` or ``"completed"``.
    config : TournamentConfig
        Settings the tournament was started with.
    """

    name: str
    players: List[Player] = field(default_factory=list)
    rounds: List[Round] = field(default_factory=list)
    status: TournamentStatus = STATUS_SETUP
    config: TournamentConfig = field(default_factory=TournamentConfig)

    @property
    def current_round(self) -> Optional[Round]:
        """The most recent round, or None before round 1."""
        return self.rounds[-1] if self.rounds else None

    @property
    def current_round_number(self) -> int:
        return len(self.rounds)

    @property
    def num_rounds(self) -> int:
        """Rounds this tournament is scheduled to play."""
        return self.config.rounds_for(len(self.players))

    def get_player(self, player_id: PlayerId) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def player_names(self) -> Dict[PlayerId, str]:
        return {player.id: player.name for player in self.players}

    def evolve(self, **changes: Any) -> "Tournament":
        """Return a new snapshot with ``changes`` applied."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary."""
        return {
            "name": self.name,
            "status": self.status,
            "config": self.config.to_dict(),
            "players": [p.to_dict() for p in self.players],
            "rounds": [r.to_dict() for r in self.rounds],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary."""
        return cls(
            name=data["name"],
            players=[Player.from_dict(p) for p in data.get("players", [])],
            rounds=[Round.from_dict(r) for r in data.get("rounds", [])],
            status=data.get("status", STATUS_SETUP),
            config=TournamentConfig.from_dict(data.get("config", {})),
        )
