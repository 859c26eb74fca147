"""Tournament configuration data class."""

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

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from swisspairing.constants import DEFAULT_TOURNAMENT_NAME, MIN_PLAYERS
from swisspairing.exceptions import InvalidConfigurationException


def recommended_rounds(player_count: int) -> int:
    """Number of Swiss rounds needed to separate a single undefeated player.

    Args:
        player_count: Players registered

    Returns:
        ``ceil(log2(player_count))``, at least 1
    """
    if player_count <= 2:
        return 1
    return math.ceil(math.log2(player_count))


@dataclass
class TournamentConfig:
    """Configuration settings for a tournament.

    Attributes
    ----------
    name : str
        Tournament name.
    num_rounds : int or None
        Rounds to play. None means the recommended count for the roster.
    min_players : int
        Smallest roster the tournament may start with.
    seed : int or None
        Seed for the pairing shuffle. None gives a different shuffle each run.
    """

    name: str = DEFAULT_TOURNAMENT_NAME
    num_rounds: Optional[int] = None
    min_players: int = MIN_PLAYERS
    seed: Optional[int] = None

    def validate(self) -> None:
        """Check the settings are usable.

        Raises:
            InvalidConfigurationException: If a setting is out of range
        """
        if self.num_rounds is not None and self.num_rounds < 1:
            raise InvalidConfigurationException(
                f"num_rounds must be at least 1, got {self.num_rounds}"
            )
        if self.min_players < MIN_PLAYERS:
            raise InvalidConfigurationException(
                f"min_players must be at least {MIN_PLAYERS}, got {self.min_players}"
            )

    def rounds_for(self, player_count: int) -> int:
        """Rounds to play for a roster of ``player_count`` players."""
        if self.num_rounds is not None:
            return self.num_rounds
        return recommended_rounds(player_count)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "num_rounds": self.num_rounds,
            "min_players": self.min_players,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name", DEFAULT_TOURNAMENT_NAME),
            num_rounds=data.get("num_rounds"),
            min_players=data.get("min_players", MIN_PLAYERS),
            seed=data.get("seed"),
        )
