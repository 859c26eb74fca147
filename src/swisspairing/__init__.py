"""Swiss Pairing - Swiss-system pairings and standings.

The engine is two pure functions:

- :func:`calculate_standings` ranks players from a round history
- :func:`generate_pairings` pairs the next round

:class:`TournamentController` drives a whole tournament around them.
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

from swisspairing.constants import BYE, DRAW
from swisspairing.controllers import TournamentController
from swisspairing.models import (
    Match,
    MatchScore,
    Player,
    Round,
    Tiebreakers,
    Tournament,
    TournamentConfig,
)
from swisspairing.pairing import generate_pairings
from swisspairing.tournament import calculate_standings, player_match_history

__version__ = "0.1.0"

__all__ = [
    "BYE",
    "DRAW",
    "Match",
    "MatchScore",
    "Player",
    "Round",
    "Tiebreakers",
    "Tournament",
    "TournamentConfig",
    "TournamentController",
    "calculate_standings",
    "generate_pairings",
    "player_match_history",
]
