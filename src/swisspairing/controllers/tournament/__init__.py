"""Tournament controllers for Swiss Pairing.

This package drives a tournament through its lifecycle: registration,
pairing each round, recording results and closing the event.
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

from swisspairing.controllers.tournament.result_recorder import (
    ResultRecorder,
    decide_winner,
    parse_score,
)
from swisspairing.controllers.tournament.round_manager import RoundManager
from swisspairing.controllers.tournament.tournament_controller import (
    TournamentController,
)

__all__ = [
    "ResultRecorder",
    "RoundManager",
    "TournamentController",
    "decide_winner",
    "parse_score",
]
