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

# --- Sentinels ---
# Stands in for the missing opponent of a bye match, and for its winner
BYE = "bye"
# Winner marker of a drawn match
DRAW = "draw"

# Match outcome points
WIN_POINTS = 3
DRAW_POINTS = 1
LOSS_POINTS = 0

# A bye counts as a won match with a fixed 2-0 game score
BYE_POINTS = WIN_POINTS
BYE_RESULT = (2, 0)

# Lower bound for match-win percentage once a player has played a round
MWP_FLOOR = 0.33

# Game scores a best-of-three match can be reported with
SCORE_OPTIONS = ["2-0", "2-1", "1-0", "1-1", "0-1", "1-2", "0-2", "0-0"]

# Tournament lifecycle
STATUS_SETUP = "setup"
STATUS_IN_PROGRESS = "in_progress"
STATUS_COMPLETED = "completed"

# Match outcomes from a single player's point of view
OUTCOME_WIN = "Win"
OUTCOME_LOSS = "Loss"
OUTCOME_DRAW = "Draw"
OUTCOME_PENDING = "Pending"

# Tiebreaker Keys
TB_MATCH_WIN_PERCENTAGE = "mwp"
TB_STRENGTH_OF_SCHEDULE = "sos"
TB_SUM_OF_OPPONENT_SOS = "sosos"

TIEBREAK_NAMES = {
    TB_MATCH_WIN_PERCENTAGE: "MW%",
    TB_STRENGTH_OF_SCHEDULE: "SOS",
    TB_SUM_OF_OPPONENT_SOS: "SOSOS",
}

# Tournament defaults
DEFAULT_TOURNAMENT_NAME = "Untitled Tournament"
MIN_PLAYERS = 2

# Logging
LOG_LEVEL_ENV_VAR = "SWISSPAIRING_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
