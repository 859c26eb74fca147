"""Validation utilities for Swiss Pairing.

This module provides reusable validation functions with consistent error handling.
Each validator returns a :class:`ValidationResult` instead of raising; callers
decide whether an invalid value is an error.
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

import re
from typing import Any, Iterable, Optional

from swisspairing.constants import MIN_PLAYERS


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Tournament Setup Validation ==========


def validate_tournament_name(name: Optional[str]) -> ValidationResult:
    """Validate a tournament name.

    Args:
        name: Name as typed by the organizer

    Returns:
        ValidationResult with the stripped name
    """
    if not name or not name.strip():
        return ValidationResult(
            is_valid=False,
            error_message="Tournament name is required",
        )
    return ValidationResult(is_valid=True, sanitized_value=name.strip())


def validate_player_names(
    names: Iterable[str], min_players: int = MIN_PLAYERS
) -> ValidationResult:
    """Validate a roster of player names.

    Names are stripped and blank entries dropped, so the raw lines of a
    multi-line text box can be passed straight in.

    Args:
        names: Player names in registration order
        min_players: Smallest roster a tournament may start with

    Returns:
        ValidationResult whose sanitized value is the cleaned list of names

    Example:
        >>> result = validate_player_names(["Alice", " ", "Bob "])
        >>> result.sanitized_value
        ['Alice', 'Bob']
    """
    cleaned = [name.strip() for name in names if name and name.strip()]

    if len(cleaned) < min_players:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"You need at least {min_players} players to start a tournament "
                f"(got {len(cleaned)})"
            ),
        )

    return ValidationResult(is_valid=True, sanitized_value=cleaned)


# ========== Score Validation ==========

_SCORE_PATTERN = re.compile(r"^\s*(\d+)\s*-\s*(\d+)\s*$")


def validate_score(score: Optional[str]) -> ValidationResult:
    """Validate a game score string such as ``"2-1"``.

    Args:
        score: Score as ``"<player 1 games>-<player 2 games>"``

    Returns:
        ValidationResult whose sanitized value is a ``(player1, player2)`` tuple
    """
    if score is None or not score.strip():
        return ValidationResult(is_valid=False, error_message="Score is required")

    match = _SCORE_PATTERN.match(score)
    if not match:
        return ValidationResult(
            is_valid=False,
            error_message=f"Invalid score {score!r}, expected a form like '2-1'",
        )

    return ValidationResult(
        is_valid=True,
        sanitized_value=(int(match.group(1)), int(match.group(2))),
    )
