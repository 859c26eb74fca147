"""Shared helpers for Swiss Pairing."""

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

import logging
import os

from swisspairing.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ROOT_LOGGER_NAME = "swisspairing"


def _resolve_level(level_name: str) -> int:
    level = logging.getLevelName(level_name.strip().upper())
    if isinstance(level, int):
        return level
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


def setup_logger(name: str) -> logging.Logger:
    """Return the logger for a module, configuring the package logger once.

    All module loggers hang below ``swisspairing``; that logger gets a single
    stream handler, and its level is read from ``SWISSPAIRING_LOG_LEVEL``.

    Args:
        name: Module name, normally ``__name__``

    Returns:
        The logger for ``name``
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(
            _resolve_level(os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL))
        )
    return logging.getLogger(name)


def set_log_level(level_name: str) -> None:
    """Override the package log level (used by the command line tools)."""
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(_resolve_level(level_name))
