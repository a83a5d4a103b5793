"""Utility helpers shared across Bowl Standings."""

# Bowl Standings
# Copyright (C) 2025  Bowl Standings developers
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
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Return a module logger writing to stderr.

    A handler is attached to the package root logger only once, so module
    loggers created with this helper share a single output stream.

    Args:
        name: Logger name, usually ``__name__``
        level: Level applied to the package root logger on first setup

    Returns:
        The configured logger
    """
    root_name = name.split(".")[0]
    root_logger = logging.getLogger(root_name)
    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(handler)
        root_logger.setLevel(level)
    return logging.getLogger(name)


__all__ = ["setup_logger", "LOG_FORMAT"]
