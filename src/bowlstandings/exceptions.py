"""Exceptions for use in Bowl Standings"""

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


# ========== Base Application Exception ==========


class BowlStandingsException(Exception):
    """Base exception for all Bowl Standings errors.

    All custom exceptions in the package inherit from this class.
    This enables catching all package-specific errors with a single except clause.
    """

    pass


# ========== Match Exceptions ==========


class MatchException(BowlStandingsException):
    """Base exception for errors raised while resolving a single match."""

    pass


class MatchNotCompletedException(MatchException):
    """Raised when a match that is not in the completed state is resolved."""

    pass


class DataIntegrityException(MatchException):
    """Raised when a completed match cannot be trusted for the standings.

    The offending match is excluded from the computation and reported,
    never patched up with default values.
    """

    pass


class IncompleteBallotSetException(DataIntegrityException):
    """Raised when the number of ballots differs from the judge panel size."""

    pass


class PendingBallotException(DataIntegrityException):
    """Raised when a match still has a ballot that is not finalized."""

    pass


class UnknownTeamException(DataIntegrityException):
    """Raised when a match references a team the tournament does not know."""

    pass


class DuplicateTeamException(DataIntegrityException):
    """Raised when a tournament lists the same team id more than once.

    This concerns the whole team list, so it stops the computation instead
    of excluding a single match.
    """

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(BowlStandingsException):
    """Base exception for configuration errors.

    Configuration errors are fatal to the whole computation: no standings
    are produced from an ambiguous configuration.
    """

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid or inconsistent."""

    pass


class MissingConfigurationException(ConfigurationException):
    """Raised when required configuration is missing."""

    pass


# ========== Store Exceptions ==========


class StoreException(BowlStandingsException):
    """Base exception for match store errors."""

    pass


class TournamentNotFoundException(StoreException):
    """Raised when a requested tournament does not exist in the store."""

    pass


class FileLoadException(StoreException):
    """Raised when a snapshot file cannot be loaded."""

    pass
