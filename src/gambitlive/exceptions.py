"""Exceptions for use in Gambit Live"""

# Gambit Live
# Copyright (C) 2025  Gambit Pairing developers
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


class GambitLiveException(Exception):
    """Base exception for all Gambit Live errors.

    All custom exceptions in the package inherit from this class so callers
    can catch every engine-specific error with a single except clause.
    """

    pass


# ========== Clock Exceptions ==========


class ClockException(GambitLiveException):
    """Base exception for match clock errors."""

    pass


class MalformedEventStream(ClockException):
    """Raised when a match event log is out of order or inconsistent.

    Attributes
    ----------
    match_id : str or None
        Match the offending log belongs to, when known.
    index : int or None
        Position of the offending event in the log.
    """

    def __init__(self, message, match_id=None, index=None):
        super().__init__(message)
        self.match_id = match_id
        self.index = index


# ========== Standings Exceptions ==========


class StandingsException(GambitLiveException):
    """Base exception for standings errors."""

    pass


class UnknownSportException(StandingsException):
    """Raised when no rules are registered under the requested sport name."""

    pass


# ========== Bracket Exceptions ==========


class BracketException(GambitLiveException):
    """Base exception for bracket projection errors."""

    pass


class UnknownSeedingPolicyException(BracketException):
    """Raised when a bracket is configured with an unregistered seeding policy."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(GambitLiveException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
