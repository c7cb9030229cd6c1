"""Data classes shared by the clock, standings and bracket engines."""

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

from gambitlive.models.bracket import (
    BracketPairing,
    Definitive,
    Provisional,
    SlotAssignment,
    SlotRef,
)
from gambitlive.models.event import ClockState, MatchEvent, parse_timestamp
from gambitlive.models.match import MatchResult, TeamRef
from gambitlive.models.rules import (
    BUILTIN_SPORTS,
    BracketRules,
    SportRules,
    get_sport_rules,
    load_sport_rules,
)
from gambitlive.models.standings import StandingsDiscrepancy, StandingsRow, TeamCounters

__all__ = [
    "BracketPairing",
    "BracketRules",
    "BUILTIN_SPORTS",
    "ClockState",
    "Definitive",
    "MatchEvent",
    "MatchResult",
    "Provisional",
    "SlotAssignment",
    "SlotRef",
    "SportRules",
    "StandingsDiscrepancy",
    "StandingsRow",
    "TeamCounters",
    "TeamRef",
    "get_sport_rules",
    "load_sport_rules",
    "parse_timestamp",
]
