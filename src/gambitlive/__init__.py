"""Gambit Live: state reconstruction for live tournament dashboards.

The engine rebuilds match clocks from event logs, aggregates group
standings and projects knockout brackets. Everything here is a pure
function of its inputs except the Qt helpers in ``gambitlive.live``.
"""

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

from gambitlive.bracket import BracketProjector, lock_definitive, project
from gambitlive.clock import reconstruct, replay_score
from gambitlive.standings import StandingsAggregator, StandingsResult, aggregate

__version__ = "0.1.0"

__all__ = [
    "BracketProjector",
    "StandingsAggregator",
    "StandingsResult",
    "aggregate",
    "lock_definitive",
    "project",
    "reconstruct",
    "replay_score",
]
