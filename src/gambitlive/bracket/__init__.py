"""Knockout bracket projection."""

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

from gambitlive.bracket.policies import (
    SEEDING_POLICIES,
    adjacent_winners,
    pooled_top_two,
    select_policy,
    top_winners,
    winners_plus_best_runner_up,
)
from gambitlive.bracket.projector import (
    BracketProjector,
    followup_placeholders,
    lock_definitive,
    merge,
    project,
)

__all__ = [
    "BracketProjector",
    "SEEDING_POLICIES",
    "adjacent_winners",
    "followup_placeholders",
    "lock_definitive",
    "merge",
    "pooled_top_two",
    "project",
    "select_policy",
    "top_winners",
    "winners_plus_best_runner_up",
]
