"""Standings data classes."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class TeamCounters:
    """Precomputed per-team counters from an authoritative store.

    ``table_points`` may be omitted, in which case the sport's point values
    are applied to the win/draw/loss counts.
    """

    team_id: str
    group_id: str
    played: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    sets_won: int = 0
    sets_lost: int = 0
    points_for: int = 0
    points_against: int = 0
    table_points: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TeamCounters":
        """Deserialize counters from dictionary, treating nulls as zero."""

        def count(key: str) -> int:
            return int(data.get(key) or 0)

        table_points = data.get("table_points")
        return cls(
            team_id=str(data["team_id"]),
            group_id=str(data["group_id"]),
            played=count("played"),
            wins=count("wins"),
            draws=count("draws"),
            losses=count("losses"),
            sets_won=count("sets_won"),
            sets_lost=count("sets_lost"),
            points_for=count("points_for"),
            points_against=count("points_against"),
            table_points=int(table_points) if table_points is not None else None,
        )


@dataclass(frozen=True)
class StandingsRow:
    """One team's line in a group table.

    Attributes
    ----------
    group_id : str
        Group the row belongs to.
    team_id : str
        Team identifier.
    played, wins, draws, losses : int
        Match counters.
    sets_won, sets_lost : int
        Set counters, always zero for goal-based sports.
    points_for, points_against : int
        Goals or rally points scored and conceded.
    table_points : int
        Points awarded for results.
    rank : int
        1-based position after the full tiebreak chain, 0 before ranking.
    """

    group_id: str
    team_id: str
    played: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    sets_won: int = 0
    sets_lost: int = 0
    points_for: int = 0
    points_against: int = 0
    table_points: int = 0
    rank: int = 0

    @property
    def point_difference(self) -> int:
        return self.points_for - self.points_against

    def to_dict(
        self, include_sets: bool = True, include_draws: bool = True
    ) -> Dict[str, Any]:
        """Serialize row to dictionary.

        Args:
            include_sets: Emit ``sets_won``/``sets_lost`` (set-based sports)
            include_draws: Emit ``draws`` (sports where draws can happen)
        """
        data: Dict[str, Any] = {
            "group_id": self.group_id,
            "team_id": self.team_id,
            "played": self.played,
            "wins": self.wins,
        }
        if include_draws:
            data["draws"] = self.draws
        data["losses"] = self.losses
        if include_sets:
            data["sets_won"] = self.sets_won
            data["sets_lost"] = self.sets_lost
        data.update(
            {
                "points_for": self.points_for,
                "points_against": self.points_against,
                "point_difference": self.point_difference,
                "table_points": self.table_points,
                "rank": self.rank,
            }
        )
        return data


@dataclass(frozen=True)
class StandingsDiscrepancy:
    """A counter that differs between authoritative and derived standings."""

    group_id: str
    team_id: str
    field: str
    authoritative: Any
    derived: Any

    def __str__(self) -> str:
        return (
            f"Group {self.group_id} team {self.team_id}: {self.field} "
            f"authoritative={self.authoritative!r} derived={self.derived!r}"
        )
