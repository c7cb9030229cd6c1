"""Team and match result data classes."""

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

from gambitlive.constants import STAGE_GROUP, STATUS_FINISHED, STATUS_SCHEDULED
from gambitlive.type_hints import MatchStatus, Stage


@dataclass(frozen=True)
class TeamRef:
    """A team registered for a sport.

    Attributes
    ----------
    team_id : str
        Stable team identifier. Also the last tiebreak key.
    group_id : str or None
        Group the team was drawn into, if any.
    name : str
        Display name.
    """

    team_id: str
    group_id: Optional[str] = None
    name: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"team_id": self.team_id, "group_id": self.group_id, "name": self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TeamRef":
        return cls(
            team_id=str(data["team_id"]),
            group_id=data.get("group_id"),
            name=data.get("name", ""),
        )


@dataclass(frozen=True)
class MatchResult:
    """Represents the current score of a single match.

    Attributes
    ----------
    match_id : str
        ID of the match.
    home_id : str or None
        ID of the home team. Knockout matches may not have one yet.
    away_id : str or None
        ID of the away team.
    group_id : str or None
        Group of a group-stage match.
    stage : str
        ``group`` or one of the knockout stages.
    status : str
        ``scheduled``, ``ongoing``, ``paused`` or ``finished``.
    home_score, away_score : int
        Goals or rally points.
    home_sets, away_sets : int
        Sets won, for set-based sports.
    """

    match_id: str
    home_id: Optional[str]
    away_id: Optional[str]
    group_id: Optional[str] = None
    stage: Stage = STAGE_GROUP
    status: MatchStatus = STATUS_SCHEDULED
    home_score: int = 0
    away_score: int = 0
    home_sets: int = 0
    away_sets: int = 0

    @property
    def is_finished(self) -> bool:
        return self.status == STATUS_FINISHED

    @property
    def counts_for_standings(self) -> bool:
        """Only finished group-stage matches feed the group tables."""
        return self.is_finished and self.stage == STAGE_GROUP and bool(self.group_id)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match result to dictionary."""
        return {
            "match_id": self.match_id,
            "home_id": self.home_id,
            "away_id": self.away_id,
            "group_id": self.group_id,
            "stage": self.stage,
            "status": self.status,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "home_sets": self.home_sets,
            "away_sets": self.away_sets,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchResult":
        """Deserialize match result from dictionary.

        Missing or null scores count as zero, negative set counts are clamped.
        """
        return cls(
            match_id=str(data["match_id"]),
            home_id=data.get("home_id"),
            away_id=data.get("away_id"),
            group_id=data.get("group_id"),
            stage=data.get("stage", STAGE_GROUP),
            status=data.get("status", STATUS_SCHEDULED),
            home_score=int(data.get("home_score") or 0),
            away_score=int(data.get("away_score") or 0),
            home_sets=max(0, int(data.get("home_sets") or 0)),
            away_sets=max(0, int(data.get("away_sets") or 0)),
        )
