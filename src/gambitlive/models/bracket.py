"""Bracket pairing data classes."""

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
from typing import Any, Dict, Optional, Union

from gambitlive.type_hints import SlotKey, Stage


@dataclass(frozen=True)
class Provisional:
    """A bracket side that is not locked in yet.

    Attributes
    ----------
    label : str
        Symbolic description of the side, e.g. "Winner of Group A".
    projected_team_id : str or None
        Team currently holding that position in the standings, if any.
        This is a forecast and never a real assignment.
    """

    label: str
    projected_team_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "provisional",
            "label": self.label,
            "projected_team_id": self.projected_team_id,
        }


@dataclass(frozen=True)
class Definitive:
    """A bracket side backed by an authoritative slot assignment."""

    team_id: str

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "definitive", "team_id": self.team_id}


SlotRef = Union[Provisional, Definitive]


@dataclass(frozen=True)
class BracketPairing:
    """A knockout matchup shown in the bracket.

    Attributes
    ----------
    stage : str
        Knockout stage, e.g. ``semifinal``.
    slot_index : int
        0-based position of the matchup within its stage.
    home, away : SlotRef
        The two sides.
    """

    stage: Stage
    slot_index: int
    home: SlotRef
    away: SlotRef

    @property
    def key(self) -> SlotKey:
        return (self.stage, self.slot_index)

    @property
    def definitive(self) -> bool:
        return isinstance(self.home, Definitive) and isinstance(self.away, Definitive)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing to dictionary."""
        return {
            "stage": self.stage,
            "slot_index": self.slot_index,
            "home": self.home.to_dict(),
            "away": self.away.to_dict(),
            "definitive": self.definitive,
        }


@dataclass(frozen=True)
class SlotAssignment:
    """An authoritative bracket slot, possibly only partly filled.

    Attributes
    ----------
    stage : str
        Knockout stage of the slot.
    slot_index : int
        0-based position within the stage.
    home_team_id, away_team_id : str or None
        Assigned teams; None until the organiser fills the side.
    match_id : str or None
        Backing match, when one exists.
    """

    stage: Stage
    slot_index: int
    home_team_id: Optional[str] = None
    away_team_id: Optional[str] = None
    match_id: Optional[str] = None

    @property
    def key(self) -> SlotKey:
        return (self.stage, self.slot_index)

    @property
    def is_complete(self) -> bool:
        return bool(self.home_team_id) and bool(self.away_team_id)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SlotAssignment":
        """Deserialize slot assignment from dictionary."""
        return cls(
            stage=data["stage"],
            slot_index=int(data["slot_index"]),
            home_team_id=data.get("home_team_id"),
            away_team_id=data.get("away_team_id"),
            match_id=data.get("match_id"),
        )
