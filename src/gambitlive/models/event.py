"""Match event and clock state data classes."""

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

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from dateutil import tz
from dateutil.parser import isoparse

from gambitlive.constants import EVENT_TYPES
from gambitlive.exceptions import InvalidConfigurationException
from gambitlive.type_hints import EventType, Timestamp


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO-8601 timestamp such as ``2025-03-01T18:00:00Z``.

    Timestamps without an offset are taken to be UTC, so every parsed value
    can be compared with an aware ``now``.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = isoparse(value.strip())
        except ValueError as e:
            raise InvalidConfigurationException(f"Invalid timestamp: {value!r}") from e
    else:
        raise InvalidConfigurationException(f"Invalid timestamp: {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz.UTC)
    return parsed


@dataclass(frozen=True)
class MatchEvent:
    """A single immutable fact recorded against a match.

    Attributes
    ----------
    match_id : str
        ID of the match the event belongs to.
    type : str
        One of the clock-control types or ``score_delta``.
    timestamp : datetime
        When the event happened. Logs are ordered by this value; events
        sharing a timestamp keep their insertion order.
    payload : dict
        Free-form event data. ``score_delta`` events carry ``side`` and
        ``delta``.
    """

    match_id: str
    type: EventType
    timestamp: Timestamp
    payload: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize event to dictionary."""
        return {
            "match_id": self.match_id,
            "type": self.type,
            "timestamp": self.timestamp.isoformat(),
            "payload": dict(self.payload),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchEvent":
        """Deserialize event from dictionary."""
        event_type = data["type"]
        if event_type not in EVENT_TYPES:
            raise InvalidConfigurationException(f"Unknown event type: {event_type!r}")
        return cls(
            match_id=str(data["match_id"]),
            type=event_type,
            timestamp=parse_timestamp(data["timestamp"]),
            payload=dict(data.get("payload") or {}),
        )


@dataclass(frozen=True)
class ClockState:
    """Derived state of a match clock.

    Attributes
    ----------
    accumulated_ms : int
        Sum of all closed running periods in milliseconds.
    running : bool
        Whether the clock is currently running.
    run_started_at : datetime or None
        Start of the open running period, None when stopped.
    """

    accumulated_ms: int = 0
    running: bool = False
    run_started_at: Optional[datetime] = None

    def live_elapsed_ms(self, now: datetime) -> int:
        """Elapsed time including the open running period, as of ``now``."""
        if not self.running or self.run_started_at is None:
            return self.accumulated_ms
        open_ms = int((now - self.run_started_at).total_seconds() * 1000)
        return self.accumulated_ms + max(0, open_ms)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize clock state to dictionary."""
        return {
            "accumulated_ms": self.accumulated_ms,
            "running": self.running,
            "run_started_at": (
                self.run_started_at.isoformat() if self.run_started_at else None
            ),
        }
