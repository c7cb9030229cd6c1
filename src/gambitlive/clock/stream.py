"""Ordering checks shared by every fold over a match event log."""

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

from datetime import datetime
from typing import Iterator, Optional, Sequence, Tuple

from gambitlive.constants import EVENT_TYPES
from gambitlive.exceptions import MalformedEventStream
from gambitlive.models import MatchEvent


def _is_aware(timestamp: datetime) -> bool:
    return timestamp.utcoffset() is not None


def ordered_events(events: Sequence[MatchEvent]) -> Iterator[Tuple[int, MatchEvent]]:
    """Yield ``(index, event)`` pairs, validating the log as it is walked.

    Raises:
        MalformedEventStream: If an event goes back in time, belongs to a
            different match than the first event, has an unknown type, or
            mixes timezone-aware and naive timestamps
    """
    match_id: Optional[str] = None
    previous = None

    for index, event in enumerate(events):
        if event.type not in EVENT_TYPES:
            raise MalformedEventStream(
                f"Event {index} has unknown type {event.type!r}",
                match_id=event.match_id,
                index=index,
            )
        if match_id is None:
            match_id = event.match_id
        elif event.match_id != match_id:
            raise MalformedEventStream(
                f"Event {index} belongs to match {event.match_id!r}, "
                f"log is for match {match_id!r}",
                match_id=match_id,
                index=index,
            )
        if previous is not None:
            if _is_aware(event.timestamp) != _is_aware(previous.timestamp):
                raise MalformedEventStream(
                    f"Event {index} mixes timezone-aware and naive timestamps",
                    match_id=match_id,
                    index=index,
                )
            if event.timestamp < previous.timestamp:
                raise MalformedEventStream(
                    f"Event {index} ({event.type} at "
                    f"{event.timestamp.isoformat()}) is earlier than the "
                    f"previous event at {previous.timestamp.isoformat()}",
                    match_id=match_id,
                    index=index,
                )
        previous = event
        yield index, event
