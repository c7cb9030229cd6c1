"""Score replay from score_delta events."""

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

from typing import Dict, Sequence

from gambitlive.clock.stream import ordered_events
from gambitlive.constants import AWAY, EVENT_SCORE_DELTA, HOME
from gambitlive.exceptions import MalformedEventStream
from gambitlive.models import MatchEvent
from gambitlive.type_hints import Score, Side


def replay_score(events: Sequence[MatchEvent]) -> Score:
    """Fold the ``score_delta`` events of a match into ``(home, away)``.

    Each payload names a ``side`` and an integer ``delta`` (default 1).
    A side never drops below zero.

    Raises:
        MalformedEventStream: If the log is out of order or a payload is invalid
    """
    score: Dict[Side, int] = {HOME: 0, AWAY: 0}

    for index, event in ordered_events(events):
        if event.type != EVENT_SCORE_DELTA:
            continue
        side = event.payload.get("side")
        if side not in score:
            raise MalformedEventStream(
                f"Event {index}: score side must be 'home' or 'away', got {side!r}",
                match_id=event.match_id,
                index=index,
            )
        try:
            delta = int(event.payload.get("delta", 1))
        except (TypeError, ValueError):
            raise MalformedEventStream(
                f"Event {index}: invalid score delta {event.payload.get('delta')!r}",
                match_id=event.match_id,
                index=index,
            ) from None
        score[side] = max(0, score[side] + delta)

    return score[HOME], score[AWAY]
