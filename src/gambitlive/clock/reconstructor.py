"""Match clock reconstruction.

The clock is never stored. It is rebuilt on demand by folding the match's
clock-control events in timestamp order.
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

from datetime import timedelta
from typing import Sequence

from gambitlive.clock.stream import ordered_events
from gambitlive.constants import CLOCK_HALT_EVENTS, CLOCK_RUN_EVENTS
from gambitlive.models import ClockState, MatchEvent
from gambitlive.utils import setup_logger

logger = setup_logger(__name__)

_ONE_MS = timedelta(milliseconds=1)


def reconstruct(events: Sequence[MatchEvent]) -> ClockState:
    """Reduce an ordered event log to the current clock state.

    Start and resume events open a running period unless one is already
    open. Pause, stop and finish events close the open period and add its
    length to the accumulated time; without an open period they do nothing.
    Score events are skipped.

    Args:
        events: Events of a single match, ascending by timestamp

    Returns:
        The derived ClockState, ``ClockState()`` for an empty log

    Raises:
        MalformedEventStream: If the log is out of order or mixes matches
    """
    accumulated_ms = 0
    run_started_at = None

    for _, event in ordered_events(events):
        if event.type in CLOCK_RUN_EVENTS:
            if run_started_at is None:
                run_started_at = event.timestamp
        elif event.type in CLOCK_HALT_EVENTS:
            if run_started_at is not None:
                accumulated_ms += (event.timestamp - run_started_at) // _ONE_MS
                run_started_at = None

    state = ClockState(
        accumulated_ms=accumulated_ms,
        running=run_started_at is not None,
        run_started_at=run_started_at,
    )
    if events:
        logger.debug(
            f"Clock for match {events[0].match_id}: {state.accumulated_ms} ms, "
            f"running={state.running}"
        )
    return state
