"""Periodic live clock display for an observed match."""

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

from datetime import datetime, timezone
from typing import Callable, Optional

from PyQt6 import QtCore

from gambitlive.constants import LIVE_TICK_INTERVAL_MS
from gambitlive.models import ClockState
from gambitlive.utils import setup_logger

logger = setup_logger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LiveClock(QtCore.QObject):
    """Re-emits a match's elapsed time on a fixed cadence while it runs.

    The clock state is supplied by the caller whenever the event log
    changes; ticks only extrapolate from it and never re-walk the log.
    Call ``stop()`` once the match is no longer observed.
    """

    elapsed_changed = QtCore.pyqtSignal(int)

    def __init__(
        self,
        state: Optional[ClockState] = None,
        interval_ms: int = LIVE_TICK_INTERVAL_MS,
        now: Callable[[], datetime] = _utc_now,
        parent: Optional[QtCore.QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._state = state or ClockState()
        self._now = now
        self._timer = QtCore.QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self.tick)

    @property
    def state(self) -> ClockState:
        return self._state

    @property
    def is_ticking(self) -> bool:
        return self._timer.isActive()

    def elapsed_ms(self) -> int:
        return self._state.live_elapsed_ms(self._now())

    def set_state(self, state: ClockState) -> None:
        """Adopt a freshly reconstructed state and emit its elapsed time."""
        self._state = state
        if state.running and not self._timer.isActive():
            self._timer.start()
        elif not state.running and self._timer.isActive():
            self._timer.stop()
        self.tick()

    def tick(self) -> None:
        self.elapsed_changed.emit(self.elapsed_ms())

    def stop(self) -> None:
        """Stop ticking. No signal is emitted afterwards until set_state."""
        if self._timer.isActive():
            logger.debug("Live clock stopped")
        self._timer.stop()
