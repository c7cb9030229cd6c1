"""Coalescing of bursts of change notifications into one recompute."""

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

from typing import Optional

from PyQt6 import QtCore

from gambitlive.constants import DEFAULT_DEBOUNCE_MS


class RecomputeDebouncer(QtCore.QObject):
    """Emits ``fired`` once after ``trigger()`` calls stop for a full window.

    Every ``trigger()`` restarts the window, so a storm of change
    notifications leads to a single standings or bracket recompute.
    """

    fired = QtCore.pyqtSignal()

    def __init__(
        self,
        window_ms: int = DEFAULT_DEBOUNCE_MS,
        parent: Optional[QtCore.QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._timer = QtCore.QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(window_ms)
        self._timer.timeout.connect(self.fired)

    @property
    def pending(self) -> bool:
        return self._timer.isActive()

    def trigger(self) -> None:
        self._timer.start()

    def flush(self) -> None:
        """Fire now if a recompute is pending."""
        if self._timer.isActive():
            self._timer.stop()
            self.fired.emit()

    def cancel(self) -> None:
        self._timer.stop()
