"""Display formatting helpers."""

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


def format_elapsed(ms: int) -> str:
    """Format an elapsed duration in milliseconds as ``MM:SS``.

    Minutes are not wrapped at 60 and negative durations render as ``00:00``.

    Example:
        >>> format_elapsed(17_000)
        '00:17'
        >>> format_elapsed(3_725_000)
        '62:05'
    """
    total_seconds = max(0, int(ms) // 1000)
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"
