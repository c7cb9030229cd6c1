"""Tiebreak comparator chains for standings rows."""

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

import functools
from dataclasses import dataclass, replace
from typing import Iterable, List, Tuple

from gambitlive.constants import ASC, DESC
from gambitlive.models import SportRules, StandingsRow
from gambitlive.type_hints import Direction


@dataclass(frozen=True)
class SortKey:
    """One step of a tiebreak chain: a row attribute and its direction."""

    key: str
    direction: Direction = DESC

    def compare(self, a: StandingsRow, b: StandingsRow) -> int:
        """Return a negative number if ``a`` ranks above ``b`` on this key."""
        va = getattr(a, self.key)
        vb = getattr(b, self.key)
        if va == vb:
            return 0
        better = va > vb if self.direction == DESC else va < vb
        return -1 if better else 1


class ComparatorChain:
    """Ordered tiebreak chain evaluated left to right.

    The chain always ends on the team identifier (ascending) and then the
    group identifier, so two distinct rows never compare equal. The same
    chain ranks rows within a group and across groups.
    """

    def __init__(self, keys: Iterable[Tuple[str, str]]) -> None:
        self.keys: List[SortKey] = [SortKey(key, direction) for key, direction in keys]

    @classmethod
    def for_rules(cls, rules: SportRules) -> "ComparatorChain":
        return cls(rules.tiebreak_order)

    def compare(self, a: StandingsRow, b: StandingsRow) -> int:
        """Compare two rows for standings order.

        Returns:
            -1 if ``a`` ranks higher, 1 if ``b`` ranks higher, 0 only for
            rows of the same team in the same group
        """
        for sort_key in self.keys:
            result = sort_key.compare(a, b)
            if result:
                return result

        for final_key in (SortKey("team_id", ASC), SortKey("group_id", ASC)):
            result = final_key.compare(a, b)
            if result:
                return result
        return 0

    def sort(self, rows: Iterable[StandingsRow]) -> List[StandingsRow]:
        """Return rows best first."""
        return sorted(rows, key=functools.cmp_to_key(self.compare))

    def rank(self, rows: Iterable[StandingsRow]) -> List[StandingsRow]:
        """Return rows best first with ``rank`` set from 1."""
        return [
            replace(row, rank=position)
            for position, row in enumerate(self.sort(rows), start=1)
        ]

    def __repr__(self) -> str:
        chain = ", ".join(f"{k.key} {k.direction}" for k in self.keys)
        return f"ComparatorChain({chain})"
