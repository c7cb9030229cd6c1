"""Knockout bracket projection and reconciliation.

Provisional first-stage pairings are derived from group standings and merged
with whatever slots have been assigned authoritatively. Later stages are
never projected with teams; they come from authoritative slots or show
"Winner of ..." placeholders.
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

from typing import Dict, Iterable, List, Mapping, Optional, Union

from gambitlive.bracket.policies import (
    STAGE_FOR_SLOT_COUNT,
    GroupTables,
    select_policy,
)
from gambitlive.constants import (
    LABEL_STAGE_LOSER,
    LABEL_STAGE_WINNER,
    LABEL_TO_BE_DECIDED,
    STAGE_NAMES,
    STAGE_ORDER,
    STAGE_SEMIFINAL,
    STAGE_THIRD_PLACE,
)
from gambitlive.models import (
    BracketPairing,
    BracketRules,
    Definitive,
    Provisional,
    SlotAssignment,
    SportRules,
    StandingsRow,
)
from gambitlive.standings import ComparatorChain, StandingsResult
from gambitlive.type_hints import SlotKey
from gambitlive.utils import setup_logger

logger = setup_logger(__name__)

Standings = Union[StandingsResult, Mapping[str, List[StandingsRow]]]


def _stage_position(stage: str) -> int:
    return STAGE_ORDER.index(stage) if stage in STAGE_ORDER else len(STAGE_ORDER)


def _sorted_pairings(pairings: Iterable[BracketPairing]) -> List[BracketPairing]:
    return sorted(
        pairings, key=lambda p: (_stage_position(p.stage), p.stage, p.slot_index)
    )


def _placeholder_pairing(assignment: SlotAssignment) -> BracketPairing:
    """Provisional pairing for a slot that is only partly assigned."""
    return BracketPairing(
        assignment.stage,
        assignment.slot_index,
        Provisional(LABEL_TO_BE_DECIDED, assignment.home_team_id),
        Provisional(LABEL_TO_BE_DECIDED, assignment.away_team_id),
    )


def followup_placeholders(first_stage: str, slot_count: int) -> List[BracketPairing]:
    """Placeholder pairings for every stage after ``first_stage``.

    Each later slot is fed by the winners of two consecutive earlier slots.
    A third-place slot is fed by the semifinal losers.
    """
    pairings: List[BracketPairing] = []
    stage, count = first_stage, slot_count

    while count > 1:
        next_count = count // 2
        next_stage = STAGE_FOR_SLOT_COUNT.get(next_count)
        if next_stage is None:
            break
        stage_name = STAGE_NAMES.get(stage, stage.replace("_", " ").title())
        for slot in range(next_count):
            home = LABEL_STAGE_WINNER.format(stage=stage_name, number=2 * slot + 1)
            away = LABEL_STAGE_WINNER.format(stage=stage_name, number=2 * slot + 2)
            pairings.append(
                BracketPairing(next_stage, slot, Provisional(home), Provisional(away))
            )
        if stage == STAGE_SEMIFINAL:
            pairings.append(
                BracketPairing(
                    STAGE_THIRD_PLACE,
                    0,
                    Provisional(LABEL_STAGE_LOSER.format(stage=stage_name, number=1)),
                    Provisional(LABEL_STAGE_LOSER.format(stage=stage_name, number=2)),
                )
            )
        stage, count = next_stage, next_count

    return pairings


def merge(
    provisional: Iterable[BracketPairing],
    authoritative: Iterable[SlotAssignment],
    include_followups: bool = True,
) -> List[BracketPairing]:
    """Merge projected pairings with authoritative slot assignments.

    A slot whose assignment names both teams is always definitive. Other
    slots show the projected pairing, or a placeholder when nothing was
    projected for them.
    """
    projected: Dict[SlotKey, BracketPairing] = {p.key: p for p in provisional}
    assigned: Dict[SlotKey, SlotAssignment] = {}
    for assignment in authoritative:
        if assignment.key in assigned:
            logger.warning(
                f"Duplicate assignment for {assignment.stage} slot "
                f"{assignment.slot_index}, keeping the first"
            )
            continue
        assigned[assignment.key] = assignment

    merged: Dict[SlotKey, BracketPairing] = {}
    for key in set(projected) | set(assigned):
        assignment = assigned.get(key)
        if assignment is not None and assignment.is_complete:
            merged[key] = BracketPairing(
                assignment.stage,
                assignment.slot_index,
                Definitive(assignment.home_team_id),
                Definitive(assignment.away_team_id),
            )
        elif key in projected:
            if assignment is not None:
                logger.debug(f"{key[0]} slot {key[1]} is only partly assigned")
            merged[key] = projected[key]
        else:
            merged[key] = _placeholder_pairing(assignment)

    if include_followups and merged:
        first_stage = min((key[0] for key in merged), key=_stage_position)
        slot_count = sum(1 for key in merged if key[0] == first_stage)
        for pairing in followup_placeholders(first_stage, slot_count):
            merged.setdefault(pairing.key, pairing)

    return _sorted_pairings(merged.values())


def lock_definitive(
    previous: Iterable[BracketPairing], current: Iterable[BracketPairing]
) -> List[BracketPairing]:
    """Keep every slot ``previous`` showed as definitive.

    Used when results can arrive out of order: a view computed from an older
    snapshot never turns a definitive slot back into a provisional one.
    """
    result: Dict[SlotKey, BracketPairing] = {p.key: p for p in current}
    for pairing in previous:
        if pairing.definitive and not (
            pairing.key in result and result[pairing.key].definitive
        ):
            result[pairing.key] = pairing
    return _sorted_pairings(result.values())


class BracketProjector:
    """Derives the knockout bracket for one sport.

    Args
    ----
    sport_rules: Rules whose tiebreak chain also ranks rows across groups
    bracket_rules: Seeding policy settings
    """

    def __init__(
        self, sport_rules: SportRules, bracket_rules: Optional[BracketRules] = None
    ) -> None:
        self.sport_rules = sport_rules
        self.bracket_rules = bracket_rules or BracketRules()
        self.comparator = ComparatorChain.for_rules(sport_rules)

    def provisional_pairings(
        self, standings: Standings, group_count: Optional[int] = None
    ) -> List[BracketPairing]:
        """Project first-stage pairings from the group tables.

        Returns:
            Provisional pairings, empty when there is not enough data yet
        """
        groups = self._group_tables(standings)
        if group_count is None:
            group_count = len(groups)

        policy = select_policy(group_count, self.bracket_rules)
        if policy is None:
            logger.debug(
                f"{self.sport_rules.name}: {group_count} group(s), no projection"
            )
            return []

        pairings = policy(groups, self.comparator, self.bracket_rules)
        logger.debug(
            f"{self.sport_rules.name}: {policy.__name__} projected "
            f"{len(pairings)} pairing(s)"
        )
        return pairings

    def project(
        self,
        standings: Standings,
        authoritative: Iterable[SlotAssignment] = (),
        group_count: Optional[int] = None,
    ) -> List[BracketPairing]:
        """Project the bracket and merge it with authoritative slots."""
        return merge(
            self.provisional_pairings(standings, group_count),
            authoritative,
            include_followups=self.bracket_rules.include_followups,
        )

    def _group_tables(self, standings: Standings) -> GroupTables:
        if isinstance(standings, StandingsResult):
            standings = standings.groups
        return {
            group_id: self.comparator.sort(standings[group_id])
            for group_id in sorted(standings)
        }


def project(
    standings: Standings,
    authoritative: Iterable[SlotAssignment],
    group_count: int,
    sport_rules: SportRules,
    bracket_rules: Optional[BracketRules] = None,
) -> List[BracketPairing]:
    """Shortcut for ``BracketProjector(...).project(...)``."""
    return BracketProjector(sport_rules, bracket_rules).project(
        standings, authoritative, group_count
    )
