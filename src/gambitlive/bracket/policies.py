"""Seeding policies for the first knockout stage.

A policy reads ranked group tables and returns provisional pairings for the
first knockout stage. It returns an empty list when the tables do not hold
enough ranked rows yet.
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

from typing import Callable, Dict, List, Optional

from gambitlive.constants import (
    LABEL_BEST_RUNNER_UP,
    LABEL_GROUP_WINNER,
    LABEL_QUALIFIER_SEED,
    LABEL_WINNER_SEED,
    POLICY_ADJACENT_WINNERS,
    POLICY_AUTO,
    POLICY_POOLED_TOP_TWO,
    POLICY_TOP_WINNERS,
    POLICY_WINNERS_PLUS_BEST_RUNNER_UP,
    STAGE_FINAL,
    STAGE_QUARTERFINAL,
    STAGE_ROUND_OF_16,
    STAGE_SEMIFINAL,
)
from gambitlive.exceptions import UnknownSeedingPolicyException
from gambitlive.models import BracketPairing, BracketRules, Provisional, StandingsRow
from gambitlive.standings.comparator import ComparatorChain
from gambitlive.utils import setup_logger

logger = setup_logger(__name__)

GroupTables = Dict[str, List[StandingsRow]]
SeedingPolicy = Callable[
    [GroupTables, ComparatorChain, BracketRules], List[BracketPairing]
]

# Stage reached by a bracket with this many first-stage slots
STAGE_FOR_SLOT_COUNT = {
    1: STAGE_FINAL,
    2: STAGE_SEMIFINAL,
    4: STAGE_QUARTERFINAL,
    8: STAGE_ROUND_OF_16,
}


def _side(label: str, row: Optional[StandingsRow]) -> Provisional:
    return Provisional(label=label, projected_team_id=row.team_id if row else None)


def _seeded_pairings(seeds: List[StandingsRow], label: str) -> List[BracketPairing]:
    """Pair four seeds as 1 vs 4 and 2 vs 3."""
    sides = [_side(label.format(seed=n), row) for n, row in enumerate(seeds, start=1)]
    return [
        BracketPairing(STAGE_SEMIFINAL, 0, sides[0], sides[3]),
        BracketPairing(STAGE_SEMIFINAL, 1, sides[1], sides[2]),
    ]


def top_winners(
    groups: GroupTables, comparator: ComparatorChain, rules: BracketRules
) -> List[BracketPairing]:
    """Four or more groups: the four best group winners, 1 vs 4 and 2 vs 3.

    Groups without ranked rows yet are skipped as long as four winners remain.
    """
    winners = comparator.sort(rows[0] for rows in groups.values() if rows)
    if len(winners) < 4:
        return []
    return _seeded_pairings(winners[:4], LABEL_WINNER_SEED)


def winners_plus_best_runner_up(
    groups: GroupTables, comparator: ComparatorChain, rules: BracketRules
) -> List[BracketPairing]:
    """Three groups: the three winners plus the best runner-up.

    The best runner-up meets the winner of the designated group (the last
    group unless configured). When the runner-up comes from that group it
    meets the winner of the last other group instead. The two remaining
    winners meet in the second semifinal.
    """
    group_ids = sorted(groups)
    if len(group_ids) != 3 or any(not groups[g] for g in group_ids):
        return []
    runners_up = [groups[g][1] for g in group_ids if len(groups[g]) > 1]
    if not runners_up:
        return []
    best_runner_up = comparator.sort(runners_up)[0]

    designated = rules.designated_group
    if designated not in groups:
        if designated is not None:
            logger.warning(
                f"Designated group {designated!r} does not exist, "
                f"using {group_ids[-1]!r}"
            )
        designated = group_ids[-1]
    if best_runner_up.group_id == designated:
        designated = [g for g in group_ids if g != best_runner_up.group_id][-1]

    others = [g for g in group_ids if g != designated]
    return [
        BracketPairing(
            STAGE_SEMIFINAL,
            0,
            _side(LABEL_GROUP_WINNER.format(group=designated), groups[designated][0]),
            _side(LABEL_BEST_RUNNER_UP, best_runner_up),
        ),
        BracketPairing(
            STAGE_SEMIFINAL,
            1,
            _side(LABEL_GROUP_WINNER.format(group=others[0]), groups[others[0]][0]),
            _side(LABEL_GROUP_WINNER.format(group=others[1]), groups[others[1]][0]),
        ),
    ]


def pooled_top_two(
    groups: GroupTables, comparator: ComparatorChain, rules: BracketRules
) -> List[BracketPairing]:
    """Two groups: winners and runners-up pooled and re-seeded, 1 vs 4 and 2 vs 3."""
    if len(groups) != 2 or any(len(rows) < 2 for rows in groups.values()):
        return []
    pool = [row for rows in groups.values() for row in rows[:2]]
    return _seeded_pairings(comparator.sort(pool), LABEL_QUALIFIER_SEED)


def adjacent_winners(
    groups: GroupTables, comparator: ComparatorChain, rules: BracketRules
) -> List[BracketPairing]:
    """Winners of neighbouring groups meet: A vs B, C vs D and so on.

    Groups without ranked rows still get a placeholder side. The stage
    follows from the number of pairings.
    """
    group_ids = sorted(groups)
    stage = STAGE_FOR_SLOT_COUNT.get(len(group_ids) // 2)
    if len(group_ids) % 2 or stage is None:
        return []

    def winner(group_id: str) -> Provisional:
        rows = groups[group_id]
        label = LABEL_GROUP_WINNER.format(group=group_id)
        return _side(label, rows[0] if rows else None)

    return [
        BracketPairing(
            stage, slot, winner(group_ids[2 * slot]), winner(group_ids[2 * slot + 1])
        )
        for slot in range(len(group_ids) // 2)
    ]


SEEDING_POLICIES: Dict[str, SeedingPolicy] = {
    POLICY_TOP_WINNERS: top_winners,
    POLICY_WINNERS_PLUS_BEST_RUNNER_UP: winners_plus_best_runner_up,
    POLICY_POOLED_TOP_TWO: pooled_top_two,
    POLICY_ADJACENT_WINNERS: adjacent_winners,
}


def select_policy(group_count: int, rules: BracketRules) -> Optional[SeedingPolicy]:
    """Pick the seeding policy for a bracket.

    Returns:
        The policy, or None when fewer than two groups exist and ``auto`` is set

    Raises:
        UnknownSeedingPolicyException: If ``rules.policy`` is not registered
    """
    if rules.policy != POLICY_AUTO:
        try:
            return SEEDING_POLICIES[rules.policy]
        except KeyError:
            raise UnknownSeedingPolicyException(
                f"Unknown seeding policy {rules.policy!r}"
            ) from None

    if group_count >= 4:
        return top_winners
    if group_count == 3:
        return winners_plus_best_runner_up
    if group_count == 2:
        return pooled_top_two
    return None
