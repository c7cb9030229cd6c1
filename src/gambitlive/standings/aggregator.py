"""Standings aggregation for group-stage tables.

This module turns a sport's teams and matches into ranked group tables,
either by folding the raw finished matches or by reading authoritative
per-team counters. Both paths must give the same tables for the same facts.
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

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set, Tuple

from gambitlive.constants import COUNTER_FIELDS, STAGE_GROUP
from gambitlive.models import (
    MatchResult,
    SportRules,
    StandingsDiscrepancy,
    StandingsRow,
    TeamCounters,
    TeamRef,
)
from gambitlive.standings.comparator import ComparatorChain
from gambitlive.utils import setup_logger

logger = setup_logger(__name__)

MODE_DERIVED = "derived"
MODE_AUTHORITATIVE = "authoritative"

# (group_id, team_id)
RowKey = Tuple[str, str]


@dataclass
class _Tally:
    played: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    sets_won: int = 0
    sets_lost: int = 0
    points_for: int = 0
    points_against: int = 0


@dataclass
class StandingsResult:
    """Ranked group tables produced by one aggregation pass.

    Attributes
    ----------
    groups : dict of str to list of StandingsRow
        Group id to rows, best first. Groups are ordered by id.
    warnings : list of str
        Input rows that were dropped, in the order they were found.
    mode : str
        ``derived`` or ``authoritative``.
    """

    groups: Dict[str, List[StandingsRow]] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    mode: str = MODE_DERIVED

    @property
    def group_ids(self) -> List[str]:
        return list(self.groups)

    def rows(self) -> List[StandingsRow]:
        return [row for rows in self.groups.values() for row in rows]

    def group(self, group_id: str) -> List[StandingsRow]:
        return list(self.groups.get(group_id, []))

    def at_rank(self, group_id: str, rank: int) -> Optional[StandingsRow]:
        """Row holding ``rank`` (1-based) in a group, or None."""
        rows = self.groups.get(group_id, [])
        if 1 <= rank <= len(rows):
            return rows[rank - 1]
        return None

    def find(self, team_id: str) -> Optional[StandingsRow]:
        for row in self.rows():
            if row.team_id == team_id:
                return row
        return None


def decide_outcome(match: MatchResult, rules: SportRules) -> int:
    """Decide a finished match.

    Set-based sports are decided on sets, then on the score total when the
    sets are level. Goal-based sports are decided on the score alone.

    Returns:
        1 for a home win, -1 for an away win, 0 for a draw
    """
    if rules.uses_sets and match.home_sets != match.away_sets:
        return 1 if match.home_sets > match.away_sets else -1
    if match.home_score != match.away_score:
        return 1 if match.home_score > match.away_score else -1
    return 0


class StandingsAggregator:
    """Builds ranked group tables for one sport.

    Every pass recomputes all rows from its inputs. Teams drawn into a group,
    or appearing in a group match, always get a row even before they play.
    Matches and counters naming teams outside ``teams`` are dropped with a
    warning rather than failing the pass.
    """

    def __init__(self, rules: SportRules) -> None:
        self.rules = rules
        self.comparator = ComparatorChain.for_rules(rules)

    def aggregate(
        self,
        matches: Iterable[MatchResult],
        teams: Iterable[TeamRef],
        counters: Optional[Iterable[TeamCounters]] = None,
    ) -> StandingsResult:
        """Aggregate group standings.

        Args:
            matches: All matches of the sport, in any state
            teams: Teams registered for the sport
            counters: Authoritative per-team counters. When given, rows are
                read from them instead of being derived from ``matches``.

        Returns:
            StandingsResult with ranked rows per group
        """
        teams = list(teams)
        warnings: List[str] = []
        team_ids = {team.team_id for team in teams}
        seeded = self._seed(teams)

        valid_matches = []
        for match in sorted(matches, key=lambda m: m.match_id):
            if match.stage != STAGE_GROUP or not match.group_id:
                continue
            problem = self._check_match(match, team_ids)
            if problem:
                logger.warning(problem)
                warnings.append(problem)
                continue
            seeded.add((match.group_id, match.home_id))
            seeded.add((match.group_id, match.away_id))
            valid_matches.append(match)

        if counters is None:
            tallies = self._tally_matches(valid_matches, seeded)
            points: Dict[RowKey, int] = {}
            mode = MODE_DERIVED
        else:
            tallies, points = self._read_counters(counters, team_ids, seeded, warnings)
            mode = MODE_AUTHORITATIVE

        result = StandingsResult(
            groups=self._rank(tallies, points), warnings=warnings, mode=mode
        )
        logger.debug(
            f"{self.rules.name}: {mode} standings for {len(result.groups)} group(s), "
            f"{len(valid_matches)} match(es), {len(warnings)} warning(s)"
        )
        return result

    def validate(
        self,
        matches: Iterable[MatchResult],
        teams: Iterable[TeamRef],
        counters: Iterable[TeamCounters],
    ) -> List[StandingsDiscrepancy]:
        """Run both modes on the same inputs and report where they disagree."""
        matches = list(matches)
        teams = list(teams)
        authoritative = self.aggregate(matches, teams, counters=list(counters))
        derived = self.aggregate(matches, teams)
        return compare_modes(authoritative, derived)

    # ========== Internals ==========

    def _seed(self, teams: Iterable[TeamRef]) -> Set[RowKey]:
        return {(team.group_id, team.team_id) for team in teams if team.group_id}

    def _check_match(self, match: MatchResult, team_ids: Set[str]) -> Optional[str]:
        """Return a warning message if the match cannot be counted."""
        if not match.home_id or not match.away_id:
            return f"Match {match.match_id}: group match without both teams, ignored"
        missing = [tid for tid in (match.home_id, match.away_id) if tid not in team_ids]
        if missing:
            return (
                f"Match {match.match_id}: unknown team(s) {', '.join(missing)}, "
                "dropped from standings"
            )
        if match.home_id == match.away_id:
            return f"Match {match.match_id}: team {match.home_id} plays itself, ignored"
        return None

    def _tally_matches(
        self, matches: List[MatchResult], seeded: Set[RowKey]
    ) -> Dict[RowKey, _Tally]:
        tallies = {key: _Tally() for key in seeded}

        for match in matches:
            if not match.is_finished:
                continue
            home = tallies[(match.group_id, match.home_id)]
            away = tallies[(match.group_id, match.away_id)]

            home.played += 1
            away.played += 1
            home.points_for += match.home_score
            home.points_against += match.away_score
            away.points_for += match.away_score
            away.points_against += match.home_score
            if self.rules.uses_sets:
                home.sets_won += match.home_sets
                home.sets_lost += match.away_sets
                away.sets_won += match.away_sets
                away.sets_lost += match.home_sets

            outcome = decide_outcome(match, self.rules)
            if outcome > 0:
                home.wins += 1
                away.losses += 1
            elif outcome < 0:
                away.wins += 1
                home.losses += 1
            else:
                home.draws += 1
                away.draws += 1

        return tallies

    def _read_counters(
        self,
        counters: Iterable[TeamCounters],
        team_ids: Set[str],
        seeded: Set[RowKey],
        warnings: List[str],
    ) -> Tuple[Dict[RowKey, _Tally], Dict[RowKey, int]]:
        tallies = {key: _Tally() for key in seeded}
        table_points: Dict[RowKey, int] = {}

        for counter in sorted(counters, key=lambda c: (c.group_id, c.team_id)):
            if counter.team_id not in team_ids:
                message = (
                    f"Counters for unknown team {counter.team_id} in group "
                    f"{counter.group_id}, dropped from standings"
                )
                logger.warning(message)
                warnings.append(message)
                continue
            key = (counter.group_id, counter.team_id)
            tallies[key] = _Tally(
                played=counter.played,
                wins=counter.wins,
                draws=counter.draws,
                losses=counter.losses,
                sets_won=counter.sets_won if self.rules.uses_sets else 0,
                sets_lost=counter.sets_lost if self.rules.uses_sets else 0,
                points_for=counter.points_for,
                points_against=counter.points_against,
            )
            if counter.table_points is not None:
                table_points[key] = counter.table_points

        return tallies, table_points

    def _rank(
        self, tallies: Dict[RowKey, _Tally], overrides: Dict[RowKey, int]
    ) -> Dict[str, List[StandingsRow]]:
        """Build rows, preferring authoritative table points where given."""

        by_group: Dict[str, List[StandingsRow]] = {}
        for (group_id, team_id), tally in tallies.items():
            points = overrides.get(
                (group_id, team_id),
                self.rules.table_points_for(tally.wins, tally.draws, tally.losses),
            )
            row = StandingsRow(
                group_id=group_id,
                team_id=team_id,
                played=tally.played,
                wins=tally.wins,
                draws=tally.draws,
                losses=tally.losses,
                sets_won=tally.sets_won,
                sets_lost=tally.sets_lost,
                points_for=tally.points_for,
                points_against=tally.points_against,
                table_points=points,
            )
            by_group.setdefault(group_id, []).append(row)

        return {
            group_id: self.comparator.rank(by_group[group_id])
            for group_id in sorted(by_group)
        }


def compare_modes(
    authoritative: StandingsResult, derived: StandingsResult
) -> List[StandingsDiscrepancy]:
    """List every counter where authoritative and derived standings differ.

    A row present in only one result is reported with field ``row`` and
    None on the missing side. Each discrepancy is logged as a warning.
    """
    auth_rows = {(r.group_id, r.team_id): r for r in authoritative.rows()}
    derived_rows = {(r.group_id, r.team_id): r for r in derived.rows()}
    discrepancies: List[StandingsDiscrepancy] = []

    for key in sorted(set(auth_rows) | set(derived_rows)):
        a = auth_rows.get(key)
        d = derived_rows.get(key)
        if a is None or d is None:
            discrepancies.append(
                StandingsDiscrepancy(
                    group_id=key[0],
                    team_id=key[1],
                    field="row",
                    authoritative=a.rank if a else None,
                    derived=d.rank if d else None,
                )
            )
            continue
        for name in COUNTER_FIELDS + ["rank"]:
            va = getattr(a, name)
            vd = getattr(d, name)
            if va != vd:
                discrepancies.append(
                    StandingsDiscrepancy(
                        group_id=key[0],
                        team_id=key[1],
                        field=name,
                        authoritative=va,
                        derived=vd,
                    )
                )

    for discrepancy in discrepancies:
        logger.warning(f"Standings mismatch: {discrepancy}")
    return discrepancies


def aggregate(
    matches: Iterable[MatchResult],
    teams: Iterable[TeamRef],
    rules: SportRules,
    counters: Optional[Iterable[TeamCounters]] = None,
) -> StandingsResult:
    """Shortcut for ``StandingsAggregator(rules).aggregate(...)``."""
    return StandingsAggregator(rules).aggregate(matches, teams, counters)
