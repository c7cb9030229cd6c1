"""Sport and bracket rule configuration."""

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

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from gambitlive.constants import (
    ASC,
    DESC,
    DRAW_POINTS,
    GOALS_TIEBREAK_ORDER,
    LOSS_POINTS,
    POLICY_AUTO,
    SCORING_GOALS,
    SCORING_SETS,
    SETS_TIEBREAK_ORDER,
    STANDINGS_KEYS,
    WIN_POINTS,
)
from gambitlive.exceptions import InvalidConfigurationException, UnknownSportException
from gambitlive.type_hints import Scoring, TiebreakOrder
from gambitlive.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class SportRules:
    """Scoring and ranking rules of a sport.

    Instances are immutable so the built-in registry can be shared safely.

    Attributes
    ----------
    name : str
        Sport name.
    scoring : str
        ``goals`` when a match is won on score difference, ``sets`` when it
        is won on sets with the score total as fallback.
    win_points, draw_points, loss_points : int
        Table points per result.
    tiebreak_order : tuple of (str, str)
        Ordered (standings key, direction) pairs. The team identifier is
        always appended as the final ascending key.
    allow_draws : bool
        Whether the sport can end level. Only affects which columns are
        reported.
    """

    name: str
    scoring: Scoring = SCORING_GOALS
    win_points: int = WIN_POINTS
    draw_points: int = DRAW_POINTS
    loss_points: int = LOSS_POINTS
    tiebreak_order: TiebreakOrder = GOALS_TIEBREAK_ORDER
    allow_draws: bool = True

    def __post_init__(self) -> None:
        if self.scoring not in (SCORING_GOALS, SCORING_SETS):
            raise InvalidConfigurationException(
                f"Sport {self.name!r}: unknown scoring {self.scoring!r}"
            )
        normalized = []
        for entry in self.tiebreak_order:
            try:
                key, direction = entry
            except (TypeError, ValueError) as e:
                raise InvalidConfigurationException(
                    f"Sport {self.name!r}: tiebreak entry {entry!r} "
                    "is not a (key, direction) pair"
                ) from e
            if key not in STANDINGS_KEYS:
                raise InvalidConfigurationException(
                    f"Sport {self.name!r}: unknown tiebreak key {key!r}"
                )
            if direction not in (ASC, DESC):
                raise InvalidConfigurationException(
                    f"Sport {self.name!r}: invalid direction {direction!r} for {key!r}"
                )
            normalized.append((key, direction))
        object.__setattr__(self, "tiebreak_order", tuple(normalized))

    @property
    def uses_sets(self) -> bool:
        return self.scoring == SCORING_SETS

    def table_points_for(self, wins: int, draws: int, losses: int) -> int:
        return (
            wins * self.win_points
            + draws * self.draw_points
            + losses * self.loss_points
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize rules to dictionary."""
        return {
            "name": self.name,
            "scoring": self.scoring,
            "win_points": self.win_points,
            "draw_points": self.draw_points,
            "loss_points": self.loss_points,
            "tiebreak_order": [list(entry) for entry in self.tiebreak_order],
            "allow_draws": self.allow_draws,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SportRules":
        """Deserialize rules from dictionary.

        The tiebreak order defaults to the chain matching the scoring system.
        """
        if "name" not in data:
            raise InvalidConfigurationException("Sport rules require a 'name'")
        scoring = data.get("scoring", SCORING_GOALS)
        default_order = (
            SETS_TIEBREAK_ORDER if scoring == SCORING_SETS else GOALS_TIEBREAK_ORDER
        )
        return cls(
            name=data["name"],
            scoring=scoring,
            win_points=int(data.get("win_points", WIN_POINTS)),
            draw_points=int(data.get("draw_points", DRAW_POINTS)),
            loss_points=int(data.get("loss_points", LOSS_POINTS)),
            tiebreak_order=tuple(
                tuple(entry) for entry in data.get("tiebreak_order", default_order)
            ),
            allow_draws=bool(data.get("allow_draws", scoring == SCORING_GOALS)),
        )


@dataclass(frozen=True)
class BracketRules:
    """Knockout projection settings.

    Attributes
    ----------
    policy : str
        Seeding policy name, or ``auto`` to pick one from the group count.
    designated_group : str or None
        Group whose winner faces the best runner-up in the three-group
        rule. Defaults to the last group.
    include_followups : bool
        Emit placeholder final and third-place slots when they are not
        authoritatively assigned.
    """

    policy: str = POLICY_AUTO
    designated_group: Optional[str] = None
    include_followups: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "policy": self.policy,
            "designated_group": self.designated_group,
            "include_followups": self.include_followups,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BracketRules":
        return cls(
            policy=data.get("policy", POLICY_AUTO),
            designated_group=data.get("designated_group"),
            include_followups=data.get("include_followups", True),
        )


def _goal_sport(name: str) -> SportRules:
    return SportRules(name=name)


BUILTIN_SPORTS: Dict[str, SportRules] = {
    "futsal": _goal_sport("Futsal"),
    "fifa": _goal_sport("FIFA"),
    "foosball": _goal_sport("Foosball"),
    "volleyball": SportRules(
        name="Volleyball",
        scoring=SCORING_SETS,
        draw_points=0,
        tiebreak_order=SETS_TIEBREAK_ORDER,
        allow_draws=False,
    ),
}


def get_sport_rules(name: str) -> SportRules:
    """Look up built-in rules by case-insensitive sport name."""
    try:
        return BUILTIN_SPORTS[name.strip().lower()]
    except KeyError:
        raise UnknownSportException(f"No rules registered for sport {name!r}") from None


def load_sport_rules(path: Union[str, Path]) -> List[SportRules]:
    """Load sport rules from a JSON file.

    The file holds either one rules object or a list of them.

    Raises:
        InvalidConfigurationException: If the file cannot be parsed or a
            rules object is invalid
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise InvalidConfigurationException(
            f"Cannot read sport rules from {path}: {e}"
        ) from e

    entries = data if isinstance(data, list) else [data]
    rules = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise InvalidConfigurationException(
                f"{path}: expected a rules object, got {type(entry).__name__}"
            )
        rules.append(SportRules.from_dict(entry))
    logger.debug(f"Loaded {len(rules)} sport rule set(s) from {path}")
    return rules
