import dataclasses
import json
from datetime import datetime, timezone

import pytest

from gambitlive.constants import GOALS_TIEBREAK_ORDER, SETS_TIEBREAK_ORDER
from gambitlive.exceptions import (
    GambitLiveException,
    InvalidConfigurationException,
    UnknownSportException,
)
from gambitlive.models import (
    BracketRules,
    MatchEvent,
    MatchResult,
    SlotAssignment,
    SportRules,
    TeamCounters,
    get_sport_rules,
    load_sport_rules,
    parse_timestamp,
)


def test_builtin_lookup_is_case_insensitive():
    assert get_sport_rules(" Volleyball ").uses_sets
    assert get_sport_rules("FUTSAL").tiebreak_order == GOALS_TIEBREAK_ORDER


def test_unknown_sport_raises():
    with pytest.raises(UnknownSportException):
        get_sport_rules("curling")


def test_builtin_rules_cannot_be_mutated():
    rules = get_sport_rules("futsal")

    with pytest.raises(dataclasses.FrozenInstanceError):
        rules.win_points = 2

    assert get_sport_rules("futsal").win_points == 3


def test_volleyball_awards_three_points_per_win_only():
    rules = get_sport_rules("volleyball")

    assert rules.table_points_for(wins=2, draws=1, losses=1) == 6


def test_load_single_rules_object(tmp_path):
    path = tmp_path / "rules.json"
    path.write_text(json.dumps({"name": "Handball", "win_points": 2}))

    (rules,) = load_sport_rules(path)

    assert rules.name == "Handball"
    assert rules.table_points_for(1, 1, 0) == 3
    assert rules.tiebreak_order == GOALS_TIEBREAK_ORDER


def test_load_rules_list_defaults_chain_by_scoring(tmp_path):
    path = tmp_path / "rules.json"
    path.write_text(
        json.dumps(
            [
                {"name": "Beach volleyball", "scoring": "sets", "draw_points": 0},
                {
                    "name": "Hockey",
                    "tiebreak_order": [["table_points", "desc"], ["wins", "desc"]],
                },
            ]
        )
    )

    beach, hockey = load_sport_rules(str(path))

    assert beach.tiebreak_order == SETS_TIEBREAK_ORDER
    assert not beach.allow_draws
    assert hockey.tiebreak_order == (("table_points", "desc"), ("wins", "desc"))


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        json.dumps({"scoring": "goals"}),
        json.dumps({"name": "X", "scoring": "innings"}),
        json.dumps({"name": "X", "tiebreak_order": [["height", "desc"]]}),
        json.dumps({"name": "X", "tiebreak_order": [["wins", "sideways"]]}),
        json.dumps({"name": "X", "tiebreak_order": ["wins"]}),
        json.dumps([42]),
    ],
)
def test_invalid_rules_files_raise(tmp_path, content):
    path = tmp_path / "rules.json"
    path.write_text(content)

    with pytest.raises(InvalidConfigurationException):
        load_sport_rules(path)


def test_missing_rules_file_raises(tmp_path):
    with pytest.raises(GambitLiveException):
        load_sport_rules(tmp_path / "missing.json")


def test_rules_serialization_round_trip():
    rules = get_sport_rules("volleyball")

    assert SportRules.from_dict(rules.to_dict()) == rules


def test_bracket_rules_defaults():
    rules = BracketRules.from_dict({"designated_group": "C"})

    assert rules.policy == "auto"
    assert rules.designated_group == "C"
    assert rules.include_followups


def test_match_result_from_dict_treats_nulls_as_zero():
    result = MatchResult.from_dict(
        {
            "match_id": 7,
            "home_id": "a",
            "away_id": "b",
            "group_id": "A",
            "home_score": None,
            "away_sets": -2,
            "status": "finished",
        }
    )

    assert result.match_id == "7"
    assert (result.home_score, result.away_score, result.away_sets) == (0, 0, 0)
    assert result.counts_for_standings


def test_counters_from_dict_keeps_missing_table_points():
    counters = TeamCounters.from_dict({"team_id": "a", "group_id": "A", "wins": 2})

    assert counters.wins == 2
    assert counters.table_points is None


def test_slot_assignment_from_dict():
    assignment = SlotAssignment.from_dict(
        {"stage": "final", "slot_index": "0", "home_team_id": "a"}
    )

    assert assignment.key == ("final", 0)
    assert not assignment.is_complete


def test_match_event_accepts_utc_suffix():
    event = MatchEvent.from_dict(
        {
            "match_id": "m1",
            "type": "clock_start",
            "timestamp": "2025-03-01T18:00:00Z",
        }
    )

    assert event.timestamp.utcoffset().total_seconds() == 0
    assert MatchEvent.from_dict(event.to_dict()) == event


def test_naive_timestamps_are_read_as_utc():
    event = MatchEvent.from_dict(
        {"match_id": "m1", "type": "clock_start", "timestamp": "2025-03-01T18:00:00"}
    )

    assert event.timestamp == datetime(2025, 3, 1, 18, 0, tzinfo=timezone.utc)


def test_naive_datetime_is_read_as_utc():
    assert parse_timestamp(datetime(2025, 3, 1, 18, 0)).utcoffset().total_seconds() == 0
