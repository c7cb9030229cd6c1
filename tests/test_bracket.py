import pytest

from builders import match, row, team
from gambitlive.bracket import (
    BracketProjector,
    followup_placeholders,
    lock_definitive,
    merge,
    project,
    select_policy,
    top_winners,
)
from gambitlive.constants import (
    STAGE_FINAL,
    STAGE_QUARTERFINAL,
    STAGE_SEMIFINAL,
    STAGE_THIRD_PLACE,
)
from gambitlive.exceptions import UnknownSeedingPolicyException
from gambitlive.models import (
    BracketPairing,
    BracketRules,
    Definitive,
    Provisional,
    SlotAssignment,
    get_sport_rules,
)
from gambitlive.standings import aggregate

FUTSAL = get_sport_rules("futsal")


def tables(**groups):
    """Build group tables from ``A=[("a1", 6), ...]`` style arguments."""
    return {
        group: [row(group, team_id, points) for team_id, points in entries]
        for group, entries in groups.items()
    }


def three_groups(a_runner_up=4, c_runner_up=3):
    return tables(
        A=[("a1", 6), ("a2", a_runner_up), ("a3", 0)],
        B=[("b1", 6), ("b2", 1), ("b3", 0)],
        C=[("c1", 6), ("c2", c_runner_up), ("c3", 0)],
    )


def sides(pairing):
    return (pairing.home, pairing.away)


def projected(pairing):
    return (pairing.home.projected_team_id, pairing.away.projected_team_id)


def first_stage(pairings, stage=STAGE_SEMIFINAL):
    return [p for p in pairings if p.stage == stage]


def test_three_groups_best_runner_up_meets_last_group_winner():
    pairings = BracketProjector(FUTSAL).provisional_pairings(three_groups())

    slot0, slot1 = pairings

    assert slot0.key == (STAGE_SEMIFINAL, 0)
    assert sides(slot0) == (
        Provisional("Winner of Group C", "c1"),
        Provisional("Best Runner-up", "a2"),
    )
    assert sides(slot1) == (
        Provisional("Winner of Group A", "a1"),
        Provisional("Winner of Group B", "b1"),
    )


def test_three_groups_runner_up_never_meets_own_group_winner():
    groups = three_groups(a_runner_up=1, c_runner_up=4)

    slot0, slot1 = BracketProjector(FUTSAL).provisional_pairings(groups)

    assert slot0.home.label == "Winner of Group B"
    assert projected(slot0) == ("b1", "c2")
    assert projected(slot1) == ("a1", "c1")


def test_three_groups_designated_group_is_configurable():
    projector = BracketProjector(FUTSAL, BracketRules(designated_group="B"))

    slot0, slot1 = projector.provisional_pairings(three_groups())

    assert projected(slot0) == ("b1", "a2")
    assert projected(slot1) == ("a1", "c1")


def test_unknown_designated_group_falls_back_to_last_group():
    projector = BracketProjector(FUTSAL, BracketRules(designated_group="Z"))

    slot0, _ = projector.provisional_pairings(three_groups())

    assert projected(slot0) == ("c1", "a2")


def test_four_groups_seed_winners_one_against_four():
    groups = tables(
        A=[("a1", 9), ("a2", 3)],
        B=[("b1", 4), ("b2", 3)],
        C=[("c1", 7), ("c2", 0)],
        D=[("d1", 6), ("d2", 1)],
    )

    slot0, slot1 = BracketProjector(FUTSAL).provisional_pairings(groups)

    assert projected(slot0) == ("a1", "b1")
    assert projected(slot1) == ("c1", "d1")
    assert slot0.home.label == "Group Winner Seed 1"
    assert slot0.away.label == "Group Winner Seed 4"


def test_more_than_four_groups_take_the_best_four_winners():
    groups = tables(
        A=[("a1", 9)], B=[("b1", 3)], C=[("c1", 7)], D=[("d1", 6)], E=[("e1", 5)]
    )

    pairings = BracketProjector(FUTSAL).provisional_pairings(groups)
    seeded = {team_id for p in pairings for team_id in projected(p)}

    assert seeded == {"a1", "c1", "d1", "e1"}


def test_empty_group_does_not_block_four_ranked_winners():
    groups = tables(
        A=[("a1", 9)], B=[("b1", 3)], C=[("c1", 7)], D=[("d1", 6)], E=[]
    )

    slot0, slot1 = BracketProjector(FUTSAL).provisional_pairings(groups)

    assert projected(slot0) == ("a1", "b1")
    assert projected(slot1) == ("c1", "d1")


def test_fewer_than_four_ranked_winners_project_nothing():
    groups = tables(A=[("a1", 9)], B=[("b1", 3)], C=[("c1", 7)], D=[])

    assert BracketProjector(FUTSAL).provisional_pairings(groups) == []


def test_two_groups_pool_top_two_and_reseed():
    groups = tables(
        A=[("a1", 9), ("a2", 6), ("a3", 0)],
        B=[("b1", 7), ("b2", 3)],
    )

    slot0, slot1 = BracketProjector(FUTSAL).provisional_pairings(groups)

    assert projected(slot0) == ("a1", "b2")
    assert projected(slot1) == ("b1", "a2")
    assert slot1.away.label == "Qualifier Seed 3"


def test_single_group_projects_nothing():
    groups = tables(A=[("a1", 9), ("a2", 6)])

    assert BracketProjector(FUTSAL).project(groups) == []


def test_missing_group_data_projects_nothing():
    groups = three_groups()
    groups["B"] = []

    assert BracketProjector(FUTSAL).project(groups) == []


def test_group_tables_are_reranked_before_projection():
    groups = tables(
        A=[("a2", 3), ("a1", 6), ("a3", 0)],
        B=[("b1", 6), ("b2", 1), ("b3", 0)],
        C=[("c3", 0), ("c2", 3), ("c1", 6)],
    )

    slot0, slot1 = BracketProjector(FUTSAL).provisional_pairings(groups)

    assert projected(slot1) == ("a1", "b1")
    assert projected(slot0)[0] == "c1"


def test_projection_from_aggregated_standings():
    teams = [team("a1", "A"), team("a2", "A"), team("b1", "B"), team("b2", "B")]
    matches = [
        match("m1", "a1", "a2", 2, 0, group="A"),
        match("m2", "b1", "b2", 0, 1, group="B"),
    ]
    standings = aggregate(matches, teams, FUTSAL)

    slot0, slot1 = first_stage(BracketProjector(FUTSAL).project(standings))

    assert projected(slot0) == ("a1", "a2")
    assert projected(slot1) == ("b2", "b1")


def test_followups_complete_the_bracket():
    pairings = BracketProjector(FUTSAL).project(three_groups())

    assert [p.key for p in pairings] == [
        (STAGE_SEMIFINAL, 0),
        (STAGE_SEMIFINAL, 1),
        (STAGE_THIRD_PLACE, 0),
        (STAGE_FINAL, 0),
    ]
    final = pairings[-1]
    third = pairings[-2]
    assert sides(final) == (
        Provisional("Winner of Semifinal 1"),
        Provisional("Winner of Semifinal 2"),
    )
    assert third.home == Provisional("Loser of Semifinal 1")


def test_followups_can_be_disabled():
    projector = BracketProjector(FUTSAL, BracketRules(include_followups=False))

    pairings = projector.project(three_groups())

    assert {p.stage for p in pairings} == {STAGE_SEMIFINAL}


def test_adjacent_winners_over_eight_groups():
    groups = {g: [row(g, g.lower() + "1", 6)] for g in "ABCDEFGH"}
    projector = BracketProjector(FUTSAL, BracketRules(policy="adjacent_winners"))

    pairings = projector.project(groups)
    quarters = first_stage(pairings, STAGE_QUARTERFINAL)

    assert [projected(p) for p in quarters] == [
        ("a1", "b1"),
        ("c1", "d1"),
        ("e1", "f1"),
        ("g1", "h1"),
    ]
    assert len(first_stage(pairings)) == 2
    assert len(pairings) == 8
    assert first_stage(pairings)[1].away.label == "Winner of Quarterfinal 4"


def test_followup_placeholders_from_round_of_sixteen():
    stages = [p.stage for p in followup_placeholders("round_of_16", 8)]

    assert stages.count(STAGE_QUARTERFINAL) == 4
    assert stages.count(STAGE_SEMIFINAL) == 2
    assert stages.count(STAGE_THIRD_PLACE) == 1
    assert stages.count(STAGE_FINAL) == 1


def test_unknown_policy_raises():
    with pytest.raises(UnknownSeedingPolicyException):
        select_policy(4, BracketRules(policy="coin_toss"))


def test_explicit_policy_overrides_group_count():
    assert select_policy(2, BracketRules(policy="top_winners")) is top_winners
    assert select_policy(1, BracketRules()) is None


def test_complete_assignment_is_definitive():
    assignment = SlotAssignment(STAGE_SEMIFINAL, 0, "b1", "c2", match_id="sf1")

    slot0, slot1 = first_stage(
        BracketProjector(FUTSAL).project(three_groups(), [assignment])
    )

    assert slot0.definitive
    assert sides(slot0) == (Definitive("b1"), Definitive("c2"))
    assert not slot1.definitive
    assert projected(slot1) == ("a1", "b1")


def test_partial_assignment_keeps_projection():
    assignment = SlotAssignment(STAGE_SEMIFINAL, 1, home_team_id="a1")

    _, slot1 = first_stage(
        BracketProjector(FUTSAL).project(three_groups(), [assignment])
    )

    assert not slot1.definitive
    assert slot1.home == Provisional("Winner of Group A", "a1")


def test_partial_assignment_without_projection_gets_placeholder():
    assignment = SlotAssignment(STAGE_FINAL, 0, away_team_id="x")

    (pairing,) = merge([], [assignment], include_followups=False)

    assert sides(pairing) == (
        Provisional("To be decided", None),
        Provisional("To be decided", "x"),
    )


def test_assigned_followup_replaces_placeholder():
    final = SlotAssignment(STAGE_FINAL, 0, "c1", "a1")

    pairings = BracketProjector(FUTSAL).project(three_groups(), [final])

    assert sides(pairings[-1]) == (Definitive("c1"), Definitive("a1"))


def test_duplicate_assignment_keeps_first():
    first = SlotAssignment(STAGE_SEMIFINAL, 0, "a1", "b1")
    second = SlotAssignment(STAGE_SEMIFINAL, 0, "c1", "a2")

    (pairing,) = merge([], [first, second], include_followups=False)

    assert sides(pairing) == (Definitive("a1"), Definitive("b1"))


def test_definitive_slots_ignore_later_standings_changes():
    assignment = SlotAssignment(STAGE_SEMIFINAL, 0, "c1", "a2")
    projector = BracketProjector(FUTSAL)

    before = projector.project(three_groups(), [assignment])
    after = projector.project(three_groups(a_runner_up=1, c_runner_up=4), [assignment])

    assert before[0] == after[0]
    assert before[1] != after[1]


def test_lock_definitive_keeps_previous_definitive_slots():
    locked = BracketPairing(STAGE_SEMIFINAL, 0, Definitive("c1"), Definitive("a2"))
    stale = BracketPairing(
        STAGE_SEMIFINAL, 0, Provisional("Winner of Group C", "c1"), Provisional("x")
    )
    other = BracketPairing(
        STAGE_SEMIFINAL, 1, Provisional("Winner of Group A"), Provisional("y")
    )

    result = lock_definitive([locked], [stale, other])

    assert result == [locked, other]


def test_module_level_project_honours_group_count():
    pairings = project(three_groups(), [], 2, FUTSAL)

    assert pairings == []


def test_pairing_serialization():
    pairing = BracketPairing(STAGE_FINAL, 0, Definitive("a1"), Provisional("TBD"))

    assert pairing.to_dict() == {
        "stage": "final",
        "slot_index": 0,
        "home": {"kind": "definitive", "team_id": "a1"},
        "away": {"kind": "provisional", "label": "TBD", "projected_team_id": None},
        "definitive": False,
    }
