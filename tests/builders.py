from datetime import datetime, timedelta, timezone

from gambitlive.constants import STATUS_FINISHED
from gambitlive.models import MatchEvent, MatchResult, StandingsRow, TeamRef

KICKOFF = datetime(2025, 3, 1, 18, 0, tzinfo=timezone.utc)


def event(kind, seconds, match_id="m1", **payload):
    return MatchEvent(match_id, kind, KICKOFF + timedelta(seconds=seconds), payload)


def team(team_id, group="A"):
    return TeamRef(team_id=team_id, group_id=group, name=team_id.upper())


def match(match_id, home, away, home_score=0, away_score=0, group="A", **kwargs):
    kwargs.setdefault("status", STATUS_FINISHED)
    return MatchResult(
        match_id=match_id,
        home_id=home,
        away_id=away,
        group_id=group,
        home_score=home_score,
        away_score=away_score,
        **kwargs,
    )


def row(group, team_id, table_points, points_for=0, points_against=0, wins=None, **kw):
    if wins is None:
        wins = table_points // 3
    return StandingsRow(
        group_id=group,
        team_id=team_id,
        table_points=table_points,
        wins=wins,
        points_for=points_for,
        points_against=points_against,
        **kw,
    )
