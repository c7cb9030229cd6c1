"""Type hints used in Gambit Live."""

from datetime import datetime
from typing import Literal, Tuple

# Event type literals
EventType = Literal[
    "clock_start",
    "clock_pause",
    "clock_resume",
    "clock_stop",
    "clock_finish",
    "score_delta",
]

MatchStatus = Literal["scheduled", "ongoing", "paused", "finished"]
Side = Literal["home", "away"]

# Knockout stages plus the group stage
Stage = Literal[
    "group",
    "round_of_16",
    "quarterfinal",
    "semifinal",
    "third_place",
    "final",
]

Scoring = Literal["goals", "sets"]
Direction = Literal["asc", "desc"]

# (standings key, direction)
TiebreakKey = Tuple[str, Direction]
TiebreakOrder = Tuple[TiebreakKey, ...]

Timestamp = datetime
# (stage, slot_index)
SlotKey = Tuple[str, int]
# (home, away)
Score = Tuple[int, int]
