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

# --- Constants ---

# Clock-control and scoring event types
EVENT_CLOCK_START = "clock_start"
EVENT_CLOCK_PAUSE = "clock_pause"
EVENT_CLOCK_RESUME = "clock_resume"
EVENT_CLOCK_STOP = "clock_stop"
EVENT_CLOCK_FINISH = "clock_finish"
EVENT_SCORE_DELTA = "score_delta"

CLOCK_RUN_EVENTS = frozenset({EVENT_CLOCK_START, EVENT_CLOCK_RESUME})
CLOCK_HALT_EVENTS = frozenset({EVENT_CLOCK_PAUSE, EVENT_CLOCK_STOP, EVENT_CLOCK_FINISH})
EVENT_TYPES = CLOCK_RUN_EVENTS | CLOCK_HALT_EVENTS | {EVENT_SCORE_DELTA}

# Match status values
STATUS_SCHEDULED = "scheduled"
STATUS_ONGOING = "ongoing"
STATUS_PAUSED = "paused"
STATUS_FINISHED = "finished"

# Sides of a match
HOME = "home"
AWAY = "away"

# Bracket stages
STAGE_GROUP = "group"
STAGE_ROUND_OF_16 = "round_of_16"
STAGE_QUARTERFINAL = "quarterfinal"
STAGE_SEMIFINAL = "semifinal"
STAGE_THIRD_PLACE = "third_place"
STAGE_FINAL = "final"

# Display order of knockout stages
STAGE_ORDER = [
    STAGE_ROUND_OF_16,
    STAGE_QUARTERFINAL,
    STAGE_SEMIFINAL,
    STAGE_THIRD_PLACE,
    STAGE_FINAL,
]

STAGE_NAMES = {
    STAGE_GROUP: "Group stage",
    STAGE_ROUND_OF_16: "Round of 16",
    STAGE_QUARTERFINAL: "Quarterfinal",
    STAGE_SEMIFINAL: "Semifinal",
    STAGE_THIRD_PLACE: "Third place",
    STAGE_FINAL: "Final",
}

# Scoring systems
SCORING_GOALS = "goals"
SCORING_SETS = "sets"

# Table points
WIN_POINTS = 3
DRAW_POINTS = 1
LOSS_POINTS = 0

# Sort directions
ASC = "asc"
DESC = "desc"

# Standings keys usable in a tiebreak order
KEY_TABLE_POINTS = "table_points"
KEY_WINS = "wins"
KEY_DRAWS = "draws"
KEY_LOSSES = "losses"
KEY_PLAYED = "played"
KEY_SETS_WON = "sets_won"
KEY_SETS_LOST = "sets_lost"
KEY_POINTS_FOR = "points_for"
KEY_POINTS_AGAINST = "points_against"
KEY_POINT_DIFFERENCE = "point_difference"

STANDINGS_KEYS = frozenset(
    {
        KEY_TABLE_POINTS,
        KEY_WINS,
        KEY_DRAWS,
        KEY_LOSSES,
        KEY_PLAYED,
        KEY_SETS_WON,
        KEY_SETS_LOST,
        KEY_POINTS_FOR,
        KEY_POINTS_AGAINST,
        KEY_POINT_DIFFERENCE,
    }
)

# Counters compared when checking authoritative against derived standings
COUNTER_FIELDS = [
    KEY_PLAYED,
    KEY_WINS,
    KEY_DRAWS,
    KEY_LOSSES,
    KEY_SETS_WON,
    KEY_SETS_LOST,
    KEY_POINTS_FOR,
    KEY_POINTS_AGAINST,
    KEY_POINT_DIFFERENCE,
    KEY_TABLE_POINTS,
]

# Default tiebreak chains. The team identifier is always the final key.
GOALS_TIEBREAK_ORDER = (
    (KEY_TABLE_POINTS, DESC),
    (KEY_WINS, DESC),
    (KEY_POINT_DIFFERENCE, DESC),
    (KEY_POINTS_FOR, DESC),
)

SETS_TIEBREAK_ORDER = (
    (KEY_TABLE_POINTS, DESC),
    (KEY_SETS_WON, DESC),
    (KEY_SETS_LOST, ASC),
    (KEY_POINT_DIFFERENCE, DESC),
    (KEY_POINTS_FOR, DESC),
)

# Seeding policy names
POLICY_AUTO = "auto"
POLICY_TOP_WINNERS = "top_winners"
POLICY_WINNERS_PLUS_BEST_RUNNER_UP = "winners_plus_best_runner_up"
POLICY_POOLED_TOP_TWO = "pooled_top_two"
POLICY_ADJACENT_WINNERS = "adjacent_winners"

# Placeholder labels
LABEL_GROUP_WINNER = "Winner of Group {group}"
LABEL_BEST_RUNNER_UP = "Best Runner-up"
LABEL_WINNER_SEED = "Group Winner Seed {seed}"
LABEL_QUALIFIER_SEED = "Qualifier Seed {seed}"
LABEL_STAGE_WINNER = "Winner of {stage} {number}"
LABEL_STAGE_LOSER = "Loser of {stage} {number}"
LABEL_TO_BE_DECIDED = "To be decided"

# Live refresh cadence
LIVE_TICK_INTERVAL_MS = 1000
DEFAULT_DEBOUNCE_MS = 300

# Environment variable read by setup_logger
LOG_LEVEL_ENV = "GAMBITLIVE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
