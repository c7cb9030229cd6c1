from datetime import timedelta

import pytest
from PyQt6.QtTest import QTest

from builders import KICKOFF
from gambitlive.live import LiveClock, RecomputeDebouncer
from gambitlive.clock import reconstruct
from gambitlive.models import ClockState, MatchEvent


class FakeNow:
    def __init__(self, moment):
        self.moment = moment

    def __call__(self):
        return self.moment

    def advance(self, seconds):
        self.moment += timedelta(seconds=seconds)


@pytest.fixture
def now():
    return FakeNow(KICKOFF + timedelta(seconds=30))


@pytest.fixture
def running():
    return ClockState(accumulated_ms=60_000, running=True, run_started_at=KICKOFF)


def test_set_state_emits_and_starts_ticking(qapp, now, running):
    clock = LiveClock(now=now)
    seen = []
    clock.elapsed_changed.connect(seen.append)

    clock.set_state(running)

    assert seen == [90_000]
    assert clock.is_ticking
    clock.stop()


def test_tick_extrapolates_from_current_time(qapp, now, running):
    clock = LiveClock(running, now=now)
    seen = []
    clock.elapsed_changed.connect(seen.append)

    now.advance(5)
    clock.tick()

    assert seen == [95_000]


def test_stopped_state_halts_ticking(qapp, now, running):
    clock = LiveClock(now=now)
    clock.set_state(running)

    clock.set_state(ClockState(accumulated_ms=75_000))

    assert not clock.is_ticking
    assert clock.elapsed_ms() == 75_000


def test_timer_ticks_while_running(qapp, now, running):
    clock = LiveClock(interval_ms=10, now=now)
    seen = []
    clock.set_state(running)
    clock.elapsed_changed.connect(seen.append)

    QTest.qWait(100)
    clock.stop()
    count = len(seen)
    QTest.qWait(50)

    assert count >= 2
    assert len(seen) == count


def test_debouncer_coalesces_bursts(qapp):
    debouncer = RecomputeDebouncer(window_ms=20)
    fired = []
    debouncer.fired.connect(lambda: fired.append(True))

    for _ in range(5):
        debouncer.trigger()
    assert debouncer.pending
    QTest.qWait(100)

    assert fired == [True]
    assert not debouncer.pending


def test_debouncer_cancel_drops_pending_recompute(qapp):
    debouncer = RecomputeDebouncer(window_ms=20)
    fired = []
    debouncer.fired.connect(lambda: fired.append(True))

    debouncer.trigger()
    debouncer.cancel()
    QTest.qWait(60)

    assert fired == []


def test_debouncer_flush_fires_once(qapp):
    debouncer = RecomputeDebouncer(window_ms=1000)
    fired = []
    debouncer.fired.connect(lambda: fired.append(True))

    debouncer.flush()
    debouncer.trigger()
    debouncer.flush()
    debouncer.flush()

    assert fired == [True]
    assert not debouncer.pending


def test_log_without_offsets_drives_live_clock(qapp):
    start = MatchEvent.from_dict(
        {"match_id": "m1", "type": "clock_start", "timestamp": "2025-03-01T18:00:00"}
    )
    clock = LiveClock()
    seen = []
    clock.elapsed_changed.connect(seen.append)

    clock.set_state(reconstruct([start]))

    assert clock.is_ticking
    assert len(seen) == 1 and seen[0] > 0
    clock.stop()
