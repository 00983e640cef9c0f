"""Tick timer tests."""

from __future__ import annotations

import pytest

from backend.engine.gameclock import TickTimer

from conftest import FakeClock


def test_inactive_timer_reports_nothing(clock: FakeClock, timer: TickTimer) -> None:
    clock.advance(5.0)
    assert not timer.active
    assert timer.due() == 0


def test_due_counts_whole_intervals(clock: FakeClock, timer: TickTimer) -> None:
    timer.start()
    assert timer.active

    clock.advance(0.5)
    assert timer.due() == 0
    clock.advance(0.5)
    assert timer.due() == 1
    assert timer.due() == 0
    clock.advance(2.75)
    assert timer.due() == 2
    clock.advance(0.5)
    assert timer.due() == 1


def test_cancel_stops_ticks(clock: FakeClock, timer: TickTimer) -> None:
    timer.start()
    clock.advance(1.5)
    timer.cancel()

    assert not timer.active
    assert timer.due() == 0


def test_start_rearms_from_now(clock: FakeClock, timer: TickTimer) -> None:
    timer.start()
    clock.advance(0.75)
    timer.start()
    clock.advance(0.75)
    assert timer.due() == 0
    clock.advance(0.25)
    assert timer.due() == 1


def test_custom_interval(clock: FakeClock) -> None:
    timer = TickTimer(interval=0.25, clock=clock)
    timer.start()
    clock.advance(1.0)
    assert timer.due() == 4


@pytest.mark.parametrize("interval", [0, -1.0])
def test_interval_must_be_positive(interval: float) -> None:
    with pytest.raises(ValueError, match="positive"):
        TickTimer(interval=interval)
