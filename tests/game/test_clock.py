"""Tests for TurnTimer."""

import time

from dama.game.clock import TurnTimer


class _FakeTime:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


class TestTurnTimerBasics:
    def test_initial_remaining(self) -> None:
        timer = TurnTimer(120)
        assert timer.remaining() == 120.0
        assert timer.limit == 120

    def test_not_running_initially(self) -> None:
        assert not TurnTimer(120).is_running

    def test_start_sets_running(self) -> None:
        timer = TurnTimer(120)
        timer.start()
        assert timer.is_running

    def test_stop_pauses(self) -> None:
        clock = _FakeTime()
        timer = TurnTimer(120, time_source=clock)
        timer.start()
        clock.now += 30
        timer.stop()
        clock.now += 50
        assert not timer.is_running
        assert timer.remaining() == 90.0

    def test_time_decreases(self) -> None:
        timer = TurnTimer(120)
        timer.start()
        time.sleep(0.02)
        assert timer.remaining() < 120.0

    def test_start_resets_budget(self) -> None:
        clock = _FakeTime()
        timer = TurnTimer(120, time_source=clock)
        timer.start()
        clock.now += 100
        timer.start()
        assert timer.remaining() == 120.0


class TestTurnTimerExpiry:
    def test_not_expired_initially(self) -> None:
        assert not TurnTimer(120).is_expired()

    def test_expires_at_limit(self) -> None:
        clock = _FakeTime()
        timer = TurnTimer(120, time_source=clock)
        timer.start()
        clock.now += 119.5
        assert not timer.is_expired()
        clock.now += 1
        assert timer.is_expired()
        assert timer.remaining() == 0.0


class TestTurnTimerUnlimited:
    def test_unlimited_is_infinite(self) -> None:
        timer = TurnTimer(float("inf"))
        assert timer.is_unlimited
        assert timer.remaining() == float("inf")

    def test_unlimited_never_expires(self) -> None:
        timer = TurnTimer(float("inf"))
        timer.start()
        assert not timer.is_expired()
