"""Shared fixtures."""

from __future__ import annotations

import pytest

from pomoterm.engine import TimerEngine


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def engine(clock: FakeClock) -> TimerEngine:
    return TimerEngine(focus_minutes=25, break_minutes=5, clock=clock)
