"""Tests for ecofield.simulation.clock with a fake timer."""

from __future__ import annotations

import time

import pytest

from ecofield.config.types import ConfigurationError
from ecofield.simulation.clock import Clock


class FakeTime:
    """Manually advanced monotonic clock; sleeping advances it."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start
        self.sleeps: list[float] = []

    def timer(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds

    def advance(self, seconds: float) -> None:
        self.now += seconds


def _clock(fake: FakeTime, max_fps: int = 10) -> Clock:
    return Clock(max_fps, timer=fake.timer, sleep=fake.sleep)


def test_frame_interval() -> None:
    assert Clock(50).frame_interval == pytest.approx(0.02)


def test_first_tick_does_not_sleep() -> None:
    fake = FakeTime()
    assert _clock(fake).tick() == 0.0
    assert fake.sleeps == []


def test_early_tick_sleeps_for_remainder() -> None:
    fake = FakeTime()
    clock = _clock(fake)
    clock.tick()
    fake.advance(0.03)
    slept = clock.tick()
    assert slept == pytest.approx(0.07)
    assert fake.sleeps == [pytest.approx(0.07)]


def test_late_tick_returns_immediately_without_compensation() -> None:
    fake = FakeTime()
    clock = _clock(fake)
    clock.tick()
    fake.advance(0.35)
    assert clock.tick() == 0.0
    # The next tick measures only from the late one: no catch-up.
    fake.advance(0.02)
    assert clock.tick() == pytest.approx(0.08)
    assert len(fake.sleeps) == 1


def test_tick_records_time_after_sleep() -> None:
    fake = FakeTime()
    clock = _clock(fake)
    clock.tick()
    clock.tick()  # sleeps a full interval
    fake.advance(0.05)
    assert clock.tick() == pytest.approx(0.05)


def test_exact_interval_does_not_sleep() -> None:
    fake = FakeTime(start=0.0)
    clock = _clock(fake, max_fps=4)
    clock.tick()
    fake.advance(0.25)
    assert clock.tick() == 0.0


@pytest.mark.parametrize("max_fps", [0, -5, True])
def test_rejects_non_positive_fps(max_fps: int) -> None:
    with pytest.raises(ConfigurationError):
        Clock(max_fps)


def test_real_clock_bounds_rate() -> None:
    clock = Clock(50)
    start = time.perf_counter()
    for _ in range(4):
        clock.tick()
    # First tick is free, the next three each wait ~20 ms.
    assert time.perf_counter() - start >= 0.055
