# Shared fixtures: repository imports, a controllable time source and a recording ticker.

from __future__ import annotations

import sys
from pathlib import Path

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from core.models.slide import Schedule  # noqa: E402
from core.services.clock import PresentationClock  # noqa: E402


class FakeTime:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingTicker:
    instances: list = []

    def __init__(self, interval, callback) -> None:
        self.interval = interval
        self.callback = callback
        self.started = False
        self.cancelled = False
        RecordingTicker.instances.append(self)

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def pending(self) -> bool:
        return self.started and not self.cancelled


@pytest.fixture
def fake_time() -> FakeTime:
    return FakeTime()


@pytest.fixture
def ticker_log():
    RecordingTicker.instances = []
    return RecordingTicker.instances


@pytest.fixture
def clock(fake_time: FakeTime, ticker_log) -> PresentationClock:
    return PresentationClock(time_source=fake_time, ticker_factory=RecordingTicker)


@pytest.fixture
def schedule() -> Schedule:
    return Schedule.from_durations([10, 20, 30])
