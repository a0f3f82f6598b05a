# Validates drift classification/magnitude and the auto-advance index policy.

from __future__ import annotations

import pytest

from core.models.slide import Schedule
from core.models.snapshot import AdvanceMode, DriftState
from core.services.auto_advance import AutoAdvancer
from core.services.drift import DriftDetector
from core.services.evaluator import ScheduleEvaluator


@pytest.fixture
def evaluator(schedule: Schedule) -> ScheduleEvaluator:
    return ScheduleEvaluator(schedule)


@pytest.fixture
def detector(evaluator: ScheduleEvaluator) -> DriftDetector:
    return DriftDetector(evaluator)


def test_on_time_when_current_matches_ideal(detector: DriftDetector) -> None:
    report = detector.detect(current_index=1, elapsed=15)

    assert report.state is DriftState.ON_TIME
    assert report.magnitude_seconds is None
    assert report.ideal_number == 2


def test_behind_when_ideal_is_further_along(detector: DriftDetector) -> None:
    report = detector.detect(current_index=0, elapsed=35)

    assert report.state is DriftState.BEHIND
    assert report.ideal_index == 2
    assert report.magnitude_seconds == pytest.approx(35)


def test_ahead_reports_negative_magnitude(detector: DriftDetector) -> None:
    report = detector.detect(current_index=2, elapsed=12)

    assert report.state is DriftState.AHEAD
    assert report.magnitude_seconds == pytest.approx(-18)


def test_magnitude_hidden_within_tolerance(detector: DriftDetector) -> None:
    # Jumped to slide 2 at 8 s: only 2 s before its planned start
    report = detector.detect(current_index=1, elapsed=8)

    assert report.state is DriftState.AHEAD
    assert report.magnitude_seconds is None


def test_magnitude_threshold_is_strict(detector: DriftDetector) -> None:
    assert detector.magnitude(current_index=1, elapsed=15) is None
    assert detector.magnitude(current_index=1, elapsed=15.5) == pytest.approx(5.5)


def test_auto_advance_is_always_on_time(detector: DriftDetector) -> None:
    report = detector.detect(current_index=0, elapsed=50, auto_advance=True)

    assert report.state is DriftState.ON_TIME
    assert report.magnitude_seconds is None
    assert report.ideal_index == 2


def test_auto_policy_replaces_index_with_ideal(evaluator: ScheduleEvaluator) -> None:
    advancer = AutoAdvancer(evaluator, AdvanceMode.AUTO)

    assert advancer.resolve(current_index=0, elapsed=31) == 2
    assert not advancer.allows_manual_navigation


def test_manual_policy_keeps_operator_index(evaluator: ScheduleEvaluator) -> None:
    advancer = AutoAdvancer(evaluator, "manual")

    assert advancer.resolve(current_index=0, elapsed=31) == 0
    assert advancer.allows_manual_navigation
