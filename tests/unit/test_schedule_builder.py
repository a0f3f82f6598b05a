# Validates setup-time schedule editing: defaults, even distribution and slide edits.

from __future__ import annotations

import pytest

from core.models.slide import Schedule
from core.services.schedule_builder import ScheduleBuilder


def test_default_schedule_spreads_total_time() -> None:
    schedule = ScheduleBuilder.default_schedule()

    assert len(schedule) == 10
    assert schedule.durations == [120] * 10
    assert schedule[0].title == "Slide 1"


def test_distribute_evenly_floors_per_slide_seconds() -> None:
    schedule = ScheduleBuilder.distribute_evenly(Schedule.from_durations([5, 10, 15]), total_minutes=1.0)

    assert schedule.durations == [20, 20, 20]

    uneven = ScheduleBuilder.distribute_evenly(Schedule.from_durations([1] * 7), total_minutes=1)
    assert uneven.durations == [8] * 7


def test_distribute_evenly_keeps_empty_schedule() -> None:
    assert ScheduleBuilder.distribute_evenly(Schedule(), 10) == Schedule()


def test_resize_grows_and_truncates_with_even_time() -> None:
    base = Schedule.from_durations([60, 60], title="Part {number}")

    grown = ScheduleBuilder.resize(base, 4, total_minutes=8)
    assert [s.title for s in grown] == ["Part 1", "Part 2", "Slide 3", "Slide 4"]
    assert grown.durations == [120] * 4
    assert grown[0].id == base[0].id

    shrunk = ScheduleBuilder.resize(grown, 1, total_minutes=8)
    assert len(shrunk) == 1
    assert shrunk.durations == [480]


def test_resize_rejects_zero_slides() -> None:
    with pytest.raises(ValueError):
        ScheduleBuilder.resize(Schedule.from_durations([1]), 0, 5)


def test_remove_slide_renumbers() -> None:
    schedule = Schedule.from_durations([10, 20, 30])

    trimmed = ScheduleBuilder.remove_slide(schedule, schedule[0].id)

    assert trimmed.durations == [20, 30]
    assert [s.number for s in trimmed] == [1, 2]


def test_update_slide_changes_only_target() -> None:
    schedule = Schedule.from_durations([10, 20])

    updated = ScheduleBuilder.update_slide(schedule, schedule[1].id, title="Demo", duration_seconds=45)

    assert updated[1].title == "Demo"
    assert updated.durations == [10, 45]
    assert updated[0] == schedule[0]


def test_update_slide_rejects_negative_duration() -> None:
    schedule = Schedule.from_durations([10])

    with pytest.raises(ValueError):
        ScheduleBuilder.update_slide(schedule, schedule[0].id, duration_seconds=-1)


def test_add_slide_appends_and_redistributes() -> None:
    schedule = ScheduleBuilder.add_slide(Schedule.from_durations([30, 30]), total_minutes=3)

    assert len(schedule) == 3
    assert schedule.durations == [60, 60, 60]
    assert ScheduleBuilder.total_minutes(schedule) == 3.0
