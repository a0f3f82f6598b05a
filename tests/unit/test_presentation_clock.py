# Validates the presentation clock state machine: elapsed accounting, pause bookkeeping,
# navigation clamping, tick guarding and ticker ownership.

from __future__ import annotations

import pytest

from core.exceptions import EmptySchedule, InvalidTransition
from core.models.slide import Schedule
from core.models.snapshot import AdvanceMode, AppMode, DriftState, Urgency
from core.services.clock import PresentationClock


def test_start_resets_run_state(clock: PresentationClock, fake_time, schedule: Schedule) -> None:
    snapshot = clock.start(schedule)

    assert clock.mode is AppMode.RUNNING
    assert clock.start_timestamp == fake_time.now
    assert clock.pause_start_timestamp is None
    assert clock.accumulated_pause == 0
    assert snapshot.current_slide_index == 0
    assert snapshot.elapsed_global_time == 0


def test_tick_derives_elapsed_from_timestamps(clock: PresentationClock, fake_time, schedule: Schedule) -> None:
    clock.start(schedule)
    fake_time.advance(12.5)

    snapshot = clock.tick()

    assert snapshot.elapsed_global_time == pytest.approx(12.5)
    assert snapshot.ideal_slide_index == 1
    assert snapshot.global_remaining_seconds == pytest.approx(47.5)


def test_tick_is_idempotent_for_the_same_instant(clock: PresentationClock, fake_time, schedule: Schedule) -> None:
    clock.start(schedule)
    instant = fake_time.now + 17

    first = clock.tick(instant)
    second = clock.tick(instant)

    assert first == second


def test_pause_freezes_elapsed_and_resume_discounts_pause(
    clock: PresentationClock, fake_time, schedule: Schedule
) -> None:
    clock.start(schedule)
    fake_time.advance(8)
    clock.pause()
    frozen = clock.snapshot().elapsed_global_time

    fake_time.advance(100)
    assert clock.tick().elapsed_global_time == frozen
    assert clock.pause_start_timestamp is not None

    clock.resume()
    fake_time.advance(4)
    snapshot = clock.tick()

    # 112 s of wall clock minus the 100 s pause
    assert snapshot.elapsed_global_time == pytest.approx(12)
    assert clock.accumulated_pause == pytest.approx(100)
    assert clock.pause_start_timestamp is None


def test_pause_only_valid_while_running(clock: PresentationClock, schedule: Schedule) -> None:
    with pytest.raises(InvalidTransition):
        clock.pause()

    clock.start(schedule)
    clock.pause()
    before = clock.state
    with pytest.raises(InvalidTransition):
        clock.pause()
    assert clock.state == before


def test_resume_only_valid_while_paused(clock: PresentationClock, schedule: Schedule) -> None:
    with pytest.raises(InvalidTransition):
        clock.resume()

    clock.start(schedule)
    before = clock.state
    with pytest.raises(InvalidTransition):
        clock.resume()
    assert clock.state == before


def test_toggle_pause_alternates_and_ignores_setup(clock: PresentationClock, schedule: Schedule) -> None:
    assert clock.toggle_pause().mode is AppMode.SETUP

    clock.start(schedule)
    assert clock.toggle_pause().mode is AppMode.PAUSED
    assert clock.toggle_pause().mode is AppMode.RUNNING


def test_start_with_empty_schedule_keeps_prior_state(clock: PresentationClock, fake_time, schedule: Schedule) -> None:
    clock.start(schedule)
    fake_time.advance(15)
    clock.tick()
    before = clock.state

    with pytest.raises(EmptySchedule):
        clock.start(Schedule())

    assert clock.state == before


def test_start_rejects_negative_durations(clock: PresentationClock) -> None:
    with pytest.raises(EmptySchedule):
        clock.start(Schedule.from_durations([10, -5]))
    assert clock.mode is AppMode.SETUP


def test_manual_navigation_clamps_at_both_ends(clock: PresentationClock, schedule: Schedule) -> None:
    clock.start(schedule)

    assert clock.change_slide_index(-1).current_slide_index == 0
    clock.change_slide_index(+1)
    clock.change_slide_index(+1)
    assert clock.current_slide_index == 2
    assert clock.change_slide_index(+1).current_slide_index == 2
    assert clock.change_slide_index(+10).current_slide_index == 2
    assert clock.change_slide_index(-10).current_slide_index == 0


def test_manual_tick_never_moves_the_slide(clock: PresentationClock, fake_time, schedule: Schedule) -> None:
    clock.start(schedule, AdvanceMode.MANUAL)
    fake_time.advance(45)

    snapshot = clock.tick()

    assert snapshot.current_slide_index == 0
    assert snapshot.ideal_slide_index == 2
    assert snapshot.drift.state is DriftState.BEHIND
    assert snapshot.drift.magnitude_seconds == pytest.approx(45)


def test_navigation_allowed_while_paused(clock: PresentationClock, schedule: Schedule) -> None:
    clock.start(schedule)
    clock.pause()

    assert clock.change_slide_index(1).current_slide_index == 1


def test_auto_mode_follows_ideal_index_and_rejects_navigation(
    clock: PresentationClock, fake_time, schedule: Schedule
) -> None:
    clock.start(schedule, AdvanceMode.AUTO)

    for step in (3, 9, 0.5, 12, 6, 30):
        fake_time.advance(step)
        snapshot = clock.tick()
        assert snapshot.current_slide_index == snapshot.ideal_slide_index
        with pytest.raises(InvalidTransition):
            clock.change_slide_index(1)
        assert clock.current_slide_index == snapshot.ideal_slide_index

    assert clock.current_slide_index == 2
    assert clock.snapshot().drift.state is DriftState.ON_TIME


def test_run_clamps_at_last_slide_past_the_end(clock: PresentationClock, fake_time, schedule: Schedule) -> None:
    clock.start(schedule, AdvanceMode.AUTO)
    fake_time.advance(500)

    snapshot = clock.tick()

    assert snapshot.mode is AppMode.RUNNING
    assert snapshot.current_slide_index == 2
    assert snapshot.is_overrun
    assert snapshot.progress_percent == 100


def test_stop_returns_to_pre_start_shape(clock: PresentationClock, fake_time, schedule: Schedule) -> None:
    pristine = clock.state

    clock.start(schedule)
    for _ in range(3):
        fake_time.advance(5)
        clock.pause()
        fake_time.advance(2)
        clock.resume()
    clock.change_slide_index(1)
    clock.stop()

    assert clock.state == pristine
    assert clock.snapshot().slide_count == 0


def test_tick_after_stop_does_not_mutate(clock: PresentationClock, fake_time, schedule: Schedule) -> None:
    clock.start(schedule)
    clock.stop()
    after_stop = clock.state

    fake_time.advance(30)
    clock.tick()

    assert clock.state == after_stop


def test_navigation_rejected_in_setup(clock: PresentationClock) -> None:
    with pytest.raises(InvalidTransition):
        clock.change_slide_index(1)


def test_ticker_owned_only_while_running(clock: PresentationClock, ticker_log, schedule: Schedule) -> None:
    clock.start(schedule)
    assert len(ticker_log) == 1 and ticker_log[0].pending
    assert ticker_log[0].interval == pytest.approx(0.2)

    clock.pause()
    assert not ticker_log[0].pending
    assert clock.ticker is None

    clock.resume()
    assert len(ticker_log) == 2 and ticker_log[1].pending

    clock.start(schedule)
    assert [t.pending for t in ticker_log] == [False, False, True]

    clock.stop()
    assert not any(t.pending for t in ticker_log)


def test_ticker_callback_drives_tick(clock: PresentationClock, fake_time, ticker_log, schedule: Schedule) -> None:
    clock.start(schedule)
    fake_time.advance(11)

    ticker_log[0].callback()

    assert clock.elapsed_seconds == pytest.approx(11)


def test_zero_length_schedule_runs_with_undefined_progress(clock: PresentationClock, fake_time) -> None:
    clock.start(Schedule.from_durations([0, 0]))
    fake_time.advance(5)

    snapshot = clock.tick()

    assert snapshot.progress_defined is False
    assert snapshot.progress_percent == 0
    assert snapshot.ideal_slide_index == 1


def test_zero_length_schedule_clamps_remaining_to_zero(clock: PresentationClock, fake_time) -> None:
    clock.start(Schedule.from_durations([0, 0]))
    fake_time.advance(5)

    snapshot = clock.tick()

    assert snapshot.slide_remaining_seconds == 0
    assert snapshot.global_remaining_seconds == 0
    assert snapshot.is_overrun is False
    assert snapshot.urgency is not Urgency.DANGER


def test_clock_without_ticker_factory_is_poll_driven(fake_time, schedule: Schedule) -> None:
    clock = PresentationClock(time_source=fake_time)
    clock.start(schedule)
    fake_time.advance(3)

    assert clock.ticker is None
    assert clock.tick().elapsed_global_time == pytest.approx(3)
