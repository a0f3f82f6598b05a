"""
Presentation clock - run/pause bookkeeping and slide position
"""
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional

import config
from core.exceptions import EmptySchedule, InvalidTransition
from core.models.slide import Schedule
from core.models.snapshot import AdvanceMode, AppMode, PresentationSnapshot, Urgency
from core.services.auto_advance import AutoAdvancer
from core.services.drift import DriftDetector
from core.services.evaluator import ScheduleEvaluator
from core.utils.logger import get_logger

logger = get_logger(__name__)

TimeSource = Callable[[], float]
TickerFactory = Callable[[float, Callable[[], None]], object]


@dataclass(frozen=True)
class ClockState:
    """Raw bookkeeping of a clock, comparable between two points in time"""
    mode: AppMode
    schedule: Optional[Schedule]
    advance_mode: AdvanceMode
    start_timestamp: Optional[float]
    pause_start_timestamp: Optional[float]
    accumulated_pause: float
    current_slide_index: int
    elapsed_seconds: float


class PresentationClock:
    """
    State machine for one presentation run.

    Elapsed time is always derived from absolute timestamps:
        elapsed = now - start - accumulated_pause
    so a tick can be repeated for the same instant without drift. While
    paused the last computed value is kept as is.

    Timestamps come from time_source (seconds, monotonic by default). When a
    ticker_factory is given, it is called as ticker_factory(interval, tick)
    and must return an object with start() and cancel(); the clock keeps one
    such handle and only while running.
    """

    def __init__(
        self,
        time_source: TimeSource = time.monotonic,
        ticker_factory: Optional[TickerFactory] = None,
        tick_interval: float = config.TICK_INTERVAL_SECONDS
    ):
        self.time_source = time_source
        self.ticker_factory = ticker_factory
        self.tick_interval = tick_interval
        self._lock = threading.RLock()
        self._ticker = None
        self._reset()

    def _reset(self) -> None:
        self.mode = AppMode.SETUP
        self.schedule: Optional[Schedule] = None
        self.advance_mode = AdvanceMode.MANUAL
        self.start_timestamp: Optional[float] = None
        self.pause_start_timestamp: Optional[float] = None
        self.accumulated_pause = 0.0
        self.current_slide_index = 0
        self.elapsed_seconds = 0.0
        self._evaluator: Optional[ScheduleEvaluator] = None
        self._advancer: Optional[AutoAdvancer] = None
        self._drift: Optional[DriftDetector] = None

    # ------------------------------------------------------------ state
    @property
    def state(self) -> ClockState:
        with self._lock:
            return ClockState(
                mode=self.mode,
                schedule=self.schedule,
                advance_mode=self.advance_mode,
                start_timestamp=self.start_timestamp,
                pause_start_timestamp=self.pause_start_timestamp,
                accumulated_pause=self.accumulated_pause,
                current_slide_index=self.current_slide_index,
                elapsed_seconds=self.elapsed_seconds,
            )

    @property
    def is_running(self) -> bool:
        return self.mode is AppMode.RUNNING

    @property
    def is_active(self) -> bool:
        return self.mode in (AppMode.RUNNING, AppMode.PAUSED)

    @property
    def ticker(self):
        return self._ticker

    # ------------------------------------------------------ transitions
    def start(self, schedule: Schedule, advance_mode: AdvanceMode = AdvanceMode.MANUAL) -> PresentationSnapshot:
        """
        Begin a new run. Any run in progress is replaced.

        Raises:
            EmptySchedule: schedule has no slides or a negative duration
        """
        if not schedule:
            raise EmptySchedule()
        if schedule.has_negative_durations():
            raise EmptySchedule("Slide durations must not be negative")
        advance_mode = AdvanceMode(advance_mode)

        with self._lock:
            self._stop_ticker()
            evaluator = ScheduleEvaluator(schedule)

            self._reset()
            self.schedule = schedule
            self.advance_mode = advance_mode
            self._evaluator = evaluator
            self._advancer = AutoAdvancer(evaluator, self.advance_mode)
            self._drift = DriftDetector(evaluator)
            self.start_timestamp = self.time_source()
            self.mode = AppMode.RUNNING
            self._start_ticker()

            logger.info(
                f"Presentation started: {len(schedule)} slides, "
                f"{schedule.total_duration:g}s planned, {self.advance_mode.value} mode"
            )
            if not evaluator.progress_defined:
                logger.warning("Schedule total duration is zero, progress is undefined")
            return self._snapshot()

    def pause(self) -> PresentationSnapshot:
        with self._lock:
            if self.mode is not AppMode.RUNNING:
                self._reject("pause")
            now = self.time_source()
            self._update(now)
            self.pause_start_timestamp = now
            self.mode = AppMode.PAUSED
            self._stop_ticker()
            logger.info(f"Presentation paused at {self.elapsed_seconds:.1f}s")
            return self._snapshot()

    def resume(self) -> PresentationSnapshot:
        with self._lock:
            if self.mode is not AppMode.PAUSED:
                self._reject("resume")
            now = self.time_source()
            paused_for = now - self.pause_start_timestamp
            self.accumulated_pause += paused_for
            self.pause_start_timestamp = None
            self.mode = AppMode.RUNNING
            self._update(now)
            self._start_ticker()
            logger.info(f"Presentation resumed after {paused_for:.1f}s pause")
            return self._snapshot()

    def toggle_pause(self) -> PresentationSnapshot:
        """Pause when running, resume when paused, ignore otherwise"""
        with self._lock:
            if self.mode is AppMode.RUNNING:
                return self.pause()
            if self.mode is AppMode.PAUSED:
                return self.resume()
            logger.debug(f"Toggle pause ignored while {self.mode.value}")
            return self._snapshot()

    def stop(self) -> PresentationSnapshot:
        with self._lock:
            self._stop_ticker()
            if self.mode is not AppMode.SETUP:
                logger.info(f"Presentation stopped at {self.elapsed_seconds:.1f}s")
            self._reset()
            return self._snapshot()

    # ------------------------------------------------------------ ticking
    def tick(self, now: Optional[float] = None) -> PresentationSnapshot:
        """
        Recompute elapsed time for instant now (time_source() by default).

        Ticks outside RUNNING are ignored, which also neutralises a timer
        that fires after stop() or pause().
        """
        with self._lock:
            if self.mode is not AppMode.RUNNING:
                logger.debug(f"Tick ignored while {self.mode.value}")
                return self._snapshot()
            self._update(self.time_source() if now is None else now)
            return self._snapshot()

    def _update(self, now: float) -> None:
        self.elapsed_seconds = max(0.0, now - self.start_timestamp - self.accumulated_pause)
        self.current_slide_index = self._advancer.resolve(self.current_slide_index, self.elapsed_seconds)

    # --------------------------------------------------------- navigation
    def change_slide_index(self, delta: int) -> PresentationSnapshot:
        """
        Move the displayed slide by delta, clamped to the schedule bounds.

        Raises:
            InvalidTransition: no run in progress, or auto-advance is on
        """
        with self._lock:
            if not self.is_active:
                self._reject("change slide")
            if not self._advancer.allows_manual_navigation:
                self._reject("change slide", "slides follow the schedule in auto mode")

            target = max(0, min(self.schedule.last_index, self.current_slide_index + delta))
            if target != self.current_slide_index:
                logger.info(f"Slide {self.current_slide_index + 1} -> {target + 1}")
                self.current_slide_index = target
            return self._snapshot()

    # ----------------------------------------------------------- snapshot
    def snapshot(self) -> PresentationSnapshot:
        with self._lock:
            return self._snapshot()

    def _snapshot(self) -> PresentationSnapshot:
        if self._evaluator is None:
            return PresentationSnapshot(
                mode=self.mode,
                advance_mode=self.advance_mode,
                slide_count=0,
                current_slide_index=0,
                ideal_slide_index=0,
                elapsed_global_time=0.0,
                slide_remaining_seconds=0.0,
                global_remaining_seconds=0.0,
                progress_percent=0.0,
                progress_defined=False,
                slide_progress_percent=0.0,
                drift=None,
                urgency=Urgency.NORMAL,
            )

        evaluator = self._evaluator
        elapsed = self.elapsed_seconds
        index = self.current_slide_index
        progress = evaluator.progress(elapsed)
        return PresentationSnapshot(
            mode=self.mode,
            advance_mode=self.advance_mode,
            slide_count=len(self.schedule),
            current_slide_index=index,
            ideal_slide_index=evaluator.ideal_index(elapsed),
            elapsed_global_time=elapsed,
            slide_remaining_seconds=evaluator.remaining_in_slide(index, elapsed),
            global_remaining_seconds=evaluator.global_remaining(elapsed),
            progress_percent=progress.percent,
            progress_defined=progress.defined,
            slide_progress_percent=evaluator.slide_progress(index, elapsed).percent,
            drift=self._drift.detect(index, elapsed, auto_advance=self._advancer.is_auto),
            urgency=evaluator.urgency(index, elapsed),
        )

    # ------------------------------------------------------------ helpers
    def _reject(self, operation: str, reason: Optional[str] = None) -> None:
        error = InvalidTransition(operation, self.mode.value, reason)
        logger.warning(str(error))
        raise error

    def _start_ticker(self) -> None:
        if self.ticker_factory is None:
            return
        self._ticker = self.ticker_factory(self.tick_interval, self.tick)
        self._ticker.start()

    def _stop_ticker(self) -> None:
        if self._ticker is not None:
            self._ticker.cancel()
            self._ticker = None
