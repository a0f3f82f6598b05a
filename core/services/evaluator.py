"""
Schedule evaluation - maps elapsed time onto the planned schedule
"""
import bisect
from typing import List, Tuple

import config
from core.exceptions import EmptySchedule, UndefinedProgress
from core.models.slide import Schedule
from core.models.snapshot import Progress, Urgency


class ScheduleEvaluator:
    """
    Stateless queries over one schedule.

    Every slide owns the half-open interval [start, end) of the timeline, so
    an elapsed value that lands exactly on a boundary belongs to the next
    slide. Past the end of the plan the last slide stays ideal.
    """

    def __init__(self, schedule: Schedule):
        if not schedule:
            raise EmptySchedule("Cannot evaluate an empty schedule")
        self.schedule = schedule

    @property
    def total_duration(self) -> float:
        return self.schedule.total_duration

    @property
    def progress_defined(self) -> bool:
        return self.total_duration > 0

    def ideal_index(self, elapsed: float) -> int:
        """Smallest index whose cumulative end is strictly greater than elapsed"""
        index = bisect.bisect_right(self.schedule.cumulative_ends, elapsed)
        return min(index, self.schedule.last_index)

    def remaining_in_slide(self, index: int, elapsed: float) -> float:
        """
        Seconds left on slide index; negative once the slide overruns.
        Zero when the plan has no length.
        """
        if not self.progress_defined:
            return 0.0
        return self.schedule.cumulative_end_of(index) - elapsed

    def global_remaining(self, elapsed: float) -> float:
        if not self.progress_defined:
            return 0.0
        return self.total_duration - elapsed

    def progress(self, elapsed: float) -> Progress:
        """Overall progress through the plan, clamped to [0, 100]"""
        return _percent(elapsed, self.total_duration)

    def slide_progress(self, index: int, elapsed: float) -> Progress:
        """Progress through slide index against its own planned duration"""
        spent = elapsed - self.schedule.cumulative_start_of(index)
        return _percent(spent, self.schedule[index].duration_seconds)

    def check_progress_defined(self) -> None:
        if not self.progress_defined:
            raise UndefinedProgress()

    def urgency(self, index: int, elapsed: float) -> Urgency:
        if not self.progress_defined:
            return Urgency.NORMAL
        remaining = self.remaining_in_slide(index, elapsed)
        if remaining < 0:
            return Urgency.DANGER
        if remaining < config.SLIDE_WARNING_SECONDS:
            return Urgency.WARNING
        return Urgency.NORMAL

    def segments(self) -> List[Tuple[float, float, float]]:
        """
        Timeline markers as (start_pct, width_pct, end_pct) per slide.
        All zeros when the plan has no length.
        """
        total = self.total_duration
        if total <= 0:
            return [(0.0, 0.0, 0.0) for _ in self.schedule]

        markers = []
        for index, slide in enumerate(self.schedule):
            start = self.schedule.cumulative_start_of(index)
            end = self.schedule.cumulative_end_of(index)
            markers.append((
                start / total * 100,
                slide.duration_seconds / total * 100,
                end / total * 100,
            ))
        return markers


def _percent(value: float, total: float) -> Progress:
    if total <= 0:
        return Progress(percent=0.0, defined=False)
    return Progress(percent=max(0.0, min(100.0, value / total * 100)))
