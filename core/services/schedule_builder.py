"""
Setup-time schedule editing
"""
import math
from dataclasses import replace
from typing import Iterable, Optional

import config
from core.models.slide import Schedule, Slide
from core.utils.logger import get_logger

logger = get_logger(__name__)


class ScheduleBuilder:
    """
    Editing helpers used before a run starts.

    Schedules are immutable, so every operation returns a new one; slide
    numbers are reassigned from position each time.
    """

    @staticmethod
    def default_schedule(
        slide_count: int = config.DEFAULT_SLIDE_COUNT,
        total_minutes: float = config.DEFAULT_TOTAL_TIME_MINUTES
    ) -> Schedule:
        if slide_count < 1:
            raise ValueError(f"Slide count must be at least 1, got {slide_count}")
        per_slide = total_minutes * 60 / slide_count
        return Schedule(
            Slide(title=_default_title(i + 1), duration_seconds=per_slide, number=i + 1)
            for i in range(slide_count)
        )

    @staticmethod
    def distribute_evenly(schedule: Schedule, total_minutes: float) -> Schedule:
        """Give every slide floor(total / count) seconds"""
        if not schedule:
            return schedule
        per_slide = math.floor(total_minutes * 60 / len(schedule))
        logger.info(f"Distributing {total_minutes} min over {len(schedule)} slides ({per_slide}s each)")
        return Schedule(replace(s, duration_seconds=per_slide) for s in schedule)

    @staticmethod
    def resize(schedule: Schedule, slide_count: int, total_minutes: float) -> Schedule:
        """Grow or truncate to slide_count slides, then distribute time evenly"""
        if slide_count < 1:
            raise ValueError(f"Slide count must be at least 1, got {slide_count}")

        slides = list(schedule.slides[:slide_count])
        while len(slides) < slide_count:
            number = len(slides) + 1
            slides.append(Slide(
                title=_default_title(number),
                duration_seconds=config.DEFAULT_NEW_SLIDE_DURATION,
                number=number,
            ))
        return ScheduleBuilder.distribute_evenly(Schedule(slides), total_minutes)

    @staticmethod
    def add_slide(schedule: Schedule, total_minutes: float) -> Schedule:
        return ScheduleBuilder.resize(schedule, len(schedule) + 1, total_minutes)

    @staticmethod
    def remove_slide(schedule: Schedule, slide_id: str) -> Schedule:
        """Drop a slide by id; unknown ids leave the schedule unchanged"""
        return Schedule(s for s in schedule if s.id != slide_id)

    @staticmethod
    def update_slide(
        schedule: Schedule,
        slide_id: str,
        title: Optional[str] = None,
        duration_seconds: Optional[float] = None
    ) -> Schedule:
        changes = {}
        if title is not None:
            changes["title"] = title
        if duration_seconds is not None:
            if duration_seconds < 0:
                raise ValueError(f"Slide duration must not be negative, got {duration_seconds}")
            changes["duration_seconds"] = duration_seconds
        return Schedule(replace(s, **changes) if s.id == slide_id else s for s in schedule)

    @staticmethod
    def from_plan(items: Iterable[dict]) -> Schedule:
        return Schedule.from_plan(items)

    @staticmethod
    def total_minutes(schedule: Schedule) -> float:
        return round(schedule.total_duration / 60, 1)


def _default_title(number: int) -> str:
    return config.DEFAULT_SLIDE_TITLE.format(number=number)
