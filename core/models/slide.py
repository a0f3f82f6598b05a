"""
Data models for slides and schedules
"""
import math
import uuid
from dataclasses import dataclass, field, replace
from itertools import accumulate
from typing import Iterable, List, Tuple


def new_slide_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Slide:
    """
    Represents a single planned slide
    """
    title: str
    duration_seconds: float
    number: int = 1
    id: str = field(default_factory=new_slide_id)

    def __post_init__(self):
        if self.number < 1:
            raise ValueError(f"Slide number must be positive, got {self.number}")
        if not isinstance(self.duration_seconds, (int, float)) or math.isnan(self.duration_seconds):
            raise ValueError(f"Slide duration must be a number, got {self.duration_seconds!r}")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "number": self.number,
            "title": self.title,
            "durationSeconds": self.duration_seconds,
        }


class Schedule:
    """
    Ordered, immutable plan of slides.

    Slide numbers are reassigned from position so they always form 1..N.
    Cumulative end times are computed once, lookups are O(log N).
    """

    def __init__(self, slides: Iterable[Slide] = ()):
        self._slides: Tuple[Slide, ...] = tuple(
            s if s.number == i + 1 else replace(s, number=i + 1)
            for i, s in enumerate(slides)
        )
        self._ends: Tuple[float, ...] = tuple(
            accumulate(s.duration_seconds for s in self._slides)
        )

    @classmethod
    def from_durations(cls, durations: Iterable[float], title: str = "Slide {number}") -> "Schedule":
        return cls(
            Slide(title=title.format(number=i + 1), duration_seconds=d, number=i + 1)
            for i, d in enumerate(durations)
        )

    @classmethod
    def from_plan(cls, items: Iterable[dict]) -> "Schedule":
        """Build a schedule from {title, durationSeconds} mappings"""
        return cls(
            Slide(title=item["title"], duration_seconds=item["durationSeconds"])
            for item in items
        )

    # ------------------------------------------------------------ sequence
    @property
    def slides(self) -> Tuple[Slide, ...]:
        return self._slides

    def __len__(self) -> int:
        return len(self._slides)

    def __iter__(self):
        return iter(self._slides)

    def __getitem__(self, index: int) -> Slide:
        return self._slides[index]

    def __bool__(self) -> bool:
        return bool(self._slides)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Schedule):
            return NotImplemented
        return self._slides == other._slides

    def __repr__(self) -> str:
        return f"Schedule({len(self)} slides, {self.total_duration:g}s)"

    @property
    def last_index(self) -> int:
        return len(self._slides) - 1

    # ----------------------------------------------------------- durations
    @property
    def durations(self) -> List[float]:
        return [s.duration_seconds for s in self._slides]

    @property
    def cumulative_ends(self) -> Tuple[float, ...]:
        return self._ends

    @property
    def total_duration(self) -> float:
        return self._ends[-1] if self._ends else 0

    def cumulative_end_of(self, index: int) -> float:
        """Planned end time (seconds from start) of slide at index"""
        return self._ends[index]

    def cumulative_start_of(self, index: int) -> float:
        """Planned start time (seconds from start) of slide at index"""
        if not 0 <= index < len(self._ends):
            raise IndexError(f"Slide index out of range: {index}")
        return self._ends[index - 1] if index > 0 else 0

    def has_negative_durations(self) -> bool:
        return any(s.duration_seconds < 0 for s in self._slides)

    def to_list(self) -> List[dict]:
        return [s.to_dict() for s in self._slides]
