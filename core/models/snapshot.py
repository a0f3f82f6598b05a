"""
Read-only state records exposed by the presentation clock
"""
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional


class AppMode(str, Enum):
    SETUP = "setup"
    RUNNING = "running"
    PAUSED = "paused"
    # Never entered: a run clamps at the last slide instead of finishing.
    FINISHED = "finished"


class AdvanceMode(str, Enum):
    AUTO = "auto"
    MANUAL = "manual"


class DriftState(str, Enum):
    ON_TIME = "on_time"
    BEHIND = "behind"
    AHEAD = "ahead"


class Urgency(str, Enum):
    NORMAL = "normal"
    WARNING = "warning"
    DANGER = "danger"


@dataclass(frozen=True)
class Progress:
    """Clamped progress percentage; defined is False for zero-length plans"""
    percent: float
    defined: bool = True


@dataclass(frozen=True)
class DriftReport:
    state: DriftState
    ideal_index: int
    magnitude_seconds: Optional[float] = None

    @property
    def ideal_number(self) -> int:
        return self.ideal_index + 1


@dataclass(frozen=True)
class PresentationSnapshot:
    """Derived values recomputed on every tick, consumed by the display layer"""
    mode: AppMode
    advance_mode: AdvanceMode
    slide_count: int
    current_slide_index: int
    ideal_slide_index: int
    elapsed_global_time: float
    slide_remaining_seconds: float
    global_remaining_seconds: float
    progress_percent: float
    progress_defined: bool
    slide_progress_percent: float
    drift: Optional[DriftReport]
    urgency: Urgency

    @property
    def is_overrun(self) -> bool:
        return self.slide_remaining_seconds < 0

    @property
    def drift_state(self) -> Optional[DriftState]:
        return self.drift.state if self.drift else None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["mode"] = self.mode.value
        data["advance_mode"] = self.advance_mode.value
        data["urgency"] = self.urgency.value
        data["is_overrun"] = self.is_overrun
        if self.drift is not None:
            data["drift"] = {
                "state": self.drift.state.value,
                "ideal_index": self.drift.ideal_index,
                "ideal_number": self.drift.ideal_number,
                "magnitude_seconds": self.drift.magnitude_seconds,
            }
        return data
