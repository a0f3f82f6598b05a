"""
Drift detection between the operator's slide and the planned one
"""
from typing import Optional

import config
from core.models.snapshot import DriftReport, DriftState
from core.services.evaluator import ScheduleEvaluator


class DriftDetector:
    """
    Compares the slide being shown with the ideal slide.

    Auto-advanced runs follow the plan by construction and always report
    ON_TIME without magnitude.
    """

    def __init__(self, evaluator: ScheduleEvaluator, tolerance: float = config.DRIFT_TOLERANCE_SECONDS):
        self.evaluator = evaluator
        self.tolerance = tolerance

    def state(self, current_index: int, ideal_index: int) -> DriftState:
        if ideal_index == current_index:
            return DriftState.ON_TIME
        if ideal_index > current_index:
            return DriftState.BEHIND
        return DriftState.AHEAD

    def magnitude(self, current_index: int, elapsed: float) -> Optional[float]:
        """
        Seconds spent past the planned start of the current slide, or None
        when within tolerance. Positive means over time on this slide.
        """
        offset = elapsed - self.evaluator.schedule.cumulative_start_of(current_index)
        if abs(offset) > self.tolerance:
            return offset
        return None

    def detect(self, current_index: int, elapsed: float, auto_advance: bool = False) -> DriftReport:
        ideal = self.evaluator.ideal_index(elapsed)
        if auto_advance:
            return DriftReport(state=DriftState.ON_TIME, ideal_index=ideal)

        state = self.state(current_index, ideal)
        magnitude = None
        if state is not DriftState.ON_TIME:
            magnitude = self.magnitude(current_index, elapsed)
        return DriftReport(state=state, ideal_index=ideal, magnitude_seconds=magnitude)
