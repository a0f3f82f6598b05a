"""
Auto-advance policy - decides who owns the displayed slide index
"""
from core.models.snapshot import AdvanceMode
from core.services.evaluator import ScheduleEvaluator


class AutoAdvancer:
    """Chosen at run start and fixed for the whole run"""

    def __init__(self, evaluator: ScheduleEvaluator, mode: AdvanceMode = AdvanceMode.MANUAL):
        self.evaluator = evaluator
        self.mode = AdvanceMode(mode)

    @property
    def is_auto(self) -> bool:
        return self.mode is AdvanceMode.AUTO

    @property
    def allows_manual_navigation(self) -> bool:
        return not self.is_auto

    def resolve(self, current_index: int, elapsed: float) -> int:
        """Index to display after a tick at elapsed"""
        if self.is_auto:
            return self.evaluator.ideal_index(elapsed)
        return current_index
