"""Services layer"""
from .evaluator import ScheduleEvaluator
from .auto_advance import AutoAdvancer
from .drift import DriftDetector
from .ticker import Ticker
from .clock import PresentationClock, ClockState
from .schedule_builder import ScheduleBuilder

__all__ = [
    'ScheduleEvaluator',
    'AutoAdvancer',
    'DriftDetector',
    'Ticker',
    'PresentationClock',
    'ClockState',
    'ScheduleBuilder',
]
