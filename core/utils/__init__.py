"""
Utility functions and helpers
"""
from .logger import setup_logger, get_logger
from .formatting import format_time, format_drift

__all__ = [
    'setup_logger',
    'get_logger',
    'format_time',
    'format_drift',
]
