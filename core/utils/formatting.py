"""
Display formatting for timer values
"""
import math
from datetime import datetime, timedelta
from typing import Optional


def format_time(total_seconds: float) -> str:
    """
    Format seconds as MM:SS, with a leading minus for overruns

    >>> format_time(-75.4)
    '-01:15'
    """
    negative = total_seconds < 0
    absolute = abs(total_seconds)
    minutes = math.floor(absolute / 60)
    seconds = math.floor(absolute % 60)
    return f"{'-' if negative else ''}{minutes:02d}:{seconds:02d}"


def format_drift(seconds: float) -> str:
    """Signed whole seconds, e.g. '+12s' or '-7s'"""
    whole = math.floor(seconds)
    return f"{'+' if seconds > 0 else ''}{whole}s"


def format_finish_time(remaining_seconds: float, now: Optional[datetime] = None) -> str:
    """Wall-clock HH:MM reached after remaining_seconds, starting from now"""
    now = now or datetime.now()
    return (now + timedelta(seconds=remaining_seconds)).strftime("%H:%M")
