"""
Presentation clock errors
"""
from typing import Optional


class PresentationError(Exception):
    """Base class for presentation clock errors"""


class EmptySchedule(PresentationError, ValueError):
    """Raised when a run is started without a usable schedule"""

    def __init__(self, message: str = "Cannot start a presentation with an empty schedule"):
        super().__init__(message)


class InvalidTransition(PresentationError):
    """Raised when an operation is not supported in the current mode"""

    def __init__(self, operation: str, mode: str, reason: Optional[str] = None):
        self.operation = operation
        self.mode = mode
        message = f"Cannot {operation} while {mode}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UndefinedProgress(PresentationError):
    """Raised when progress is requested for a schedule whose total duration is zero"""

    def __init__(self, message: str = "Progress is undefined for a zero-length schedule"):
        super().__init__(message)
