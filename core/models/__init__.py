"""Data models"""
from .slide import Slide, Schedule, new_slide_id
from .snapshot import (
    AppMode,
    AdvanceMode,
    DriftState,
    DriftReport,
    Progress,
    PresentationSnapshot,
    Urgency,
)

__all__ = [
    'Slide',
    'Schedule',
    'new_slide_id',
    'AppMode',
    'AdvanceMode',
    'DriftState',
    'DriftReport',
    'Progress',
    'PresentationSnapshot',
    'Urgency',
]
