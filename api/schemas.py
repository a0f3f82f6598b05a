"""
Pydantic schemas for API requests and responses
"""
from pydantic import BaseModel, Field
from typing import List, Optional, Literal

import config


class SlideInput(BaseModel):
    """Single planned slide"""
    id: Optional[str] = Field(None, description="Existing slide id, kept for edit correlation")
    title: str = Field(..., min_length=1, description="Slide title")
    duration_seconds: float = Field(..., ge=0, alias="durationSeconds", description="Planned duration in seconds")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "title": "Introduction",
                "durationSeconds": 90
            }
        }


class SlideOutput(BaseModel):
    id: str
    number: int
    title: str
    duration_seconds: float = Field(..., alias="durationSeconds")

    class Config:
        populate_by_name = True


class TimelineSegment(BaseModel):
    """Slide position on the timeline, in percent of the whole plan"""
    start_percent: float
    width_percent: float
    end_percent: float


class ScheduleResponse(BaseModel):
    slides: List[SlideOutput]
    total_seconds: float
    total_minutes: float
    segments: List[TimelineSegment] = Field(default_factory=list)


class DistributeRequest(BaseModel):
    slides: List[SlideInput]
    total_minutes: float = Field(config.DEFAULT_TOTAL_TIME_MINUTES, gt=0)


class ResizeRequest(BaseModel):
    slides: List[SlideInput] = Field(default_factory=list)
    slide_count: int = Field(..., ge=1, le=200)
    total_minutes: float = Field(config.DEFAULT_TOTAL_TIME_MINUTES, gt=0)


class AddSlideRequest(BaseModel):
    slides: List[SlideInput] = Field(default_factory=list)
    total_minutes: float = Field(config.DEFAULT_TOTAL_TIME_MINUTES, gt=0)


class RemoveSlideRequest(BaseModel):
    slides: List[SlideInput]
    slide_id: str


class UpdateSlideRequest(BaseModel):
    """Edit one slide; omitted fields stay as they are"""
    slides: List[SlideInput]
    slide_id: str
    title: Optional[str] = Field(None, min_length=1)
    duration_seconds: Optional[float] = Field(None, ge=0, alias="durationSeconds")

    class Config:
        populate_by_name = True


class PlanRequest(BaseModel):
    """Request for an AI generated plan"""
    topic: str = Field(..., min_length=1, description="Talk topic")
    slide_count: int = Field(config.DEFAULT_SLIDE_COUNT, ge=1, le=50)
    total_minutes: float = Field(config.DEFAULT_TOTAL_TIME_MINUTES, gt=0)
    slides: List[SlideInput] = Field(default_factory=list, description="Schedule kept when generation fails")

    class Config:
        json_schema_extra = {
            "example": {
                "topic": "Q4 marketing strategy",
                "slide_count": 8,
                "total_minutes": 15
            }
        }


class PlanResponse(ScheduleResponse):
    generated: bool


class StartRequest(BaseModel):
    slides: List[SlideInput]
    auto_advance: bool = False


class SlideChangeRequest(BaseModel):
    delta: int = Field(..., description="Slides to move, negative goes back")


class DriftInfo(BaseModel):
    state: Literal["on_time", "behind", "ahead"]
    ideal_index: int
    ideal_number: int
    magnitude_seconds: Optional[float] = None
    magnitude_text: Optional[str] = None


class SnapshotResponse(BaseModel):
    """Derived presentation state, recomputed on every tick"""
    mode: Literal["setup", "running", "paused", "finished"]
    advance_mode: Literal["auto", "manual"]
    slide_count: int
    current_slide_index: int
    ideal_slide_index: int
    elapsed_global_time: float
    slide_remaining_seconds: float
    global_remaining_seconds: float
    progress_percent: float = Field(..., ge=0, le=100)
    progress_defined: bool
    slide_progress_percent: float = Field(..., ge=0, le=100)
    is_overrun: bool
    urgency: Literal["normal", "warning", "danger"]
    drift: Optional[DriftInfo] = None
    current_slide: Optional[SlideOutput] = None
    slide_remaining_text: str
    global_remaining_text: str
    estimated_finish: Optional[str] = Field(None, description="Wall-clock finish time (HH:MM) at the current pace")
