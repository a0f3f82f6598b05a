"""
API routes for schedule setup and the live presentation clock
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from api.schemas import (
    AddSlideRequest,
    DistributeRequest,
    DriftInfo,
    PlanRequest,
    PlanResponse,
    RemoveSlideRequest,
    ResizeRequest,
    ScheduleResponse,
    SlideChangeRequest,
    SlideInput,
    SlideOutput,
    SnapshotResponse,
    StartRequest,
    TimelineSegment,
    UpdateSlideRequest,
)
from ai_module.ai_services.plan_generator import SlidePlanGenerator
from core.exceptions import EmptySchedule, InvalidTransition
from core.models.slide import Schedule, Slide
from core.models.snapshot import AdvanceMode, AppMode, PresentationSnapshot
from core.services.clock import PresentationClock
from core.services.evaluator import ScheduleEvaluator
from core.services.schedule_builder import ScheduleBuilder
from core.services.ticker import Ticker
from core.utils.formatting import format_drift, format_finish_time, format_time
from core.utils.logger import get_logger
import config

logger = get_logger(__name__)

router = APIRouter()

# Single in-memory presentation session
_clock = PresentationClock(ticker_factory=Ticker)


def get_clock() -> PresentationClock:
    return _clock


def get_plan_generator() -> SlidePlanGenerator:
    return SlidePlanGenerator()


# ── conversions ────────────────────────────────────────────────────────────
def to_schedule(slides: List[SlideInput]) -> Schedule:
    return Schedule(
        Slide(title=s.title, duration_seconds=s.duration_seconds, id=s.id)
        if s.id else Slide(title=s.title, duration_seconds=s.duration_seconds)
        for s in slides
    )


def slide_output(slide: Slide) -> SlideOutput:
    return SlideOutput(
        id=slide.id,
        number=slide.number,
        title=slide.title,
        duration_seconds=slide.duration_seconds
    )


def schedule_response(schedule: Schedule) -> ScheduleResponse:
    segments = []
    if schedule:
        segments = [
            TimelineSegment(start_percent=start, width_percent=width, end_percent=end)
            for start, width, end in ScheduleEvaluator(schedule).segments()
        ]
    return ScheduleResponse(
        slides=[slide_output(s) for s in schedule],
        total_seconds=schedule.total_duration,
        total_minutes=ScheduleBuilder.total_minutes(schedule),
        segments=segments
    )


def snapshot_response(snapshot: PresentationSnapshot, schedule: Schedule = None) -> SnapshotResponse:
    data = snapshot.to_dict()
    drift = None
    if snapshot.drift is not None:
        magnitude = snapshot.drift.magnitude_seconds
        drift = DriftInfo(
            **data["drift"],
            magnitude_text=format_drift(magnitude) if magnitude is not None else None
        )
    data["drift"] = drift
    data["current_slide"] = slide_output(schedule[snapshot.current_slide_index]) if schedule else None
    data["slide_remaining_text"] = format_time(snapshot.slide_remaining_seconds)
    data["global_remaining_text"] = format_time(snapshot.global_remaining_seconds)
    if snapshot.mode in (AppMode.RUNNING, AppMode.PAUSED):
        data["estimated_finish"] = format_finish_time(snapshot.global_remaining_seconds)
    return SnapshotResponse(**data)


def _clock_response(clock: PresentationClock, snapshot: PresentationSnapshot) -> SnapshotResponse:
    return snapshot_response(snapshot, clock.schedule)


# ── schedule setup ─────────────────────────────────────────────────────────
@router.get("/schedule/default", response_model=ScheduleResponse)
async def default_schedule(
    slide_count: int = config.DEFAULT_SLIDE_COUNT,
    total_minutes: float = config.DEFAULT_TOTAL_TIME_MINUTES
):
    """Evenly timed placeholder schedule"""
    try:
        schedule = ScheduleBuilder.default_schedule(slide_count, total_minutes)
    except ValueError as e:
        raise HTTPException(422, str(e))
    return schedule_response(schedule)


@router.post("/schedule/distribute", response_model=ScheduleResponse)
async def distribute_schedule(request: DistributeRequest):
    """Split total_minutes evenly across the given slides"""
    schedule = ScheduleBuilder.distribute_evenly(to_schedule(request.slides), request.total_minutes)
    return schedule_response(schedule)


@router.post("/schedule/resize", response_model=ScheduleResponse)
async def resize_schedule(request: ResizeRequest):
    """Grow or truncate the schedule, then distribute time evenly"""
    schedule = ScheduleBuilder.resize(
        to_schedule(request.slides),
        request.slide_count,
        request.total_minutes
    )
    return schedule_response(schedule)


@router.post("/schedule/add", response_model=ScheduleResponse)
async def add_slide(request: AddSlideRequest):
    """Append a placeholder slide and redistribute total_minutes"""
    schedule = ScheduleBuilder.add_slide(to_schedule(request.slides), request.total_minutes)
    return schedule_response(schedule)


@router.post("/schedule/remove", response_model=ScheduleResponse)
async def remove_slide(request: RemoveSlideRequest):
    """Drop a slide by id; the remaining slides are renumbered from 1"""
    schedule = ScheduleBuilder.remove_slide(to_schedule(request.slides), request.slide_id)
    return schedule_response(schedule)


@router.post("/schedule/update", response_model=ScheduleResponse)
async def update_slide(request: UpdateSlideRequest):
    schedule = ScheduleBuilder.update_slide(
        to_schedule(request.slides),
        request.slide_id,
        title=request.title,
        duration_seconds=request.duration_seconds
    )
    return schedule_response(schedule)


@router.post("/plan/generate", response_model=PlanResponse)
def generate_plan(
    request: PlanRequest,
    generator: SlidePlanGenerator = Depends(get_plan_generator)
):
    """
    Ask the AI provider for a timed plan.
    Falls back to the submitted slides when no plan is produced.
    """
    items = generator.generate(request.topic, request.slide_count, request.total_minutes)

    if items is None:
        logger.info("No plan produced, keeping the submitted schedule")
        schedule = to_schedule(request.slides)
        generated = False
    else:
        schedule = ScheduleBuilder.from_plan(item.to_dict() for item in items)
        generated = True

    base = schedule_response(schedule)
    return PlanResponse(**base.model_dump(), generated=generated)


# ── presentation clock ─────────────────────────────────────────────────────
@router.post("/presentation/start", response_model=SnapshotResponse)
async def start_presentation(request: StartRequest, clock: PresentationClock = Depends(get_clock)):
    mode = AdvanceMode.AUTO if request.auto_advance else AdvanceMode.MANUAL
    try:
        snapshot = clock.start(to_schedule(request.slides), mode)
    except EmptySchedule as e:
        logger.warning(f"Start rejected: {e}")
        raise HTTPException(422, str(e))
    return _clock_response(clock, snapshot)


@router.post("/presentation/pause", response_model=SnapshotResponse)
async def pause_presentation(clock: PresentationClock = Depends(get_clock)):
    try:
        snapshot = clock.pause()
    except InvalidTransition as e:
        raise HTTPException(409, str(e))
    return _clock_response(clock, snapshot)


@router.post("/presentation/resume", response_model=SnapshotResponse)
async def resume_presentation(clock: PresentationClock = Depends(get_clock)):
    try:
        snapshot = clock.resume()
    except InvalidTransition as e:
        raise HTTPException(409, str(e))
    return _clock_response(clock, snapshot)


@router.post("/presentation/toggle", response_model=SnapshotResponse)
async def toggle_presentation(clock: PresentationClock = Depends(get_clock)):
    return _clock_response(clock, clock.toggle_pause())


@router.post("/presentation/stop", response_model=SnapshotResponse)
async def stop_presentation(clock: PresentationClock = Depends(get_clock)):
    return _clock_response(clock, clock.stop())


@router.post("/presentation/slide", response_model=SnapshotResponse)
async def change_slide(request: SlideChangeRequest, clock: PresentationClock = Depends(get_clock)):
    try:
        snapshot = clock.change_slide_index(request.delta)
    except InvalidTransition as e:
        raise HTTPException(409, str(e))
    return _clock_response(clock, snapshot)


@router.get("/presentation/snapshot", response_model=SnapshotResponse)
async def get_snapshot(clock: PresentationClock = Depends(get_clock)):
    """Current derived state; ticks the clock so polling alone keeps it fresh"""
    return _clock_response(clock, clock.tick())


@router.get("/presentation/schedule", response_model=ScheduleResponse)
async def get_running_schedule(clock: PresentationClock = Depends(get_clock)):
    if clock.schedule is None:
        raise HTTPException(404, "No presentation is running")
    return schedule_response(clock.schedule)
