"""
AI slide plan generation - topic, slide count and length in, timed slide list out
"""
import json
import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional

import config
from ai_module.ai_services.ai_provider import AIProvider

logger = logging.getLogger(__name__)

PLAN_PROMPT = """
Create a presentation plan for a talk about "{topic}".
The presentation must have exactly {slide_count} slides.
The total duration must be exactly {total_minutes} minutes ({total_seconds} seconds).
Distribute the time logically based on the complexity of typical slide content (e.g., Intro is short, deep dives are long).
Return a JSON object {{"slides": [...]}} where each slide has "title", "durationSeconds" and an optional short "notes" idea.
"""

PLAN_SCHEMA = {
    "type": "object",
    "properties": {
        "slides": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "title": {"type": "string"},
                    "durationSeconds": {"type": "number", "description": "Duration in seconds"},
                    "notes": {"type": "string", "description": "Short speaker note idea"}
                },
                "required": ["title", "durationSeconds"]
            }
        }
    }
}

_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


class PlanFormatError(ValueError):
    """The provider answered, but not with a usable plan"""


@dataclass(frozen=True)
class PlanItem:
    title: str
    duration_seconds: float
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        return {"title": self.title, "durationSeconds": self.duration_seconds}


def parse_plan(text: str) -> List[PlanItem]:
    """
    Parse a model answer into plan items.

    Accepts {"slides": [...]} or a bare list, optionally wrapped in a
    Markdown code fence.

    Raises:
        PlanFormatError: invalid JSON, missing fields or bad durations
    """
    cleaned = _FENCE_RE.sub("", text.strip())
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise PlanFormatError(f"Plan is not valid JSON: {e}")

    slides = data.get("slides") if isinstance(data, dict) else data
    if not isinstance(slides, list) or not slides:
        raise PlanFormatError("Plan contains no slides")

    items = []
    for i, raw in enumerate(slides):
        if not isinstance(raw, dict):
            raise PlanFormatError(f"Slide {i}: expected an object")
        title = raw.get("title")
        duration = raw.get("durationSeconds")
        if not isinstance(title, str) or not title.strip():
            raise PlanFormatError(f"Slide {i}: missing title")
        if isinstance(duration, bool) or not isinstance(duration, (int, float)) or duration < 0:
            raise PlanFormatError(f"Slide {i}: invalid durationSeconds {duration!r}")
        notes = raw.get("notes")
        items.append(PlanItem(
            title=title.strip(),
            duration_seconds=duration,
            notes=notes if isinstance(notes, str) else None
        ))
    return items


class SlidePlanGenerator:
    """
    Asks an AI provider for a timed slide plan.

    Every failure (no API key, provider error, unusable answer) is logged
    and reported as None so the caller keeps its current schedule.
    """

    def __init__(
        self,
        provider: str = config.PLAN_PROVIDER,
        model: str = config.PLAN_MODEL,
        api_key: Optional[str] = None,
        provider_factory: Callable[[str, str], AIProvider] = AIProvider
    ):
        self.provider = provider
        self.model = model
        self.api_key = api_key if api_key is not None else config.get_api_key(provider)
        self.provider_factory = provider_factory

    def build_prompt(self, topic: str, slide_count: int, total_minutes: float) -> str:
        return PLAN_PROMPT.format(
            topic=topic,
            slide_count=slide_count,
            total_minutes=total_minutes,
            total_seconds=round(total_minutes * 60)
        )

    def generate(self, topic: str, slide_count: int, total_minutes: float) -> Optional[List[PlanItem]]:
        if not topic or not topic.strip():
            logger.warning("Plan generation skipped: empty topic")
            return None
        if not self.api_key:
            logger.warning(f"API key for {self.provider} is missing. Cannot generate a plan.")
            return None

        prompt = self.build_prompt(topic.strip(), slide_count, total_minutes)
        try:
            logger.info(f"Generating plan: provider={self.provider}, model={self.model}, slides={slide_count}")
            client = self.provider_factory(self.provider, self.api_key)
            text = client.generate(prompt, self.model, config.PLAN_MAX_TOKENS, response_schema=PLAN_SCHEMA)
            if not text:
                logger.warning("Plan generation returned an empty answer")
                return None
            items = parse_plan(text)
        except PlanFormatError as e:
            logger.error(f"Unusable slide plan: {e}")
            return None
        except Exception as e:
            logger.error(f"Error generating slide plan: {e}")
            return None

        logger.info(f"Plan generated: {len(items)} slides, {sum(i.duration_seconds for i in items):g}s")
        return items
