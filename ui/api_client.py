import requests
from typing import Dict, List, Optional

import config


class ChronoSlideClient:
    """Thin requests wrapper around the ChronoSlide HTTP API"""

    def __init__(self, base_url: str = config.API_BASE_URL, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _get(self, path: str, **params) -> Dict:
        response = requests.get(f"{self.base_url}{path}", params=params or None, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def _post(self, path: str, payload: Optional[Dict] = None, timeout: Optional[float] = None) -> Dict:
        response = requests.post(
            f"{self.base_url}{path}",
            json=payload,
            timeout=timeout or self.timeout
        )
        response.raise_for_status()
        return response.json()

    # ── setup ──────────────────────────────────────────────────────────
    def default_schedule(self, slide_count: int, total_minutes: float) -> Dict:
        return self._get("/schedule/default", slide_count=slide_count, total_minutes=total_minutes)

    def distribute(self, slides: List[Dict], total_minutes: float) -> Dict:
        return self._post("/schedule/distribute", {"slides": slides, "total_minutes": total_minutes})

    def resize(self, slides: List[Dict], slide_count: int, total_minutes: float) -> Dict:
        return self._post("/schedule/resize", {
            "slides": slides,
            "slide_count": slide_count,
            "total_minutes": total_minutes
        })

    def add_slide(self, slides: List[Dict], total_minutes: float) -> Dict:
        return self._post("/schedule/add", {"slides": slides, "total_minutes": total_minutes})

    def remove_slide(self, slides: List[Dict], slide_id: str) -> Dict:
        return self._post("/schedule/remove", {"slides": slides, "slide_id": slide_id})

    def update_slide(
        self,
        slides: List[Dict],
        slide_id: str,
        title: Optional[str] = None,
        duration_seconds: Optional[float] = None
    ) -> Dict:
        payload = {"slides": slides, "slide_id": slide_id}
        if title is not None:
            payload["title"] = title
        if duration_seconds is not None:
            payload["durationSeconds"] = duration_seconds
        return self._post("/schedule/update", payload)

    def generate_plan(self, topic: str, slide_count: int, total_minutes: float, slides: List[Dict]) -> Dict:
        payload = {
            "topic": topic,
            "slide_count": slide_count,
            "total_minutes": total_minutes,
            "slides": slides
        }
        return self._post("/plan/generate", payload, timeout=config.API_TIMEOUT)

    # ── presentation ───────────────────────────────────────────────────
    def start(self, slides: List[Dict], auto_advance: bool) -> Dict:
        return self._post("/presentation/start", {"slides": slides, "auto_advance": auto_advance})

    def toggle_pause(self) -> Dict:
        return self._post("/presentation/toggle")

    def stop(self) -> Dict:
        return self._post("/presentation/stop")

    def change_slide(self, delta: int) -> Dict:
        return self._post("/presentation/slide", {"delta": delta})

    def snapshot(self) -> Dict:
        return self._get("/presentation/snapshot")

    def running_schedule(self) -> Dict:
        return self._get("/presentation/schedule")
