"""
Repeating tick source built on threading.Timer
"""
import threading
from typing import Callable, Optional

from core.utils.logger import get_logger

logger = get_logger(__name__)


class Ticker:
    """
    Cancellable repeating task.

    At most one timer is pending at a time. Each start() bumps a generation
    counter, so a timer that already fired but has not run its callback yet
    becomes a no-op once cancel() or a new start() has happened.
    """

    def __init__(self, interval: float, callback: Callable[[], None]):
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")
        self.interval = interval
        self.callback = callback
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._generation = 0
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def start(self) -> None:
        with self._lock:
            self._cancel_locked()
            self._active = True
            self._schedule_locked(self._generation)

    def cancel(self) -> None:
        with self._lock:
            self._cancel_locked()

    def _cancel_locked(self) -> None:
        self._generation += 1
        self._active = False
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _schedule_locked(self, generation: int) -> None:
        timer = threading.Timer(self.interval, self._fire, args=(generation,))
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
        try:
            self.callback()
        except Exception as e:
            logger.error(f"Tick callback failed: {e}", exc_info=True)
        with self._lock:
            if generation == self._generation:
                self._schedule_locked(generation)
