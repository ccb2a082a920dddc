import threading
import time
from typing import Optional

from common.core.telemetry import get_logger
from packages.billing.providers.clock.interface import ClockInterface

logger = get_logger(__name__)


def _require_whole_seconds(value, name: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be a whole number of seconds, got {value!r}")


class ManualClock(ClockInterface):
    """Time source that only moves when told to.

    Used to fast-forward through billing cycles in simulations and tests.
    Time is whole seconds and never moves backwards.
    """

    def __init__(self, start: Optional[int] = None):
        if start is not None:
            _require_whole_seconds(start, "start")
        self._now = int(time.time()) if start is None else start
        self._lock = threading.Lock()

    def now(self) -> int:
        with self._lock:
            return self._now

    def advance(self, seconds: int) -> int:
        """Move time forward by `seconds` and return the new timestamp."""
        _require_whole_seconds(seconds, "seconds")
        if seconds < 0:
            raise ValueError("cannot move the clock backwards")
        with self._lock:
            self._now += seconds
            logger.debug(f"Clock advanced by {seconds}s to {self._now}")
            return self._now

    def set(self, timestamp: int) -> None:
        """Jump to an absolute timestamp not earlier than the current one."""
        _require_whole_seconds(timestamp, "timestamp")
        with self._lock:
            if timestamp < self._now:
                raise ValueError("cannot move the clock backwards")
            self._now = timestamp
