import time

from packages.billing.providers.clock.interface import ClockInterface


class SystemClock(ClockInterface):
    """Wall-clock time source."""

    def now(self) -> int:
        return int(time.time())
