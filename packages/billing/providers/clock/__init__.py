"""Time sources for gating payments."""

from packages.billing.providers.clock.interface import ClockInterface
from packages.billing.providers.clock.system_clock import SystemClock
from packages.billing.providers.clock.manual_clock import ManualClock
from packages.billing.providers.clock.factory import get_clock

__all__ = [
    "ClockInterface",
    "SystemClock",
    "ManualClock",
    "get_clock",
]
