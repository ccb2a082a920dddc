"""
Factory for getting the time source.
"""

from common.core.config import settings
from common.core.constants import ClockProviderType
from packages.billing.providers.clock.interface import ClockInterface
from packages.billing.providers.clock.manual_clock import ManualClock
from packages.billing.providers.clock.system_clock import SystemClock


def get_clock() -> ClockInterface:
    """
    Get a time source based on configuration.

    Returns:
        ClockInterface: Wall clock, or a manual clock starting now
    """
    if settings.clock_provider == ClockProviderType.MANUAL:
        return ManualClock()
    return SystemClock()
