"""
Interface for time sources.
"""

from abc import ABC, abstractmethod


class ClockInterface(ABC):
    """Abstract read-only time source used to gate payments."""

    @abstractmethod
    def now(self) -> int:
        """
        Get the current time.

        Returns:
            Seconds since the Unix epoch
        """
        pass
