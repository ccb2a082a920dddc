from enum import Enum


class LedgerProviderType(str, Enum):
    """Ledger provider types."""

    IN_MEMORY = "in_memory"


class ClockProviderType(str, Enum):
    """Time source provider types."""

    SYSTEM = "system"
    MANUAL = "manual"
