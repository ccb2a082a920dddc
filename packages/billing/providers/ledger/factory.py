"""
Factory for getting ledger provider instance.
"""

from typing import Optional

from common.core.config import settings
from common.core.constants import LedgerProviderType
from common.core.telemetry import get_logger
from packages.billing.providers.ledger.interface import LedgerProviderInterface
from packages.billing.providers.ledger.in_memory_ledger import InMemoryLedger

logger = get_logger(__name__)

# Global instance
_ledger_provider: Optional[LedgerProviderInterface] = None


def get_ledger_provider() -> LedgerProviderInterface:
    """
    Get the configured ledger provider.

    Only the in-memory ledger ships with the package; engines backed by
    another ledger receive it through their constructor instead.

    Returns:
        LedgerProviderInterface: The shared ledger instance
    """
    global _ledger_provider

    if _ledger_provider is None:
        if settings.ledger_provider == LedgerProviderType.IN_MEMORY:
            _ledger_provider = InMemoryLedger()
        else:
            raise ValueError(f"Unsupported ledger provider: {settings.ledger_provider}")
        logger.info(f"Initialized {settings.ledger_provider.value} ledger provider")

    return _ledger_provider


def reset_ledger_provider() -> None:
    """Drop the shared instance so the next call builds a fresh one."""
    global _ledger_provider
    _ledger_provider = None
