"""Ledger providers - token balances and allowance-gated transfers."""

from packages.billing.providers.ledger.interface import LedgerProviderInterface
from packages.billing.providers.ledger.in_memory_ledger import InMemoryLedger
from packages.billing.providers.ledger.factory import (
    get_ledger_provider,
    reset_ledger_provider,
)

__all__ = [
    "LedgerProviderInterface",
    "InMemoryLedger",
    "get_ledger_provider",
    "reset_ledger_provider",
]
