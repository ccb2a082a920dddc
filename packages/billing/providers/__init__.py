"""
Billing providers.

Abstracts external collaborators for the billing engine:
- Ledger: token balances and allowance-gated transfers
- Clock: the time source payments are gated on
"""

from packages.billing.providers.ledger import (
    LedgerProviderInterface,
    InMemoryLedger,
    get_ledger_provider,
)
from packages.billing.providers.clock import (
    ClockInterface,
    SystemClock,
    ManualClock,
    get_clock,
)

__all__ = [
    "LedgerProviderInterface",
    "InMemoryLedger",
    "get_ledger_provider",
    "ClockInterface",
    "SystemClock",
    "ManualClock",
    "get_clock",
]
