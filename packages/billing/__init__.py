"""
Recurring billing.

Merchant-defined payment plans, subscriber enrollment, time-gated recurring
charges and cancellation, settled against a pluggable token ledger.
"""

from packages.billing.services.billing_engine import BillingEngine
from packages.billing.models.domain import (
    Plan,
    Subscription,
    SubscriptionStatus,
    BillingEvent,
    BillingEventType,
)
from packages.billing.exceptions import (
    InvalidAddressError,
    InvalidAmountError,
    InvalidFrequencyError,
    PlanNotFoundError,
    SubscriptionNotActiveError,
    NotSubscribedError,
    PaymentNotDueError,
    TransferFailedError,
    TokenNotFoundError,
)

__all__ = [
    "BillingEngine",
    "Plan",
    "Subscription",
    "SubscriptionStatus",
    "BillingEvent",
    "BillingEventType",
    "InvalidAddressError",
    "InvalidAmountError",
    "InvalidFrequencyError",
    "PlanNotFoundError",
    "SubscriptionNotActiveError",
    "NotSubscribedError",
    "PaymentNotDueError",
    "TransferFailedError",
    "TokenNotFoundError",
]
