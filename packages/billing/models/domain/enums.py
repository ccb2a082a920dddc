"""
Billing enums - strongly typed enumerations for subscription and billing states.
"""

from enum import Enum


class SubscriptionStatus(str, Enum):
    """
    Subscription status lifecycle.

    Flow: (absent) -> active -> cancelled -> (active again on re-subscribe)
    """

    ACTIVE = "active"  # Enrolled, charged on each elapsed billing cycle
    CANCELLED = "cancelled"  # Cancelled by the subscriber, never charged again

    def is_billable(self) -> bool:
        """Check if this status should be billed."""
        return self == SubscriptionStatus.ACTIVE


class BillingEventType(str, Enum):
    """Types of state changes recorded by the billing engine."""

    PLAN_CREATED = "plan_created"
    SUBSCRIPTION_CREATED = "subscription_created"
    PAYMENT_SENT = "payment_sent"
    SUBSCRIPTION_CANCELLED = "subscription_cancelled"
