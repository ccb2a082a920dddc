"""Domain models for billing."""

from packages.billing.models.domain.enums import (
    SubscriptionStatus,
    BillingEventType,
)
from packages.billing.models.domain.plan import Plan, PlanCreateModel
from packages.billing.models.domain.subscription import (
    Subscription,
    SubscriptionCreateModel,
    SubscriptionUpdateModel,
)
from packages.billing.models.domain.events import BillingEvent

__all__ = [
    # Enums
    "SubscriptionStatus",
    "BillingEventType",
    # Plan
    "Plan",
    "PlanCreateModel",
    # Subscription
    "Subscription",
    "SubscriptionCreateModel",
    "SubscriptionUpdateModel",
    # Events
    "BillingEvent",
]
