"""Billing repositories."""

from packages.billing.repositories.plan_repository import PlanRepository
from packages.billing.repositories.subscription_repository import (
    SubscriptionRepository,
)
from packages.billing.repositories.event_repository import BillingEventRepository

__all__ = [
    "PlanRepository",
    "SubscriptionRepository",
    "BillingEventRepository",
]
