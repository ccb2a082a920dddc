"""
Domain models for subscriptions.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from packages.billing.models.domain.enums import SubscriptionStatus


class Subscription(BaseModel):
    """
    A subscriber's enrollment in one plan.

    Represents:
    - The (subscriber, plan_id) key
    - Status (Active/Cancelled); an absent record means never subscribed
    - Billing cycle bookkeeping (next due timestamp, last charge)
    """

    model_config = ConfigDict(frozen=True)

    subscriber: str
    plan_id: int

    status: SubscriptionStatus = SubscriptionStatus.ACTIVE

    # Billing cycle (seconds since epoch)
    start: int
    next_payment: int
    last_payment_at: int
    payments_made: int = 1  # Enrollment charges the first cycle

    # Lifecycle dates
    cancelled_at: Optional[int] = None

    def is_active(self) -> bool:
        """Check if the subscription is live."""
        return self.status.is_billable()

    def is_payment_due(self, now: int) -> bool:
        """Check if the next cycle can be charged at `now`."""
        return self.is_active() and now >= self.next_payment

    def seconds_until_due(self, now: int) -> int:
        """Get number of seconds until the next cycle is due."""
        return max(0, self.next_payment - now)


class SubscriptionCreateModel(BaseModel):
    """Model for creating (or re-creating) a subscription record."""

    subscriber: str
    plan_id: int
    start: int
    next_payment: int
    status: SubscriptionStatus = SubscriptionStatus.ACTIVE


class SubscriptionUpdateModel(BaseModel):
    """Model for updating a subscription. Only set fields are applied."""

    status: Optional[SubscriptionStatus] = None
    next_payment: Optional[int] = Field(default=None, ge=0)
    last_payment_at: Optional[int] = None
    payments_made: Optional[int] = None
    cancelled_at: Optional[int] = None
