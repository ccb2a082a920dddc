"""Domain models for the billing event log."""

from typing import Optional
from pydantic import BaseModel, ConfigDict

from packages.billing.models.domain.enums import BillingEventType


class BillingEvent(BaseModel):
    """
    A committed state change.

    Events are appended after the matching state write succeeds, so the log
    never contains entries for rejected calls.
    """

    model_config = ConfigDict(frozen=True)

    sequence: int
    event_type: BillingEventType
    plan_id: int
    timestamp: int

    merchant: str
    token: str
    subscriber: Optional[str] = None
    amount: Optional[int] = None  # Set for charges (subscribe, payment)
    next_payment: Optional[int] = None
    caller: Optional[str] = None  # Who triggered a payment
