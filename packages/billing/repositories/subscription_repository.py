"""
Repository for subscription records.
"""

from typing import Dict, Optional, Tuple

from common.core.telemetry import trace_span
from packages.billing.models.domain.subscription import (
    Subscription,
    SubscriptionCreateModel,
    SubscriptionUpdateModel,
)


class SubscriptionRepository:
    """Subscription store keyed by (subscriber, plan_id).

    Cancelled records are kept; `get` returns None only for pairs that never
    subscribed.
    """

    def __init__(self):
        self._subscriptions: Dict[Tuple[str, int], Subscription] = {}

    @trace_span
    def get(self, subscriber: str, plan_id: int) -> Optional[Subscription]:
        return self._subscriptions.get((subscriber, plan_id))

    @trace_span
    def upsert(self, subscription_data: SubscriptionCreateModel) -> Subscription:
        """Create a fresh record, replacing any previous one for the pair."""
        subscription = Subscription(
            subscriber=subscription_data.subscriber,
            plan_id=subscription_data.plan_id,
            status=subscription_data.status,
            start=subscription_data.start,
            next_payment=subscription_data.next_payment,
            last_payment_at=subscription_data.start,
        )
        self._subscriptions[(subscription.subscriber, subscription.plan_id)] = (
            subscription
        )
        return subscription

    @trace_span
    def update(
        self, subscriber: str, plan_id: int, update_data: SubscriptionUpdateModel
    ) -> Subscription:
        """Apply the fields set on `update_data` to an existing record."""
        key = (subscriber, plan_id)
        current = self._subscriptions[key]
        updated = current.model_copy(update=update_data.model_dump(exclude_unset=True))
        self._subscriptions[key] = updated
        return updated

    def list_by_plan(self, plan_id: int, active_only: bool = True) -> list[Subscription]:
        """Subscriptions to a plan, in enrollment order."""
        subscriptions = [
            sub for (_, sub_plan_id), sub in self._subscriptions.items()
            if sub_plan_id == plan_id and (sub.is_active() or not active_only)
        ]
        return sorted(subscriptions, key=lambda sub: sub.start)

    def list_by_subscriber(
        self, subscriber: str, active_only: bool = True
    ) -> list[Subscription]:
        """Subscriptions held by one subscriber, ordered by plan id."""
        subscriptions = [
            sub for (sub_subscriber, _), sub in self._subscriptions.items()
            if sub_subscriber == subscriber and (sub.is_active() or not active_only)
        ]
        return sorted(subscriptions, key=lambda sub: sub.plan_id)
