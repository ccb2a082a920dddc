"""
Repository for the billing event log.
"""

from typing import Optional

from packages.billing.models.domain.enums import BillingEventType
from packages.billing.models.domain.events import BillingEvent


class BillingEventRepository:
    """Append-only, ordered log of committed billing events."""

    def __init__(self):
        self._events: list[BillingEvent] = []

    def append(self, event_type: BillingEventType, **fields) -> BillingEvent:
        event = BillingEvent(
            sequence=len(self._events), event_type=event_type, **fields
        )
        self._events.append(event)
        return event

    def list_events(
        self,
        plan_id: Optional[int] = None,
        event_type: Optional[BillingEventType] = None,
    ) -> list[BillingEvent]:
        """Events in commit order, optionally filtered by plan and type."""
        return [
            event
            for event in self._events
            if (plan_id is None or event.plan_id == plan_id)
            and (event_type is None or event.event_type == event_type)
        ]
