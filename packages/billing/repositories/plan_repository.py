"""
Repository for payment plans.
"""

from typing import Dict, Optional

from common.core.telemetry import trace_span
from packages.billing.models.domain.plan import Plan, PlanCreateModel


class PlanRepository:
    """Append-only plan registry. Ids are assigned sequentially from 0."""

    def __init__(self):
        self._plans: Dict[int, Plan] = {}
        self._next_id = 0

    @trace_span
    def create(self, plan_data: PlanCreateModel) -> Plan:
        """Store a new plan under the next id."""
        plan = Plan(id=self._next_id, **plan_data.model_dump())
        self._plans[plan.id] = plan
        self._next_id += 1
        return plan

    @trace_span
    def get(self, plan_id: int) -> Optional[Plan]:
        return self._plans.get(plan_id)

    def count(self) -> int:
        return len(self._plans)

    def list_all(self) -> list[Plan]:
        """All plans in id order."""
        return [self._plans[plan_id] for plan_id in sorted(self._plans)]
