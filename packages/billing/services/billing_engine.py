"""
Recurring billing engine.

Merchants create plans, subscribers enroll (paying the first cycle up front),
anyone may trigger the charge for an elapsed cycle, and subscribers cancel.
"""

import threading
from typing import Optional

from common.core.config import settings
from common.core.telemetry import get_logger, log_span_event, trace_span
from packages.billing.addresses import is_null_address
from packages.billing.exceptions import (
    InvalidAddressError,
    InvalidAmountError,
    InvalidFrequencyError,
    PaymentNotDueError,
    PlanNotFoundError,
    SubscriptionNotActiveError,
    TransferFailedError,
)
from packages.billing.models.domain.enums import BillingEventType, SubscriptionStatus
from packages.billing.models.domain.events import BillingEvent
from packages.billing.models.domain.plan import Plan, PlanCreateModel
from packages.billing.models.domain.subscription import (
    Subscription,
    SubscriptionCreateModel,
    SubscriptionUpdateModel,
)
from packages.billing.providers.clock.factory import get_clock
from packages.billing.providers.clock.interface import ClockInterface
from packages.billing.providers.ledger.factory import get_ledger_provider
from packages.billing.providers.ledger.interface import LedgerProviderInterface
from packages.billing.repositories.event_repository import BillingEventRepository
from packages.billing.repositories.plan_repository import PlanRepository
from packages.billing.repositories.subscription_repository import (
    SubscriptionRepository,
)

logger = get_logger(__name__)


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class BillingEngine:
    """Plan registry, subscription store and payment orchestration.

    Operations run one at a time under the engine lock. Each one validates
    its inputs and builds the new record before making at most one ledger
    transfer. Only infallible repository writes follow the transfer, so a
    failure at any step leaves plans, subscriptions and balances as they were.
    """

    def __init__(
        self,
        ledger: Optional[LedgerProviderInterface] = None,
        clock: Optional[ClockInterface] = None,
        engine_address: Optional[str] = None,
    ):
        self.ledger = ledger or get_ledger_provider()
        self.clock = clock or get_clock()
        self.engine_address = engine_address or settings.engine_address
        self.plan_repo = PlanRepository()
        self.subscription_repo = SubscriptionRepository()
        self.event_repo = BillingEventRepository()
        self._lock = threading.RLock()

    @trace_span
    def create_plan(
        self, merchant: str, token: str, amount: int, frequency: int
    ) -> Plan:
        """
        Register a plan owned by `merchant`.

        Args:
            merchant: Calling identity; receives every payment for the plan
            token: Ledger token the plan is billed in
            amount: Charge per billing cycle
            frequency: Billing cycle length in seconds

        Returns:
            The stored plan with its sequential id

        Raises:
            InvalidAddressError: Null token or merchant
            InvalidAmountError: Amount is not a positive integer
            InvalidFrequencyError: Frequency is not a positive integer
        """
        with self._lock:
            if is_null_address(token):
                self._reject("create_plan", "null token", merchant=merchant)
                raise InvalidAddressError("token")
            if not _is_positive_int(amount):
                self._reject("create_plan", f"invalid amount {amount!r}", merchant=merchant)
                raise InvalidAmountError(amount)
            if not _is_positive_int(frequency):
                self._reject(
                    "create_plan", f"invalid frequency {frequency!r}", merchant=merchant
                )
                raise InvalidFrequencyError(frequency)
            if is_null_address(merchant):
                self._reject("create_plan", "null merchant")
                raise InvalidAddressError("merchant")

            now = self.clock.now()
            plan = self.plan_repo.create(
                PlanCreateModel(
                    token=token,
                    amount=amount,
                    frequency=frequency,
                    merchant=merchant,
                    created_at=now,
                )
            )
            self.event_repo.append(
                BillingEventType.PLAN_CREATED,
                plan_id=plan.id,
                timestamp=now,
                merchant=merchant,
                token=token,
            )

        logger.info(
            f"Created plan {plan.id} for merchant {merchant}",
            extra={
                "plan_id": plan.id,
                "merchant": merchant,
                "token": token,
                "amount": amount,
                "frequency": frequency,
            },
        )
        return plan

    @trace_span
    def subscribe_to_plan(self, subscriber: str, plan_id: int) -> Subscription:
        """
        Enroll `subscriber` in a plan, charging the first cycle immediately.

        Any previous record for the pair (active or cancelled) is replaced
        once the charge succeeds.

        Raises:
            InvalidAddressError: Null subscriber
            PlanNotFoundError: Unknown plan
            TransferFailedError: Ledger rejected the first charge
        """
        with self._lock:
            if is_null_address(subscriber):
                self._reject("subscribe_to_plan", "null subscriber", plan_id=plan_id)
                raise InvalidAddressError("subscriber")
            plan = self._get_plan_or_raise(plan_id, operation="subscribe_to_plan")

            now = self.clock.now()
            subscription_data = SubscriptionCreateModel(
                subscriber=subscriber,
                plan_id=plan.id,
                start=now,
                next_payment=now + plan.frequency,
            )

            self._charge(plan, subscriber)

            subscription = self.subscription_repo.upsert(subscription_data)
            self.event_repo.append(
                BillingEventType.SUBSCRIPTION_CREATED,
                plan_id=plan.id,
                timestamp=now,
                merchant=plan.merchant,
                token=plan.token,
                subscriber=subscriber,
                amount=plan.amount,
                next_payment=subscription.next_payment,
            )

        logger.info(
            f"Subscribed {subscriber} to plan {plan.id}",
            extra={
                "plan_id": plan.id,
                "subscriber": subscriber,
                "amount": plan.amount,
                "next_payment": subscription.next_payment,
            },
        )
        return subscription

    @trace_span
    def pay(
        self, subscriber: str, plan_id: int, caller: Optional[str] = None
    ) -> Subscription:
        """
        Charge one elapsed billing cycle.

        Anyone may trigger billing; the plan amount always moves from
        `subscriber` to the merchant. The due date advances by exactly one
        `frequency` from the previous due date, so N elapsed cycles take N calls.

        Args:
            subscriber: Subscriber whose account is debited
            plan_id: Plan being billed
            caller: Identity triggering the charge, recorded in the event log

        Raises:
            PlanNotFoundError: Unknown plan
            SubscriptionNotActiveError: No active subscription for the pair
            PaymentNotDueError: The current cycle has not started yet
            TransferFailedError: Ledger rejected the charge
        """
        with self._lock:
            plan = self._get_plan_or_raise(plan_id, operation="pay")
            subscription = self._get_active_or_raise(subscriber, plan_id, operation="pay")

            now = self.clock.now()
            if now < subscription.next_payment:
                self._reject(
                    "pay",
                    f"payment not due until {subscription.next_payment}",
                    plan_id=plan_id,
                    subscriber=subscriber,
                )
                raise PaymentNotDueError(due_at=subscription.next_payment, now=now)

            update_data = SubscriptionUpdateModel(
                next_payment=subscription.next_payment + plan.frequency,
                last_payment_at=now,
                payments_made=subscription.payments_made + 1,
            )

            self._charge(plan, subscriber)

            updated = self.subscription_repo.update(subscriber, plan_id, update_data)
            self.event_repo.append(
                BillingEventType.PAYMENT_SENT,
                plan_id=plan.id,
                timestamp=now,
                merchant=plan.merchant,
                token=plan.token,
                subscriber=subscriber,
                amount=plan.amount,
                next_payment=updated.next_payment,
                caller=caller or subscriber,
            )

        log_span_event(
            f"Payment sent from {subscriber} to {plan.merchant} for plan {plan.id}",
            {
                "plan_id": plan.id,
                "subscriber": subscriber,
                "merchant": plan.merchant,
                "amount": plan.amount,
                "next_payment": updated.next_payment,
                "caller": caller or subscriber,
            },
        )
        return updated

    @trace_span
    def cancel_plan(self, subscriber: str, plan_id: int) -> Subscription:
        """
        Cancel the caller's subscription. No refund and no transfer.

        Raises:
            SubscriptionNotActiveError: No active subscription for the pair
        """
        with self._lock:
            subscription = self._get_active_or_raise(
                subscriber, plan_id, operation="cancel_plan"
            )
            plan = self.plan_repo.get(plan_id)

            now = self.clock.now()
            cancelled = self.subscription_repo.update(
                subscriber,
                plan_id,
                SubscriptionUpdateModel(
                    status=SubscriptionStatus.CANCELLED, cancelled_at=now
                ),
            )
            self.event_repo.append(
                BillingEventType.SUBSCRIPTION_CANCELLED,
                plan_id=plan_id,
                timestamp=now,
                merchant=plan.merchant,
                token=plan.token,
                subscriber=subscriber,
                next_payment=subscription.next_payment,
            )

        logger.info(
            f"Cancelled subscription of {subscriber} to plan {plan_id}",
            extra={"plan_id": plan_id, "subscriber": subscriber},
        )
        return cancelled

    # Read accessors

    def get_plan(self, plan_id: int) -> Plan:
        """Get a plan by id. Raises PlanNotFoundError for unknown ids."""
        plan = self.plan_repo.get(plan_id)
        if plan is None:
            raise PlanNotFoundError(plan_id)
        return plan

    def get_subscription(self, subscriber: str, plan_id: int) -> Optional[Subscription]:
        """Get the record for a pair; None if the pair never subscribed."""
        return self.subscription_repo.get(subscriber, plan_id)

    def plan_count(self) -> int:
        return self.plan_repo.count()

    def list_plans(self) -> list[Plan]:
        return self.plan_repo.list_all()

    def list_subscriptions(
        self, plan_id: int, active_only: bool = True
    ) -> list[Subscription]:
        return self.subscription_repo.list_by_plan(plan_id, active_only=active_only)

    def list_subscriber_subscriptions(
        self, subscriber: str, active_only: bool = True
    ) -> list[Subscription]:
        return self.subscription_repo.list_by_subscriber(
            subscriber, active_only=active_only
        )

    def is_payment_due(self, subscriber: str, plan_id: int) -> bool:
        """Check whether `pay` would pass the due-date gate right now."""
        subscription = self.subscription_repo.get(subscriber, plan_id)
        if subscription is None:
            return False
        return subscription.is_payment_due(self.clock.now())

    def get_events(
        self,
        plan_id: Optional[int] = None,
        event_type: Optional[BillingEventType] = None,
    ) -> list[BillingEvent]:
        return self.event_repo.list_events(plan_id=plan_id, event_type=event_type)

    # Internals

    def _get_plan_or_raise(self, plan_id: int, operation: str) -> Plan:
        plan = self.plan_repo.get(plan_id)
        if plan is None:
            self._reject(operation, "unknown plan", plan_id=plan_id)
            raise PlanNotFoundError(plan_id)
        return plan

    def _get_active_or_raise(
        self, subscriber: str, plan_id: int, operation: str
    ) -> Subscription:
        subscription = self.subscription_repo.get(subscriber, plan_id)
        if subscription is None or not subscription.is_active():
            self._reject(
                operation,
                "no active subscription",
                plan_id=plan_id,
                subscriber=subscriber,
            )
            raise SubscriptionNotActiveError(subscriber, plan_id)
        return subscription

    def _charge(self, plan: Plan, payer: str) -> None:
        """Move one cycle's amount from `payer` to the plan's merchant."""
        try:
            self.ledger.transfer_from(
                token=plan.token,
                spender=self.engine_address,
                payer=payer,
                payee=plan.merchant,
                amount=plan.amount,
            )
        except TransferFailedError as e:
            logger.warning(
                f"Charge for plan {plan.id} failed: {e.reason}",
                extra={
                    "plan_id": plan.id,
                    "subscriber": payer,
                    "amount": plan.amount,
                    "error": str(e),
                },
            )
            raise

    @staticmethod
    def _reject(operation: str, reason: str, **context) -> None:
        logger.warning(f"Rejected {operation}: {reason}", extra=context)
