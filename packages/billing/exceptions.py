"""
Billing error taxonomy.

Every error is raised before any state is written, so a rejected call leaves
plans, subscriptions and balances untouched.
"""

from typing import Optional

from common.core.exceptions import (
    AppException,
    NotFoundError,
    ValidationError,
    ProcessingError,
)


class InvalidAddressError(ValidationError):
    """A token, merchant or subscriber identity is null."""

    code = "invalid_address"

    def __init__(self, field: str = "address"):
        self.field = field
        super().__init__("invalid, address should not be the null address")


class InvalidAmountError(ValidationError):
    """Plan amount is not a positive integer."""

    code = "invalid_amount"

    def __init__(self, amount=None):
        self.amount = amount
        super().__init__("invalid amount")


class InvalidFrequencyError(ValidationError):
    """Plan frequency is not a positive integer."""

    code = "invalid_frequency"

    def __init__(self, frequency=None):
        self.frequency = frequency
        super().__init__("frequency needs to be greater than 0")


class PlanNotFoundError(NotFoundError):
    """Referenced plan id does not exist."""

    code = "plan_not_found"

    def __init__(self, plan_id: int):
        self.plan_id = plan_id
        super().__init__(f"this plan does not exist: {plan_id}")


class SubscriptionNotActiveError(AppException):
    """No active subscription exists for the (subscriber, plan) pair."""

    code = "subscription_not_active"

    def __init__(self, subscriber: str, plan_id: int):
        self.subscriber = subscriber
        self.plan_id = plan_id
        super().__init__(
            f"this subscription does not exist: {subscriber} on plan {plan_id}"
        )


NotSubscribedError = SubscriptionNotActiveError


class PaymentNotDueError(AppException):
    """`pay` was called before the next billing cycle started."""

    code = "payment_not_due"
    retryable = True

    def __init__(self, due_at: int, now: int):
        self.due_at = due_at
        self.now = now
        super().__init__(f"Payment not due yet (due at {due_at}, now {now})")


class TransferFailedError(ProcessingError):
    """The ledger rejected a transfer."""

    code = "transfer_failed"
    retryable = True

    def __init__(self, reason: str, token: Optional[str] = None):
        self.reason = reason
        self.token = token
        super().__init__(f"transfer failed: {reason}")


class TokenNotFoundError(NotFoundError):
    """The ledger does not know the token."""

    code = "token_not_found"

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"unknown token: {token}")
