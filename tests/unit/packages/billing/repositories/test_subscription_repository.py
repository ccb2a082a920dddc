import pytest

from packages.billing.models.domain.enums import SubscriptionStatus
from packages.billing.models.domain.subscription import (
    SubscriptionCreateModel,
    SubscriptionUpdateModel,
)
from packages.billing.repositories.subscription_repository import (
    SubscriptionRepository,
)


def subscription_data(subscriber="alice", plan_id=0, start=1000):
    return SubscriptionCreateModel(
        subscriber=subscriber, plan_id=plan_id, start=start, next_payment=start + 100
    )


class TestSubscriptionRepository:
    """Unit tests for SubscriptionRepository."""

    @pytest.fixture
    def repo(self):
        return SubscriptionRepository()

    def test_upsert_creates_active_record(self, repo):
        subscription = repo.upsert(subscription_data())

        assert subscription.status == SubscriptionStatus.ACTIVE
        assert subscription.last_payment_at == 1000
        assert subscription.payments_made == 1
        assert repo.get("alice", 0) == subscription

    def test_get_is_keyed_by_subscriber_and_plan(self, repo):
        repo.upsert(subscription_data())

        assert repo.get("alice", 1) is None
        assert repo.get("bob", 0) is None

    def test_update_applies_only_set_fields(self, repo):
        repo.upsert(subscription_data())

        updated = repo.update("alice", 0, SubscriptionUpdateModel(next_payment=1200))

        assert updated.next_payment == 1200
        assert updated.start == 1000
        assert updated.status == SubscriptionStatus.ACTIVE
        assert repo.get("alice", 0) == updated

    def test_update_status(self, repo):
        repo.upsert(subscription_data())

        cancelled = repo.update(
            "alice",
            0,
            SubscriptionUpdateModel(status=SubscriptionStatus.CANCELLED, cancelled_at=1050),
        )

        assert cancelled.status == SubscriptionStatus.CANCELLED
        assert cancelled.cancelled_at == 1050
        assert not cancelled.is_active()

    def test_upsert_replaces_cancelled_record(self, repo):
        repo.upsert(subscription_data())
        repo.update(
            "alice", 0, SubscriptionUpdateModel(status=SubscriptionStatus.CANCELLED)
        )

        fresh = repo.upsert(subscription_data(start=5000))

        assert fresh.is_active()
        assert fresh.start == 5000
        assert repo.get("alice", 0) == fresh

    def test_list_by_plan(self, repo):
        repo.upsert(subscription_data("alice", start=2000))
        repo.upsert(subscription_data("bob", start=1000))
        repo.upsert(subscription_data("carol", plan_id=1))
        repo.update("bob", 0, SubscriptionUpdateModel(status=SubscriptionStatus.CANCELLED))

        assert [s.subscriber for s in repo.list_by_plan(0)] == ["alice"]
        assert [s.subscriber for s in repo.list_by_plan(0, active_only=False)] == [
            "bob",
            "alice",
        ]

    def test_list_by_subscriber(self, repo):
        repo.upsert(subscription_data("alice", plan_id=3))
        repo.upsert(subscription_data("alice", plan_id=0))
        repo.upsert(subscription_data("alice", plan_id=5))
        repo.upsert(subscription_data("bob", plan_id=0))
        repo.update(
            "alice",
            5,
            SubscriptionUpdateModel(status=SubscriptionStatus.CANCELLED, cancelled_at=1500),
        )

        assert [s.plan_id for s in repo.list_by_subscriber("alice")] == [0, 3]
        assert [
            s.plan_id for s in repo.list_by_subscriber("alice", active_only=False)
        ] == [0, 3, 5]
