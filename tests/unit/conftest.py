import pytest
from unittest.mock import MagicMock

from packages.billing.providers.clock.manual_clock import ManualClock
from packages.billing.providers.ledger.in_memory_ledger import InMemoryLedger
from packages.billing.providers.ledger.interface import LedgerProviderInterface
from packages.billing.services.billing_engine import BillingEngine
from tests.conftest import ADMIN, ENGINE_ADDRESS, START_TIME, TOKEN, SUBSCRIBER


@pytest.fixture
def clock():
    """Create a manual clock pinned to a fixed start time."""
    return ManualClock(start=START_TIME)


@pytest.fixture
def ledger():
    """
    Create an in-memory ledger with one token.

    The admin holds the supply, sends 1000 to the subscriber, and the
    subscriber approves the engine for all of it.
    """
    ledger = InMemoryLedger()
    ledger.create_token(TOKEN, owner=ADMIN, initial_supply=1_000_000)
    ledger.transfer(TOKEN, ADMIN, SUBSCRIBER, 1000)
    ledger.approve(TOKEN, owner=SUBSCRIBER, spender=ENGINE_ADDRESS, amount=1000)
    return ledger


@pytest.fixture
def engine(ledger, clock):
    """Create a BillingEngine wired to the in-memory ledger and manual clock."""
    return BillingEngine(ledger=ledger, clock=clock, engine_address=ENGINE_ADDRESS)


@pytest.fixture
def mock_ledger():
    """Create a mocked ledger that accepts every transfer."""
    ledger = MagicMock(spec=LedgerProviderInterface)
    ledger.transfer_from.return_value = None
    return ledger


@pytest.fixture
def mock_engine(mock_ledger, clock):
    """Create a BillingEngine backed by the mocked ledger."""
    return BillingEngine(ledger=mock_ledger, clock=clock, engine_address=ENGINE_ADDRESS)
