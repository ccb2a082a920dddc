import pytest

from packages.billing.addresses import ZERO_ADDRESS
from packages.billing.exceptions import TokenNotFoundError, TransferFailedError
from packages.billing.providers.ledger.in_memory_ledger import InMemoryLedger

TOKEN = "TKN"
OWNER = "owner"
ALICE = "alice"
BOB = "bob"
SPENDER = "engine"


class TestInMemoryLedger:
    """Unit tests for InMemoryLedger."""

    @pytest.fixture
    def ledger(self):
        """Create a ledger with one token held by OWNER."""
        ledger = InMemoryLedger()
        ledger.create_token(TOKEN, owner=OWNER, initial_supply=1000)
        return ledger

    def test_create_token_credits_owner(self, ledger):
        assert ledger.balance_of(TOKEN, OWNER) == 1000
        assert ledger.balance_of(TOKEN, ALICE) == 0

    def test_create_duplicate_token_fails(self, ledger):
        with pytest.raises(ValueError):
            ledger.create_token(TOKEN, owner=ALICE, initial_supply=5)

    def test_mint(self, ledger):
        ledger.mint(TOKEN, ALICE, 50)
        assert ledger.balance_of(TOKEN, ALICE) == 50

    def test_transfer(self, ledger):
        ledger.transfer(TOKEN, OWNER, ALICE, 300)

        assert ledger.balance_of(TOKEN, OWNER) == 700
        assert ledger.balance_of(TOKEN, ALICE) == 300

    def test_transfer_insufficient_balance(self, ledger):
        with pytest.raises(TransferFailedError) as exc_info:
            ledger.transfer(TOKEN, ALICE, BOB, 1)

        assert "insufficient balance" in exc_info.value.reason
        assert exc_info.value.token == TOKEN

    def test_transfer_to_null_address_fails(self, ledger):
        with pytest.raises(TransferFailedError):
            ledger.transfer(TOKEN, OWNER, ZERO_ADDRESS, 1)
        assert ledger.balance_of(TOKEN, OWNER) == 1000

    @pytest.mark.parametrize("amount", [0, -5])
    def test_transfer_non_positive_amount_fails(self, ledger, amount):
        with pytest.raises(TransferFailedError):
            ledger.transfer(TOKEN, OWNER, ALICE, amount)

    def test_approve_sets_allowance(self, ledger):
        ledger.approve(TOKEN, owner=OWNER, spender=SPENDER, amount=400)
        assert ledger.allowance(TOKEN, OWNER, SPENDER) == 400

        # A new approval replaces the old one
        ledger.approve(TOKEN, owner=OWNER, spender=SPENDER, amount=10)
        assert ledger.allowance(TOKEN, OWNER, SPENDER) == 10

    def test_transfer_from_consumes_allowance(self, ledger):
        ledger.approve(TOKEN, owner=OWNER, spender=SPENDER, amount=400)

        ledger.transfer_from(TOKEN, SPENDER, OWNER, BOB, 150)

        assert ledger.balance_of(TOKEN, OWNER) == 850
        assert ledger.balance_of(TOKEN, BOB) == 150
        assert ledger.allowance(TOKEN, OWNER, SPENDER) == 250

    def test_transfer_from_without_allowance_changes_nothing(self, ledger):
        ledger.approve(TOKEN, owner=OWNER, spender=SPENDER, amount=100)

        with pytest.raises(TransferFailedError) as exc_info:
            ledger.transfer_from(TOKEN, SPENDER, OWNER, BOB, 101)

        assert "insufficient allowance" in exc_info.value.reason
        assert ledger.balance_of(TOKEN, OWNER) == 1000
        assert ledger.balance_of(TOKEN, BOB) == 0
        assert ledger.allowance(TOKEN, OWNER, SPENDER) == 100

    def test_transfer_from_other_spender_fails(self, ledger):
        """Test that an allowance only applies to the approved spender."""
        ledger.approve(TOKEN, owner=OWNER, spender=SPENDER, amount=100)

        with pytest.raises(TransferFailedError):
            ledger.transfer_from(TOKEN, BOB, OWNER, BOB, 50)

    def test_transfer_from_unknown_token_fails(self, ledger):
        with pytest.raises(TransferFailedError) as exc_info:
            ledger.transfer_from("MISSING", SPENDER, OWNER, BOB, 1)

        assert exc_info.value.reason == "unknown token"

    def test_reads_on_unknown_token_fail(self, ledger):
        with pytest.raises(TokenNotFoundError):
            ledger.balance_of("MISSING", OWNER)
        with pytest.raises(TokenNotFoundError):
            ledger.approve("MISSING", owner=OWNER, spender=SPENDER, amount=1)

    def test_tokens_are_isolated(self, ledger):
        ledger.create_token("OTHER", owner=ALICE, initial_supply=5)

        assert ledger.balance_of("OTHER", OWNER) == 0
        assert ledger.balance_of(TOKEN, ALICE) == 0

    def test_health_check(self, ledger):
        assert ledger.health_check() is True
