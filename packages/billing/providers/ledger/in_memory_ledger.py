"""
In-memory token ledger.

ERC-20 style bookkeeping (balances plus owner -> spender allowances) for any
number of tokens, used for local runs, simulations and tests.
"""

import threading
from typing import Dict, Tuple

from common.core.telemetry import get_logger, trace_span
from packages.billing.addresses import is_null_address
from packages.billing.exceptions import TokenNotFoundError, TransferFailedError
from packages.billing.providers.ledger.interface import LedgerProviderInterface

logger = get_logger(__name__)


class InMemoryLedger(LedgerProviderInterface):
    """Thread-safe in-memory ledger. Each mutation happens under one lock."""

    def __init__(self):
        self._balances: Dict[str, Dict[str, int]] = {}
        self._allowances: Dict[Tuple[str, str, str], int] = {}
        self._lock = threading.RLock()

    def create_token(self, token: str, owner: str, initial_supply: int) -> None:
        """Register a token and credit its whole initial supply to `owner`."""
        if is_null_address(token) or is_null_address(owner):
            raise ValueError("token and owner must not be null")
        if initial_supply < 0:
            raise ValueError("initial supply must not be negative")

        with self._lock:
            if token in self._balances:
                raise ValueError(f"token already exists: {token}")
            self._balances[token] = {owner: initial_supply}

        logger.info(
            f"Created token {token} with supply {initial_supply}",
            extra={"token": token, "owner": owner, "amount": initial_supply},
        )

    def mint(self, token: str, account: str, amount: int) -> None:
        """Credit newly issued supply to `account`."""
        if amount <= 0:
            raise ValueError("mint amount must be positive")
        with self._lock:
            balances = self._get_token_balances(token)
            balances[account] = balances.get(account, 0) + amount

    @trace_span
    def balance_of(self, token: str, account: str) -> int:
        with self._lock:
            return self._get_token_balances(token).get(account, 0)

    @trace_span
    def allowance(self, token: str, owner: str, spender: str) -> int:
        with self._lock:
            self._get_token_balances(token)
            return self._allowances.get((token, owner, spender), 0)

    @trace_span
    def approve(self, token: str, owner: str, spender: str, amount: int) -> None:
        if is_null_address(spender):
            raise ValueError("spender must not be null")
        if amount < 0:
            raise ValueError("allowance must not be negative")

        with self._lock:
            self._get_token_balances(token)
            self._allowances[(token, owner, spender)] = amount

        logger.debug(
            f"Approved {spender} to spend {amount} of {token} for {owner}",
            extra={"token": token, "owner": owner, "spender": spender, "amount": amount},
        )

    @trace_span
    def transfer(self, token: str, sender: str, recipient: str, amount: int) -> None:
        with self._lock:
            balances = self._get_transfer_balances(token)
            self._validate_transfer(token, balances, sender, recipient, amount)
            self._move(balances, sender, recipient, amount)

    @trace_span
    def transfer_from(
        self,
        token: str,
        spender: str,
        payer: str,
        payee: str,
        amount: int,
    ) -> None:
        with self._lock:
            balances = self._get_transfer_balances(token)
            self._validate_transfer(token, balances, payer, payee, amount)

            key = (token, payer, spender)
            allowed = self._allowances.get(key, 0)
            if allowed < amount:
                raise TransferFailedError(
                    f"insufficient allowance ({allowed} < {amount})", token=token
                )

            self._allowances[key] = allowed - amount
            self._move(balances, payer, payee, amount)

        logger.debug(
            f"Transferred {amount} of {token} from {payer} to {payee}",
            extra={"token": token, "payer": payer, "payee": payee, "amount": amount},
        )

    def health_check(self) -> bool:
        """Always healthy since there's no external dependency."""
        return True

    def _get_token_balances(self, token: str) -> Dict[str, int]:
        try:
            return self._balances[token]
        except KeyError:
            raise TokenNotFoundError(token) from None

    def _get_transfer_balances(self, token: str) -> Dict[str, int]:
        try:
            return self._get_token_balances(token)
        except TokenNotFoundError:
            raise TransferFailedError("unknown token", token=token) from None

    @staticmethod
    def _validate_transfer(
        token: str, balances: Dict[str, int], payer: str, payee: str, amount: int
    ) -> None:
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise TransferFailedError(f"invalid amount {amount!r}", token=token)
        if is_null_address(payee):
            raise TransferFailedError("transfer to the null address", token=token)

        balance = balances.get(payer, 0)
        if balance < amount:
            raise TransferFailedError(
                f"insufficient balance ({balance} < {amount})", token=token
            )

    @staticmethod
    def _move(balances: Dict[str, int], payer: str, payee: str, amount: int) -> None:
        balances[payer] = balances.get(payer, 0) - amount
        balances[payee] = balances.get(payee, 0) + amount
