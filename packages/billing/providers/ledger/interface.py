"""
Interface for ledger providers.

Abstracts token balances and transfers away from a specific ledger
(in-memory simulation, ERC-20 contract, internal accounting, etc.)
"""

from abc import ABC, abstractmethod


class LedgerProviderInterface(ABC):
    """Abstract interface for token ledgers with allowance-gated transfers."""

    @abstractmethod
    def balance_of(self, token: str, account: str) -> int:
        """
        Get the balance an account holds in a token.

        Args:
            token: Token reference
            account: Account identity

        Returns:
            Balance in the token's smallest unit
        """
        pass

    @abstractmethod
    def allowance(self, token: str, owner: str, spender: str) -> int:
        """
        Get how much `spender` may still move out of `owner`'s account.

        Args:
            token: Token reference
            owner: Account that granted the allowance
            spender: Account allowed to spend

        Returns:
            Remaining allowance
        """
        pass

    @abstractmethod
    def approve(self, token: str, owner: str, spender: str, amount: int) -> None:
        """
        Authorize `spender` to transfer up to `amount` from `owner`.

        Replaces any previous allowance for the same pair.

        Args:
            token: Token reference
            owner: Account granting the allowance
            spender: Account allowed to spend
            amount: New allowance
        """
        pass

    @abstractmethod
    def transfer(self, token: str, sender: str, recipient: str, amount: int) -> None:
        """
        Move `amount` from `sender` to `recipient` on the sender's own authority.

        Raises:
            TransferFailedError: Insufficient balance, bad recipient or amount
        """
        pass

    @abstractmethod
    def transfer_from(
        self,
        token: str,
        spender: str,
        payer: str,
        payee: str,
        amount: int,
    ) -> None:
        """
        Move `amount` from `payer` to `payee` using `spender`'s allowance.

        Either the whole transfer happens (balances and allowance updated
        together) or nothing changes.

        Args:
            token: Token reference
            spender: Account consuming the allowance (the billing engine)
            payer: Account debited
            payee: Account credited
            amount: Amount to move

        Raises:
            TransferFailedError: Insufficient balance or allowance, unknown token
        """
        pass

    @abstractmethod
    def health_check(self) -> bool:
        """
        Check if the ledger backend is available and healthy.

        Returns:
            True if healthy, False otherwise
        """
        pass
