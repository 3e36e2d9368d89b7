"""Accounts and payment processors for transaction records."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Protocol

from pyrecords.exceptions import InsufficientFundsError
from pyrecords.models.finance import Transaction

_logger = logging.getLogger(__name__)


class TransactionProcessor(Protocol):
    def process(self, transaction: Transaction) -> str: ...


class BankTransferProcessor:
    def process(self, transaction: Transaction) -> str:
        message = f"[BankTransfer] Processed {transaction.amount:,.2f} for '{transaction.category}'."
        _logger.info("%s", message)
        return message


class MobileMoneyProcessor:
    def process(self, transaction: Transaction) -> str:
        message = f"[MobileMoney] Payment of {transaction.amount:,.2f} tagged '{transaction.category}' completed."
        _logger.info("%s", message)
        return message


class CryptoWalletProcessor:
    def process(self, transaction: Transaction) -> str:
        message = (
            f"[CryptoWallet] On-chain payment {transaction.amount:,.2f} "
            f"categorized as '{transaction.category}' broadcast."
        )
        _logger.info("%s", message)
        return message


class Account:
    """Account that deducts every applied transaction from its balance."""

    def __init__(self, account_number: str, initial_balance: Decimal | int | str = 0) -> None:
        if not account_number or not account_number.strip():
            raise ValueError("Account number is required.")
        self._account_number = account_number
        self._balance = Decimal(initial_balance)

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def balance(self) -> Decimal:
        return self._balance

    def apply_transaction(self, transaction: Transaction) -> Decimal:
        """Deduct *transaction* and return the new balance."""
        self._balance -= transaction.amount
        return self._balance


class SavingsAccount(Account):
    """Account that refuses to go below zero."""

    def apply_transaction(self, transaction: Transaction) -> Decimal:
        """Deduct *transaction* and return the new balance.

        Raises :class:`InsufficientFundsError` and keeps the balance when
        the amount exceeds it.
        """
        amount = transaction.amount
        if amount > self._balance:
            raise InsufficientFundsError(
                f"Insufficient funds: balance {self._balance:,.2f}, requested {amount:,.2f}",
                balance=self._balance,
                amount=amount,
            )
        self._balance -= amount
        _logger.debug("Account %s new balance: %s", self._account_number, self._balance)
        return self._balance
