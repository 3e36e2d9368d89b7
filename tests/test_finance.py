"""Tests for accounts and payment processors."""

from __future__ import annotations

from decimal import Decimal

import pytest

from pyrecords.exceptions import InsufficientFundsError
from pyrecords.finance import (
    Account,
    BankTransferProcessor,
    CryptoWalletProcessor,
    MobileMoneyProcessor,
    SavingsAccount,
)
from pyrecords.models import Transaction


def _txn(amount: str, txn_id: int = 1, category: str = "Groceries") -> Transaction:
    return Transaction(id=txn_id, amount=Decimal(amount), category=category)


def test_processor_messages() -> None:
    txn = _txn("150.00")

    assert BankTransferProcessor().process(txn) == "[BankTransfer] Processed 150.00 for 'Groceries'."
    assert MobileMoneyProcessor().process(txn) == "[MobileMoney] Payment of 150.00 tagged 'Groceries' completed."
    assert CryptoWalletProcessor().process(txn) == (
        "[CryptoWallet] On-chain payment 150.00 categorized as 'Groceries' broadcast."
    )


def test_account_requires_number() -> None:
    with pytest.raises(ValueError, match="Account number is required"):
        Account("  ", 10)


def test_plain_account_can_go_negative() -> None:
    account = Account("ACC-002", Decimal("100"))

    assert account.apply_transaction(_txn("150.00")) == Decimal("-50.00")


def test_savings_account_deducts() -> None:
    account = SavingsAccount("ACC-001", Decimal("1000"))

    for txn_id, amount in enumerate(("150.00", "300.00", "120.00"), start=1):
        account.apply_transaction(_txn(amount, txn_id))

    assert account.balance == Decimal("430.00")


def test_savings_account_insufficient_funds_keeps_balance() -> None:
    account = SavingsAccount("ACC-001", Decimal("100"))

    with pytest.raises(InsufficientFundsError) as exc_info:
        account.apply_transaction(_txn("100.01"))

    assert exc_info.value.balance == Decimal("100")
    assert exc_info.value.amount == Decimal("100.01")
    assert account.balance == Decimal("100")


def test_savings_account_allows_exact_balance() -> None:
    account = SavingsAccount("ACC-001", Decimal("100"))

    assert account.apply_transaction(_txn("100")) == Decimal("0")
