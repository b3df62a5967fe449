"""Finance domain: transactions, processors and accounts.

Processors only announce a transaction; accounts apply it to a balance.
Amounts are Decimal throughout to keep currency arithmetic exact.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Protocol


def format_amount(amount: Decimal, symbol: str = "$") -> str:
    """Format a currency amount, e.g. ``$1,234.50`` or ``-$20.00``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


@dataclass(frozen=True, slots=True)
class Transaction:
    """A single debit against an account."""
    id: int
    date: datetime
    amount: Decimal
    category: str

    def __post_init__(self):
        if self.id < 0:
            raise ValueError(f"id must be non-negative, got {self.id}")
        if self.amount < 0:
            raise ValueError(f"amount must be non-negative, got {self.amount}")

    def to_dict(self) -> dict:
        """Convert to dictionary for DataFrame creation."""
        return {
            "id": self.id,
            "date": self.date,
            "amount": float(self.amount),
            "category": self.category,
        }


# =============================================================================
# Processors
# =============================================================================

class TransactionProcessor(Protocol):
    """Channel a transaction is sent through."""

    def process(self, transaction: Transaction) -> str: ...


class _AnnouncingProcessor:
    channel = "transfer"

    def __init__(self, currency_symbol: str = "$"):
        self._symbol = currency_symbol

    def process(self, transaction: Transaction) -> str:
        """Describe the transaction being sent through this channel."""
        return (
            f"Processing {self.channel}: "
            f"Amount: {format_amount(transaction.amount, self._symbol)}, "
            f"Category: {transaction.category}"
        )


class BankTransferProcessor(_AnnouncingProcessor):
    channel = "bank transfer"


class MobileMoneyProcessor(_AnnouncingProcessor):
    channel = "mobile money transfer"


class CryptoWalletProcessor(_AnnouncingProcessor):
    channel = "crypto wallet transfer"


# =============================================================================
# Accounts
# =============================================================================

class Account:
    """Account that accepts any debit, allowing the balance to go negative."""

    def __init__(self, account_number: str, initial_balance: Decimal):
        self._account_number = account_number
        self._balance = Decimal(initial_balance)

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def balance(self) -> Decimal:
        return self._balance

    def apply_transaction(self, transaction: Transaction) -> bool:
        """Debit the transaction amount.

        Returns:
            True if the balance changed
        """
        self._balance -= transaction.amount
        return True


class SavingsAccount(Account):
    """Account that refuses debits larger than the current balance."""

    def apply_transaction(self, transaction: Transaction) -> bool:
        if transaction.amount > self._balance:
            return False
        return super().apply_transaction(transaction)
