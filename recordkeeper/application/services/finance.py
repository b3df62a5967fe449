"""Finance Service: Process transactions against a savings account.

Each transaction is announced by a processor, applied to the account,
then recorded in a TypedRepository. Totals per category come back as a
polars DataFrame.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Callable

import polars as pl

from recordkeeper.domain.finance import (
    Transaction,
    TransactionProcessor,
    BankTransferProcessor,
    MobileMoneyProcessor,
    CryptoWalletProcessor,
    Account,
    SavingsAccount,
    format_amount,
)
from recordkeeper.infrastructure import (
    AppConfig,
    DEFAULT_CONFIG,
    TypedRepository,
)

logger = logging.getLogger(__name__)


class FinanceApp:
    """Runs sample transactions through processors and a savings account.

    Example:
        >>> app = FinanceApp()
        >>> app.run()
        >>> app.summarize_by_category()
    """

    def __init__(
        self,
        config: AppConfig = DEFAULT_CONFIG,
        echo: Callable[[str], None] = print,
    ):
        self._config = config
        self._echo = echo
        self._transactions: TypedRepository[Transaction] = TypedRepository("transactions")
        self._account: Account = SavingsAccount(
            config.savings_account_number, config.savings_opening_balance
        )

    @property
    def account(self) -> Account:
        return self._account

    @property
    def transactions(self) -> TypedRepository[Transaction]:
        return self._transactions

    def _fmt(self, amount: Decimal) -> str:
        return format_amount(amount, self._config.currency_symbol)

    def process(self, transaction: Transaction, processor: TransactionProcessor) -> bool:
        """Announce, apply and record one transaction.

        A transaction whose id is already recorded is rejected before it
        touches the account.

        Returns:
            True if the account balance changed
        """
        if transaction.id in self._transactions:
            message = f"Transaction {transaction.id} already processed."
            logger.warning("%s", message)
            self._echo(message)
            return False

        self._echo(processor.process(transaction))
        applied = self._account.apply_transaction(transaction)
        if applied:
            self._echo(f"Transaction applied. New balance: {self._fmt(self._account.balance)}")
        else:
            self._echo("Insufficient funds")

        self._transactions.add(transaction)
        return applied

    def sample_transactions(self, now: datetime | None = None) -> list[Transaction]:
        now = now or datetime.now()
        return [
            Transaction(1, now, Decimal("200"), "Groceries"),
            Transaction(2, now, Decimal("150"), "Utilities"),
            Transaction(3, now, Decimal("300"), "Entertainment"),
        ]

    def summarize_by_category(self) -> pl.DataFrame:
        """Total amount and count per category, largest total first."""
        schema = {"id": pl.Int64, "date": pl.Datetime, "amount": pl.Float64, "category": pl.Utf8}
        df = pl.DataFrame(
            [t.to_dict() for t in self._transactions.get_all()], schema=schema
        )
        return (
            df.group_by("category")
            .agg(
                pl.col("amount").sum().alias("total"),
                pl.len().alias("count"),
            )
            .sort(["total", "category"], descending=[True, False])
        )

    def run(self) -> Decimal:
        """Process the sample transactions.

        Returns:
            Final account balance
        """
        self._echo("Finance Management System\n")
        transactions = self.sample_transactions()
        processors: list[TransactionProcessor] = [
            MobileMoneyProcessor(self._config.currency_symbol),
            BankTransferProcessor(self._config.currency_symbol),
            CryptoWalletProcessor(self._config.currency_symbol),
        ]

        self._echo("\nProcessing transactions...\n")
        for transaction, processor in zip(transactions, processors):
            self.process(transaction, processor)

        self._echo(f"\nFinal balance: {self._fmt(self._account.balance)}")
        self._echo(f"Total transactions processed: {len(self._transactions)}")
        return self._account.balance
