"""Domain Layer: Core records and business rules.

This layer contains:
- models.py: Record types (inventory, healthcare, grading)
- finance.py: Transactions, processors and accounts
"""

from recordkeeper.domain.models import (
    ElectronicItem,
    GroceryItem,
    InventoryItem,
    Patient,
    Prescription,
    Student,
    letter_grade,
    DEFAULT_GRADE_BOUNDARIES,
)
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

__all__ = [
    # Models
    "ElectronicItem",
    "GroceryItem",
    "InventoryItem",
    "Patient",
    "Prescription",
    "Student",
    "letter_grade",
    "DEFAULT_GRADE_BOUNDARIES",
    # Finance
    "Transaction",
    "TransactionProcessor",
    "BankTransferProcessor",
    "MobileMoneyProcessor",
    "CryptoWalletProcessor",
    "Account",
    "SavingsAccount",
    "format_amount",
]
