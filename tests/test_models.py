"""Unit tests for domain models."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from recordkeeper.domain.models import (
    ElectronicItem,
    GroceryItem,
    InventoryItem,
    Patient,
    Prescription,
    Student,
    letter_grade,
)
from recordkeeper.domain.finance import (
    Transaction,
    Account,
    SavingsAccount,
    BankTransferProcessor,
    MobileMoneyProcessor,
    CryptoWalletProcessor,
    format_amount,
)


class TestElectronicItem:
    """Tests for ElectronicItem dataclass."""

    def test_str(self):
        item = ElectronicItem(1, "Laptop", 10, "Dell", 24)
        assert str(item) == (
            "Electronic - ID: 1, Name: Laptop, Brand: Dell, "
            "Quantity: 10, Warranty: 24 months"
        )

    def test_negative_id(self):
        with pytest.raises(ValueError, match="id must be non-negative"):
            ElectronicItem(-1, "Laptop", 10, "Dell", 24)

    def test_negative_quantity(self):
        with pytest.raises(ValueError, match="quantity must be non-negative"):
            ElectronicItem(1, "Laptop", -1, "Dell", 24)

    def test_quantity_is_mutable(self):
        item = ElectronicItem(1, "Laptop", 10, "Dell", 24)
        item.quantity = 11
        assert item.quantity == 11


class TestGroceryItem:
    """Tests for GroceryItem dataclass."""

    def test_str(self):
        item = GroceryItem(2, "Bread", 30, date(2024, 1, 6))
        assert str(item) == "Grocery - ID: 2, Name: Bread, Quantity: 30, Expires: 2024-01-06"


class TestInventoryItem:
    """Tests for InventoryItem dataclass."""

    def test_frozen(self):
        """InventoryItem should be immutable."""
        item = InventoryItem(1, "Mouse", 20, datetime(2024, 1, 1))
        with pytest.raises(AttributeError):
            item.quantity = 5

    def test_to_dict(self):
        d = InventoryItem(1, "Mouse", 20, datetime(2024, 1, 1, 8, 0)).to_dict()
        assert d == {
            "id": 1,
            "name": "Mouse",
            "quantity": 20,
            "date_added": "2024-01-01T08:00:00",
        }

    def test_from_dict(self):
        item = InventoryItem.from_dict(
            {"id": 3, "name": "Keyboard", "quantity": 15, "date_added": "2024-02-03T10:00:00"}
        )
        assert item.id == 3
        assert item.date_added == datetime(2024, 2, 3, 10, 0)

    @pytest.mark.parametrize(
        "field,value",
        [("quantity", 2.9), ("quantity", True), ("quantity", "15"), ("id", "3"), ("id", 1.0)],
    )
    def test_from_dict_rejects_non_integers(self, field, value):
        """Counts must be JSON integers, never truncated or coerced."""
        data = {"id": 3, "name": "Keyboard", "quantity": 15, "date_added": "2024-02-03T10:00:00"}
        data[field] = value
        with pytest.raises(ValueError, match=f"{field} must be an integer"):
            InventoryItem.from_dict(data)

    def test_from_dict_missing_field(self):
        with pytest.raises(KeyError):
            InventoryItem.from_dict({"id": 1, "name": "Keyboard"})

    def test_str(self):
        item = InventoryItem(4, "Monitor", 8, datetime(2024, 2, 3, 10, 0))
        assert str(item) == "ID: 4, Name: Monitor, Quantity: 8, Added: 2024-02-03"


class TestHealthRecords:
    """Tests for Patient and Prescription."""

    def test_patient_str(self):
        patient = Patient(1, "John Doe", 35, "Male")
        assert str(patient) == "Patient ID: 1, Name: John Doe, Age: 35, Gender: Male"

    def test_patient_negative_age(self):
        with pytest.raises(ValueError, match="age"):
            Patient(1, "John Doe", -1, "Male")

    def test_prescription_str(self):
        prescription = Prescription(2, 1, "Ibuprofen", date(2024, 1, 2))
        assert str(prescription) == "Prescription ID: 2, Medication: Ibuprofen, Date: 2024-01-02"


class TestGrading:
    """Tests for letter grades and Student."""

    @pytest.mark.parametrize(
        "score,grade",
        [
            (100, "A"), (80, "A"),
            (79, "B"), (70, "B"),
            (69, "C"), (60, "C"),
            (59, "D"), (50, "D"),
            (49, "F"), (0, "F"),
            (101, "F"),
        ],
    )
    def test_letter_grade(self, score, grade):
        assert letter_grade(score) == grade

    def test_custom_boundaries(self):
        assert letter_grade(55, ((50, "P"),)) == "P"
        assert letter_grade(45, ((50, "P"),)) == "F"

    def test_student_str(self):
        student = Student(101, "John Smith", 85)
        assert str(student) == "John Smith (ID: 101): Score = 85, Grade = A"

    def test_student_to_dict(self):
        assert Student(104, "Carol Brown", 65).to_dict()["grade"] == "C"

    def test_student_empty_name(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            Student(1, "", 50)


class TestFinance:
    """Tests for transactions, processors and accounts."""

    @pytest.fixture
    def groceries(self):
        return Transaction(1, datetime(2024, 1, 1), Decimal("200"), "Groceries")

    def test_format_amount(self):
        assert format_amount(Decimal("1234.5")) == "$1,234.50"
        assert format_amount(Decimal("-20")) == "-$20.00"
        assert format_amount(Decimal("5"), "€") == "€5.00"

    def test_negative_amount_rejected(self):
        with pytest.raises(ValueError, match="amount"):
            Transaction(1, datetime(2024, 1, 1), Decimal("-1"), "Refund")

    def test_processors_describe_channel(self, groceries):
        assert BankTransferProcessor().process(groceries) == (
            "Processing bank transfer: Amount: $200.00, Category: Groceries"
        )
        assert "mobile money transfer" in MobileMoneyProcessor().process(groceries)
        assert "crypto wallet transfer" in CryptoWalletProcessor().process(groceries)

    def test_account_allows_overdraft(self):
        account = Account("CHK001", Decimal("100"))
        big = Transaction(1, datetime(2024, 1, 1), Decimal("150"), "Rent")
        assert account.apply_transaction(big) is True
        assert account.balance == Decimal("-50")

    def test_savings_debits(self, groceries):
        account = SavingsAccount("SAV001", Decimal("1000"))
        assert account.apply_transaction(groceries) is True
        assert account.balance == Decimal("800")

    def test_savings_insufficient_funds(self):
        account = SavingsAccount("SAV001", Decimal("100"))
        big = Transaction(1, datetime(2024, 1, 1), Decimal("150"), "Rent")
        assert account.apply_transaction(big) is False
        assert account.balance == Decimal("100")

    def test_savings_exact_balance(self):
        account = SavingsAccount("SAV001", Decimal("150"))
        exact = Transaction(1, datetime(2024, 1, 1), Decimal("150"), "Rent")
        assert account.apply_transaction(exact) is True
        assert account.balance == Decimal("0")
