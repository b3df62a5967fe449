"""Domain models for the record-keeping programs.

Every record carries a caller-assigned non-negative integer ``id``.
Stock records also carry a mutable ``quantity``.
"""

from dataclasses import dataclass
from datetime import date, datetime


def _check_id(value: int) -> None:
    if value < 0:
        raise ValueError(f"id must be non-negative, got {value}")


def _check_quantity(value: int) -> None:
    if value < 0:
        raise ValueError(f"quantity must be non-negative, got {value}")


def _require_int(data: dict, field: str) -> int:
    value = data[field]
    # bool is an int subclass; JSON true/false is not a count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field} must be an integer, got {value!r}")
    return value


# =============================================================================
# Warehouse
# =============================================================================

@dataclass(slots=True)
class ElectronicItem:
    """Electronic product held in the warehouse."""
    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int

    def __post_init__(self):
        _check_id(self.id)
        _check_quantity(self.quantity)

    def __str__(self) -> str:
        return (
            f"Electronic - ID: {self.id}, Name: {self.name}, Brand: {self.brand}, "
            f"Quantity: {self.quantity}, Warranty: {self.warranty_months} months"
        )


@dataclass(slots=True)
class GroceryItem:
    """Perishable product held in the warehouse."""
    id: int
    name: str
    quantity: int
    expiry_date: date

    def __post_init__(self):
        _check_id(self.id)
        _check_quantity(self.quantity)

    def __str__(self) -> str:
        return (
            f"Grocery - ID: {self.id}, Name: {self.name}, "
            f"Quantity: {self.quantity}, Expires: {self.expiry_date:%Y-%m-%d}"
        )


# =============================================================================
# JSON Inventory
# =============================================================================

@dataclass(frozen=True, slots=True)
class InventoryItem:
    """Immutable inventory record persisted to JSON.

    Attributes:
        id: Item id
        name: Display name
        quantity: Units on hand
        date_added: When the record was created
    """
    id: int
    name: str
    quantity: int
    date_added: datetime

    def __post_init__(self):
        _check_id(self.id)
        _check_quantity(self.quantity)

    def to_dict(self) -> dict:
        """Convert to a JSON-compatible dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "date_added": self.date_added.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "InventoryItem":
        """Build from a dictionary produced by to_dict().

        Raises:
            KeyError: If a field is missing
            ValueError: If a field has the wrong format, including an id or
                quantity that is not a JSON integer
        """
        return cls(
            id=_require_int(data, "id"),
            name=str(data["name"]),
            quantity=_require_int(data, "quantity"),
            date_added=datetime.fromisoformat(data["date_added"]),
        )

    def __str__(self) -> str:
        return (
            f"ID: {self.id}, Name: {self.name}, "
            f"Quantity: {self.quantity}, Added: {self.date_added:%Y-%m-%d}"
        )


# =============================================================================
# Healthcare
# =============================================================================

@dataclass(slots=True)
class Patient:
    id: int
    name: str
    age: int
    gender: str

    def __post_init__(self):
        _check_id(self.id)
        if self.age < 0:
            raise ValueError(f"age must be non-negative, got {self.age}")

    def __str__(self) -> str:
        return (
            f"Patient ID: {self.id}, Name: {self.name}, "
            f"Age: {self.age}, Gender: {self.gender}"
        )


@dataclass(slots=True)
class Prescription:
    id: int
    patient_id: int
    medication_name: str
    date_issued: date

    def __post_init__(self):
        _check_id(self.id)

    def __str__(self) -> str:
        return (
            f"Prescription ID: {self.id}, Medication: {self.medication_name}, "
            f"Date: {self.date_issued:%Y-%m-%d}"
        )


# =============================================================================
# School Grading
# =============================================================================

DEFAULT_GRADE_BOUNDARIES: tuple[tuple[int, str], ...] = (
    (80, "A"),
    (70, "B"),
    (60, "C"),
    (50, "D"),
)


def letter_grade(
    score: int,
    boundaries: tuple[tuple[int, str], ...] = DEFAULT_GRADE_BOUNDARIES,
    max_score: int = 100,
) -> str:
    """Map a score to a letter grade.

    Args:
        score: Score to grade
        boundaries: (lower bound, letter) pairs, highest bound first
        max_score: Scores above this get "F"

    Returns:
        The first letter whose bound the score reaches, else "F"

    Example:
        >>> letter_grade(85)
        'A'
        >>> letter_grade(45)
        'F'
    """
    if score > max_score:
        return "F"
    for lower, letter in boundaries:
        if score >= lower:
            return letter
    return "F"


@dataclass(frozen=True, slots=True)
class Student:
    """A student's result for one assessment."""
    id: int
    full_name: str
    score: int

    def __post_init__(self):
        _check_id(self.id)
        if not self.full_name:
            raise ValueError("full_name cannot be empty")

    @property
    def grade(self) -> str:
        return letter_grade(self.score)

    def to_dict(self) -> dict:
        """Convert to dictionary for DataFrame creation."""
        return {
            "id": self.id,
            "full_name": self.full_name,
            "score": self.score,
            "grade": self.grade,
        }

    def __str__(self) -> str:
        return f"{self.full_name} (ID: {self.id}): Score = {self.score}, Grade = {self.grade}"
