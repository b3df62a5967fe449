"""Base Repository: Abstract interface and error model for data access.

Repository Pattern provides:
- Abstraction over where records live (memory, JSON files, text files)
- Identity-keyed access with consistent error handling
- Explicit outcomes for callers that prefer not to catch exceptions
- Easy testing via dependency injection
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")
V = TypeVar("V")


class Repository(ABC, Generic[T]):
    """Abstract base class for repositories.

    All repositories should:
    1. Provide a get_all() method returning a snapshot
    2. Provide a clear() method dropping held records
    3. Raise RepositoryError on failures
    """

    @abstractmethod
    def get_all(self) -> list[T]:
        """Retrieve all records from the repository.

        Returns:
            A snapshot list; mutating it does not affect the repository

        Raises:
            RepositoryError: If records cannot be loaded
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Drop every held record."""
        pass


# =============================================================================
# Errors
# =============================================================================

class ErrorKind(Enum):
    """Kinds of recoverable repository failure."""

    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    INVALID_VALUE = "invalid_value"


class RepositoryError(Exception):
    """Exception raised when repository operations fail."""

    kind: ErrorKind | None = None

    def __init__(self, message: str, path: str | None = None):
        self.message = message
        self.path = path
        super().__init__(f"{message}" + (f" (path: {path})" if path else ""))


class DuplicateKeyError(RepositoryError):
    """An item with the same id is already stored."""

    kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, key: int, message: str | None = None):
        self.key = key
        super().__init__(message or f"Item with ID {key} already exists.")


class NotFoundError(RepositoryError):
    """No item is stored under the requested id."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, key: int, message: str | None = None):
        self.key = key
        super().__init__(message or f"Item with ID {key} not found.")


class InvalidValueError(RepositoryError):
    """A value violates a field constraint (e.g. negative quantity)."""

    kind = ErrorKind.INVALID_VALUE

    def __init__(self, value: object, message: str | None = None, key: int | None = None):
        self.value = value
        self.key = key
        super().__init__(message or f"Invalid value: {value}.")


# =============================================================================
# Outcomes
# =============================================================================

@dataclass(frozen=True, slots=True)
class Ok(Generic[V]):
    """Successful outcome carrying the operation's value."""
    value: V

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Err:
    """Failed outcome carrying the error kind and a readable message.

    Attributes:
        kind: Which of the recoverable failures occurred
        message: Human readable description
        error: The underlying exception, for callers that want to re-raise
    """
    kind: ErrorKind
    message: str
    error: RepositoryError

    @property
    def ok(self) -> bool:
        return False

    @classmethod
    def from_error(cls, error: RepositoryError) -> "Err":
        """Build an Err from a raised repository error."""
        if error.kind is None:
            raise ValueError(f"Error has no kind: {error!r}")
        return cls(kind=error.kind, message=error.message, error=error)


Outcome = Ok[V] | Err
