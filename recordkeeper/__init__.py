"""recordkeeper: Typed in-memory repositories for small record domains.

Console programs built around one identity-keyed repository, covering
warehouse stock, JSON-persisted inventory, patient records, student
grading and account transactions.

Architecture:
- domain/: Records and business rules
- infrastructure/: Repositories, persistence and configuration
- application/: One service per console program
- interfaces/: CLI
"""

__version__ = "0.1.0"

from recordkeeper.domain import (
    ElectronicItem,
    GroceryItem,
    InventoryItem,
    Patient,
    Prescription,
    Student,
    Transaction,
)
from recordkeeper.infrastructure import (
    DataPaths,
    AppConfig,
    DEFAULT_PATHS,
    TypedRepository,
    RepositoryError,
    DuplicateKeyError,
    NotFoundError,
    InvalidValueError,
    ErrorKind,
    Ok,
    Err,
)

__all__ = [
    # Version
    "__version__",
    # Domain models
    "ElectronicItem",
    "GroceryItem",
    "InventoryItem",
    "Patient",
    "Prescription",
    "Student",
    "Transaction",
    # Infrastructure
    "DataPaths",
    "AppConfig",
    "DEFAULT_PATHS",
    "TypedRepository",
    "RepositoryError",
    "DuplicateKeyError",
    "NotFoundError",
    "InvalidValueError",
    "ErrorKind",
    "Ok",
    "Err",
]
