"""Data repositories for recordkeeper.

Provides abstracted data access through the Repository pattern:
- TypedRepository: Identity-keyed in-memory store
- JsonInventoryStore: Inventory snapshots as JSON files
- StudentFileRepository: Student result text files and reports
"""

from recordkeeper.infrastructure.repositories.base import (
    Repository,
    RepositoryError,
    DuplicateKeyError,
    NotFoundError,
    InvalidValueError,
    ErrorKind,
    Ok,
    Err,
    Outcome,
)
from recordkeeper.infrastructure.repositories.typed_repo import (
    TypedRepository,
    Identified,
    Stocked,
)
from recordkeeper.infrastructure.repositories.json_store import JsonInventoryStore
from recordkeeper.infrastructure.repositories.student_file import (
    StudentFileRepository,
    StudentFileError,
    MissingFieldError,
    InvalidScoreFormatError,
    parse_student_line,
)

__all__ = [
    "Repository",
    "RepositoryError",
    "DuplicateKeyError",
    "NotFoundError",
    "InvalidValueError",
    "ErrorKind",
    "Ok",
    "Err",
    "Outcome",
    "TypedRepository",
    "Identified",
    "Stocked",
    "JsonInventoryStore",
    "StudentFileRepository",
    "StudentFileError",
    "MissingFieldError",
    "InvalidScoreFormatError",
    "parse_student_line",
]
