"""Infrastructure layer for recordkeeper.

Contains:
- config: Data paths and program configuration
- repositories: Data access abstractions
"""

from recordkeeper.infrastructure.config import (
    DataPaths,
    AppConfig,
    DEFAULT_PATHS,
    DEFAULT_CONFIG,
)
from recordkeeper.infrastructure.repositories import (
    Repository,
    RepositoryError,
    DuplicateKeyError,
    NotFoundError,
    InvalidValueError,
    ErrorKind,
    Ok,
    Err,
    TypedRepository,
    JsonInventoryStore,
    StudentFileRepository,
)

__all__ = [
    # Config
    "DataPaths",
    "AppConfig",
    "DEFAULT_PATHS",
    "DEFAULT_CONFIG",
    # Repositories
    "Repository",
    "RepositoryError",
    "DuplicateKeyError",
    "NotFoundError",
    "InvalidValueError",
    "ErrorKind",
    "Ok",
    "Err",
    "TypedRepository",
    "JsonInventoryStore",
    "StudentFileRepository",
]
