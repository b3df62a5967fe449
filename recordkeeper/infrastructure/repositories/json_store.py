"""JSON Inventory Store: File persistence for inventory snapshots.

Converts between a sequence of InventoryItem and an indented JSON array.
The store never touches a TypedRepository; callers re-insert loaded items
one by one so the repository's uniqueness check still applies.
"""

import json
import logging
from pathlib import Path
from typing import Iterable

from recordkeeper.domain.models import InventoryItem
from recordkeeper.infrastructure.repositories.base import RepositoryError
from recordkeeper.infrastructure.config import DataPaths, DEFAULT_PATHS

logger = logging.getLogger(__name__)


class JsonInventoryStore:
    """Reads and writes inventory snapshots as JSON.

    Example:
        >>> store = JsonInventoryStore(Path("data/inventory.json"))
        >>> store.save(repo.get_all())
        >>> items = store.load()
    """

    def __init__(self, path: Path | None = None, paths: DataPaths = DEFAULT_PATHS):
        self._path = Path(path) if path is not None else paths.inventory_file

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def save(self, items: Iterable[InventoryItem]) -> Path:
        """Write items to the JSON file, creating its directory if needed.

        Returns:
            Path written

        Raises:
            RepositoryError: If the file cannot be written
        """
        records = [item.to_dict() for item in items]
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(
                json.dumps(records, ensure_ascii=False, indent=2),
                encoding="utf-8",
            )
        except OSError as e:
            raise RepositoryError(f"Failed to save inventory: {e}", str(self._path)) from e

        logger.info("Saved %d inventory items to %s", len(records), self._path)
        return self._path

    def load(self) -> list[InventoryItem]:
        """Read items from the JSON file.

        Returns:
            Items in file order, or an empty list if the file does not exist

        Raises:
            RepositoryError: If the file is unreadable or malformed
        """
        if not self._path.exists():
            logger.info("No inventory file at %s, starting empty", self._path)
            return []

        try:
            with open(self._path, encoding="utf-8") as f:
                records = json.load(f)
        except json.JSONDecodeError as e:
            raise RepositoryError(f"Error parsing JSON data: {e}", str(self._path)) from e
        except UnicodeDecodeError as e:
            raise RepositoryError(f"Inventory file is not valid UTF-8: {e}", str(self._path)) from e
        except OSError as e:
            raise RepositoryError(f"Failed to read inventory: {e}", str(self._path)) from e

        if records is None:
            return []
        if not isinstance(records, list):
            raise RepositoryError("Inventory file must hold a JSON array", str(self._path))

        try:
            items = [InventoryItem.from_dict(record) for record in records]
        except (KeyError, TypeError, ValueError) as e:
            raise RepositoryError(f"Invalid inventory record: {e}", str(self._path)) from e

        logger.info("Loaded %d inventory items from %s", len(items), self._path)
        return items
