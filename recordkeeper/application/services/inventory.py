"""Inventory Service: JSON-persisted inventory.

Seeds a TypedRepository, saves its snapshot with JsonInventoryStore,
simulates a new session by clearing memory, then reloads the file.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

from recordkeeper.domain.models import InventoryItem
from recordkeeper.infrastructure import (
    DataPaths,
    DEFAULT_PATHS,
    TypedRepository,
    JsonInventoryStore,
)

logger = logging.getLogger(__name__)

SAMPLE_ITEMS = (
    (1, "Laptop", 10),
    (2, "Mouse", 20),
    (3, "Keyboard", 15),
    (4, "Monitor", 8),
    (5, "Headphones", 25),
)


class InventoryApp:
    """Inventory kept in memory and persisted to a JSON file.

    Example:
        >>> app = InventoryApp(Path("data/inventory.json"))
        >>> app.seed_sample_data()
        >>> app.save_data()
        >>> app.clear_memory()
        >>> app.load_data()
    """

    def __init__(
        self,
        data_file: Path | None = None,
        paths: DataPaths = DEFAULT_PATHS,
        echo: Callable[[str], None] = print,
    ):
        self._store = JsonInventoryStore(data_file, paths)
        self._repo: TypedRepository[InventoryItem] = TypedRepository("inventory")
        self._echo = echo

    @property
    def repository(self) -> TypedRepository[InventoryItem]:
        return self._repo

    @property
    def store(self) -> JsonInventoryStore:
        return self._store

    def seed_sample_data(self, now: datetime | None = None) -> None:
        """Insert the sample items.

        Raises:
            DuplicateKeyError: If a sample id is already stored
        """
        now = now or datetime.now()
        for item_id, name, quantity in SAMPLE_ITEMS:
            self._repo.add(InventoryItem(item_id, name, quantity, now))
        self._echo("Sample data seeded successfully")

    def save_data(self) -> Path:
        """Write the current snapshot to the data file.

        Raises:
            RepositoryError: If the file cannot be written
        """
        path = self._store.save(self._repo.get_all())
        self._echo(f"Data successfully saved to {path}")
        return path

    def load_data(self) -> int:
        """Re-insert every item from the data file.

        Returns:
            Number of items loaded

        Raises:
            RepositoryError: If the file is unreadable or malformed
            DuplicateKeyError: If a loaded id is already in memory
        """
        if not self._store.exists():
            self._echo("No existing data file found. Starting with empty inventory.")
            return 0

        items = self._store.load()
        for item in items:
            self._repo.add(item)
        self._echo(f"Data successfully loaded from {self._store.path}")
        return len(items)

    def print_all_items(self) -> None:
        items = self._repo.get_all()
        if not items:
            self._echo("No items in inventory")
            return

        self._echo("\nCurrent Inventory Items:")
        self._echo("------------------------")
        for item in items:
            self._echo(str(item))
        self._echo(f"\nTotal Items: {len(items)}")

    def clear_memory(self) -> None:
        self._repo.clear()
        logger.debug("Cleared in-memory inventory")
        self._echo("Memory cleared - simulating new session")

    def run(self) -> None:
        """Seed, save, clear and reload the inventory."""
        self._echo("Inventory Management System\n")

        self._echo("Seeding and saving initial data...")
        self.seed_sample_data()
        self.save_data()
        self.print_all_items()

        self._echo("\nSimulating new session...")
        self.clear_memory()
        self.print_all_items()

        self._echo("\nLoading data from file...")
        self.load_data()
        self.print_all_items()
