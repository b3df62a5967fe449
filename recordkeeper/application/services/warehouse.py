"""Warehouse Service: Electronics and groceries inventory.

Keeps one TypedRepository per product type and demonstrates:
- Seeding with duplicate detection
- Stock increases and removals that report failures and carry on
- The three recoverable error kinds
"""

import logging
from datetime import date, timedelta
from typing import Callable

from recordkeeper.domain.models import ElectronicItem, GroceryItem
from recordkeeper.infrastructure import (
    AppConfig,
    DEFAULT_CONFIG,
    TypedRepository,
    Ok,
    Err,
)
from recordkeeper.infrastructure.repositories import Outcome, Stocked

logger = logging.getLogger(__name__)


class WarehouseManager:
    """Manages the electronics and groceries repositories.

    Example:
        >>> warehouse = WarehouseManager()
        >>> warehouse.seed_data()
        >>> warehouse.increase_stock(warehouse.electronics, 1, 5)
    """

    def __init__(
        self,
        config: AppConfig = DEFAULT_CONFIG,
        echo: Callable[[str], None] = print,
        today: date | None = None,
    ):
        self._config = config
        self._echo = echo
        self._today = today or date.today()
        self._electronics: TypedRepository[ElectronicItem] = TypedRepository("electronics")
        self._groceries: TypedRepository[GroceryItem] = TypedRepository("groceries")

    @property
    def electronics(self) -> TypedRepository[ElectronicItem]:
        return self._electronics

    @property
    def groceries(self) -> TypedRepository[GroceryItem]:
        return self._groceries

    def seed_data(self) -> int:
        """Insert the initial electronics and groceries.

        Duplicate ids are reported and skipped.

        Returns:
            Number of items inserted
        """
        def expires(days: int) -> date:
            return self._today + timedelta(days=days)

        electronics = [
            ElectronicItem(1, "Laptop", 10, "Dell", 24),
            ElectronicItem(2, "Smartphone", 15, "Samsung", 12),
            ElectronicItem(3, "Tablet", 8, "Apple", 12),
        ]
        groceries = [
            GroceryItem(1, "Milk", 50, expires(self._config.milk_expiry_days)),
            GroceryItem(2, "Bread", 30, expires(self._config.bread_expiry_days)),
            GroceryItem(3, "Eggs", 100, expires(self._config.eggs_expiry_days)),
        ]

        inserted = 0
        for repo, items in ((self._electronics, electronics), (self._groceries, groceries)):
            for item in items:
                outcome = repo.try_add(item)
                if isinstance(outcome, Err):
                    logger.warning("Seeding %s: %s", repo.name, outcome.message)
                    self._echo(f"Error seeding {repo.name}: {outcome.message}")
                else:
                    inserted += 1
        return inserted

    def print_all_items(self, repo: TypedRepository) -> None:
        for item in repo.get_all():
            self._echo(str(item))

    def increase_stock(self, repo: TypedRepository[Stocked], key: int, quantity: int) -> Outcome:
        """Add ``quantity`` units to an item's stock."""
        outcome = repo.try_get_by_id(key)
        if isinstance(outcome, Ok):
            outcome = repo.try_update_quantity(key, outcome.value.quantity + quantity)

        if isinstance(outcome, Ok):
            self._echo(
                f"Successfully updated quantity for item {key}. "
                f"New quantity: {outcome.value.quantity}"
            )
        else:
            self._echo(f"Error increasing stock: {outcome.message}")
        return outcome

    def remove_item_by_id(self, repo: TypedRepository, key: int) -> Outcome:
        outcome = repo.try_remove(key)
        if isinstance(outcome, Ok):
            self._echo(f"Successfully removed item {key}")
        else:
            self._echo(f"Error removing item: {outcome.message}")
        return outcome

    def demonstrate_exceptions(self) -> list[Err]:
        """Trigger each recoverable failure once.

        Returns:
            The failures observed, in order
        """
        self._echo("\nDemonstrating Exception Handling:")
        attempts = [
            (
                "Trying to add duplicate electronic item...",
                lambda: self._electronics.try_add(
                    ElectronicItem(1, "Duplicate Laptop", 5, "Dell", 24)
                ),
            ),
            (
                "Trying to remove non-existent item...",
                lambda: self._electronics.try_remove(999),
            ),
            (
                "Trying to update with invalid quantity...",
                lambda: self._electronics.try_update_quantity(1, -5),
            ),
        ]

        failures = []
        for label, attempt in attempts:
            self._echo(f"\n{label}")
            outcome = attempt()
            if isinstance(outcome, Err):
                self._echo(f"Expected error: {outcome.message}")
                failures.append(outcome)
            else:
                self._echo("Unexpected success")
        return failures

    def run(self) -> None:
        """Run the full warehouse walkthrough."""
        self._echo("Warehouse Inventory Management System\n")
        self.seed_data()

        self._echo("\nGrocery Items:")
        self.print_all_items(self._groceries)
        self._echo("\nElectronic Items:")
        self.print_all_items(self._electronics)

        self.demonstrate_exceptions()

        self._echo("\nDemonstrating successful operations:")
        self.increase_stock(self._electronics, 1, 5)
        self.remove_item_by_id(self._groceries, 1)
