"""Typed Repository: Identity-keyed in-memory store.

Stores caller-supplied items under their integer ``id``:
- add / get_by_id / remove enforce uniqueness and existence
- update_quantity validates before mutating
- get_all returns a snapshot of copies, in insertion order
- try_* variants return Ok / Err outcomes instead of raising

Not thread-safe. Callers sharing a repository must serialize access.
"""

import copy
import dataclasses
from typing import Callable, Iterator, Protocol, TypeVar, runtime_checkable

from recordkeeper.infrastructure.repositories.base import (
    Repository,
    RepositoryError,
    DuplicateKeyError,
    NotFoundError,
    InvalidValueError,
    Ok,
    Err,
    Outcome,
)


@runtime_checkable
class Identified(Protocol):
    """Anything with a stable integer identity."""

    @property
    def id(self) -> int: ...


@runtime_checkable
class Stocked(Identified, Protocol):
    """Identified item carrying a mutable quantity."""

    quantity: int


ItemT = TypeVar("ItemT", bound=Identified)


class TypedRepository(Repository[ItemT]):
    """In-memory repository keyed by ``item.id``.

    Example:
        >>> repo = TypedRepository[ElectronicItem]("electronics")
        >>> repo.add(ElectronicItem(1, "Laptop", 10, "Dell", 24))
        >>> repo.get_by_id(1).name
        'Laptop'
        >>> repo.try_remove(999)
        Err(kind=<ErrorKind.NOT_FOUND: 'not_found'>, ...)
    """

    def __init__(self, name: str = "repository"):
        self._name = name
        self._items: dict[int, ItemT] = {}

    @property
    def name(self) -> str:
        return self._name

    # --- Core operations ---

    def add(self, item: ItemT) -> None:
        """Store an item under its id.

        Raises:
            DuplicateKeyError: If an item with the same id is stored
        """
        key = item.id
        if key in self._items:
            raise DuplicateKeyError(
                key, f"Item with ID {key} already exists in {self._name}."
            )
        self._items[key] = item

    def get_by_id(self, key: int) -> ItemT:
        """Return the stored item for ``key``.

        Raises:
            NotFoundError: If nothing is stored under ``key``
        """
        try:
            return self._items[key]
        except KeyError:
            raise NotFoundError(
                key, f"Item with ID {key} not found in {self._name}."
            ) from None

    def remove(self, key: int) -> None:
        """Delete the item stored under ``key``.

        Raises:
            NotFoundError: If nothing is stored under ``key``
        """
        if key not in self._items:
            raise NotFoundError(
                key, f"Item with ID {key} not found in {self._name}."
            )
        del self._items[key]

    def update_quantity(self, key: int, new_quantity: int) -> ItemT:
        """Replace the quantity of the stored item.

        The quantity is validated before the id is looked up, so a
        negative quantity for a missing id reports InvalidValueError.
        Frozen dataclass items are swapped for an updated copy.

        Args:
            key: Item id
            new_quantity: Replacement quantity, an int >= 0

        Returns:
            The stored item after the update

        Raises:
            InvalidValueError: If ``new_quantity`` is not an int or is negative
            NotFoundError: If nothing is stored under ``key``
        """
        if isinstance(new_quantity, bool) or not isinstance(new_quantity, int):
            raise InvalidValueError(
                new_quantity,
                f"Invalid quantity: {new_quantity!r}. Quantity must be an integer.",
                key=key,
            )
        if new_quantity < 0:
            raise InvalidValueError(
                new_quantity,
                f"Invalid quantity: {new_quantity}. Quantity must be non-negative.",
                key=key,
            )

        item = self.get_by_id(key)
        try:
            item.quantity = new_quantity
        except dataclasses.FrozenInstanceError:
            item = dataclasses.replace(item, quantity=new_quantity)
            self._items[key] = item
        return item

    def get_all(self) -> list[ItemT]:
        """Snapshot of stored items in insertion order.

        Items are shallow copies, so neither the list nor the items in it
        can be used to bypass add/update validation.
        """
        return [copy.copy(item) for item in self._items.values()]

    def find_by(self, predicate: Callable[[ItemT], bool]) -> ItemT | None:
        """Return the first stored item matching ``predicate``, or None."""
        for item in self._items.values():
            if predicate(item):
                return item
        return None

    def remove_by(self, predicate: Callable[[ItemT], bool]) -> bool:
        """Remove the first item matching ``predicate``.

        Returns:
            True if an item was removed
        """
        item = self.find_by(predicate)
        if item is None:
            return False
        del self._items[item.id]
        return True

    def clear(self) -> None:
        """Drop every stored item."""
        self._items.clear()

    # --- Outcome variants ---

    def try_add(self, item: ItemT) -> Outcome[None]:
        return self._attempt(self.add, item)

    def try_get_by_id(self, key: int) -> Outcome[ItemT]:
        return self._attempt(self.get_by_id, key)

    def try_remove(self, key: int) -> Outcome[None]:
        return self._attempt(self.remove, key)

    def try_update_quantity(self, key: int, new_quantity: int) -> Outcome[ItemT]:
        return self._attempt(self.update_quantity, key, new_quantity)

    @staticmethod
    def _attempt(operation: Callable, *args) -> Outcome:
        try:
            return Ok(operation(*args))
        except RepositoryError as e:
            if e.kind is None:
                raise
            return Err.from_error(e)

    # --- Container protocol ---

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[ItemT]:
        return iter(self.get_all())

    def __repr__(self) -> str:
        return f"TypedRepository(name={self._name!r}, size={len(self._items)})"
