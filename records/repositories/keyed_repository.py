"""Keyed repository - in-memory implementation."""

from typing import Dict, List

from records.exceptions import DuplicateKeyError, InvalidValueError, NotFoundError
from records.repositories.base import Repository, T


class KeyedRepository(Repository[T]):
    """
    Repository for id-keyed records.

    Current implementation: In-memory (dict)
    Items are returned by reference; ``get_all`` hands out a fresh list so
    callers can't corrupt the index. Ids can be reused after ``remove``.
    """

    def __init__(self):
        self._items: Dict[int, T] = {}

    def add(self, item: T) -> None:
        """Store item, rejecting duplicate ids."""
        if item.id in self._items:
            raise DuplicateKeyError(item.id)
        self._items[item.id] = item

    def get_by_id(self, id: int) -> T:
        """Get item by id."""
        try:
            return self._items[id]
        except KeyError:
            raise NotFoundError(id) from None

    def remove(self, id: int) -> None:
        """Delete item by id."""
        if id not in self._items:
            raise NotFoundError(id)
        del self._items[id]

    def get_all(self) -> List[T]:
        """List all items (insertion order)."""
        return list(self._items.values())

    def update_quantity(self, id: int, new_quantity: int) -> None:
        """Overwrite the stored item's quantity in place.

        The value is checked before the id, so a non-integer or negative
        quantity for an unknown id reports InvalidValueError.
        """
        if isinstance(new_quantity, bool) or not isinstance(new_quantity, int):
            raise InvalidValueError(f"Quantity must be an integer, got {new_quantity!r}.")
        if new_quantity < 0:
            raise InvalidValueError("Quantity cannot be negative.")
        item = self.get_by_id(id)
        item.quantity = new_quantity

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, id: object) -> bool:
        return id in self._items
