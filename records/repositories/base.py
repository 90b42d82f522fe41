"""Base repository interface."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, List, Protocol, runtime_checkable


@runtime_checkable
class Identified(Protocol):
    """Anything with an integer ``id`` can be stored in a repository."""

    @property
    def id(self) -> int: ...


T = TypeVar('T', bound=Identified)


class Repository(ABC, Generic[T]):
    """
    Base repository interface.

    Abstracts keyed record access. Lookups that miss raise
    ``NotFoundError`` instead of returning None, so callers never have to
    tell an absent record apart from a stored falsy one.
    """

    @abstractmethod
    def add(self, item: T) -> None:
        """Store a new item. Raises DuplicateKeyError if its id is taken."""
        pass

    @abstractmethod
    def get_by_id(self, id: int) -> T:
        """Get item by ID. Raises NotFoundError if absent."""
        pass

    @abstractmethod
    def remove(self, id: int) -> None:
        """Delete item by ID. Raises NotFoundError if absent."""
        pass

    @abstractmethod
    def get_all(self) -> List[T]:
        """List all items as a new list."""
        pass
