"""Generic repository base interface.

CrudRepository[T, ID] is the root abstraction for all data-access interfaces
in this package.  Concrete implementations live in
repokit/infrastructure/persistence/ and are wired at the application boundary
via dependency injection.

Design notes:
  - All methods are async to accommodate async database drivers (asyncpg /
    SQLAlchemy async).  Each call completes or raises before the awaiting
    caller proceeds.
  - T is the domain model type (never an ORM row or DTO); ID is its key and
    must be hashable.
  - Absence is not an error: find_by_key returns None, delete_by_key and
    delete are no-ops for missing keys.
  - A write either fully succeeds or leaves no trace observable by a later
    call, including when the awaiting task is cancelled.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class CrudRepository(ABC, Generic[T, ID]):
    """Minimal persistence contract for one entity/key type pair."""

    @abstractmethod
    async def save(self, entity: T) -> None:
        """Insert the entity, or fully replace the record with the same key."""

    @abstractmethod
    async def find_by_key(self, key: ID) -> T | None:
        """Return the entity stored under key, or None."""

    @abstractmethod
    def find_all(self) -> AsyncIterator[T]:
        """Yield every stored entity once, in no particular order.

        The iterator is single-pass.  Entities present when iteration starts
        are never skipped or yielded twice.
        """

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored entities."""

    @abstractmethod
    async def delete_by_key(self, key: ID) -> None:
        """Remove the record stored under key, if any."""

    @abstractmethod
    async def delete(self, entity: T) -> None:
        """Remove the record whose key matches the entity's key, if any."""
