"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the record type handed across the
    repository boundary (e.g. ``StoredCustomer``).  Implementations must
    not leak ORM instances through this interface.
    """

    @abstractmethod
    def find_all(self) -> List[T]:
        """Return every record in insertion order."""

    @abstractmethod
    def find_by_id(self, id: int) -> Optional[T]:
        """Retrieve a record by its primary key, or ``None``."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) a record and return the stored value."""

    @abstractmethod
    def delete_by_id(self, id: int) -> None:
        """Remove a record by ID.  Unknown IDs are ignored."""
