"""Customer repository interface.

Extends ``IRepository[StoredCustomer]`` with the e-mail look-ups the
service layer needs for uniqueness checks and e-mail keyed operations.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.dtos import StoredCustomer


class ICustomerRepository(IRepository["StoredCustomer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def find_customer_by_id(self, id: int) -> StoredCustomer:
        """Retrieve a customer by ID.

        Raises:
            CustomerNotFound: if no customer has this ID.
        """

    @abstractmethod
    def find_customer_by_email(self, email: str) -> Optional[StoredCustomer]:
        """Retrieve a customer by email address, or ``None``."""

    @abstractmethod
    def exists_by_email(self, email: str) -> bool:
        """``True`` when a customer already uses ``email``."""
