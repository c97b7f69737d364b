"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
ORM instances never leave this module: every read is projected onto an
immutable ``StoredCustomer`` and every write receives one.
Error handling follows the Null Object pattern: optional look-ups
return ``None`` and the Service Layer decides how to report a missing
customer.  Database errors propagate.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import transaction

from modules.customers.dtos import StoredCustomer
from modules.customers.exceptions import CustomerNotFound
from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


def _to_record(customer: Customer) -> StoredCustomer:
    return StoredCustomer(id=customer.id, name=customer.name, email=customer.email)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def find_all(self) -> List[StoredCustomer]:
        """Return every customer in insertion order."""
        return [_to_record(customer) for customer in Customer.objects.all()]

    def find_by_id(self, id: int) -> Optional[StoredCustomer]:
        """Retrieve a customer by primary key, or ``None``."""
        customer = Customer.objects.filter(id=id).first()
        return _to_record(customer) if customer else None

    def find_customer_by_id(self, id: int) -> StoredCustomer:
        """Retrieve a customer by primary key.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        record = self.find_by_id(id)
        if record is None:
            raise CustomerNotFound(f"Customer {id} not found.")
        return record

    def find_customer_by_email(self, email: str) -> Optional[StoredCustomer]:
        """Retrieve a customer by email address, or ``None``."""
        customer = Customer.objects.filter(email=email).first()
        return _to_record(customer) if customer else None

    def exists_by_email(self, email: str) -> bool:
        return Customer.objects.filter(email=email).exists()

    @transaction.atomic
    def save(self, entity: StoredCustomer) -> StoredCustomer:
        """Persist (create or update) a customer.

        A record without ``id`` is inserted; otherwise the row with that
        ``id`` is overwritten.
        """
        is_new = entity.id is None
        if is_new:
            customer = Customer(name=entity.name, email=entity.email)
        else:
            customer = Customer.objects.select_for_update().get(id=entity.id)
            customer.name = entity.name
            customer.email = entity.email
        customer.save()
        logger.info("customer.saved", customer_id=customer.id, is_new=is_new)
        return _to_record(customer)

    @transaction.atomic
    def delete_by_id(self, id: int) -> None:
        """Hard-delete a customer by ID.  Unknown IDs are ignored."""
        deleted, _ = Customer.objects.filter(id=id).delete()
        logger.info("customer.removed", customer_id=id, deleted=bool(deleted))
