"""Customer service layer (Use Cases).

Orchestrates validation, persistence and response envelopes for the
Customer aggregate, delegating persistence to the injected
``ICustomerRepository``.

Expected outcomes never raise: validation errors, missing customers and
duplicate emails come back as failure envelopes carrying one message and
a ``CustomerErrorKind``.  Repository/database errors propagate to the
caller untouched.

Business rules enforced here:
- Candidates pass ``validators.validate_customer`` before any write.
- Email must be unique on create and when an update changes it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

from modules.core.envelope import ResponseEnvelope
from modules.customers.dtos import CustomerDTO, StoredCustomer
from modules.customers.messages import CUSTOMER_DELETED, CustomerErrorKind, message_for
from modules.customers.validators import validate_customer

if TYPE_CHECKING:
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)

CustomerEnvelope = ResponseEnvelope[CustomerDTO]


def _failure(kind: CustomerErrorKind, **params) -> CustomerEnvelope:
    return CustomerEnvelope.create_failure(message_for(kind, **params), error=kind)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    Holds no state between calls.
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_customers(self) -> List[CustomerDTO]:
        """Return every customer, in repository order."""
        return [CustomerDTO.from_record(record) for record in self._repo.find_all()]

    def get_customer(self, id: Optional[int]) -> CustomerEnvelope:
        """Look a customer up by its numeric ID."""
        record = self._repo.find_by_id(id) if id is not None else None
        if record is None:
            logger.info("customer.not_found", customer_id=id)
            return _failure(CustomerErrorKind.NOT_FOUND)
        return CustomerEnvelope.create_success(CustomerDTO.from_record(record))

    def get_customer_by_email(self, email: str) -> CustomerEnvelope:
        """Look a customer up by email.  The email is not validated."""
        record = self._repo.find_customer_by_email(email)
        if record is None:
            logger.info("customer.not_found", email=email)
            return _failure(CustomerErrorKind.NOT_FOUND)
        return CustomerEnvelope.create_success(CustomerDTO.from_record(record))

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_customer(self, candidate: Optional[CustomerDTO]) -> CustomerEnvelope:
        """Create a customer after validation and the unique-email check.

        On success the envelope echoes ``candidate``.
        """
        violation = validate_customer(candidate)
        if violation is not None:
            logger.info("customer.validation_failed", operation="create", kind=violation)
            return _failure(violation)

        log = logger.bind(email=candidate.email)

        if self._repo.exists_by_email(candidate.email):
            log.warning("customer.duplicate_email")
            return _failure(CustomerErrorKind.ALREADY_EXISTS)

        saved = self._repo.save(StoredCustomer.from_candidate(candidate))
        log.info("customer.created", customer_id=saved.id)
        return CustomerEnvelope.create_success(candidate)

    @transaction.atomic
    def update_customer(
        self, candidate: Optional[CustomerDTO], identifier_email: Optional[str]
    ) -> CustomerEnvelope:
        """Overwrite the customer currently registered under ``identifier_email``."""
        violation = validate_customer(candidate)
        if violation is not None:
            logger.info("customer.validation_failed", operation="update", kind=violation)
            return _failure(violation)

        existing = (
            self._repo.find_customer_by_email(identifier_email)
            if identifier_email is not None
            else None
        )
        if existing is None:
            logger.info("customer.not_found", email=identifier_email)
            return _failure(CustomerErrorKind.NOT_FOUND_BY_EMAIL, email=identifier_email)

        return self._apply_update(existing, candidate)

    @transaction.atomic
    def update_customer_by_id(
        self, candidate: Optional[CustomerDTO], id: Optional[int]
    ) -> CustomerEnvelope:
        """Overwrite the customer with the given numeric ID."""
        violation = validate_customer(candidate)
        if violation is not None:
            logger.info("customer.validation_failed", operation="update", kind=violation)
            return _failure(violation)

        existing = self._repo.find_by_id(id) if id is not None else None
        if existing is None:
            logger.info("customer.not_found", customer_id=id)
            return _failure(CustomerErrorKind.NOT_FOUND_BY_ID, id=id)

        return self._apply_update(existing, candidate)

    def _apply_update(self, existing: StoredCustomer, candidate: CustomerDTO) -> CustomerEnvelope:
        if candidate.email != existing.email and self._repo.exists_by_email(candidate.email):
            logger.warning("customer.duplicate_email", customer_id=existing.id, email=candidate.email)
            return _failure(CustomerErrorKind.ALREADY_EXISTS)

        self._repo.save(existing.updated_with(candidate))
        logger.info("customer.updated", customer_id=existing.id)
        return CustomerEnvelope.create_success(candidate)

    def delete_customer(self, id: Optional[int]) -> CustomerEnvelope:
        """Delete a customer by ID.

        Success is reported through an informational message rather than
        an entity (see ``ResponseEnvelope.create_acknowledged``).
        """
        if id is None:
            logger.info("customer.validation_failed", operation="delete")
            return _failure(CustomerErrorKind.DELETION_ID_NULL)

        self._repo.delete_by_id(id)
        logger.info("customer.deleted", customer_id=id)
        return CustomerEnvelope.create_acknowledged(CUSTOMER_DELETED)
