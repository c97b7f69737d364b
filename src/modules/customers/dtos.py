"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer, the Service layer and
the repository.  DTOs are immutable (``frozen=True``).

- ``CustomerDTO``: the customer shape crossing the service boundary
  (request candidates and response entities).  Fields are optional
  because candidates arrive unvalidated; ``validators.py`` decides
  whether they may proceed.  Surrounding whitespace is trimmed on
  construction.
- ``StoredCustomer``: snapshot of a persisted customer returned by the
  repository.  Updates produce a new snapshot instead of mutating it.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


# ---------------------------------------------------------------------------
# Boundary DTO
# ---------------------------------------------------------------------------


class CustomerDTO(BaseModel):
    """Immutable customer payload (name + email, no identity)."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    email: Optional[str] = None

    @field_validator("name", "email")
    @classmethod
    def strip_whitespace(cls, v: Optional[str]) -> Optional[str]:
        """Trim surrounding whitespace so validated and stored values match."""
        return v.strip() if v is not None else v

    @classmethod
    def from_record(cls, record: StoredCustomer) -> CustomerDTO:
        """Project a stored customer onto the boundary shape."""
        return cls(name=record.name, email=record.email)


# ---------------------------------------------------------------------------
# Persistence snapshot
# ---------------------------------------------------------------------------


class StoredCustomer(BaseModel):
    """Immutable snapshot of a persisted customer.

    ``id`` is ``None`` until the repository has saved the record.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    name: str
    email: str

    @classmethod
    def from_candidate(cls, candidate: CustomerDTO) -> StoredCustomer:
        """Build a new, unsaved record from a validated candidate."""
        return cls(name=candidate.name, email=candidate.email)

    def updated_with(self, candidate: CustomerDTO) -> StoredCustomer:
        """Return a copy carrying the candidate's name and email."""
        return self.model_copy(update={"name": candidate.name, "email": candidate.email})
