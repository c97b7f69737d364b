"""Customer outcome kinds and their user-facing messages.

The message texts are part of the public contract: existing API
consumers match on them verbatim (including the "allready" spelling),
so they are kept as literal templates keyed by ``CustomerErrorKind``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class CustomerErrorKind(StrEnum):
    """Machine-readable reason attached to a failed customer operation."""

    PAYLOAD_NULL = "PAYLOAD_NULL"
    NAME_EMPTY = "NAME_EMPTY"
    EMAIL_EMPTY = "EMAIL_EMPTY"
    NAME_INVALID = "NAME_INVALID"
    EMAIL_INVALID = "EMAIL_INVALID"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    NOT_FOUND = "NOT_FOUND"
    NOT_FOUND_BY_EMAIL = "NOT_FOUND_BY_EMAIL"
    NOT_FOUND_BY_ID = "NOT_FOUND_BY_ID"
    DELETION_ID_NULL = "DELETION_ID_NULL"


MESSAGES: dict[CustomerErrorKind, str] = {
    CustomerErrorKind.PAYLOAD_NULL: "O Payload está nulo.",
    CustomerErrorKind.NAME_EMPTY: "O nome está vazio",
    CustomerErrorKind.EMAIL_EMPTY: "O email está vazio",
    CustomerErrorKind.NAME_INVALID: "O nome está inválido",
    CustomerErrorKind.EMAIL_INVALID: "O email está inválido",
    CustomerErrorKind.ALREADY_EXISTS: "Customer allready exist with this email",
    CustomerErrorKind.NOT_FOUND: "Customer not found",
    CustomerErrorKind.NOT_FOUND_BY_EMAIL: "Customer with email {email} not exists",
    CustomerErrorKind.NOT_FOUND_BY_ID: "Customer with id {id} not exists",
    CustomerErrorKind.DELETION_ID_NULL: "Customer deletion id is null.",
}

VALIDATION_KINDS = frozenset(
    {
        CustomerErrorKind.PAYLOAD_NULL,
        CustomerErrorKind.NAME_EMPTY,
        CustomerErrorKind.EMAIL_EMPTY,
        CustomerErrorKind.NAME_INVALID,
        CustomerErrorKind.EMAIL_INVALID,
    }
)

NOT_FOUND_KINDS = frozenset(
    {
        CustomerErrorKind.NOT_FOUND,
        CustomerErrorKind.NOT_FOUND_BY_EMAIL,
        CustomerErrorKind.NOT_FOUND_BY_ID,
    }
)

CUSTOMER_DELETED = "Customer Deleted with success"


def message_for(kind: CustomerErrorKind, **params: Any) -> str:
    """Render the message template for ``kind``.

    ``None`` parameters are rendered as ``null``.
    """
    rendered = {key: "null" if value is None else value for key, value in params.items()}
    return MESSAGES[kind].format(**rendered)
