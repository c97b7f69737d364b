"""Business-rule validation for customer candidates.

Rules are evaluated in a fixed precedence and stop at the first
violation, so a validation pass yields at most one message:

1. payload present
2. name not empty
3. email not empty
4. name at least ``MIN_NAME_LENGTH`` characters
5. email well-formed (``local@domain.tld``)

Uniqueness is not checked here; it needs the repository and lives in
the service layer.
"""

from __future__ import annotations

import re
from typing import List, Optional

from modules.customers.dtos import CustomerDTO
from modules.customers.messages import CustomerErrorKind, message_for

MIN_NAME_LENGTH = 3

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s.]+(\.[^@\s.]+)+$")


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def is_valid_email(email: str) -> bool:
    """Check for a local part, ``@`` and a dotted domain."""
    return EMAIL_PATTERN.match(email) is not None


def validate_customer(candidate: Optional[CustomerDTO]) -> Optional[CustomerErrorKind]:
    """Return the first rule ``candidate`` breaks, or ``None`` if it is valid."""
    if candidate is None:
        return CustomerErrorKind.PAYLOAD_NULL
    if _is_blank(candidate.name):
        return CustomerErrorKind.NAME_EMPTY
    if _is_blank(candidate.email):
        return CustomerErrorKind.EMAIL_EMPTY
    if len(candidate.name) < MIN_NAME_LENGTH:
        return CustomerErrorKind.NAME_INVALID
    if not is_valid_email(candidate.email):
        return CustomerErrorKind.EMAIL_INVALID
    return None


def customer_violations(candidate: Optional[CustomerDTO]) -> List[str]:
    """Messages for the violated rule; empty when ``candidate`` is valid."""
    kind = validate_customer(candidate)
    return [] if kind is None else [message_for(kind)]
