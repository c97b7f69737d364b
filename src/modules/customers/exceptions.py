"""Customer domain exceptions.

Expected outcomes (validation, not found, duplicate email) are reported
through ``ResponseEnvelope`` failures, not exceptions.  The only domain
exception is raised by the repository's non-optional look-up.
"""

from __future__ import annotations


class CustomerNotFound(Exception):
    """The requested customer does not exist."""
