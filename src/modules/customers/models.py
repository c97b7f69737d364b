"""Customer model.

Business rules implemented:
- Email must be unique in the system (``unique=True``).
- Personal data (email) masked in ``__str__``.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Customer(BaseModel):
    """Customer aggregate root.

    Only ``name`` and ``email`` are modelled.  ``email`` is unique so the
    database rejects a duplicate that races past the service-level check.
    """

    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, unique=True)

    class Meta:
        db_table = "customers"
        ordering = ["id"]

    def __str__(self) -> str:
        domain = self.email.rpartition("@")[2] if self.email else "?"
        return f"{self.name} (***@{domain})"
