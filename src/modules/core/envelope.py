"""Uniform response envelope for service-layer operations.

A ``ResponseEnvelope`` wraps an optional result entity and a list of
human-readable messages.  Services return envelopes instead of raising
for expected outcomes (validation, not-found, conflict), so callers
inspect ``success`` / ``messages`` rather than catching exceptions.

Construction paths:

- ``create_success(entity)``: entity set, no messages.
- ``create_failure(*messages, error=...)``: no entity, one or more messages and
  an optional machine-readable error kind.
- ``create_acknowledged(*messages)``: no entity, informational messages, still
  successful.  This is the only state where ``success`` is true while
  ``messages`` is non-empty (used by delete).
"""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

T = TypeVar("T")


class ResponseEnvelope(BaseModel, Generic[T]):
    """Immutable outcome of a service operation."""

    model_config = ConfigDict(frozen=True)

    entity: Optional[T] = None
    messages: List[str] = Field(default_factory=list)
    success: bool = False
    error: Optional[str] = None

    @model_validator(mode="after")
    def check_consistency(self) -> ResponseEnvelope[T]:
        """Reject states no constructor produces."""
        if self.entity is not None and self.messages:
            raise ValueError("An envelope cannot carry both an entity and messages.")
        if not self.success and not self.messages:
            raise ValueError("A failed envelope needs at least one message.")
        return self

    @classmethod
    def create_success(cls, entity: T) -> ResponseEnvelope[T]:
        """Successful outcome carrying ``entity`` and no messages."""
        return cls(entity=entity, messages=[], success=True)

    @classmethod
    def create_failure(cls, *messages: str, error: Optional[str] = None) -> ResponseEnvelope[T]:
        """Failed outcome carrying ``messages`` and no entity.

        Raises:
            ValueError: if no message is given.
        """
        if not messages:
            raise ValueError("A failure envelope needs at least one message.")
        return cls(entity=None, messages=list(messages), success=False, error=error)

    @classmethod
    def create_acknowledged(cls, *messages: str) -> ResponseEnvelope[T]:
        """Successful outcome without an entity, reported through ``messages``."""
        return cls(entity=None, messages=list(messages), success=True)
