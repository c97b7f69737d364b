"""Customer DRF serializers for API input/output.

The serializers operate at the Interface layer (API Views).  They only
handle HTTP-level concerns (parsing the request body into a candidate
and rendering envelopes); every business rule lives in the Service
Layer, so the input serializer accepts blank and missing fields.
"""

from __future__ import annotations

from typing import Any, Optional

from rest_framework import serializers

from modules.customers.dtos import CustomerDTO


class CustomerSerializer(serializers.Serializer):
    """Loose read/write shape of a customer (name + email)."""

    name = serializers.CharField(required=False, allow_null=True, allow_blank=True, trim_whitespace=False)
    email = serializers.CharField(required=False, allow_null=True, allow_blank=True, trim_whitespace=False)

    @classmethod
    def to_candidate(cls, data: Any) -> Optional[CustomerDTO]:
        """Turn a request body into a candidate.

        Anything that is not a JSON object (``null``, a list, a string)
        yields ``None`` so the service reports a null payload.  An object
        without fields is a present payload with empty name and email.
        """
        if not isinstance(data, dict):
            return None
        serializer = cls(data=data)
        serializer.is_valid(raise_exception=True)
        return CustomerDTO(**serializer.validated_data)


class CustomerEnvelopeSerializer(serializers.Serializer):
    """Renders a ``ResponseEnvelope[CustomerDTO]``."""

    entity = CustomerSerializer(allow_null=True)
    messages = serializers.ListField(child=serializers.CharField())
    success = serializers.BooleanField()
    error = serializers.CharField(allow_null=True)
