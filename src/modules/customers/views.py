"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet.
The service answers with envelopes; the view renders them and picks the
status code from the envelope's error kind.  The view never swallows
generic exceptions.
"""

from __future__ import annotations

from typing import Optional

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.envelope import ResponseEnvelope
from modules.customers.messages import NOT_FOUND_KINDS, CustomerErrorKind
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import CustomerEnvelopeSerializer, CustomerSerializer
from modules.customers.services import CustomerService


def _status_for(envelope: ResponseEnvelope, success_status: int = status.HTTP_200_OK) -> int:
    if envelope.success:
        return success_status
    if envelope.error == CustomerErrorKind.ALREADY_EXISTS:
        return status.HTTP_409_CONFLICT
    if envelope.error in NOT_FOUND_KINDS:
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_400_BAD_REQUEST


def _render(envelope: ResponseEnvelope, success_status: int = status.HTTP_200_OK) -> Response:
    data = CustomerEnvelopeSerializer(envelope).data
    return Response(data, status=_status_for(envelope, success_status))


class CustomerViewSet(ViewSet):
    """ViewSet for Customer CRUD operations.

    Uses ``CustomerService`` with ``CustomerDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    The ``pk`` URL segment only matches digits.
    """

    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=CustomerDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/customers/"""
        customers = self._service.list_customers()
        return Response(CustomerSerializer(customers, many=True).data)

    def retrieve(self, request: Request, pk: Optional[str] = None) -> Response:
        """GET /api/v1/customers/{pk}/"""
        envelope = self._service.get_customer(int(pk) if pk is not None else None)
        return _render(envelope)

    @action(detail=False, methods=["get", "put"], url_path="by-email")
    def by_email(self, request: Request) -> Response:
        """GET/PUT /api/v1/customers/by-email/?email=..."""
        email = request.query_params.get("email")
        if request.method == "PUT":
            candidate = CustomerSerializer.to_candidate(request.data)
            return _render(self._service.update_customer(candidate, email))
        return _render(self._service.get_customer_by_email(email or ""))

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/customers/"""
        candidate = CustomerSerializer.to_candidate(request.data)
        envelope = self._service.create_customer(candidate)
        return _render(envelope, success_status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: Optional[str] = None) -> Response:
        """PUT /api/v1/customers/{pk}/"""
        candidate = CustomerSerializer.to_candidate(request.data)
        envelope = self._service.update_customer_by_id(
            candidate, int(pk) if pk is not None else None
        )
        return _render(envelope)

    def destroy(self, request: Request, pk: Optional[str] = None) -> Response:
        """DELETE /api/v1/customers/{pk}/"""
        envelope = self._service.delete_customer(int(pk) if pk is not None else None)
        return _render(envelope)
