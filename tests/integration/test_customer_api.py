"""Integration tests for Customer API endpoints.

Covers:
- CRUD operations via /api/v1/customers/.
- Envelope rendering and error-kind to HTTP status mapping (400, 404, 409).
- Null-payload handling for bodies that are not JSON objects.
"""

from __future__ import annotations

import pytest

from modules.customers.models import Customer

pytestmark = pytest.mark.integration


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_customer():
    """A persisted Customer instance."""
    return Customer.objects.create(name="João Silva", email="joao@example.com")


# ===========================================================================
# LIST
# ===========================================================================


class TestCustomerList:
    def test_list_empty(self, api_client):
        response = api_client.get("/api/v1/customers/")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_returns_customers(self, api_client, sample_customer):
        Customer.objects.create(name="Maria Souza", email="maria@example.com")

        response = api_client.get("/api/v1/customers/")

        assert response.status_code == 200
        assert response.json() == [
            {"name": "João Silva", "email": "joao@example.com"},
            {"name": "Maria Souza", "email": "maria@example.com"},
        ]


# ===========================================================================
# RETRIEVE
# ===========================================================================


class TestCustomerRetrieve:
    def test_retrieve_success(self, api_client, sample_customer):
        response = api_client.get(f"/api/v1/customers/{sample_customer.id}/")

        assert response.status_code == 200
        assert response.json() == {
            "entity": {"name": "João Silva", "email": "joao@example.com"},
            "messages": [],
            "success": True,
            "error": None,
        }

    def test_retrieve_not_found(self, api_client):
        response = api_client.get("/api/v1/customers/999/")

        assert response.status_code == 404
        assert response.json()["messages"] == ["Customer not found"]
        assert response.json()["entity"] is None

    def test_non_numeric_id_is_not_routed(self, api_client):
        response = api_client.get("/api/v1/customers/abc/")
        assert response.status_code == 404


class TestCustomerByEmail:
    def test_lookup_success(self, api_client, sample_customer):
        response = api_client.get(
            "/api/v1/customers/by-email/", {"email": "joao@example.com"}
        )

        assert response.status_code == 200
        assert response.json()["entity"]["name"] == "João Silva"

    def test_lookup_not_found(self, api_client):
        response = api_client.get(
            "/api/v1/customers/by-email/", {"email": "ghost@example.com"}
        )

        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"

    def test_update_by_email(self, api_client, sample_customer):
        payload = {"name": "João Atualizado", "email": "novo@example.com"}

        response = api_client.put(
            "/api/v1/customers/by-email/?email=joao@example.com", payload, format="json"
        )

        assert response.status_code == 200
        assert response.json()["entity"] == payload
        sample_customer.refresh_from_db()
        assert sample_customer.email == "novo@example.com"

    def test_update_by_email_onto_taken_email_returns_409(self, api_client, sample_customer):
        Customer.objects.create(name="Bia Souza", email="bia@example.com")
        payload = {"name": "Bia Souza", "email": "joao@example.com"}

        response = api_client.put(
            "/api/v1/customers/by-email/?email=bia@example.com", payload, format="json"
        )

        assert response.status_code == 409
        assert response.json()["error"] == "ALREADY_EXISTS"

    def test_update_by_email_not_found(self, api_client):
        payload = {"name": "Ghost", "email": "ghost@example.com"}

        response = api_client.put(
            "/api/v1/customers/by-email/?email=missing@x.com", payload, format="json"
        )

        assert response.status_code == 404
        assert response.json()["messages"] == [
            "Customer with email missing@x.com not exists"
        ]


# ===========================================================================
# CREATE
# ===========================================================================


class TestCustomerCreate:
    def test_create_success(self, api_client):
        payload = {"name": "Maria Souza", "email": "maria@example.com"}

        response = api_client.post("/api/v1/customers/", payload, format="json")

        assert response.status_code == 201
        assert response.json()["entity"] == payload
        assert response.json()["success"] is True
        assert Customer.objects.filter(email="maria@example.com").exists()

    def test_create_duplicate_email_returns_409(self, api_client, sample_customer):
        payload = {"name": "Duplicate", "email": "joao@example.com"}

        response = api_client.post("/api/v1/customers/", payload, format="json")

        assert response.status_code == 409
        assert response.json()["messages"] == ["Customer allready exist with this email"]
        assert Customer.objects.count() == 1

    def test_create_short_name_returns_400(self, api_client):
        payload = {"name": "ab", "email": "ab@example.com"}

        response = api_client.post("/api/v1/customers/", payload, format="json")

        assert response.status_code == 400
        assert response.json()["messages"] == ["O nome está inválido"]
        assert response.json()["error"] == "NAME_INVALID"

    def test_create_missing_email_returns_400(self, api_client):
        response = api_client.post(
            "/api/v1/customers/", {"name": "Incomplete"}, format="json"
        )

        assert response.status_code == 400
        assert response.json()["messages"] == ["O email está vazio"]

    @pytest.mark.parametrize("body", ["null", "[]", "\"text\""])
    def test_create_without_object_body_is_null_payload(self, api_client, body):
        response = api_client.post(
            "/api/v1/customers/", data=body, content_type="application/json"
        )

        assert response.status_code == 400
        assert response.json()["messages"] == ["O Payload está nulo."]

    def test_create_with_empty_object_reports_empty_name(self, api_client):
        response = api_client.post(
            "/api/v1/customers/", data="{}", content_type="application/json"
        )

        assert response.status_code == 400
        assert response.json()["messages"] == ["O nome está vazio"]

    def test_create_padded_duplicate_email_returns_409(self, api_client, sample_customer):
        payload = {"name": "Carla Dias", "email": "  joao@example.com "}

        response = api_client.post("/api/v1/customers/", payload, format="json")

        assert response.status_code == 409
        assert response.json()["messages"] == ["Customer allready exist with this email"]
        assert Customer.objects.count() == 1

    def test_create_stores_trimmed_values(self, api_client):
        payload = {"name": " Carla Dias ", "email": " carla@example.com "}

        response = api_client.post("/api/v1/customers/", payload, format="json")

        assert response.status_code == 201
        assert response.json()["entity"] == {"name": "Carla Dias", "email": "carla@example.com"}
        assert Customer.objects.filter(email="carla@example.com").exists()


# ===========================================================================
# UPDATE
# ===========================================================================


class TestCustomerUpdate:
    def test_update_success(self, api_client, sample_customer):
        payload = {"name": "João PUT", "email": "joao@example.com"}

        response = api_client.put(
            f"/api/v1/customers/{sample_customer.id}/", payload, format="json"
        )

        assert response.status_code == 200
        assert response.json()["entity"] == payload
        sample_customer.refresh_from_db()
        assert sample_customer.name == "João PUT"

    def test_update_not_found(self, api_client):
        payload = {"name": "Ghost", "email": "ghost@example.com"}

        response = api_client.put("/api/v1/customers/999/", payload, format="json")

        assert response.status_code == 404
        assert response.json()["messages"] == ["Customer with id 999 not exists"]

    def test_update_onto_taken_email_returns_409(self, api_client, sample_customer):
        other = Customer.objects.create(name="Bia Souza", email="bia@example.com")
        payload = {"name": "Bia Souza", "email": "joao@example.com"}

        response = api_client.put(f"/api/v1/customers/{other.id}/", payload, format="json")

        assert response.status_code == 409
        assert response.json()["messages"] == ["Customer allready exist with this email"]
        other.refresh_from_db()
        assert other.email == "bia@example.com"

    def test_update_invalid_email_returns_400(self, api_client, sample_customer):
        payload = {"name": "João Silva", "email": "roberto"}

        response = api_client.put(
            f"/api/v1/customers/{sample_customer.id}/", payload, format="json"
        )

        assert response.status_code == 400
        assert response.json()["messages"] == ["O email está inválido"]


# ===========================================================================
# DESTROY
# ===========================================================================


class TestCustomerDestroy:
    def test_destroy_success(self, api_client, sample_customer):
        response = api_client.delete(f"/api/v1/customers/{sample_customer.id}/")

        assert response.status_code == 200
        assert response.json() == {
            "entity": None,
            "messages": ["Customer Deleted with success"],
            "success": True,
            "error": None,
        }
        assert not Customer.objects.filter(id=sample_customer.id).exists()

    def test_destroy_unknown_id_still_acknowledged(self, api_client):
        response = api_client.delete("/api/v1/customers/999/")

        assert response.status_code == 200
        assert response.json()["messages"] == ["Customer Deleted with success"]
