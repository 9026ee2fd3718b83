"""
Tests for sessions, employees, clients and error responses
"""
import pytest

from grounded.core.security import hash_password, verify_password
from grounded.main import describe_validation_errors


@pytest.mark.unit
class TestPasswords:
    """Tests for password hashing"""

    def test_hash_verifies(self):
        password_hash = hash_password("s3cret-pass")
        assert password_hash != "s3cret-pass"
        assert verify_password(password_hash, "s3cret-pass") is True

    def test_wrong_password(self):
        assert verify_password(hash_password("s3cret-pass"), "guess") is False

    def test_empty_hash(self):
        assert verify_password("", "anything") is False


@pytest.mark.unit
class TestValidationMessages:
    """Tests for turning request validation errors into one message"""

    def test_missing_and_invalid(self):
        errors = [
            {"type": "missing", "loc": ("body", "email"), "msg": "Field required"},
            {"type": "int_parsing", "loc": ("query", "page"), "msg": "Input should be a valid integer"},
        ]
        assert describe_validation_errors(errors) == (
            "Required fields are missing: email. Invalid fields: page: Input should be a valid integer"
        )

    def test_no_errors(self):
        assert describe_validation_errors([]) == "Invalid request"


@pytest.mark.integration
class TestSessions:
    """Tests for login, logout and protected routes"""

    def test_login_and_me(self, client, employee, employee_password):
        response = client.post("/api/v1/auth/login", json={"email": "DANA@example.com", "password": employee_password})
        assert response.status_code == 200
        assert "passwordHash" not in response.json()

        me = client.get("/api/v1/auth/me")
        assert me.status_code == 200
        assert me.json()["email"] == "dana@example.com"

    def test_wrong_password(self, client, employee):
        response = client.post("/api/v1/auth/login", json={"email": employee.email, "password": "nope"})
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid email or password"}

    def test_logout_ends_session(self, auth_client):
        assert auth_client.post("/api/v1/auth/logout").json() == {"success": True}
        assert auth_client.get("/api/v1/auth/me").status_code == 401

    @pytest.mark.parametrize("path", ["/api/v1/clients", "/api/v1/jobs", "/api/v1/employees", "/api/v1/routes"])
    def test_protected_routes(self, client, path):
        response = client.get(path)
        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert "status" in response.json()


@pytest.mark.integration
class TestEmployees:
    """Tests for the employees API"""

    def test_create_employee(self, auth_client):
        response = auth_client.post(
            "/api/v1/employees",
            json={"name": "Chris Ng", "email": "Chris@Example.com", "password": "long-enough", "role": "manager"},
        )
        assert response.status_code == 201
        assert response.json()["email"] == "chris@example.com"
        assert response.json()["role"] == "manager"

    def test_duplicate_email(self, auth_client, employee):
        response = auth_client.post(
            "/api/v1/employees",
            json={"name": "Dana Again", "email": employee.email, "password": "long-enough"},
        )
        assert response.status_code == 400

    def test_short_password(self, auth_client):
        response = auth_client.post(
            "/api/v1/employees",
            json={"name": "Chris Ng", "email": "chris@example.com", "password": "short"},
        )
        assert response.status_code == 400


@pytest.mark.integration
class TestClients:
    """Tests for the clients API"""

    def test_create_and_fetch(self, auth_client):
        payload = {
            "firstName": "Morgan",
            "lastName": "Lee",
            "phone": "555-0142",
            "address": "9 Elm Street",
            "city": "Apex",
            "state": "NC",
            "zipCode": "27502",
            "email": "",
        }
        response = auth_client.post("/api/v1/clients", json=payload)
        assert response.status_code == 201
        data = response.json()
        assert data["displayName"] == "Morgan Lee"
        assert data["email"] is None

        fetched = auth_client.get(f"/api/v1/clients/{data['id']}").json()
        assert fetched["city"] == "Apex"

    def test_missing_fields(self, auth_client):
        response = auth_client.post("/api/v1/clients", json={"firstName": "Morgan"})
        assert response.status_code == 400
        assert response.json()["error"].startswith("Required fields are missing: lastName, phone")

    def test_list_with_counts(self, auth_client, make_job):
        job = make_job()
        clients = auth_client.get("/api/v1/clients").json()
        assert clients[0]["id"] == job.client_id
        assert clients[0]["jobCount"] == 1
        assert clients[0]["invoiceCount"] == 0

    def test_update(self, auth_client, make_client):
        customer = make_client()
        payload = {
            "firstName": "Jordan",
            "lastName": "Miles-Hart",
            "phone": "555-0100",
            "address": "12 Oak Lane",
            "city": "Raleigh",
            "state": "NC",
            "zipCode": "27601",
        }
        response = auth_client.put(f"/api/v1/clients/{customer.id}", json=payload)
        assert response.status_code == 200
        assert response.json()["displayName"] == "Jordan Miles-Hart"

    def test_unknown_client(self, auth_client):
        response = auth_client.get("/api/v1/clients/999")
        assert response.status_code == 404
        assert response.json() == {"error": "Client 999 not found"}
