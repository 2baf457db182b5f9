"""Route tests: FastAPI TestClient over in-memory SQLite, covering status codes and bodies."""

import unittest
from datetime import datetime, timedelta
from unittest.mock import patch

import jwt
from fastapi.testclient import TestClient

from onboarding.core.config import settings
from onboarding.core.database import get_db
from onboarding.core.security import create_access_token
from onboarding.main import app
from tests.db import make_session_factory


def _bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class ApiTestCase(unittest.TestCase):
    """Fresh database per test; admin token minted directly."""

    def setUp(self) -> None:
        session_factory = make_session_factory()

        def override_get_db():
            db = session_factory()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)
        self.admin = _bearer(create_access_token(1, "admin@example.com", "admin"))
        self.customer = _bearer(create_access_token(2, "c@example.com", "customer"))

    def tearDown(self) -> None:
        app.dependency_overrides.clear()

    def submit(self, **overrides: object):
        body = {"firstName": "John", "lastName": "Doe", "email": "john@example.com"}
        body.update(overrides)
        return self.client.post("/applications", json=body)


class TestHealth(ApiTestCase):
    def test_health(self) -> None:
        resp = self.client.get("/health")
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["status"], "ok")
        self.assertIn("timestamp", data)
        self.assertEqual(data["database"], "connected")


class TestSubmitApplication(ApiTestCase):
    def test_create(self) -> None:
        resp = self.submit()
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json(), {"applicationId": 1, "status": "submitted"})

    def test_custom_product_type(self) -> None:
        resp = self.submit(firstName="Jane", lastName="Smith", email="jane@example.com", productType="savings")
        self.assertEqual(resp.status_code, 201)
        detail = self.client.get(f"/admin/applications/{resp.json()['applicationId']}", headers=self.admin)
        self.assertEqual(detail.json()["productType"], "savings")

    def test_missing_fields(self) -> None:
        for field in ("firstName", "lastName", "email"):
            with self.subTest(field=field):
                body = {"firstName": "John", "lastName": "Doe", "email": "john@example.com"}
                del body[field]
                resp = self.client.post("/applications", json=body)
                self.assertEqual(resp.status_code, 400)
                self.assertEqual(resp.json()["error"], "Missing required fields")
                self.assertEqual(resp.json()["required"], ["firstName", "lastName", "email"])
        self.assertEqual(self.client.get("/admin/applications", headers=self.admin).json(), [])

    def test_invalid_email(self) -> None:
        resp = self.submit(email="invalid-email")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "Invalid email format")

    def test_email_with_trailing_newline_is_400(self) -> None:
        resp = self.submit(email="john@example.com\n")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "Invalid email format")

    def test_malformed_json_is_400(self) -> None:
        resp = self.client.post(
            "/applications",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "Invalid request")


class TestAdminAccess(ApiTestCase):
    def test_no_token(self) -> None:
        resp = self.client.get("/admin/applications")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["error"], "No token provided")
        self.assertEqual(resp.headers["www-authenticate"], "Bearer")

    def test_malformed_header(self) -> None:
        token = create_access_token(1, "admin@example.com", "admin")
        resp = self.client.get("/admin/applications", headers={"Authorization": f"Token {token}"})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["error"], "No token provided")

    def test_invalid_token(self) -> None:
        resp = self.client.get("/admin/applications", headers=_bearer("garbage"))
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["error"], "Invalid token")

    def test_expired_token(self) -> None:
        token = create_access_token(1, "admin@example.com", "admin", expires_delta=timedelta(seconds=-5))
        resp = self.client.get("/admin/applications", headers=_bearer(token))
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["error"], "Token expired")

    def test_customer_forbidden(self) -> None:
        for method, path, body in (
            ("get", "/admin/applications", None),
            ("get", "/admin/applications/1", None),
            ("put", "/admin/applications/1/status", {"status": "approved"}),
        ):
            with self.subTest(path=path):
                resp = self.client.request(method, path, json=body, headers=self.customer)
                self.assertEqual(resp.status_code, 403)
                self.assertEqual(resp.json()["error"], "Insufficient permissions")

    def test_public_submit_needs_no_token(self) -> None:
        self.assertEqual(self.submit().status_code, 201)


class TestAdminApplications(ApiTestCase):
    def test_list_empty(self) -> None:
        resp = self.client.get("/admin/applications", headers=self.admin)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), [])

    def test_list_newest_first(self) -> None:
        self.submit()
        self.submit(firstName="Jane", lastName="Smith", email="jane@example.com")
        resp = self.client.get("/admin/applications", headers=self.admin)
        data = resp.json()
        self.assertEqual(len(data), 2)
        self.assertEqual(data[0]["firstName"], "Jane")
        for key in ("id", "firstName", "lastName", "email", "productType", "status", "createdAt", "updatedAt"):
            self.assertIn(key, data[0])

    def test_get_by_id(self) -> None:
        app_id = self.submit().json()["applicationId"]
        resp = self.client.get(f"/admin/applications/{app_id}", headers=self.admin)
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["id"], app_id)
        self.assertEqual(data["firstName"], "John")
        self.assertEqual(data["lastName"], "Doe")
        self.assertEqual(data["email"], "john@example.com")
        self.assertEqual(data["productType"], "checking")

    def test_get_unknown_id(self) -> None:
        resp = self.client.get("/admin/applications/99999", headers=self.admin)
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["error"], "Application not found")

    def test_update_status(self) -> None:
        app_id = self.submit().json()["applicationId"]
        resp = self.client.put(
            f"/admin/applications/{app_id}/status",
            json={"status": "approved"},
            headers=self.admin,
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["status"], "approved")
        self.assertEqual(set(resp.json()), {"id", "status", "updatedAt"})

    def test_update_missing_status(self) -> None:
        app_id = self.submit().json()["applicationId"]
        resp = self.client.put(f"/admin/applications/{app_id}/status", json={}, headers=self.admin)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "Status is required")

    def test_update_invalid_status(self) -> None:
        app_id = self.submit().json()["applicationId"]
        resp = self.client.put(
            f"/admin/applications/{app_id}/status",
            json={"status": "invalid_status"},
            headers=self.admin,
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "Invalid status")
        self.assertEqual(
            resp.json()["validStatuses"],
            ["submitted", "under_review", "approved", "rejected"],
        )
        detail = self.client.get(f"/admin/applications/{app_id}", headers=self.admin)
        self.assertEqual(detail.json()["status"], "submitted")

    def test_update_unknown_id(self) -> None:
        resp = self.client.put(
            "/admin/applications/99999/status",
            json={"status": "approved"},
            headers=self.admin,
        )
        self.assertEqual(resp.status_code, 404)

    def test_submit_list_update_scenario(self) -> None:
        created = self.submit()
        self.assertEqual(created.status_code, 201)
        self.assertEqual(created.json(), {"applicationId": 1, "status": "submitted"})

        listed = self.client.get("/admin/applications", headers=self.admin).json()
        self.assertEqual(len(listed), 1)
        self.assertEqual(listed[0]["id"], 1)
        self.assertEqual(listed[0]["firstName"], "John")
        self.assertEqual(listed[0]["status"], "submitted")

        updated = self.client.put(
            "/admin/applications/1/status",
            json={"status": "approved"},
            headers=self.admin,
        ).json()
        self.assertEqual(updated["id"], 1)
        self.assertEqual(updated["status"], "approved")
        self.assertGreaterEqual(
            datetime.fromisoformat(updated["updatedAt"]),
            datetime.fromisoformat(listed[0]["updatedAt"]),
        )


class TestAuthRoutes(ApiTestCase):
    def test_register_then_login_scenario(self) -> None:
        resp = self.client.post("/auth/register", json={"email": "a@b.com", "password": "password123"})
        self.assertEqual(resp.status_code, 201)
        data = resp.json()
        self.assertEqual(data["message"], "User registered successfully")
        self.assertEqual(data["user"]["email"], "a@b.com")
        self.assertEqual(data["user"]["role"], "customer")
        self.assertNotIn("password", data["user"])
        self.assertNotIn("passwordHash", data["user"])

        resp = self.client.post("/auth/login", json={"email": "a@b.com", "password": "password123"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["message"], "Login successful")
        payload = jwt.decode(
            resp.json()["token"],
            settings.JWT_SECRET.get_secret_value(),
            algorithms=[settings.JWT_ALGORITHM],
        )
        self.assertEqual(payload["role"], "customer")
        self.assertEqual(payload["email"], "a@b.com")

    def test_register_validation(self) -> None:
        resp = self.client.post("/auth/register", json={"email": "a@b.com", "password": "short"})
        self.assertEqual(resp.status_code, 400)
        resp = self.client.post("/auth/register", json={"email": "a@b.com"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "Email and password are required")

    def test_register_duplicate(self) -> None:
        body = {"email": "a@b.com", "password": "password123"}
        self.assertEqual(self.client.post("/auth/register", json=body).status_code, 201)
        resp = self.client.post("/auth/register", json=body)
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(resp.json()["error"], "User already exists")

    def test_login_failures_identical(self) -> None:
        self.client.post("/auth/register", json={"email": "a@b.com", "password": "password123"})
        wrong = self.client.post("/auth/login", json={"email": "a@b.com", "password": "nope-nope"})
        unknown = self.client.post("/auth/login", json={"email": "x@b.com", "password": "password123"})
        self.assertEqual(wrong.status_code, 401)
        self.assertEqual(unknown.status_code, 401)
        self.assertEqual(wrong.json(), unknown.json())

    def test_login_missing_fields(self) -> None:
        resp = self.client.post("/auth/login", json={"email": "a@b.com"})
        self.assertEqual(resp.status_code, 400)

    def test_admin_self_registration_disabled_by_setting(self) -> None:
        with patch.object(settings, "ALLOW_ADMIN_SELF_REGISTRATION", False):
            resp = self.client.post(
                "/auth/register",
                json={"email": "boss@b.com", "password": "password123", "role": "admin"},
            )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "Invalid role")
        login = self.client.post("/auth/login", json={"email": "boss@b.com", "password": "password123"})
        self.assertEqual(login.status_code, 401)

    def test_registered_admin_can_use_admin_routes(self) -> None:
        resp = self.client.post(
            "/auth/register",
            json={"email": "boss@b.com", "password": "password123", "role": "admin"},
        )
        token = resp.json()["token"]
        listed = self.client.get("/admin/applications", headers=_bearer(token))
        self.assertEqual(listed.status_code, 200)


class TestInternalErrors(ApiTestCase):
    def test_unexpected_error_hides_details(self) -> None:
        client = TestClient(app, raise_server_exceptions=False)
        with patch(
            "onboarding.services.applications.ApplicationService.list",
            side_effect=RuntimeError("connection reset by peer"),
        ):
            resp = client.get("/admin/applications", headers=self.admin)
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "Internal server error"})


if __name__ == "__main__":
    unittest.main()
