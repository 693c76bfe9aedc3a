"""Integration tests for authentication endpoints."""

import pytest
from fastapi.testclient import TestClient


class TestAuthRegister:
    """Tests for POST /api/auth/register."""

    def test_register_success(
        self,
        test_client: TestClient,
        api_prefix: str,
        registered_user_data: dict,
    ):
        """Registration returns the user but no token."""
        response = test_client.post(
            f"{api_prefix}/auth/register",
            json=registered_user_data,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "User registered successfully"
        assert body["data"]["email"] == "ada@example.com"
        assert body["data"]["role"] == "admin"
        assert "createdAt" in body["data"]
        assert "token" not in body
        assert "password" not in body["data"]

    def test_register_duplicate_email(
        self,
        test_client: TestClient,
        api_prefix: str,
        registered_user,
        registered_user_data: dict,
    ):
        response = test_client.post(
            f"{api_prefix}/auth/register",
            json=registered_user_data,
        )

        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_EMAIL"

    def test_register_weak_password(self, test_client: TestClient, api_prefix: str):
        response = test_client.post(
            f"{api_prefix}/auth/register",
            json={"name": "Ada", "email": "weak@example.com", "password": "short"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "WEAK_PASSWORD"

    def test_register_password_mismatch(self, test_client: TestClient, api_prefix: str):
        response = test_client.post(
            f"{api_prefix}/auth/register",
            json={
                "name": "Ada",
                "email": "ada@example.com",
                "password": "secret1",
                "confirmPassword": "secret2",
            },
        )

        assert response.status_code == 400
        assert response.json()["code"] == "PASSWORD_MISMATCH"

    def test_register_invalid_email(self, test_client: TestClient, api_prefix: str):
        response = test_client.post(
            f"{api_prefix}/auth/register",
            json={"name": "Ada", "email": "not-an-email", "password": "secret1"},
        )

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_register_missing_field(self, test_client: TestClient, api_prefix: str):
        response = test_client.post(
            f"{api_prefix}/auth/register",
            json={"email": "ada@example.com", "password": "secret1"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"


class TestAuthLogin:
    """Tests for POST /api/auth/login."""

    def test_login_success(
        self,
        test_client: TestClient,
        api_prefix: str,
        registered_user,
        registered_user_data: dict,
    ):
        response = test_client.post(
            f"{api_prefix}/auth/login",
            json={
                "email": registered_user_data["email"],
                "password": registered_user_data["password"],
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["token"]
        assert body["data"]["id"] == registered_user["id"]

    def test_login_email_is_case_insensitive(
        self,
        test_client: TestClient,
        api_prefix: str,
        registered_user,
    ):
        response = test_client.post(
            f"{api_prefix}/auth/login",
            json={"email": "ADA@example.com", "password": "secret1"},
        )

        assert response.status_code == 200

    def test_login_wrong_password(
        self,
        test_client: TestClient,
        api_prefix: str,
        registered_user,
    ):
        response = test_client.post(
            f"{api_prefix}/auth/login",
            json={"email": "ada@example.com", "password": "wrong-password"},
        )

        assert response.status_code == 401
        assert response.json() == {
            "success": False,
            "message": "Invalid credentials",
            "code": "INVALID_CREDENTIALS",
        }

    def test_login_unknown_user(self, test_client: TestClient, api_prefix: str):
        response = test_client.post(
            f"{api_prefix}/auth/login",
            json={"email": "nobody@example.com", "password": "secret1"},
        )

        assert response.status_code == 401


class TestAuthVerify:
    """Tests for GET /api/auth/verify."""

    def test_verify_with_token(
        self,
        test_client: TestClient,
        api_prefix: str,
        auth_headers: dict,
    ):
        response = test_client.get(f"{api_prefix}/auth/verify", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"]["email"] == "ada@example.com"

    def test_verify_without_token(self, test_client: TestClient, api_prefix: str):
        response = test_client.get(f"{api_prefix}/auth/verify")

        assert response.status_code == 401
        assert response.json()["message"] == "Not authorized, no token"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_verify_with_garbage_token(self, test_client: TestClient, api_prefix: str):
        response = test_client.get(
            f"{api_prefix}/auth/verify",
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Not authorized, token failed"


class TestAuthRateLimit:
    """Register and login share one per-address allowance."""

    @pytest.fixture
    def rate_limit_attempts(self) -> int:
        return 3

    def test_limit_applies_regardless_of_credentials(
        self,
        test_client: TestClient,
        api_prefix: str,
        registered_user,
    ):
        # Registration used the first attempt
        wrong = {"email": "ada@example.com", "password": "wrong-password"}
        right = {"email": "ada@example.com", "password": "secret1"}

        assert test_client.post(f"{api_prefix}/auth/login", json=wrong).status_code == 401
        assert test_client.post(f"{api_prefix}/auth/login", json=right).status_code == 200

        response = test_client.post(f"{api_prefix}/auth/login", json=right)

        assert response.status_code == 429
        assert response.json()["message"] == (
            "Too many authentication attempts, please try again later"
        )
        assert int(response.headers["Retry-After"]) > 0

    def test_other_endpoints_not_limited(
        self,
        test_client: TestClient,
        api_prefix: str,
    ):
        for _ in range(5):
            assert test_client.get(f"{api_prefix}/health").status_code == 200
