"""Pytest fixtures for API integration tests."""

from typing import Callable

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from folio.presentation.api.app import API_PREFIX, create_app
from folio.presentation.api.dependencies import get_password_service
from folio_config.settings import Settings
from folio_identity import PasswordHashingService

TEST_USER = {
    "name": "Ada Lovelace",
    "email": "ada@example.com",
    "password": "secret1",
}


@pytest.fixture
def api_prefix() -> str:
    return API_PREFIX


@pytest.fixture
def rate_limit_attempts() -> int:
    """Override in a test module to exercise the auth rate limit."""
    return 1000


@pytest.fixture
def api_settings(tmp_path, rate_limit_attempts) -> Settings:
    """Test settings: in-memory database, uploads in a temp dir."""
    return Settings(
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        database_url="sqlite+aiosqlite:///:memory:",
        api_debug=True,
        api_cors_origins="http://localhost:5173",
        auth_rate_limit_attempts=rate_limit_attempts,
        upload_dir=tmp_path / "uploads",
    )


@pytest.fixture
def test_client(api_settings):
    """Create a test client with an in-memory database.

    Entering the client runs the app lifespan, which creates the tables on
    the same event loop that later serves the requests.
    """
    app = create_app(settings=api_settings)
    # Minimum bcrypt work factor keeps the suite fast
    app.dependency_overrides[get_password_service] = lambda: PasswordHashingService(
        rounds=4,
    )

    with TestClient(app) as client:
        yield client


@pytest.fixture
def registered_user_data() -> dict:
    """Registration body of the portfolio owner."""
    return dict(TEST_USER)


@pytest.fixture
def registered_user(
    test_client: TestClient,
    api_prefix: str,
    registered_user_data: dict,
) -> dict:
    response = test_client.post(
        f"{api_prefix}/auth/register",
        json=registered_user_data,
    )
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def auth_token(test_client: TestClient, api_prefix: str, registered_user) -> str:
    response = test_client.post(
        f"{api_prefix}/auth/login",
        json={"email": TEST_USER["email"], "password": TEST_USER["password"]},
    )
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def auth_headers(auth_token: str) -> dict:
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def create_blog(
    test_client: TestClient,
    api_prefix: str,
    auth_headers: dict,
) -> Callable[..., dict]:
    """Factory creating a blog through the API and returning its JSON."""

    def _create(**fields) -> dict:
        body = {"title": "Hello World", "content": "# Hello", "published": True}
        body.update(fields)
        response = test_client.post(
            f"{api_prefix}/blogs",
            json=body,
            headers=auth_headers,
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create


@pytest.fixture
def create_project(
    test_client: TestClient,
    api_prefix: str,
    auth_headers: dict,
) -> Callable[..., dict]:
    def _create(**fields) -> dict:
        body = {"title": "Folio", "description": "Portfolio backend"}
        body.update(fields)
        response = test_client.post(
            f"{api_prefix}/projects",
            json=body,
            headers=auth_headers,
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create
