"""Integration tests for app-level behavior."""

from fastapi.testclient import TestClient


class TestApp:
    def test_health(self, test_client: TestClient, api_prefix: str):
        response = test_client.get(f"{api_prefix}/health")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Server is running"
        assert "timestamp" in body

    def test_security_headers_on_every_response(
        self,
        test_client: TestClient,
        api_prefix: str,
    ):
        for path in (f"{api_prefix}/health", "/api/nothing-here"):
            headers = test_client.get(path).headers

            assert headers["X-Content-Type-Options"] == "nosniff"
            assert headers["X-Frame-Options"] == "SAMEORIGIN"
            assert headers["Referrer-Policy"] == "no-referrer"
            assert headers["Cross-Origin-Resource-Policy"] == "cross-origin"

    def test_unknown_route(self, test_client: TestClient):
        response = test_client.get("/api/nothing-here")

        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "message": "Route not found",
            "code": "ROUTE_NOT_FOUND",
        }

    def test_cors_allows_frontend_origin(self, test_client: TestClient, api_prefix: str):
        response = test_client.options(
            f"{api_prefix}/blogs",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "GET",
            },
        )

        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
        assert response.headers["access-control-allow-credentials"] == "true"

    def test_full_admin_flow(self, test_client: TestClient, api_prefix: str):
        """Register, log in, then list everything with the token."""
        register = test_client.post(
            f"{api_prefix}/auth/register",
            json={"name": "Ada", "email": "ada@example.com", "password": "secret1"},
        )
        assert register.status_code == 201

        login = test_client.post(
            f"{api_prefix}/auth/login",
            json={"email": "ada@example.com", "password": "secret1"},
        )
        assert login.status_code == 200
        token = login.json()["token"]

        response = test_client.get(
            f"{api_prefix}/blogs/admin/all",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 200
        assert isinstance(response.json()["data"], list)
