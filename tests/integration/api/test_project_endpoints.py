"""Integration tests for project endpoints."""

from uuid import uuid4

from fastapi.testclient import TestClient


class TestCreateProject:
    """Tests for POST /api/projects."""

    def test_create(self, test_client: TestClient, api_prefix: str, auth_headers):
        response = test_client.post(
            f"{api_prefix}/projects",
            json={
                "title": "Folio",
                "description": "Portfolio backend",
                "techStack": "Python, FastAPI",
                "liveDemoUrl": "https://folio.example.com",
                "featured": True,
                "order": 1,
            },
            headers=auth_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Project created successfully"
        assert body["data"]["techStack"] == ["Python", "FastAPI"]
        assert body["data"]["liveDemoUrl"] == "https://folio.example.com"
        assert body["data"]["featured"] is True

    def test_create_without_token_creates_nothing(
        self,
        test_client: TestClient,
        api_prefix: str,
    ):
        response = test_client.post(
            f"{api_prefix}/projects",
            json={"title": "Sneaky", "description": "Should not exist"},
        )

        assert response.status_code == 401
        listing = test_client.get(f"{api_prefix}/projects").json()
        assert listing["data"] == []
        assert listing["pagination"]["total"] == 0

    def test_missing_description(
        self,
        test_client: TestClient,
        api_prefix: str,
        auth_headers,
    ):
        response = test_client.post(
            f"{api_prefix}/projects",
            json={"title": "Folio", "description": ""},
            headers=auth_headers,
        )

        assert response.status_code == 400


class TestListProjects:
    """Tests for GET /api/projects and GET /api/projects/featured."""

    def test_ordered_by_order_field(
        self,
        test_client: TestClient,
        api_prefix: str,
        create_project,
    ):
        create_project(title="Third", order=3)
        create_project(title="First", order=1)
        create_project(title="Second", order=2)

        body = test_client.get(f"{api_prefix}/projects").json()

        assert [p["title"] for p in body["data"]] == ["First", "Second", "Third"]

    def test_featured_filter(
        self,
        test_client: TestClient,
        api_prefix: str,
        create_project,
    ):
        create_project(title="Star", featured=True)
        create_project(title="Plain", featured=False)

        featured = test_client.get(f"{api_prefix}/projects?featured=true").json()
        others = test_client.get(f"{api_prefix}/projects?featured=false").json()
        everything = test_client.get(f"{api_prefix}/projects?featured=").json()

        assert [p["title"] for p in featured["data"]] == ["Star"]
        assert [p["title"] for p in others["data"]] == ["Plain"]
        assert everything["pagination"]["total"] == 2

    def test_featured_endpoint_is_unpaginated(
        self,
        test_client: TestClient,
        api_prefix: str,
        create_project,
    ):
        create_project(title="Star", featured=True)
        create_project(title="Plain")

        response = test_client.get(f"{api_prefix}/projects/featured")

        assert response.status_code == 200
        body = response.json()
        assert "pagination" not in body
        assert [p["title"] for p in body["data"]] == ["Star"]


class TestProjectDetail:
    """Tests for GET, PUT and DELETE /api/projects/{id}."""

    def test_get(self, test_client: TestClient, api_prefix: str, create_project):
        project = create_project()

        response = test_client.get(f"{api_prefix}/projects/{project['id']}")

        assert response.status_code == 200
        assert response.json()["data"]["title"] == "Folio"

    def test_get_unknown(self, test_client: TestClient, api_prefix: str):
        response = test_client.get(f"{api_prefix}/projects/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["message"] == "Project not found"

    def test_update(
        self,
        test_client: TestClient,
        api_prefix: str,
        auth_headers,
        create_project,
    ):
        project = create_project(githubUrl="https://github.com/example/folio")

        response = test_client.put(
            f"{api_prefix}/projects/{project['id']}",
            json={"featured": True},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["featured"] is True
        assert data["githubUrl"] == "https://github.com/example/folio"

    def test_delete(
        self,
        test_client: TestClient,
        api_prefix: str,
        auth_headers,
        create_project,
    ):
        project = create_project()
        url = f"{api_prefix}/projects/{project['id']}"

        response = test_client.delete(url, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["message"] == "Project deleted successfully"
        assert test_client.get(url).status_code == 404

    def test_upload_thumbnail(
        self,
        test_client: TestClient,
        api_prefix: str,
        auth_headers,
        create_project,
    ):
        project = create_project()

        response = test_client.post(
            f"{api_prefix}/projects/{project['id']}/thumbnail",
            files={"thumbnail": ("shot.webp", b"RIFF....WEBP", "image/webp")},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Thumbnail uploaded successfully"
        assert response.json()["data"]["thumbnail"].endswith(".webp")

    def test_upload_thumbnail_too_large(
        self,
        test_client: TestClient,
        api_prefix: str,
        auth_headers,
        create_project,
        api_settings,
    ):
        project = create_project()
        too_big = b"x" * (api_settings.upload_max_bytes + 1)

        response = test_client.post(
            f"{api_prefix}/projects/{project['id']}/thumbnail",
            files={"thumbnail": ("big.png", too_big, "image/png")},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["message"] == "File too large. Maximum size is 5 MB"
