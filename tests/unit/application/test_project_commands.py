"""Unit tests for project commands and queries."""

from unittest.mock import Mock
from uuid import uuid4

import pytest

from folio.application.commands import (
    AttachProjectThumbnailCommand,
    CreateProjectCommand,
    DeleteProjectCommand,
    UpdateProjectCommand,
)
from folio.application.queries import GetProjectQuery, ListProjectsQuery
from folio.domain.content import Project, ProjectNotFoundError


def _project(**overrides) -> Project:
    fields = {"title": "Folio", "description": "Portfolio backend"}
    fields.update(overrides)
    return Project.create(**fields)


class TestCreateProjectCommand:
    @pytest.mark.asyncio
    async def test_create(self, project_repo):
        project = await CreateProjectCommand(project_repo).execute(
            title="Folio",
            description="Portfolio backend",
            tech_stack=["Python", "FastAPI"],
            featured=True,
            order=2,
        )

        assert project.tech_stack == ["Python", "FastAPI"]
        assert project.featured is True
        project_repo.save.assert_awaited_once_with(project)

    def test_from_factory_only_needs_the_repository(self, project_repo):
        factory = Mock(spec=["project_repository"])
        factory.project_repository.return_value = project_repo

        command = CreateProjectCommand.from_factory(factory)

        assert command._project_repo is project_repo


class TestUpdateProjectCommand:
    @pytest.mark.asyncio
    async def test_update_merges(self, project_repo):
        project = _project()
        project_repo.find_by_id.return_value = project

        updated = await UpdateProjectCommand(project_repo).execute(
            project.id,
            live_demo_url="https://folio.example.com",
        )

        assert updated.live_demo_url == "https://folio.example.com"
        assert updated.title == "Folio"
        project_repo.save.assert_awaited_once_with(project)

    @pytest.mark.asyncio
    async def test_update_missing(self, project_repo):
        project_repo.find_by_id.return_value = None

        with pytest.raises(ProjectNotFoundError):
            await UpdateProjectCommand(project_repo).execute(uuid4(), title="X")


class TestDeleteProjectCommand:
    @pytest.mark.asyncio
    async def test_delete_missing(self, project_repo):
        project_repo.delete.return_value = False

        with pytest.raises(ProjectNotFoundError):
            await DeleteProjectCommand(project_repo).execute(uuid4())


class TestAttachProjectThumbnailCommand:
    @pytest.mark.asyncio
    async def test_thumbnail_set(self, project_repo, upload_service, png_upload):
        project = _project()
        project_repo.find_by_id.return_value = project

        updated = await AttachProjectThumbnailCommand(
            project_repo,
            upload_service,
        ).execute(project.id, png_upload)

        assert updated.thumbnail.startswith("/uploads/thumbnail-")


class TestProjectQueries:
    @pytest.mark.asyncio
    async def test_list_passes_paging_and_filter(self, project_repo):
        projects = [_project(title=f"P{i}") for i in range(2)]
        project_repo.find_page.return_value = (projects, 8)

        page = await ListProjectsQuery(project_repo).execute(
            page=2,
            limit=6,
            featured=True,
        )

        project_repo.find_page.assert_awaited_once_with(
            offset=6,
            limit=6,
            featured=True,
        )
        assert [dto.title for dto in page.items] == ["P0", "P1"]
        assert page.pages == 2

    @pytest.mark.asyncio
    async def test_featured(self, project_repo):
        project_repo.find_featured.return_value = [_project(featured=True)]

        featured = await ListProjectsQuery(project_repo).featured()

        assert len(featured) == 1
        assert featured[0].featured is True

    @pytest.mark.asyncio
    async def test_get_missing(self, project_repo):
        project_repo.find_by_id.return_value = None

        with pytest.raises(ProjectNotFoundError):
            await GetProjectQuery(project_repo).execute(uuid4())
