"""Tests for the Project entity."""

import pytest

from folio.domain.content import Project
from folio.domain.shared.exceptions import ValidationError


class TestProject:
    def test_create_with_defaults(self):
        project = Project.create(title="Folio", description="Portfolio backend")

        assert project.featured is False
        assert project.order == 0
        assert project.tech_stack == []
        assert project.thumbnail == ""

    def test_tech_stack_cleaned(self):
        project = Project.create(
            title="Folio",
            description="Portfolio backend",
            tech_stack=["Python", " FastAPI ", "", "Python"],
        )

        assert project.tech_stack == ["Python", "FastAPI"]

    def test_title_required(self):
        with pytest.raises(ValidationError, match="title is required"):
            Project.create(title=" ", description="Something")

    def test_description_required(self):
        with pytest.raises(ValidationError, match="description is required"):
            Project.create(title="Folio", description="")

    def test_order_must_be_integer(self):
        with pytest.raises(ValidationError, match="order"):
            Project.create(title="Folio", description="x", order=True)

    def test_update_merges_fields(self):
        project = Project.create(
            title="Folio",
            description="Backend",
            github_url="https://github.com/example/folio",
        )

        project.update(featured=True, order=3)

        assert project.featured is True
        assert project.order == 3
        assert project.title == "Folio"
        assert project.github_url == "https://github.com/example/folio"

    def test_set_thumbnail(self):
        project = Project.create(title="Folio", description="Backend")

        project.set_thumbnail("/uploads/thumbnail-1-2.png")

        assert project.thumbnail == "/uploads/thumbnail-1-2.png"
