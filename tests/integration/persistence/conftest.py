"""Fixtures for repository tests against in-memory SQLite."""

import pytest
from pydantic import SecretStr

from folio.presentation.api.dependencies import (
    create_engine_from_settings,
    create_session_maker,
    create_tables,
)
from folio_config.settings import Settings


@pytest.fixture
async def db_engine():
    settings = Settings(
        jwt_secret_key=SecretStr("unused"),
        database_url="sqlite+aiosqlite:///:memory:",
    )
    engine = create_engine_from_settings(settings)
    await create_tables(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db_session(db_engine):
    async with create_session_maker(db_engine)() as session:
        yield session
