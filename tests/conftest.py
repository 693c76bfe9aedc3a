"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/                  # Fast, isolated tests (mocked repositories)
    │   ├── domain/
    │   ├── identity/
    │   ├── application/
    │   ├── infrastructure/
    │   └── presentation/
    └── integration/           # In-memory SQLite through the real stack
        ├── api/
        └── persistence/
"""

import pytest

from folio_config import clear_settings_cache


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second",
    )


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Make sure no test sees settings cached by another."""
    clear_settings_cache()
    yield
    clear_settings_cache()
