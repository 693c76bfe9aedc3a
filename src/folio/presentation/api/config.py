"""API configuration adapter.

Bridges the centralized folio_config settings with the API layer. Requests
read the settings the application was built with, so an app created with
explicit settings never falls back to the process-wide ones.
"""

from fastapi import Request

from folio_config.settings import Settings


def get_api_settings(request: Request) -> Settings:
    """Settings of the application serving ``request``."""
    return request.app.state.settings
