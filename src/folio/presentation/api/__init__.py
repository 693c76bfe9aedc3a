"""HTTP API for the portfolio (FastAPI)."""

from folio.presentation.api.app import create_app

__all__ = ["create_app"]
