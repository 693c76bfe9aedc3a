"""Folio - personal portfolio content API."""

__version__ = "1.0.0"
