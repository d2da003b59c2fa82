"""HTTP API."""

from .app import app, get_provider

__all__ = ["app", "get_provider"]
