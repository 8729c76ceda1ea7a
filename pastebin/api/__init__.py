"""HTTP API for the pastebin service."""

from .server import create_app

__all__ = ["create_app"]
