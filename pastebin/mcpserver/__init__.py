"""MCP tool surface for the snippet store."""

from .server import create_server

__all__ = ["create_server"]
