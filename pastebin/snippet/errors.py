"""Error taxonomy shared by the store and its transports."""

from __future__ import annotations


class SnippetStoreError(Exception):
    """Base class for recoverable, per-request store failures."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgument(SnippetStoreError):
    status_code = 400


class NotFound(SnippetStoreError):
    status_code = 404


class Unauthorized(SnippetStoreError):
    status_code = 401


__all__ = ["InvalidArgument", "NotFound", "SnippetStoreError", "Unauthorized"]
