"""Snippet data model and the in-memory expiring store."""

from .errors import InvalidArgument, NotFound, SnippetStoreError, Unauthorized
from .model import AdminSnapshot, OwnerSummary, Snippet, SnippetSummary
from .store import SnippetStore

__all__ = [
    "AdminSnapshot",
    "InvalidArgument",
    "NotFound",
    "OwnerSummary",
    "Snippet",
    "SnippetStore",
    "SnippetStoreError",
    "SnippetSummary",
    "Unauthorized",
]
