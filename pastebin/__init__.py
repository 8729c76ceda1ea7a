"""Core package for the pastebin snippet service."""

from .snippet import Snippet, SnippetStore

__all__ = ["Snippet", "SnippetStore"]
