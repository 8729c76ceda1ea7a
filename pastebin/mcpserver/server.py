"""FastMCP server exposing the snippet store as MCP tools."""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from ..api.model import PasteRequest
from ..api.service import (
    get_snippet_service,
    list_snippets_service,
    paste_snippet_service,
)
from ..snippet import SnippetStore, SnippetStoreError

logger = logging.getLogger("pastebin")


def _handle_store_error(exc: SnippetStoreError) -> ToolError:
    return ToolError(exc.message)


def _handle_generic_exception(exc: Exception, *, default_message: str) -> ToolError:
    logger.exception(default_message)
    return ToolError(f"{default_message}: {exc}")


def paste_snippet_tool(
    store: SnippetStore,
    name: str,
    code: str,
    language: str | None = None,
    expires_in: int | None = None,
) -> Dict[str, Any]:
    payload = PasteRequest(name=name, code=code, language=language, expires_in=expires_in)
    try:
        response = paste_snippet_service(payload, store)
    except SnippetStoreError as exc:
        raise _handle_store_error(exc)
    except Exception as exc:  # pragma: no cover - defensive
        raise _handle_generic_exception(exc, default_message="Storing snippet failed")
    return response.model_dump(by_alias=True)


def list_snippets_tool(store: SnippetStore, name: str) -> Dict[str, Any]:
    try:
        response = list_snippets_service(name, store)
    except SnippetStoreError as exc:
        raise _handle_store_error(exc)
    except Exception as exc:  # pragma: no cover - defensive
        raise _handle_generic_exception(exc, default_message="Listing snippets failed")
    return response.model_dump(by_alias=True)


def get_snippet_tool(store: SnippetStore, name: str, snippet_id: str) -> Dict[str, Any]:
    try:
        response = get_snippet_service(name, snippet_id, store)
    except SnippetStoreError as exc:
        raise _handle_store_error(exc)
    except Exception as exc:  # pragma: no cover - defensive
        raise _handle_generic_exception(exc, default_message="Fetching snippet failed")
    return response.model_dump(by_alias=True)


def create_server(store: SnippetStore) -> FastMCP:
    """Create a FastMCP server wired to the given snippet store."""

    server = FastMCP("Pastebin MCP Server")

    @server.tool(
        name="paste_snippet",
        description=(
            "Store a code snippet under an owner name. `language` defaults to plaintext and"
            " `expires_in` (milliseconds) defaults to 24 hours. Each name keeps only its 10"
            " most recent snippets."
        ),
        tags={"snippets", "paste"},
    )
    def paste_snippet(
        name: str,
        code: str,
        language: str | None = None,
        expires_in: int | None = None,
    ) -> Dict[str, Any]:
        """Store a snippet and return its id and expiry."""
        return paste_snippet_tool(store, name, code, language, expires_in)

    @server.tool(
        name="list_snippets",
        description="List the active (unexpired) snippets stored under an owner name.",
        tags={"snippets", "view"},
    )
    def list_snippets(name: str) -> Dict[str, Any]:
        return list_snippets_tool(store, name)

    @server.tool(
        name="get_snippet",
        description="Fetch one active snippet by owner name and snippet id.",
        tags={"snippets", "view"},
    )
    def get_snippet(name: str, snippet_id: str) -> Dict[str, Any]:
        return get_snippet_tool(store, name, snippet_id)

    return server


__all__ = [
    "create_server",
    "get_snippet_tool",
    "list_snippets_tool",
    "paste_snippet_tool",
]
