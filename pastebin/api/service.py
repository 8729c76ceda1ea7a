"""Service-layer helpers for pasting and viewing snippets."""

from __future__ import annotations

import hmac
import logging
import os
from dataclasses import dataclass

from ..snippet import SnippetStore, Unauthorized
from .model import (
    AdminResponse,
    PasteRequest,
    PasteResponse,
    SnippetListResponse,
    SnippetResponse,
)

logger = logging.getLogger("pastebin")


@dataclass(slots=True)
class ApiSettings:
    """Runtime configuration for the API server."""

    host: str = "0.0.0.0"
    port: int = 3001
    cors_origin: str = "http://localhost:3000"
    admin_key: str | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ApiSettings":
        def _int_env(name: str, default: int) -> int:
            raw = os.getenv(name)
            if not raw:
                return default
            try:
                return int(raw)
            except ValueError:
                logger.warning("Invalid integer for %s: %s", name, raw)
                return default

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=_int_env("PORT", 3001),
            cors_origin=os.getenv("CORS_ORIGIN", "http://localhost:3000"),
            admin_key=os.getenv("ADMIN_KEY") or None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


def check_admin_key(settings: ApiSettings, admin_key: str | None) -> None:
    """Raise ``Unauthorized`` unless ``admin_key`` matches the configured secret.

    With no secret configured the admin surface is closed.
    """
    expected = settings.admin_key
    if not expected or not admin_key:
        raise Unauthorized("Unauthorized")
    if not hmac.compare_digest(admin_key.encode("utf-8"), expected.encode("utf-8")):
        raise Unauthorized("Unauthorized")


def paste_snippet_service(payload: PasteRequest, store: SnippetStore) -> PasteResponse:
    snippet = store.insert(
        payload.name,
        payload.code,
        language=payload.language,
        ttl_ms=payload.expires_in,
    )
    logger.info("Stored snippet %s (%s, %d chars)", snippet.id, snippet.language, snippet.size)
    return PasteResponse.from_snippet(snippet)


def list_snippets_service(name: str | None, store: SnippetStore) -> SnippetListResponse:
    snippets = store.list_active(name)
    return SnippetListResponse(snippets=[SnippetResponse.from_snippet(s) for s in snippets])


def get_snippet_service(
    name: str | None,
    snippet_id: str | None,
    store: SnippetStore,
) -> SnippetResponse:
    return SnippetResponse.from_snippet(store.get(name, snippet_id))


def admin_snapshot_service(
    admin_key: str | None,
    store: SnippetStore,
    settings: ApiSettings,
) -> AdminResponse:
    # Checked before the store is touched: a rejected call purges nothing.
    check_admin_key(settings, admin_key)
    snapshot = store.admin_snapshot()
    logger.info(
        "Admin snapshot: %d owner(s), %d snippet(s)",
        snapshot.total_owners,
        snapshot.total_snippets,
    )
    return AdminResponse.from_snapshot(snapshot)


__all__ = [
    "ApiSettings",
    "admin_snapshot_service",
    "check_admin_key",
    "get_snippet_service",
    "list_snippets_service",
    "paste_snippet_service",
]
