"""FastAPI routes for pasting, viewing and administering snippets."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from ..snippet import SnippetStore
from .model import (
    AdminRequest,
    AdminResponse,
    HealthResponse,
    PasteRequest,
    PasteResponse,
    SnippetListResponse,
    SnippetResponse,
    ViewRequest,
)
from .service import (
    ApiSettings,
    admin_snapshot_service,
    get_snippet_service,
    list_snippets_service,
    paste_snippet_service,
)


def get_settings(request: Request) -> ApiSettings:
    settings = getattr(request.app.state, "settings", None)
    if not isinstance(settings, ApiSettings):
        raise RuntimeError("API settings have not been initialised")
    return settings


def get_store(request: Request) -> SnippetStore:
    store = getattr(request.app.state, "store", None)
    if not isinstance(store, SnippetStore):
        raise RuntimeError("Snippet store has not been initialised")
    return store


router = APIRouter()


@router.post("/api/paste", response_model=PasteResponse)
async def paste_snippet(
    payload: PasteRequest,
    store: SnippetStore = Depends(get_store),
) -> PasteResponse:
    return paste_snippet_service(payload, store)


@router.post("/api/view", response_model=SnippetListResponse)
async def list_snippets(
    payload: ViewRequest,
    store: SnippetStore = Depends(get_store),
) -> SnippetListResponse:
    return list_snippets_service(payload.name, store)


@router.post("/api/view/{snippet_id}", response_model=SnippetResponse)
async def get_snippet(
    snippet_id: str,
    payload: ViewRequest,
    store: SnippetStore = Depends(get_store),
) -> SnippetResponse:
    return get_snippet_service(payload.name, snippet_id, store)


@router.post("/api/admin", response_model=AdminResponse)
async def admin_snapshot(
    payload: AdminRequest,
    store: SnippetStore = Depends(get_store),
    settings: ApiSettings = Depends(get_settings),
) -> AdminResponse:
    return admin_snapshot_service(payload.admin_key, store, settings)


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()


__all__ = ["router", "get_settings", "get_store"]
