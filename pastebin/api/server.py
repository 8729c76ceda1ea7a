"""FastAPI application factory for the pastebin service."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..exception_handler import error_handler
from ..mcpserver import create_server
from ..snippet import SnippetStore
from .route import router
from .service import ApiSettings

logger = logging.getLogger("pastebin")


def create_app(
    settings: ApiSettings | None = None,
    store: SnippetStore | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = settings if settings is not None else ApiSettings.from_env()
    store = store if store is not None else SnippetStore()

    # setup mcp
    mcp_app = create_server(store).http_app("/")

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        store.start()
        logger.info("Snippet store sweeper started")
        try:
            async with mcp_app.lifespan(app):
                yield
        finally:
            store.close()
            logger.info("Snippet store sweeper stopped")

    app = FastAPI(
        title="Pastebin API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        allow_credentials=True,
    )
    error_handler.install(app)
    app.include_router(router)

    # mount mcp
    app.mount("/mcp", mcp_app)

    return app


app = create_app()


__all__ = ["app", "create_app"]
