"""
Badge Proxy - stable front door for a badge whose address changes over time

Entry point for the FastAPI application.
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

import httpx
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from badge_proxy.config import AppConfig, get_config
from badge_proxy.logging import get_logger
from badge_proxy.routers import badge
from badge_proxy.services.security import get_secret
from badge_proxy.services.url_store import UrlStore
from badge_proxy.state import AppState

load_dotenv()

logger = get_logger(__name__)


async def _init_store(config: AppConfig, store: Optional[UrlStore]) -> UrlStore:
    """Use the injected store, or seed a new one from DEFAULT_URL."""
    if store is None:
        store = UrlStore(config.default_url)

    current = await store.read()
    if current is not None:
        logger.info(f"Server started with default URL: {current}")
    else:
        logger.info("Server started with no default URL")
    return store


def _init_secret(config: AppConfig) -> Optional[str]:
    """Load the URL update password."""
    secret = get_secret(config)
    if secret is not None:
        logger.info("URL update password is set - authentication required for updates")
    else:
        logger.warning("No URL update password set - any update will be accepted")
    return secret


def _init_http_client(config: AppConfig) -> httpx.AsyncClient:
    """Initialize shared HTTP client for upstream requests."""
    client = httpx.AsyncClient(timeout=config.upstream_timeout)
    logger.info("HTTP client initialized")
    return client


async def _shutdown_http_client(state: AppState) -> None:
    """Close the shared HTTP client."""
    if state.http_client:
        await state.http_client.aclose()
        logger.info("HTTP client closed")


async def plain_text_http_exception(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Render HTTP errors as plain text. Unsupported methods are reported as 404 like unknown paths."""
    if exc.status_code == 405:
        return PlainTextResponse("Not Found", status_code=404)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


def create_app(config: Optional[AppConfig] = None, store: Optional[UrlStore] = None) -> FastAPI:
    """
    Build the application.

    Args:
        config: Settings to use instead of the environment
        store: URL store to share with the handlers; a fresh one seeded from
               DEFAULT_URL is created at startup when omitted
    """
    config = config or get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager - handles startup and shutdown."""
        state = AppState(
            store=await _init_store(config, store),
            secret=_init_secret(config),
            http_client=_init_http_client(config),
        )
        app.state.proxy = state

        yield

        await _shutdown_http_client(state)

    docs = config.enable_docs
    app = FastAPI(
        title="Badge Proxy",
        description="Relays the badge behind a runtime-configurable URL",
        lifespan=lifespan,
        redirect_slashes=False,
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        openapi_url="/openapi.json" if docs else None,
    )
    app.add_exception_handler(StarletteHTTPException, plain_text_http_exception)
    app.include_router(badge.router)
    return app


app = create_app()
