"""
Application state - shared handles initialized at startup.
"""
from __future__ import annotations

from typing import Optional

import httpx
from fastapi import Request

from badge_proxy.services.url_store import UrlStore


class AppState:
    """
    Application state container.
    Built in the lifespan, attached to app.state and injected into routes via FastAPI dependencies.
    """

    def __init__(
        self,
        store: UrlStore,
        secret: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.store = store
        self.secret = secret
        self.http_client = http_client


def get_app_state(request: Request) -> AppState:
    """FastAPI dependency returning the state of the application serving this request."""
    return request.app.state.proxy
