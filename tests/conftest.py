"""
Shared test fixtures and helpers.
"""
from __future__ import annotations

from typing import Callable, Generator, Optional

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from badge_proxy.config import AppConfig
from badge_proxy.main import create_app
from badge_proxy.services.url_store import UrlStore


TEST_PASSWORD = "secret123"
BADGE_URL = "https://example.com/badge.svg"
BADGE_SVG = b'<svg xmlns="http://www.w3.org/2000/svg"><text>passing</text></svg>'


def make_config(
    url_update_password: Optional[str] = None,
    default_url: Optional[str] = None,
    **overrides,
) -> AppConfig:
    """Build settings that ignore the developer's .env file and environment."""
    return AppConfig(
        _env_file=None,
        url_update_password=url_update_password,
        default_url=default_url,
        **overrides,
    )


@pytest.fixture
def store() -> UrlStore:
    """An empty URL store shared between the app and the test."""
    return UrlStore()


@pytest.fixture
def app_factory() -> Callable[..., FastAPI]:
    """Create an app with a given password, default URL and optional injected store."""
    def factory(
        url_update_password: Optional[str] = None,
        default_url: Optional[str] = None,
        store: Optional[UrlStore] = None,
    ) -> FastAPI:
        config = make_config(url_update_password=url_update_password, default_url=default_url)
        return create_app(config=config, store=store)

    return factory


@pytest.fixture
def client(app_factory, store) -> Generator[TestClient, None, None]:
    """Client for an app with no update password (open mode)."""
    with TestClient(app_factory(store=store)) as test_client:
        yield test_client


@pytest.fixture
def secured_client(app_factory, store) -> Generator[TestClient, None, None]:
    """Client for an app that requires `Bearer secret123` for updates."""
    with TestClient(app_factory(url_update_password=TEST_PASSWORD, store=store)) as test_client:
        yield test_client
