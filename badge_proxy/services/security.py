"""
Security service - Bearer token check for URL updates.
"""
from __future__ import annotations

import hmac
from typing import Optional

from badge_proxy.config import AppConfig, get_config

BEARER_PREFIX = "Bearer "


def get_secret(config: Optional[AppConfig] = None) -> Optional[str]:
    """
    Get the URL update password from configuration.

    Uses the environment configuration when no config is given. Returns None
    when URL_UPDATE_PASSWORD is not set, meaning updates are accepted from anyone.
    """
    config = config or get_config()
    return config.url_update_password


def authorize(configured_secret: Optional[str], presented_credential: Optional[str]) -> bool:
    """
    Check an Authorization header value against the configured password.

    Without a configured password every request is authorized. Otherwise the
    header must be exactly "Bearer <password>": case-sensitive scheme, a single
    space, and a token equal to the password.

    Returns False for missing or malformed headers instead of raising exceptions.
    """
    if configured_secret is None:
        return True

    if not isinstance(presented_credential, str):
        return False
    if not presented_credential.startswith(BEARER_PREFIX):
        return False

    token = presented_credential[len(BEARER_PREFIX):]
    return hmac.compare_digest(token.encode("utf-8"), configured_secret.encode("utf-8"))
