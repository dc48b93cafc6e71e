"""
Upstream service - fetches the content behind the stored URL.
"""
from __future__ import annotations

import httpx


class UpstreamError(Exception):
    """The upstream fetch failed; str() is the human-readable cause."""


async def fetch(url: str, client: httpx.AsyncClient) -> bytes:
    """
    Fetch the resource at url with a single GET.

    Args:
        url: The stored target URL, used verbatim
        client: Shared HTTP client for connection pooling

    Returns:
        The raw response body

    Raises:
        UpstreamError: On transport, DNS, TLS or timeout failures, an unusable
                       URL, or a non-2xx upstream status
    """
    try:
        response = await client.get(url, follow_redirects=True)
        response.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        # httpx timeouts carry no message
        cause = str(e) or f"{type(e).__name__} while requesting {url}"
        raise UpstreamError(cause) from e

    return response.content
