#!/usr/bin/env python3
"""
Update the URL served by a running badge proxy.

Usage:
    python scripts/set_url.py https://img.shields.io/badge/build-passing-green.svg
    python scripts/set_url.py https://example.com/badge.svg --password secret123
    python scripts/set_url.py https://example.com/badge.svg --proxy-url http://badges.internal:3000
"""
from __future__ import annotations

import argparse
import os
import sys

import httpx


def set_url(url: str, proxy_url: str, password: str | None) -> bool:
    """Send the new URL to the proxy. Returns True when the proxy accepted it."""
    headers = {"Content-Type": "text/plain"}
    if password:
        headers["Authorization"] = f"Bearer {password}"

    print(f"\n📤 Setting URL: {url}")

    try:
        response = httpx.post(
            f"{proxy_url}/url",
            content=url.encode("utf-8"),
            headers=headers,
            timeout=10.0
        )
    except httpx.RequestError as e:
        print(f"\n❌ Error: {e}")
        print("   Is the proxy running? (python -m badge_proxy)")
        return False

    print(f"\n📥 Response ({response.status_code}): {response.text}")
    return response.status_code == 200


def main():
    parser = argparse.ArgumentParser(description="Update the URL served by the badge proxy")
    parser.add_argument("url", help="New upstream URL, sent verbatim")
    parser.add_argument("--proxy-url", default="http://localhost:3000", help="Proxy base URL")
    parser.add_argument("--password", help="Update password (or set URL_UPDATE_PASSWORD env)")

    args = parser.parse_args()

    password = args.password or os.environ.get("URL_UPDATE_PASSWORD") or None
    ok = set_url(args.url, args.proxy_url, password)
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
