#!/usr/bin/env python3
"""
Mock upstream serving SVG badges for trying the proxy locally.

- /passing - green "build: passing" badge
- /failing - red "build: failing" badge
- /broken  - always answers 500

Run with: python scripts/mock_badge.py
Listens on: http://localhost:9001

Then point the proxy at it:
    python scripts/set_url.py http://localhost:9001/passing
"""
from __future__ import annotations

from datetime import datetime

from fastapi import FastAPI, Response
import uvicorn

app = FastAPI(title="Mock Badge Server", description="Test upstream for the badge proxy")

BADGE_TEMPLATE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="90" height="20">'
    '<rect width="40" height="20" fill="#555"/>'
    '<rect x="40" width="50" height="20" fill="{color}"/>'
    '<text x="4" y="14" fill="#fff" font-family="Verdana" font-size="11">build</text>'
    '<text x="44" y="14" fill="#fff" font-family="Verdana" font-size="11">{status}</text>'
    '</svg>'
)


def render_badge(status: str, color: str) -> Response:
    """Render a badge and log the hit."""
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] served badge: {status}")
    return Response(BADGE_TEMPLATE.format(status=status, color=color), media_type="image/svg+xml")


@app.get("/passing")
async def passing():
    return render_badge("passing", "#4c1")


@app.get("/failing")
async def failing():
    return render_badge("failing", "#e05d44")


@app.get("/broken")
async def broken():
    return Response("upstream exploded", status_code=500)


if __name__ == "__main__":
    print("\n🏷️  Mock Badge Server")
    print("=" * 50)
    print("Listening on http://localhost:9001")
    print("Endpoints:")
    print("  GET /passing - green badge")
    print("  GET /failing - red badge")
    print("  GET /broken  - HTTP 500")
    print("=" * 50 + "\n")

    uvicorn.run(app, host="127.0.0.1", port=9001, log_level="warning")
