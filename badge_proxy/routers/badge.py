"""
Badge router - serves the content behind the stored URL and accepts URL updates.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from starlette.requests import ClientDisconnect

from badge_proxy.logging import get_logger
from badge_proxy.services.security import authorize
from badge_proxy.services.upstream import UpstreamError, fetch
from badge_proxy.state import AppState, get_app_state

logger = get_logger(__name__)

router = APIRouter(tags=["badge"])

BADGE_MEDIA_TYPE = "image/svg+xml"

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


async def read_new_url(request: Request) -> str:
    """
    Read the full request body and decode it as the new URL.

    The text is returned verbatim: no trimming and no URL validation.

    Raises:
        HTTPException: 400 if the body could not be read or is not valid UTF-8
    """
    try:
        body = await request.body()
    except ClientDisconnect:
        logger.warning("Client disconnected before the request body was read")
        raise HTTPException(status_code=400, detail="Failed to read request body")

    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.warning(f"Rejected URL update with undecodable body: {e}")
        raise HTTPException(status_code=400, detail="Request body is not valid UTF-8")


@router.get(
    "/",
    response_class=Response,
    responses={
        200: {
            "description": "Content fetched from the stored URL, served with caching disabled",
            "content": {BADGE_MEDIA_TYPE: {}},
        },
        404: {"description": "No URL has been set"},
        502: {"description": "Fetching the stored URL failed"},
    }
)
async def serve_badge(state: AppState = Depends(get_app_state)) -> Response:
    """
    Fetch the stored URL and relay its content.

    The URL is captured once; an update landing during the fetch does not
    affect this request.
    """
    url = await state.store.read()
    if url is None:
        raise HTTPException(status_code=404, detail="No URL has been set")

    if state.http_client is None:
        logger.error("HTTP client not initialized")
        raise HTTPException(status_code=500, detail="Internal server error")

    try:
        content = await fetch(url, state.http_client)
    except UpstreamError as e:
        logger.error(f"Failed to fetch {url!r}: {e}")
        raise HTTPException(status_code=502, detail=f"Error proxying request: {e}")

    return Response(content=content, media_type=BADGE_MEDIA_TYPE, headers=NO_CACHE_HEADERS)


@router.post(
    "/url",
    response_class=Response,
    responses={
        200: {"description": "URL updated successfully"},
        400: {"description": "Request body could not be read or is not valid UTF-8"},
        401: {"description": "Missing or invalid Bearer token"},
    }
)
@router.post("/", response_class=Response, include_in_schema=False)
async def update_url(request: Request, state: AppState = Depends(get_app_state)) -> Response:
    """
    Replace the stored URL with the raw request body.

    **Headers:**
    - `Authorization: Bearer <password>` (required when URL_UPDATE_PASSWORD is set)

    **Request Body:** The new URL as plain text, stored exactly as sent
    """
    if not authorize(state.secret, request.headers.get("authorization")):
        logger.warning("Rejected URL update: invalid or missing Bearer token")
        raise HTTPException(
            status_code=401,
            detail="Unauthorized: Valid password required to update URL",
            headers={"WWW-Authenticate": "Bearer"},
        )

    new_url = await read_new_url(request)
    await state.store.replace(new_url)
    logger.info(f"URL updated to {new_url!r}")

    return Response(content="URL updated successfully", media_type="text/plain")
