"""List the videos of a Cloudinary folder through the Cloudinary Search API."""

from __future__ import annotations

import json
import logging
import time
from typing import TYPE_CHECKING, Any

import httpx

from app.schemas.videos import VideoItem

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

# Every listed folder lives under this root in the Cloudinary media library.
VIDEO_FOLDER_ROOT = "videos"
MAX_RESULTS = 20


class MediaSearchError(Exception):
    """Raised when the Cloudinary search cannot complete (not configured, unreachable, or an API error)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.cause = cause
        super().__init__(message)


def is_media_search_configured(settings: Settings) -> bool:
    if not settings.CLOUDINARY_CLOUD_NAME or not settings.CLOUDINARY_CLOUD_NAME.strip():
        return False
    if not settings.CLOUDINARY_API_KEY or not settings.CLOUDINARY_API_KEY.strip():
        return False
    if settings.CLOUDINARY_API_SECRET is None:
        return False
    secret = settings.CLOUDINARY_API_SECRET.get_secret_value()
    return bool(secret and secret.strip())


def quote_expression_value(value: str) -> str:
    """Double-quote a value for a search expression, escaping backslashes and quotes."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def build_search_payload(folder: str) -> dict[str, Any]:
    """Search body: videos in videos/<folder>, newest first, capped at MAX_RESULTS."""
    folder_path = quote_expression_value(f"{VIDEO_FOLDER_ROOT}/{folder}")
    return {
        "expression": f"resource_type:video AND folder:{folder_path}",
        "sort_by": [{"created_at": "desc"}],
        "max_results": MAX_RESULTS,
    }


def to_video_item(resource: dict[str, Any]) -> VideoItem:
    """Reshape a search resource: title is the last path segment of public_id."""
    public_id = str(resource.get("public_id") or "")
    return VideoItem(
        title=public_id.split("/")[-1],
        url=str(resource.get("secure_url") or ""),
    )


def _error_detail(resp: httpx.Response) -> str:
    try:
        body = resp.json()
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])[:500]
        return json.dumps(body)[:500]
    except (json.JSONDecodeError, ValueError):
        return resp.text[:500] if resp.text else "Unknown error"


async def list_folder_videos(folder: str, settings: Settings) -> list[VideoItem]:
    """
    Query Cloudinary for the videos in videos/<folder> and reshape them.

    Returns an empty list when the search succeeds with no resources; the caller
    decides how to present that. Raises MediaSearchError on any other failure.
    """
    if not is_media_search_configured(settings):
        raise MediaSearchError(
            "Cloudinary is not configured; set CLOUDINARY_CLOUD_NAME, CLOUDINARY_API_KEY, CLOUDINARY_API_SECRET."
        )
    cloud_name = (settings.CLOUDINARY_CLOUD_NAME or "").strip()
    api_key = (settings.CLOUDINARY_API_KEY or "").strip()
    api_secret = settings.CLOUDINARY_API_SECRET.get_secret_value()  # type: ignore[union-attr]
    url = f"{settings.CLOUDINARY_API_BASE_URL.rstrip('/')}/{cloud_name}/resources/search"
    timeout = httpx.Timeout(settings.CLOUDINARY_REQUEST_TIMEOUT_SEC)

    logger.info("Requested video folder", extra={"folder": f"{VIDEO_FOLDER_ROOT}/{folder}"})
    start = time.perf_counter()
    try:
        async with httpx.AsyncClient(auth=(api_key, api_secret), timeout=timeout) as client:
            resp = await client.post(url, json=build_search_payload(folder))
    except httpx.ConnectError as e:
        raise MediaSearchError("Cloudinary is unreachable.", cause=e) from e
    except httpx.TimeoutException as e:
        raise MediaSearchError(
            "Cloudinary request timed out. Try increasing CLOUDINARY_REQUEST_TIMEOUT_SEC.",
            cause=e,
        ) from e
    except httpx.HTTPError as e:
        raise MediaSearchError("Cloudinary request failed.", cause=e) from e
    elapsed = time.perf_counter() - start

    if resp.status_code == 401:
        raise MediaSearchError(
            "Cloudinary authentication failed (invalid API key or secret).", 401
        )
    if resp.status_code >= 400:
        raise MediaSearchError(
            f"Cloudinary returned {resp.status_code}: {_error_detail(resp)}",
            resp.status_code,
        )

    try:
        body = resp.json()
    except (json.JSONDecodeError, ValueError) as e:
        raise MediaSearchError("Cloudinary response body is not valid JSON.", cause=e) from e
    resources = body.get("resources") if isinstance(body, dict) else None
    if resources is None:
        resources = []
    if not isinstance(resources, list):
        raise MediaSearchError("Cloudinary response has an invalid 'resources' field.")

    logger.info(
        "Cloudinary search completed",
        extra={
            "folder": f"{VIDEO_FOLDER_ROOT}/{folder}",
            "total_count": body.get("total_count", len(resources)),
            "latency_seconds": round(elapsed, 3),
        },
    )
    return [to_video_item(r) for r in resources if isinstance(r, dict)]
