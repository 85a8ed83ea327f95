"""Video listing endpoint: proxy a folder listing to the Cloudinary search API."""

import logging
from typing import Annotated

from fastapi import APIRouter, Path

from app.core.config import get_settings
from app.core.errors import NotFoundError, UpstreamError
from app.schemas.videos import VideoItem
from app.services.media_search import MediaSearchError, list_folder_videos

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/{folder}", response_model=list[VideoItem])
async def get_folder_videos(
    folder: Annotated[str, Path(min_length=1, max_length=255)],
) -> list[VideoItem]:
    """
    List up to 20 videos in `videos/<folder>`, newest first, as `{title, url}`.

    Returns 404 when the folder has no videos and 500 with details when
    Cloudinary fails.
    """
    try:
        videos = await list_folder_videos(folder, get_settings())
    except MediaSearchError as e:
        logger.error(
            "Cloudinary search failed",
            extra={
                "folder": folder,
                "upstream_status": e.status_code,
                "reason": e.message[:500],
            },
        )
        raise UpstreamError("Server error fetching videos", details=e.message) from e

    logger.info("Listed folder videos", extra={"folder": folder, "video_count": len(videos)})
    if not videos:
        raise NotFoundError("No videos found in the specified folder.")
    return videos
