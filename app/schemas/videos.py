"""Schemas for the folder video listing."""

from pydantic import BaseModel, Field


class VideoItem(BaseModel):
    """One video: title is the last segment of the upstream public id."""

    title: str
    url: str = Field(..., description="HTTPS playback URL")
