"""Health check response."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    environment: str = Field(description="APP_ENV of the running process")
    database: Literal["connected", "disconnected"]
    media_search: Literal["configured", "not_configured"] = Field(
        description="Whether Cloudinary credentials are set for GET /videos/{folder}",
    )
