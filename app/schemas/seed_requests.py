"""Schemas for seed request creation and listing."""

import enum
from datetime import datetime
from typing import Union

from pydantic import Field, StrictBool, StrictFloat, StrictInt, StrictStr

from app.schemas.base import OBJECT_ID_REGEX, CamelModel


class SeedRequestStatus(str, enum.Enum):
    """Canonical seed request statuses. Transitions happen outside this service."""

    PENDING = "pending"
    APPROVED = "approved"
    RELEASED = "released"
    REJECTED = "rejected"


# Values allowed in a seed request's progress map.
ProgressValue = Union[StrictBool, StrictInt, StrictFloat, StrictStr]


class SeedRequestCreate(CamelModel):
    user_id: str = Field(..., pattern=OBJECT_ID_REGEX)
    seed_type: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1, max_length=5000)
    image_path: str | None = Field(
        default=None,
        max_length=2048,
        description="URL of an image already uploaded by the client.",
    )


class SeedRequestRead(CamelModel):
    id: str
    user_id: str
    seed_type: str
    description: str
    image_path: str | None = None
    status: SeedRequestStatus
    progress: dict[str, ProgressValue] = Field(default_factory=dict)
    created_at: datetime


class SeedRequestCreateResponse(CamelModel):
    message: str
    seed_request: SeedRequestRead
