"""Schemas for plant tracking."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.base import OBJECT_ID_REGEX, CamelModel


class PlantCreate(CamelModel):
    user_id: str = Field(..., pattern=OBJECT_ID_REGEX)
    plant_name: str = Field(..., min_length=1, max_length=255)


class PlantRead(CamelModel):
    id: str
    user_id: str
    plant_name: str
    progress: int
    created_at: datetime


class PlantCreateResponse(BaseModel):
    message: str
    plant: PlantRead
