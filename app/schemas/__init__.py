"""Pydantic request/response schemas."""

from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisteredUser,
    RegisterRequest,
    RegisterResponse,
    TokenClaims,
    UserSummary,
)
from app.schemas.health import HealthResponse
from app.schemas.plants import PlantCreate, PlantCreateResponse, PlantRead
from app.schemas.seed_requests import (
    ProgressValue,
    SeedRequestCreate,
    SeedRequestCreateResponse,
    SeedRequestRead,
    SeedRequestStatus,
)
from app.schemas.upload import ImageUpload
from app.schemas.users import ProfileUpdate, ProfileUpdateResponse, UserProfile
from app.schemas.videos import VideoItem

__all__ = [
    "HealthResponse",
    "ImageUpload",
    "LoginRequest",
    "LoginResponse",
    "PlantCreate",
    "PlantCreateResponse",
    "PlantRead",
    "ProfileUpdate",
    "ProfileUpdateResponse",
    "ProgressValue",
    "RegisterRequest",
    "RegisterResponse",
    "RegisteredUser",
    "SeedRequestCreate",
    "SeedRequestCreateResponse",
    "SeedRequestRead",
    "SeedRequestStatus",
    "TokenClaims",
    "UserProfile",
    "UserSummary",
    "VideoItem",
]
