"""User endpoints: register, login, current profile, profile read and update."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user, get_token_service
from app.core.config import get_settings
from app.core.database import get_db
from app.core.errors import InvalidRequestError
from app.core.security import TokenService
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisteredUser,
    RegisterRequest,
    RegisterResponse,
    UserSummary,
)
from app.schemas.users import ProfileUpdate, ProfileUpdateResponse, UserProfile
from app.services.file_storage import FileStorage, LocalFileStorage, parse_image_upload
from app.services.users import authenticate_user, get_user, register_user, update_user_profile

logger = logging.getLogger(__name__)
router = APIRouter()


def get_file_storage() -> FileStorage:
    """Dependency: where uploaded profile images are written."""
    return LocalFileStorage(get_settings().UPLOAD_DIR)


def _blank_to_none(value: str | None) -> str | None:
    """HTML forms send empty strings for untouched fields."""
    if value is None or not value.strip():
        return None
    return value.strip()


@router.post("/register", response_model=RegisterResponse, status_code=201)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> RegisterResponse:
    """Create an account. The password is stored only as a bcrypt hash."""
    user = register_user(db, body)
    return RegisterResponse(
        message="User registered successfully",
        user=RegisteredUser.model_validate(user),
    )


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> LoginResponse:
    """
    Authenticate with email and password; returns a JWT valid for one hour.
    Include the token in the Authorization header as: Bearer <token>
    """
    user = authenticate_user(db, body.email, body.password)
    token = tokens.issue(user)
    logger.info("Login successful", extra={"user_id": user.id})
    return LoginResponse(
        message="Login successful",
        token=token,
        user=UserSummary.model_validate(user),
    )


# Declared before /{user_id} so the literal path is not captured as an id.
@router.get("/user-profile", response_model=UserProfile)
def get_current_user_profile(
    current_user: Annotated[UserProfile, Depends(get_current_user)],
) -> UserProfile:
    """Return the profile of the user identified by the bearer token."""
    return current_user


@router.get("/{user_id}", response_model=UserProfile)
def get_user_by_id(
    user_id: str,
    db: Annotated[Session, Depends(get_db)],
) -> UserProfile:
    return UserProfile.model_validate(get_user(db, user_id))


@router.put("/{user_id}", response_model=ProfileUpdateResponse)
async def update_profile(
    user_id: str,
    db: Annotated[Session, Depends(get_db)],
    storage: Annotated[FileStorage, Depends(get_file_storage)],
    name: Annotated[str | None, Form()] = None,
    username: Annotated[str | None, Form()] = None,
    email: Annotated[str | None, Form()] = None,
    phone: Annotated[str | None, Form()] = None,
    profile_image: Annotated[UploadFile | None, File(alias="profileImage")] = None,
) -> ProfileUpdateResponse:
    """
    Update name, username, email and/or phone (multipart form).

    An optional `profileImage` file part is parsed first, then stored, and only
    its reference path is saved on the user.
    """
    try:
        changes = ProfileUpdate(
            name=_blank_to_none(name),
            username=_blank_to_none(username),
            email=_blank_to_none(email),
            phone=_blank_to_none(phone),
        )
    except ValidationError as e:
        raise InvalidRequestError(
            "Invalid request",
            details=[f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()],
        ) from e
    image = await parse_image_upload(profile_image, get_settings().MAX_UPLOAD_BYTES)
    user = await run_in_threadpool(update_user_profile, db, user_id, changes, image, storage)
    return ProfileUpdateResponse(
        message="Profile updated successfully",
        user=UserProfile.model_validate(user),
    )
