"""User registration, credential check, and profile read/update."""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import (
    DuplicateEmailError,
    InvalidCredentialsError,
    NotFoundError,
    ServerError,
)
from app.core.security import hash_password, verify_password
from app.models import User
from app.schemas.auth import RegisterRequest
from app.schemas.upload import ImageUpload
from app.schemas.users import ProfileUpdate

if TYPE_CHECKING:
    from app.services.file_storage import FileStorage

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"

# Profile fields a user may change through update_user_profile.
UPDATABLE_PROFILE_FIELDS = ("name", "username", "email", "phone")


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def register_user(db: Session, body: RegisterRequest) -> User:
    """
    Create a user with a bcrypt-hashed password.

    The email pre-check gives a friendly error; the unique index on users.email
    catches the race where two registrations pass the check concurrently.
    Raises DuplicateEmailError or ServerError.
    """
    try:
        if get_user_by_email(db, body.email) is not None:
            raise DuplicateEmailError()
        user = User(
            name=body.name,
            username=body.username,
            email=body.email,
            password_hash=hash_password(body.password),
            role=body.role or "user",
        )
        db.add(user)
        db.commit()
        db.refresh(user)
    except IntegrityError as e:
        db.rollback()
        raise DuplicateEmailError() from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Registration failed")
        raise ServerError() from e
    logger.info("User registered", extra={"user_id": user.id, "role": user.role})
    return user


def authenticate_user(db: Session, email: str, password: str) -> User:
    """Return the user for email if password matches. Raises NotFoundError or InvalidCredentialsError."""
    try:
        user = get_user_by_email(db, email)
    except SQLAlchemyError as e:
        logger.exception("Login lookup failed")
        raise ServerError() from e
    if user is None:
        raise NotFoundError(USER_NOT_FOUND)
    if not verify_password(password, user.password_hash):
        logger.info("Login rejected: invalid credentials", extra={"user_id": user.id})
        raise InvalidCredentialsError()
    return user


def get_user(db: Session, user_id: str) -> User:
    """Load a user by id. Raises NotFoundError or ServerError."""
    try:
        user = db.get(User, user_id)
    except SQLAlchemyError as e:
        logger.exception("User lookup failed", extra={"user_id": user_id})
        raise ServerError() from e
    if user is None:
        raise NotFoundError(USER_NOT_FOUND)
    return user


def update_user_profile(
    db: Session,
    user_id: str,
    changes: ProfileUpdate,
    image: ImageUpload | None,
    storage: "FileStorage",
) -> User:
    """
    Apply a partial profile update; fields left unset are not touched.

    When an image is supplied it is written through storage after the user is
    found, and only the returned reference path is stored on the user. If the
    commit fails the written file is deleted again.
    Raises NotFoundError, DuplicateEmailError or ServerError.
    """
    user = get_user(db, user_id)
    values = changes.model_dump(include=set(UPDATABLE_PROFILE_FIELDS), exclude_none=True)
    saved_reference = None
    if image is not None:
        saved_reference = storage.save(image)
        values["profile_image"] = saved_reference
    try:
        for field, value in values.items():
            setattr(user, field, value)
        db.commit()
        db.refresh(user)
    except IntegrityError as e:
        db.rollback()
        if saved_reference is not None:
            storage.delete(saved_reference)
        raise DuplicateEmailError() from e
    except SQLAlchemyError as e:
        db.rollback()
        if saved_reference is not None:
            storage.delete(saved_reference)
        logger.exception("Profile update failed", extra={"user_id": user_id})
        raise ServerError() from e
    logger.info(
        "Profile updated",
        extra={"user_id": user_id, "fields": sorted(values)},
    )
    return user
