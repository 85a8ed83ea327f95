"""Bearer token auth dependencies: token service, header parsing, and current user lookup."""

import logging
from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.database import get_db
from app.core.errors import MalformedIdentityError, UnauthenticatedError
from app.core.security import TokenService, is_object_id
from app.schemas.auth import TokenClaims
from app.schemas.users import UserProfile
from app.services.users import get_user

logger = logging.getLogger(__name__)


def get_token_service() -> TokenService:
    """Dependency: token service bound to the process settings."""
    return TokenService(get_settings())


def get_bearer_token(
    authorization: Annotated[str | None, Header()] = None,
) -> str:
    """
    Dependency: extract the token from 'Authorization: Bearer <token>'.

    Raises UnauthenticatedError (401) when the header is missing or is not
    exactly two space-separated parts with the Bearer scheme.
    """
    if not authorization:
        logger.info("Rejected request without Authorization header")
        raise UnauthenticatedError()
    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1]:
        logger.info("Rejected malformed Authorization header")
        raise UnauthenticatedError("Unauthorized - Malformed Authorization header")
    return parts[1]


def get_token_claims(
    token: Annotated[str, Depends(get_bearer_token)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> TokenClaims:
    """Dependency: verified claims. Raises InvalidTokenError or ExpiredTokenError (401)."""
    return tokens.verify(token)


def get_current_user(
    claims: Annotated[TokenClaims, Depends(get_token_claims)],
    db: Annotated[Session, Depends(get_db)],
) -> UserProfile:
    """
    Dependency: the authenticated user's record, without the password hash.

    The token subject must be a well-formed user id before the store is
    queried; a validly signed token with a garbled subject is a 400, not a 401.
    """
    if not is_object_id(claims.id):
        logger.error("Token subject is not a valid user id")
        raise MalformedIdentityError()
    logger.info("Fetching user profile", extra={"user_id": claims.id})
    user = get_user(db, claims.id)
    return UserProfile.model_validate(user)
