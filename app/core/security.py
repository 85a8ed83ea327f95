"""Password hashing, user id format, and JWT issue/verification for authentication."""

import re
import secrets
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any, Protocol

import bcrypt
import jwt

from app.core.errors import ConfigurationError, ExpiredTokenError, InvalidTokenError
from app.schemas.auth import TokenClaims
from app.schemas.base import OBJECT_ID_REGEX

if TYPE_CHECKING:
    from app.core.config import Settings

# Bcrypt cost (rounds).
BCRYPT_ROUNDS = 10

# User ids are 12 random bytes rendered as 24 lowercase hex characters.
OBJECT_ID_BYTES = 12
OBJECT_ID_PATTERN = re.compile(OBJECT_ID_REGEX)


def new_object_id() -> str:
    """Generate a new identity reference."""
    return secrets.token_hex(OBJECT_ID_BYTES)


def is_object_id(value: object) -> bool:
    """True if value is a syntactically valid identity reference (24 hex chars)."""
    return isinstance(value, str) and OBJECT_ID_PATTERN.match(value) is not None


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


class TokenSubject(Protocol):
    id: str
    role: str


class TokenService:
    """
    Issues and verifies signed, time-limited access tokens.

    Tokens carry sub (user id), role, iat and exp. They are not persisted and
    there is no revocation list: a leaked token stays valid until it expires.
    """

    def __init__(self, settings: "Settings") -> None:
        self._settings = settings

    def _secret(self) -> str:
        secret = self._settings.JWT_SECRET
        if secret is None or not secret.get_secret_value().strip():
            raise ConfigurationError("JWT_SECRET is not set in environment variables.")
        return secret.get_secret_value()

    @property
    def lifetime(self) -> timedelta:
        return timedelta(minutes=self._settings.JWT_EXPIRE_MINUTES)

    def issue(self, user: TokenSubject) -> str:
        """Create a token for user, expiring JWT_EXPIRE_MINUTES after issuance."""
        secret = self._secret()
        now = datetime.now(UTC)
        payload: dict[str, Any] = {
            "sub": str(user.id),
            "role": user.role,
            "iat": now,
            "exp": now + self.lifetime,
        }
        return jwt.encode(payload, secret, algorithm=self._settings.JWT_ALGORITHM)

    def verify(self, token: str) -> TokenClaims:
        """
        Validate expiry and signature; return the token's subject and role.

        Expiry is checked first on the unverified claims, so an expired token is
        reported as expired whether or not its signature is valid.
        Raises ExpiredTokenError, InvalidTokenError or ConfigurationError.
        """
        secret = self._secret()
        try:
            jwt.decode(
                token,
                options={"verify_signature": False, "verify_exp": True, "require": ["exp"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise ExpiredTokenError() from e
        except jwt.PyJWTError as e:
            raise InvalidTokenError() from e

        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self._settings.JWT_ALGORITHM],
                options={"require": ["exp", "sub", "role"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise ExpiredTokenError() from e
        except jwt.PyJWTError as e:
            raise InvalidTokenError() from e

        sub = payload.get("sub")
        role = payload.get("role")
        if not isinstance(sub, str) or not sub or not isinstance(role, str) or not role:
            raise InvalidTokenError("Unauthorized - Invalid token payload")
        return TokenClaims(id=sub, role=role)
