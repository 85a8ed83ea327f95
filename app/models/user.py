"""ORM model for application users (credentials and profile)."""

from sqlalchemy import Column, DateTime, String

from app.models.base import OBJECT_ID_LENGTH, Base, new_object_id, utcnow


class User(Base):
    """
    User account for JWT authentication and profile data.

    role: 'user' or 'admin'. email is unique at the storage layer; that index,
    not the registration pre-check, is the authoritative duplicate guard.
    """

    __tablename__ = "users"

    id = Column(String(OBJECT_ID_LENGTH), primary_key=True, default=new_object_id)
    name = Column(String(255), nullable=False)
    username = Column(String(255), nullable=False, index=True)
    email = Column(String(320), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default="user")
    profile_image = Column(String(1024), nullable=True)
    phone = Column(String(64), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
