"""ORM model for plants tracked by a user."""

from sqlalchemy import Column, DateTime, Integer, String

from app.models.base import OBJECT_ID_LENGTH, Base, new_object_id, utcnow


class Plant(Base):
    """A plant a user is growing; progress starts at 0."""

    __tablename__ = "plants"

    id = Column(String(OBJECT_ID_LENGTH), primary_key=True, default=new_object_id)
    user_id = Column(String(OBJECT_ID_LENGTH), nullable=False, index=True)
    plant_name = Column(String(255), nullable=False)
    progress = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
