"""ORM model for seed requests submitted by users."""

from sqlalchemy import Column, DateTime, String, Text

from app.models.base import OBJECT_ID_LENGTH, Base, JSONDocument, new_object_id, utcnow
from app.schemas.seed_requests import SeedRequestStatus


class SeedRequest(Base):
    """
    A user's request for seeds.

    user_id is not a foreign key: the owning user is trusted as supplied at
    creation time. progress maps string keys to number, string or boolean values.
    """

    __tablename__ = "seed_requests"

    id = Column(String(OBJECT_ID_LENGTH), primary_key=True, default=new_object_id)
    user_id = Column(String(OBJECT_ID_LENGTH), nullable=False, index=True)
    seed_type = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    image_path = Column(String(2048), nullable=True)
    status = Column(
        String(32),
        nullable=False,
        default=SeedRequestStatus.PENDING.value,
        index=True,
    )
    progress = Column(JSONDocument, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
