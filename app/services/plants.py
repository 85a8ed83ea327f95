"""Plant tracking: add a plant for a user and list a user's plants."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import ServerError
from app.models import Plant
from app.schemas.plants import PlantCreate

logger = logging.getLogger(__name__)


def add_plant(db: Session, body: PlantCreate) -> Plant:
    """Persist a new plant with progress 0."""
    plant = Plant(user_id=body.user_id, plant_name=body.plant_name, progress=0)
    try:
        db.add(plant)
        db.commit()
        db.refresh(plant)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Error adding plant", extra={"user_id": body.user_id})
        raise ServerError() from e
    logger.info("Plant added", extra={"plant_id": plant.id, "user_id": plant.user_id})
    return plant


def list_plants(db: Session, user_id: str) -> list[Plant]:
    try:
        return (
            db.query(Plant)
            .filter(Plant.user_id == user_id)
            .order_by(Plant.created_at.desc())
            .all()
        )
    except SQLAlchemyError as e:
        logger.exception("Error fetching plants", extra={"user_id": user_id})
        raise ServerError() from e
