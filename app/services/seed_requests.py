"""Seed request creation and per-user listing."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import ServerError
from app.models import SeedRequest
from app.schemas.seed_requests import SeedRequestCreate, SeedRequestStatus

logger = logging.getLogger(__name__)

# Statuses shown in a user's garden view: every canonical status.
TRACKED_STATUSES = tuple(s.value for s in SeedRequestStatus)


def create_seed_request(db: Session, body: SeedRequestCreate) -> SeedRequest:
    """Persist a new pending seed request. The owning user id is not checked against users."""
    row = SeedRequest(
        user_id=body.user_id,
        seed_type=body.seed_type,
        description=body.description,
        image_path=body.image_path or None,
        status=SeedRequestStatus.PENDING.value,
        progress={},
    )
    try:
        db.add(row)
        db.commit()
        db.refresh(row)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Error creating seed request", extra={"user_id": body.user_id})
        raise ServerError() from e
    logger.info(
        "Seed request created",
        extra={"seed_request_id": row.id, "user_id": row.user_id, "seed_type": row.seed_type},
    )
    return row


def list_seed_requests(db: Session, user_id: str) -> list[SeedRequest]:
    """Return the user's seed requests, newest first."""
    try:
        return (
            db.query(SeedRequest)
            .filter(SeedRequest.user_id == user_id)
            .order_by(SeedRequest.created_at.desc())
            .all()
        )
    except SQLAlchemyError as e:
        logger.exception("Error fetching seed requests", extra={"user_id": user_id})
        raise ServerError() from e


def list_tracked_seed_requests(db: Session, user_id: str) -> list[SeedRequest]:
    """Return the user's seed requests in any canonical status (the garden view)."""
    try:
        rows = (
            db.query(SeedRequest)
            .filter(
                SeedRequest.user_id == user_id,
                SeedRequest.status.in_(TRACKED_STATUSES),
            )
            .order_by(SeedRequest.created_at.desc())
            .all()
        )
    except SQLAlchemyError as e:
        logger.exception("Error fetching tracked seed requests", extra={"user_id": user_id})
        raise ServerError() from e
    logger.debug("Tracked seed requests found", extra={"user_id": user_id, "count": len(rows)})
    return rows
