"""Seed request endpoints: submit a request and list a user's requests."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.base import OBJECT_ID_REGEX
from app.schemas.seed_requests import (
    SeedRequestCreate,
    SeedRequestCreateResponse,
    SeedRequestRead,
)
from app.services.seed_requests import create_seed_request, list_seed_requests

router = APIRouter()


@router.post("", response_model=SeedRequestCreateResponse, status_code=201)
def post_seed_request(
    body: SeedRequestCreate,
    db: Annotated[Session, Depends(get_db)],
) -> SeedRequestCreateResponse:
    """
    Submit a seed request. It starts as `pending` with an empty progress map.

    `imagePath` is an image URL the client has already uploaded elsewhere.
    """
    row = create_seed_request(db, body)
    return SeedRequestCreateResponse(
        message="Seed request created successfully",
        seed_request=SeedRequestRead.model_validate(row),
    )


@router.get("", response_model=list[SeedRequestRead])
def get_seed_requests(
    db: Annotated[Session, Depends(get_db)],
    user_id: Annotated[str, Query(alias="userId", pattern=OBJECT_ID_REGEX)],
) -> list[SeedRequestRead]:
    """List a user's seed requests, newest first."""
    return [SeedRequestRead.model_validate(r) for r in list_seed_requests(db, user_id)]
