"""Plant endpoints: add a plant, the garden view of seed requests, and a user's plants."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.base import OBJECT_ID_REGEX
from app.schemas.plants import PlantCreate, PlantCreateResponse, PlantRead
from app.schemas.seed_requests import SeedRequestRead
from app.services.plants import add_plant, list_plants
from app.services.seed_requests import list_tracked_seed_requests

router = APIRouter()

UserIdPath = Annotated[str, Path(pattern=OBJECT_ID_REGEX)]


@router.post("", response_model=PlantCreateResponse, status_code=201)
def post_plant(
    body: PlantCreate,
    db: Annotated[Session, Depends(get_db)],
) -> PlantCreateResponse:
    """Add a plant for a user; `userId` and `plantName` are required."""
    plant = add_plant(db, body)
    return PlantCreateResponse(
        message="Plant added successfully",
        plant=PlantRead.model_validate(plant),
    )


@router.get("/{user_id}", response_model=list[SeedRequestRead])
def get_user_garden(
    user_id: UserIdPath,
    db: Annotated[Session, Depends(get_db)],
) -> list[SeedRequestRead]:
    """
    The user's garden: seed requests in every status
    (pending, approved, released, rejected), newest first.
    """
    return [SeedRequestRead.model_validate(r) for r in list_tracked_seed_requests(db, user_id)]


@router.get("/{user_id}/list", response_model=list[PlantRead])
def get_user_plants(
    user_id: UserIdPath,
    db: Annotated[Session, Depends(get_db)],
) -> list[PlantRead]:
    """Plants added by the user, newest first."""
    return [PlantRead.model_validate(p) for p in list_plants(db, user_id)]
