"""API v1 routes."""

from fastapi import APIRouter

from app.api.v1 import health, plants, seed_requests, users, videos

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(seed_requests.router, prefix="/seed-requests", tags=["seed-requests"])
router.include_router(plants.router, prefix="/plants", tags=["plants"])
router.include_router(videos.router, prefix="/videos", tags=["videos"])
