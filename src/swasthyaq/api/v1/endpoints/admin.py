"""Administrative seeding endpoints."""

from fastapi import APIRouter

from swasthyaq.core.logging import get_logger
from swasthyaq.dependencies import StoreDep
from swasthyaq.repositories.entities import ENTITY_TYPES
from swasthyaq.schemas.common import ApiResponse

logger = get_logger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post(
    "/seed",
    response_model=ApiResponse[dict[str, bool]],
    summary="Seed empty entity types",
    description="Writes built-in records for every entity type whose index is empty.",
)
async def seed(store: StoreDep) -> ApiResponse[dict[str, bool]]:
    seeded = {cls.index_name: await cls.ensure_seed(store) for cls in ENTITY_TYPES}
    return ApiResponse(data={"seeded": True, **seeded})


@router.post(
    "/reseed",
    response_model=ApiResponse[dict[str, int]],
    summary="Replace all data with seed data",
    description="Destructive: deletes every record of every entity type, then seeds.",
)
async def reseed(store: StoreDep) -> ApiResponse[dict[str, int]]:
    logger.warning("Reseed requested; replacing all stored entities")
    written = {cls.index_name: await cls.reseed(store) for cls in ENTITY_TYPES}
    return ApiResponse(data=written)
