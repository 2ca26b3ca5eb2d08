"""Restaurant Routes: HTTP surface of the restaurant repository.

Invariants:
    - Every route makes exactly one repository call
    - Success bodies: JSON records for reads and updates, plain text for
      create and delete confirmations
    - Failures raised as RestaurantApiError and rendered by the global handlers

Design Decisions:
    - Repository injected per request via Depends: tests override get_db only
    - /restaurants (collection) and /restaurant/{name} (item) kept as separate
      paths, matching the published URL scheme
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_api.core.errors import RestaurantNotFoundError
from restaurant_api.infrastructure.database import get_db
from restaurant_api.schemas.restaurant import RestaurantPayload, RestaurantResponse
from restaurant_api.core.repository_protocols import RestaurantRepository
from restaurant_api.services.restaurant_repository import SqlRestaurantRepository

logger = logging.getLogger(__name__)
router = APIRouter(tags=["restaurants"])


def get_repository(
    db: AsyncSession = Depends(get_db),
) -> RestaurantRepository:
    return SqlRestaurantRepository(db)


@router.get("/restaurants", response_model=list[RestaurantResponse])
async def list_restaurants(
    repository: RestaurantRepository = Depends(get_repository),
):
    """All stored restaurants (possibly none)."""
    return await repository.find_all()


@router.get("/restaurant/{name}", response_model=RestaurantResponse)
async def get_restaurant(
    name: str, repository: RestaurantRepository = Depends(get_repository),
):
    restaurant = await repository.find_by_name(name)
    if restaurant is None:
        raise RestaurantNotFoundError(name)
    return restaurant


@router.post(
    "/restaurant",
    status_code=status.HTTP_201_CREATED,
    response_class=PlainTextResponse,
)
async def create_restaurant(
    body: RestaurantPayload,
    repository: RestaurantRepository = Depends(get_repository),
):
    await repository.create(body)
    return "Restaurant was added"


@router.put("/restaurant/{name}", response_model=RestaurantResponse)
async def update_restaurant(
    name: str,
    body: RestaurantPayload,
    repository: RestaurantRepository = Depends(get_repository),
):
    """Replace name, address and category; the id is kept."""
    return await repository.update(name, body)


@router.delete("/restaurant/{name}", response_class=PlainTextResponse)
async def delete_restaurant(
    name: str, repository: RestaurantRepository = Depends(get_repository),
):
    await repository.delete(name)
    return f"Deleted the following restaurant: {name}"
