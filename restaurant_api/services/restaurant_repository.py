"""SQL Restaurant Repository: the only component that reads or writes the restaurants table.

Invariants:
    - Validation runs before any storage call; uniqueness is checked before any write
    - By-name mutations resolve name -> id first, then mutate by id
    - Each mutation commits exactly one record in one transaction
    - Unique-constraint violations at write time surface as RestaurantConflictError,
      every other storage failure as DatabaseError

Design Decisions:
    - One repository per request, bound to that request's AsyncSession
    - exists() check kept in front of the storage constraint so the common
      duplicate case is rejected without a failed write
    - Renaming onto another record's name is rejected as a Conflict
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import delete as sa_delete, exists as sa_exists, select
from sqlalchemy import update as sa_update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_api.core.domain_types import RestaurantId
from restaurant_api.core.errors import (
    RestaurantConflictError, RestaurantNotFoundError,
)
from restaurant_api.core.repository_protocols import RestaurantLike
from restaurant_api.core.validate_restaurant import require_complete
from restaurant_api.infrastructure.database import storage_errors
from restaurant_api.models.restaurant import Restaurant

logger = logging.getLogger(__name__)


class SqlRestaurantRepository:
    """RestaurantRepository backed by an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self._db = db

    # ─── Reads ────────────────────────────────────────────────────

    async def find_all(self) -> list[Restaurant]:
        async with storage_errors(self._db, "select"):
            result = await self._db.execute(
                select(Restaurant).order_by(Restaurant.id),
            )
            return list(result.scalars().all())

    async def find_by_name(self, name: str) -> Restaurant | None:
        """Exact-match lookup; None when no restaurant carries the name."""
        async with storage_errors(self._db, "select"):
            result = await self._db.execute(
                select(Restaurant).where(Restaurant.name == name),
            )
            return result.scalar_one_or_none()

    async def exists(self, name: str) -> bool:
        async with storage_errors(self._db, "select"):
            result = await self._db.execute(
                select(sa_exists().where(Restaurant.name == name)),
            )
            return bool(result.scalar())

    async def index_of(self, name: str) -> RestaurantId | None:
        """Identifier stored for name, or None."""
        async with storage_errors(self._db, "select"):
            result = await self._db.execute(
                select(Restaurant.id).where(Restaurant.name == name),
            )
            restaurant_id = result.scalar_one_or_none()
        return RestaurantId(restaurant_id) if restaurant_id is not None else None

    # ─── Writes ───────────────────────────────────────────────────

    async def create(self, candidate: RestaurantLike) -> Restaurant:
        """Persist a new restaurant under a fresh identifier."""
        require_complete(candidate)
        if await self.exists(candidate.name):
            logger.warning(
                f"Rejected duplicate restaurant: {candidate.name}",
                extra={"restaurant_name": candidate.name},
            )
            raise RestaurantConflictError(candidate.name)

        restaurant = Restaurant(
            name=candidate.name,
            address=candidate.address,
            category=candidate.category,
        )
        async with storage_errors(self._db, "insert"), \
                self._unique_name(candidate.name):
            self._db.add(restaurant)
            await self._db.commit()

        logger.info(
            f"Restaurant created: {restaurant.name}",
            extra={
                "restaurant_name": restaurant.name,
                "restaurant_id": restaurant.id,
            },
        )
        return restaurant

    async def update(self, name: str, replacement: RestaurantLike) -> Restaurant:
        """Overwrite all business fields of the restaurant stored under name.

        The identifier never changes. Renames are allowed as long as the new
        name does not belong to a different restaurant.
        """
        require_complete(replacement)
        restaurant_id = await self.index_of(name)
        if restaurant_id is None:
            raise RestaurantNotFoundError(name)
        if replacement.name != name and await self.exists(replacement.name):
            logger.warning(
                f"Rejected rename of {name} onto existing restaurant "
                f"{replacement.name}",
                extra={"restaurant_name": name, "restaurant_id": restaurant_id},
            )
            raise RestaurantConflictError(replacement.name)

        async with storage_errors(self._db, "update"), \
                self._unique_name(replacement.name):
            await self._db.execute(
                sa_update(Restaurant)
                .where(Restaurant.id == restaurant_id)
                .values(
                    name=replacement.name,
                    address=replacement.address,
                    category=replacement.category,
                ),
            )
            await self._db.commit()
            restaurant = await self._db.get(
                Restaurant, restaurant_id, populate_existing=True,
            )

        # Deleted by a concurrent request between index_of() and the update
        if restaurant is None:
            raise RestaurantNotFoundError(name)

        logger.info(
            f"Restaurant updated: {name} -> {restaurant.name}",
            extra={
                "restaurant_name": restaurant.name,
                "restaurant_id": restaurant.id,
            },
        )
        return restaurant

    async def delete(self, name: str) -> RestaurantId:
        """Remove the restaurant stored under name; returns its former id."""
        restaurant_id = await self.index_of(name)
        if restaurant_id is None:
            raise RestaurantNotFoundError(name)

        async with storage_errors(self._db, "delete"):
            await self._db.execute(
                sa_delete(Restaurant).where(Restaurant.id == restaurant_id),
            )
            await self._db.commit()

        logger.info(
            f"Restaurant deleted: {name}",
            extra={"restaurant_name": name, "restaurant_id": restaurant_id},
        )
        return restaurant_id

    # ─── Helpers ──────────────────────────────────────────────────

    @asynccontextmanager
    async def _unique_name(self, name: str) -> AsyncGenerator[None, None]:
        """Map a unique-constraint violation on name to RestaurantConflictError."""
        try:
            yield
        except IntegrityError as e:
            await self._db.rollback()
            logger.warning(
                f"Storage rejected duplicate restaurant name: {name}",
                extra={"restaurant_name": name},
            )
            raise RestaurantConflictError(name) from e
