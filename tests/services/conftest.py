"""Service test fixtures: async DB, repository and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - Lifespan is not run by ASGITransport, so app.state needs no manager

Design Decisions:
    - SQLite in-memory: fast, no external dependency; autoincrement and the
      unique constraint on name behave as on the file database
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from restaurant_api.db.base import Base
from restaurant_api.infrastructure.database import get_db
from restaurant_api.main import app
from restaurant_api.models.restaurant import Restaurant
from restaurant_api.services.restaurant_repository import SqlRestaurantRepository


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def repository(test_db):
    return SqlRestaurantRepository(test_db)


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def seed_restaurant(test_session_factory):
    """Insert 'Pizzeria Roma' directly into the test DB."""
    async with test_session_factory() as session:
        restaurant = Restaurant(
            name="Pizzeria Roma", address="Hauptstr. 1", category="Italian",
        )
        session.add(restaurant)
        await session.commit()
        await session.refresh(restaurant)
        return restaurant


@pytest.fixture
def row_count(test_session_factory):
    """Async callable returning the number of stored restaurants."""
    async def _count() -> int:
        async with test_session_factory() as session:
            result = await session.execute(select(func.count(Restaurant.id)))
            return result.scalar_one()
    return _count
