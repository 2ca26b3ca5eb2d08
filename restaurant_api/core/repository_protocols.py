"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All storage IO accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async methods: implementations suspend at every storage call
"""

from typing import Protocol

from restaurant_api.core.domain_types import RestaurantId


class RestaurantLike(Protocol):
    """Structural contract for restaurant payloads and stored records."""
    name: str | None
    address: str | None
    category: str | None


class RestaurantRecord(RestaurantLike, Protocol):
    """A stored restaurant: payload fields plus its identifier."""
    id: int


class RestaurantRepository(Protocol):
    """Contract for restaurant persistence; sole owner of the stored collection."""
    async def find_all(self) -> list[RestaurantRecord]: ...
    async def find_by_name(self, name: str) -> RestaurantRecord | None: ...
    async def exists(self, name: str) -> bool: ...
    async def index_of(self, name: str) -> RestaurantId | None: ...
    async def create(self, candidate: RestaurantLike) -> RestaurantRecord: ...
    async def update(
        self, name: str, replacement: RestaurantLike,
    ) -> RestaurantRecord: ...
    async def delete(self, name: str) -> RestaurantId: ...
