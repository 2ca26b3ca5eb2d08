"""Restaurant Schemas: Pydantic models for the restaurant endpoints.

Invariants:
    - RestaurantPayload fields are optional at parse time; completeness is a
      repository decision (core/validate_restaurant.py), reported as 400
    - German keys adresse/kategorie accepted as aliases for address/category
    - Unknown keys ignored

Design Decisions:
    - Optional fields over required Fields: one Validation path with one message
      for "missing" and "empty" alike
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class RestaurantPayload(BaseModel):
    """Create/update body: name, address, category."""
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    address: str | None = Field(
        None, validation_alias=AliasChoices("address", "adresse"),
    )
    category: str | None = Field(
        None, validation_alias=AliasChoices("category", "kategorie"),
    )


class RestaurantResponse(BaseModel):
    """Stored restaurant as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    address: str
    category: str
