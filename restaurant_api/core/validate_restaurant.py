"""Payload Completeness: pure presence checks for restaurant payloads.

Invariants:
    - A field is present iff its value is a non-empty string
    - Presence only: no trimming, no case folding, no format checks
    - Missing fields are reported in REQUIRED_FIELDS order

Design Decisions:
    - Works on any object with name/address/category attributes, so the
      repository can validate schemas and ORM rows alike
"""

from restaurant_api.core.domain_types import REQUIRED_FIELDS
from restaurant_api.core.errors import RestaurantValidationError


def missing_fields(candidate: object) -> list[str]:
    """Names of required fields that are absent or empty on candidate."""
    return [
        field.value
        for field in REQUIRED_FIELDS
        if not getattr(candidate, field.value, None)
    ]


def require_complete(candidate: object) -> None:
    """Raise RestaurantValidationError unless every required field is present."""
    missing = missing_fields(candidate)
    if missing:
        raise RestaurantValidationError(missing)
