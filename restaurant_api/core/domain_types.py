"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - RestaurantId wraps the storage-assigned integer; never reused after delete
    - The three business fields are enumerated once, in RestaurantField

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: field names serialize into error messages without conversion
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

RestaurantId = NewType("RestaurantId", int)


# ─── Enums ───────────────────────────────────────────────────────

class RestaurantField(str, Enum):
    """Business fields every create/update payload must carry."""
    NAME = "name"
    ADDRESS = "address"
    CATEGORY = "category"


REQUIRED_FIELDS: tuple[RestaurantField, ...] = tuple(RestaurantField)
