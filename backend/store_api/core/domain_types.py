"""Domain Types - enums and small value types shared across layers.

Invariants:
    - Category is the closed set of six product categories
    - SortDirection is asc/desc only
    - All valid states encoded as Enums, no raw string matching downstream

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
ProductId = NewType("ProductId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class Category(str, Enum):
    """Product category - maps to the products.category column."""
    FASHION = "FASHION"
    SPORTS = "SPORTS"
    ELECTRONICS = "ELECTRONICS"
    HOME_INTERIOR = "HOME_INTERIOR"
    HOUSEHOLD_SUPPLIES = "HOUSEHOLD_SUPPLIES"
    KITCHENWARE = "KITCHENWARE"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class EntityName(str, Enum):
    """Entity labels used in not-found messages and log extras."""
    USER = "User"
    PRODUCT = "Product"
