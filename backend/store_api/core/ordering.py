"""Order-key mapping - pure translation from the `order` query value to an OrderBy.

Invariants:
    - Unrecognized order values fall back to newest first (created_at desc)
    - Never raises: every string maps to some OrderBy
"""

from dataclasses import dataclass

from store_api.core.domain_types import SortDirection


@dataclass(frozen=True)
class OrderBy:
    """Column name on the ORM model plus a sort direction."""
    column: str
    direction: SortDirection = SortDirection.DESC


NEWEST = OrderBy("created_at", SortDirection.DESC)
OLDEST = OrderBy("created_at", SortDirection.ASC)
PRICE_LOWEST = OrderBy("price", SortDirection.ASC)
PRICE_HIGHEST = OrderBy("price", SortDirection.DESC)


def user_order_by(order: str) -> OrderBy:
    match order:
        case "oldest":
            return OLDEST
        case _:
            return NEWEST


def product_order_by(order: str) -> OrderBy:
    match order:
        case "priceLowest":
            return PRICE_LOWEST
        case "priceHighest":
            return PRICE_HIGHEST
        case "oldest":
            return OLDEST
        case _:
            return NEWEST
