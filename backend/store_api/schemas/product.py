"""Product Schemas - create/patch contracts and the response shape.

Invariants:
    - ProductCreate: name, description, category, price, stock all required
    - name: 1-60 chars; category: one of Category; price >= 0; stock integer >= 0
    - ProductPatch: same per-field rules, all optional, {} accepted
    - stock rejects floats and bools; price rejects bools, numeric strings, inf and NaN
"""

from typing import Annotated, Any
from uuid import UUID

from pydantic import BeforeValidator, Field, StrictInt, StrictStr

from store_api.core.domain_types import Category
from store_api.schemas.base import (
    PatchModel, RequestModel, ResponseModel, UtcDatetime,
)

ProductName = Annotated[StrictStr, Field(min_length=1, max_length=60)]


def _require_number(v: Any) -> Any:
    """Accept JSON numbers only: no bools, no numeric strings."""
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ValueError("must be a number")
    return v


Price = Annotated[
    float, BeforeValidator(_require_number), Field(ge=0, allow_inf_nan=False),
]
Stock = Annotated[StrictInt, Field(ge=0)]


class ProductCreate(RequestModel):
    name: ProductName
    description: StrictStr
    category: Category
    price: Price
    stock: Stock


class ProductPatch(PatchModel):
    name: ProductName | None = None
    description: StrictStr | None = None
    category: Category | None = None
    price: Price | None = None
    stock: Stock | None = None


class ProductResponse(ResponseModel):
    """Product as returned by every /products endpoint."""
    id: UUID
    name: str
    description: str
    category: Category
    price: float
    stock: int
    created_at: UtcDatetime
