"""Product Routes - list, get, create, update and delete products.

Invariants:
    - Bodies validated by ProductCreate / ProductPatch before the handler runs
    - category filter is applied before ordering and pagination
    - Unknown category values in the query are rejected with 400; empty means no filter
"""

from fastapi import APIRouter, Response, status

from store_api.api.dependencies import PageDep, StoreDep
from store_api.core.domain_types import Category
from store_api.core.errors import PayloadValidationError
from store_api.core.ordering import product_order_by
from store_api.core.repository_protocols import ListQuery
from store_api.schemas.product import ProductCreate, ProductPatch, ProductResponse

router = APIRouter(prefix="/products", tags=["products"])


def _parse_category(value: str) -> Category:
    try:
        return Category(value)
    except ValueError:
        allowed = ", ".join(c.value for c in Category)
        raise PayloadValidationError(
            f"category: Input should be one of {allowed}",
        )


@router.get("", response_model=list[ProductResponse])
async def list_products(
    store: StoreDep,
    page: PageDep,
    order: str = "newest",
    category: str | None = None,
):
    """List products with optional category filter.

    order: newest (default), oldest, priceLowest, priceHighest.
    An empty category means no filter.
    """
    filters = {"category": _parse_category(category)} if category else {}
    return await store.products.list(ListQuery(
        offset=page.offset,
        limit=page.limit,
        order_by=product_order_by(order),
        filters=filters,
    ))


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str, store: StoreDep):
    return await store.products.get_by_id(product_id)


@router.post(
    "", response_model=ProductResponse, status_code=status.HTTP_201_CREATED,
)
async def create_product(body: ProductCreate, store: StoreDep):
    return await store.products.create(body.to_fields())


@router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(product_id: str, body: ProductPatch, store: StoreDep):
    return await store.products.update_by_id(product_id, body.to_fields())


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: str, store: StoreDep):
    await store.products.delete_by_id(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
