"""User Routes - list, get, create, update and delete users.

Invariants:
    - Bodies validated by UserCreate / UserPatch before the handler runs
    - Each handler makes exactly one Persistence Gateway call
    - Unknown ids surface as ResourceNotFoundError (404, empty body)
"""

from fastapi import APIRouter, Response, status

from store_api.api.dependencies import PageDep, StoreDep
from store_api.core.ordering import user_order_by
from store_api.core.repository_protocols import ListQuery
from store_api.schemas.user import UserCreate, UserPatch, UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(store: StoreDep, page: PageDep, order: str = "newest"):
    """List users, newest first unless order=oldest."""
    return await store.users.list(ListQuery(
        offset=page.offset, limit=page.limit, order_by=user_order_by(order),
    ))


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, store: StoreDep):
    return await store.users.get_by_id(user_id)


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(body: UserCreate, store: StoreDep):
    return await store.users.create(body.to_fields())


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(user_id: str, body: UserPatch, store: StoreDep):
    """Apply the supplied fields only; {} leaves the user unchanged."""
    return await store.users.update_by_id(user_id, body.to_fields())


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str, store: StoreDep):
    await store.users.delete_by_id(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
