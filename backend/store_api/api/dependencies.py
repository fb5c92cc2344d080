"""FastAPI dependencies - hand the startup-built Store to request handlers.

Invariants:
    - The Store is created once in the lifespan and stored on app.state
    - Handlers receive it through Depends(get_store), never via import
"""

from typing import Annotated

from fastapi import Depends, Query, Request

from store_api.config import get_settings
from store_api.core.errors import PayloadValidationError
from store_api.core.repository_protocols import StoreLike
from store_api.infrastructure.database import DatabaseSessionManager


def get_store(request: Request) -> StoreLike:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Store not initialized")
    return store


def get_db_manager(request: Request) -> DatabaseSessionManager | None:
    return getattr(request.app.state, "db_manager", None)


class Page:
    """offset/limit query parameters, validated as non-negative integers.

    limit is unbounded unless MAX_PAGE_SIZE is configured.
    """

    def __init__(
        self,
        offset: Annotated[int, Query(ge=0)] = 0,
        limit: Annotated[int | None, Query(ge=0)] = None,
    ):
        settings = get_settings()
        if limit is None:
            limit = settings.default_page_size
        if settings.max_page_size is not None and limit > settings.max_page_size:
            raise PayloadValidationError(
                f"limit: must be at most {settings.max_page_size}",
            )
        self.offset = offset
        self.limit = limit


StoreDep = Annotated[StoreLike, Depends(get_store)]
PageDep = Annotated[Page, Depends(Page)]
