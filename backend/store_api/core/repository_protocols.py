"""Persistence Gateway Protocols - contracts between request handlers and the store.

Invariants:
    - Handlers depend on these Protocols only, never on SQLAlchemy directly
    - list() applies filters, then ordering, then offset/limit
    - get_by_id / update_by_id / delete_by_id raise ResourceNotFoundError for unknown ids
    - create / update_by_id raise PersistenceValidationError when the store rejects the data

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async methods: implementations do IO; each call is one unit of work
"""

from dataclasses import dataclass, field
from typing import Any, Protocol, TypeVar

from store_api.core.ordering import NEWEST, OrderBy

EntityT = TypeVar("EntityT", covariant=True)


@dataclass(frozen=True)
class ListQuery:
    """Filtered, ordered, paginated read over one entity."""
    offset: int = 0
    limit: int = 10
    order_by: OrderBy = NEWEST
    filters: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.offset < 0 or self.limit < 0:
            raise ValueError("offset and limit must be non-negative")


class EntityRepository(Protocol[EntityT]):
    """Contract for single-entity CRUD persistence - implemented by infrastructure."""
    async def list(self, query: ListQuery) -> list[EntityT]: ...
    async def get_by_id(self, entity_id: str) -> EntityT: ...
    async def create(self, fields: dict[str, Any]) -> EntityT: ...
    async def update_by_id(self, entity_id: str, fields: dict[str, Any]) -> EntityT: ...
    async def delete_by_id(self, entity_id: str) -> None: ...


class StoreLike(Protocol):
    """The gateway handed to handlers: one repository per entity."""
    users: EntityRepository
    products: EntityRepository
