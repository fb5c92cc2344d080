"""SQLAlchemy Repositories - the Persistence Gateway over the relational store.

Invariants:
    - One AsyncSession per repository call; commit on success, rollback on failure
    - Unknown or malformed ids raise ResourceNotFoundError
    - IntegrityError / DataError / bind-time StatementError -> PersistenceValidationError
    - Any other SQLAlchemyError -> DatabaseError
    - list() applies filters, then order_by, then offset/limit

Design Decisions:
    - Generic repository parameterized by ORM model: users and products share every operation
    - Store is built once at startup and injected, never imported as a global
"""

import logging
import uuid
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import (
    DataError, DBAPIError, IntegrityError, SQLAlchemyError, StatementError,
)
from sqlalchemy.ext.asyncio import AsyncSession

from store_api.core.domain_types import EntityName, SortDirection
from store_api.core.errors import (
    DatabaseError, ErrorContext, PersistenceValidationError,
    ResourceNotFoundError,
)
from store_api.core.repository_protocols import ListQuery
from store_api.db.base import Base
from store_api.infrastructure.database import DatabaseSessionManager
from store_api.models.product import Product
from store_api.models.user import User

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def _store_message(e: StatementError) -> str:
    orig = getattr(e, "orig", None)
    return str(orig) if orig is not None else str(e)


class SqlAlchemyRepository(Generic[ModelT]):
    """CRUD over one ORM model, each call in its own unit of work."""

    def __init__(
        self, db: DatabaseSessionManager, model: type[ModelT], entity: EntityName,
    ):
        self._db = db
        self._model = model
        self._entity = entity

    @asynccontextmanager
    async def _unit_of_work(
        self, operation: str, entity_id: str | None = None,
    ) -> AsyncGenerator[AsyncSession, None]:
        """Session scope that converts store failures into domain errors."""
        context = ErrorContext(entity=self._entity.value, entity_id=entity_id)
        try:
            async with self._db.session() as session:
                yield session
        except (IntegrityError, DataError) as e:
            logger.warning(
                f"{self._entity.value} {operation} rejected by store: {e.orig}",
                extra={"entity": self._entity.value, "entity_id": entity_id},
            )
            raise PersistenceValidationError(_store_message(e), context) from e
        except DBAPIError as e:
            logger.error(f"DB driver error during {operation}: {e}")
            raise DatabaseError(_store_message(e), operation, context) from e
        except StatementError as e:
            # Raised before reaching the driver, e.g. a value the column type cannot bind
            raise PersistenceValidationError(_store_message(e), context) from e
        except SQLAlchemyError as e:
            logger.error(f"SQLAlchemy error during {operation}: {e}")
            raise DatabaseError(str(e), operation, context) from e

    def _parse_id(self, entity_id: str) -> uuid.UUID:
        try:
            return uuid.UUID(str(entity_id))
        except ValueError:
            raise ResourceNotFoundError(self._entity.value, str(entity_id))

    async def _get_or_404(self, session: AsyncSession, entity_id: str) -> ModelT:
        row = await session.get(self._model, self._parse_id(entity_id))
        if row is None:
            raise ResourceNotFoundError(self._entity.value, str(entity_id))
        return row

    async def list(self, query: ListQuery) -> list[ModelT]:
        stmt = select(self._model)
        for name, value in query.filters.items():
            stmt = stmt.where(getattr(self._model, name) == value)
        column = getattr(self._model, query.order_by.column)
        stmt = stmt.order_by(
            column.asc() if query.order_by.direction == SortDirection.ASC
            else column.desc(),
        )
        stmt = stmt.offset(query.offset).limit(query.limit)
        async with self._unit_of_work("list") as session:
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def get_by_id(self, entity_id: str) -> ModelT:
        async with self._unit_of_work("get", entity_id) as session:
            return await self._get_or_404(session, entity_id)

    async def create(self, fields: dict[str, Any]) -> ModelT:
        async with self._unit_of_work("create") as session:
            row = self._model(**fields)
            session.add(row)
            await session.commit()
        logger.info(
            f"{self._entity.value} created",
            extra={"entity": self._entity.value, "entity_id": str(row.id)},
        )
        return row

    async def update_by_id(self, entity_id: str, fields: dict[str, Any]) -> ModelT:
        async with self._unit_of_work("update", entity_id) as session:
            row = await self._get_or_404(session, entity_id)
            if not fields:
                return row
            for name, value in fields.items():
                setattr(row, name, value)
            await session.commit()
        logger.info(
            f"{self._entity.value} updated: {sorted(fields)}",
            extra={"entity": self._entity.value, "entity_id": entity_id},
        )
        return row

    async def delete_by_id(self, entity_id: str) -> None:
        async with self._unit_of_work("delete", entity_id) as session:
            row = await self._get_or_404(session, entity_id)
            await session.delete(row)
            await session.commit()
        logger.info(
            f"{self._entity.value} deleted",
            extra={"entity": self._entity.value, "entity_id": entity_id},
        )


class Store:
    """The Persistence Gateway: one repository per entity over a shared engine."""

    def __init__(self, db: DatabaseSessionManager):
        self.db = db
        self.users: SqlAlchemyRepository[User] = SqlAlchemyRepository(
            db, User, EntityName.USER,
        )
        self.products: SqlAlchemyRepository[Product] = SqlAlchemyRepository(
            db, Product, EntityName.PRODUCT,
        )
