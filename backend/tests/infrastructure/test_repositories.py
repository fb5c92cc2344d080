"""SqlAlchemyRepository - the Persistence Gateway against an in-memory SQLite store.

Invariants:
    - list() filters, then orders, then slices
    - Unknown and malformed ids raise ResourceNotFoundError
    - Constraint violations raise PersistenceValidationError
    - Other SQLAlchemy failures raise DatabaseError
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import OperationalError

from store_api.core.domain_types import Category
from store_api.core.errors import (
    DatabaseError, PersistenceValidationError, ResourceNotFoundError,
)
from store_api.core.ordering import NEWEST, OLDEST, PRICE_HIGHEST, PRICE_LOWEST
from store_api.core.repository_protocols import ListQuery

BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


def _user(i: int) -> dict:
    return {
        "email": f"user{i}@mail.com",
        "first_name": f"First{i}",
        "last_name": f"Last{i}",
        "address": f"{i} Main St",
        "created_at": BASE_TIME + timedelta(minutes=i),
    }


def _product(i: int, price: float, category: Category = Category.SPORTS) -> dict:
    return {
        "name": f"Product {i}",
        "description": "desc",
        "category": category,
        "price": price,
        "stock": i,
        "created_at": BASE_TIME + timedelta(minutes=i),
    }


async def test_create_populates_id_and_created_at(store):
    row = await store.users.create({
        "email": "alice@mail.com", "first_name": "Alice",
        "last_name": "Kim", "address": "Seoul",
    })
    assert isinstance(row.id, uuid.UUID)
    assert row.created_at is not None


async def test_get_by_id_round_trip(store):
    created = await store.users.create(_user(1))
    fetched = await store.users.get_by_id(str(created.id))
    assert fetched.email == "user1@mail.com"


async def test_get_unknown_id_raises_not_found(store):
    with pytest.raises(ResourceNotFoundError):
        await store.users.get_by_id(str(uuid.uuid4()))


async def test_get_malformed_id_raises_not_found(store):
    with pytest.raises(ResourceNotFoundError):
        await store.products.get_by_id("not-a-uuid")


async def test_list_orders_newest_and_oldest(store):
    for i in range(3):
        await store.users.create(_user(i))
    newest = await store.users.list(ListQuery(order_by=NEWEST))
    oldest = await store.users.list(ListQuery(order_by=OLDEST))
    assert [u.first_name for u in newest] == ["First2", "First1", "First0"]
    assert [u.first_name for u in oldest] == ["First0", "First1", "First2"]


async def test_list_applies_offset_after_ordering(store):
    for i in range(8):
        await store.users.create(_user(i))
    rows = await store.users.list(ListQuery(offset=5, limit=2, order_by=OLDEST))
    assert [u.first_name for u in rows] == ["First5", "First6"]


async def test_list_with_zero_limit_is_empty(store):
    await store.users.create(_user(1))
    assert await store.users.list(ListQuery(limit=0)) == []


async def test_list_filters_before_ordering_and_slicing(store):
    await store.products.create(_product(1, 30.0, Category.SPORTS))
    await store.products.create(_product(2, 10.0, Category.FASHION))
    await store.products.create(_product(3, 20.0, Category.SPORTS))
    await store.products.create(_product(4, 5.0, Category.SPORTS))

    rows = await store.products.list(ListQuery(
        limit=2, order_by=PRICE_LOWEST, filters={"category": Category.SPORTS},
    ))
    assert [p.price for p in rows] == [5.0, 20.0]

    rows = await store.products.list(ListQuery(order_by=PRICE_HIGHEST))
    assert [p.price for p in rows] == [30.0, 20.0, 10.0, 5.0]


async def test_update_applies_only_given_fields(store):
    created = await store.users.create(_user(1))
    updated = await store.users.update_by_id(str(created.id), {"address": "Busan"})
    assert updated.address == "Busan"
    assert updated.first_name == "First1"


async def test_update_with_no_fields_returns_row_unchanged(store):
    created = await store.products.create(_product(1, 9.5))
    updated = await store.products.update_by_id(str(created.id), {})
    assert updated.id == created.id
    assert updated.price == 9.5


async def test_update_unknown_id_raises_not_found(store):
    with pytest.raises(ResourceNotFoundError):
        await store.users.update_by_id(str(uuid.uuid4()), {"address": "x"})


async def test_delete_twice_raises_not_found(store):
    created = await store.products.create(_product(1, 1.0))
    await store.products.delete_by_id(str(created.id))
    with pytest.raises(ResourceNotFoundError):
        await store.products.delete_by_id(str(created.id))


async def test_duplicate_email_raises_persistence_validation_error(store):
    await store.users.create(_user(1))
    with pytest.raises(PersistenceValidationError):
        await store.users.create(_user(1))


async def test_negative_price_rejected_by_store(store):
    with pytest.raises(PersistenceValidationError):
        await store.products.create(_product(1, -1.0))


async def test_missing_column_rejected_by_store(store):
    fields = _user(1)
    del fields["address"]
    with pytest.raises(PersistenceValidationError):
        await store.users.create(fields)


async def test_failed_write_leaves_no_row(store):
    with pytest.raises(PersistenceValidationError):
        await store.products.create(_product(1, -1.0))
    assert await store.products.list(ListQuery()) == []


async def test_operational_failure_raises_database_error(store, monkeypatch):
    async def _fail(*args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection lost"))

    monkeypatch.setattr("sqlalchemy.ext.asyncio.AsyncSession.execute", _fail)
    with pytest.raises(DatabaseError):
        await store.users.list(ListQuery())


async def test_health_check_reports_connectivity(db_manager):
    assert await db_manager.health_check() is True
