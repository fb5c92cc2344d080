"""Root conftest - shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The app lifespan never runs; get_store / get_db_manager are overridden instead
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from store_api.api.dependencies import get_db_manager, get_store  # noqa: E402
from store_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
from store_api.infrastructure.repositories import Store  # noqa: E402
from store_api.main import app  # noqa: E402


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_all()
    yield manager
    await manager.close()


@pytest.fixture
def store(db_manager):
    return Store(db_manager)


@pytest.fixture
async def client(store, db_manager):
    """FastAPI test client with the Store dependency overridden."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_db_manager] = lambda: db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
