"""Store API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - One DatabaseSessionManager and one Store per process, built in the lifespan
      and kept on app.state for dependency injection
    - Every handler failure is translated by api/error_handlers.py

Design Decisions:
    - Lifespan over @app.on_event: cleaner startup/shutdown pairing
    - Tables created at startup when database_create_tables is set (no migrations)
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from store_api.api.error_handlers import register_error_handlers
from store_api.api.routes import health, products, users
from store_api.config import get_settings
from store_api.infrastructure.database import init_db
from store_api.infrastructure.observability import setup_logging
from store_api.infrastructure.repositories import Store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        await db_manager.create_all()
    app.state.db_manager = db_manager
    app.state.store = Store(db_manager)
    logger.info("Store API started")
    yield
    logger.info("Store API shutting down")
    await db_manager.close()


app = FastAPI(title="Store API", version="1.0.0", lifespan=lifespan)
register_error_handlers(app)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(products.router)


def run() -> None:
    """Console entry point: serve the app on settings.host:settings.port."""
    settings = get_settings()
    uvicorn.run(
        "store_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
