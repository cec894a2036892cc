"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (logging, schema, DB engine).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, then table creation when auto_create_schema is set
    (otherwise run `alembic upgrade head` before starting).
    Shutdown: SQL engine dispose.
    """
    settings = get_settings()
    setup_logging()

    from app.infrastructure.persistence import database

    if settings.auto_create_schema:
        await database.create_schema()
        logger.info("Database schema ensured")

    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    await database.dispose_engine()
    logger.info("Database engine disposed")
