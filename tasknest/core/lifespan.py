"""Application lifespan: startup and shutdown.

Wiring only: logging, SQLAlchemy instrumentation when telemetry is on,
telemetry flush and engine dispose on exit.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from tasknest.infrastructure.persistence import database
from tasknest.shared.telemetry import get_telemetry, set_telemetry, setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Shutdown order: telemetry flush, SQL engine dispose.
    """
    setup_logging()

    telemetry = get_telemetry()
    if telemetry is not None:
        database.ensure_engine()
        telemetry.instrument_sqlalchemy(database.engine)
        telemetry.instrument_logging()

    logger.info("Application startup complete")

    yield

    telemetry = get_telemetry()
    if telemetry is not None:
        telemetry.shutdown()
        set_telemetry(None)

    if database.engine is not None:
        await database.engine.dispose()
        logger.info("Database engine disposed")
