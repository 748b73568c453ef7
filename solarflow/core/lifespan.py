"""Application lifespan: startup and shutdown.

Only wiring of infrastructure: logging, the document store and its HTTP pool.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from solarflow.core.config import get_settings
from solarflow.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    With the firestore backend the REST client is initialized at startup and
    closed at shutdown. A failed initialization is logged; requests that need
    the store then return 503.
    """
    settings = get_settings()
    setup_logging()

    if settings.database_backend == "firestore":
        from solarflow.infrastructure.firebase import init_firebase

        if not init_firebase():
            logger.warning("Firestore backend selected but the client is not available")
    else:
        logger.info("Using in-memory document store")
        if settings.memory_seed_path:
            from solarflow.infrastructure.memory import get_memory_store, load_seed_file

            count = load_seed_file(get_memory_store(), settings.memory_seed_path)
            logger.info("Seeded %d documents from %s", count, settings.memory_seed_path)

    yield

    if settings.database_backend == "firestore":
        from solarflow.infrastructure.firebase import close_firebase

        await close_firebase()
