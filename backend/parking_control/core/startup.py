from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..db.database import create_tables, engine
from .config import settings
from .logging import get_logger
from .metrics import set_app_info

logger = get_logger(__name__)


def create_lifespan():
    """Create lifespan context manager for FastAPI application.

    This function returns a lifespan context manager that handles:
    - Startup: publish app info to Prometheus, create missing tables
    - Shutdown: dispose of the database connection pool

    Returns:
        Lifespan context manager for FastAPI
    """
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for startup and shutdown events."""
        logger.info(
            "Application starting",
            extra={
                'environment': settings.ENVIRONMENT,
                'version': settings.APP_VERSION
            }
        )

        set_app_info(
            version=settings.APP_VERSION,
            environment=settings.ENVIRONMENT
        )
        logger.debug("Prometheus metrics initialized")

        if settings.DB_CREATE_TABLES:
            await create_tables()
            logger.debug("Database tables ensured")

        yield

        logger.info("Application shutting down")
        await engine.dispose()
        logger.debug("Database connection pool disposed")

    return lifespan
