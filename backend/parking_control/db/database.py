"""Database Configuration.

AsyncPG + SQLAlchemy setup for PostgreSQL with async support.
SQLite URLs (``sqlite+aiosqlite://``) are accepted for local runs and tests.
"""

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from ..core.config import settings

engine_options = {
    'echo': settings.DEBUG,
    'pool_pre_ping': True,
}

# SQLite pools reject sizing arguments
if not settings.is_sqlite:
    engine_options['pool_size'] = settings.DB_POOL_SIZE
    engine_options['max_overflow'] = settings.DB_MAX_OVERFLOW

engine = create_async_engine(settings.async_database_url, **engine_options)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False
)

Base = declarative_base()


async def get_db() -> AsyncSession:
    """Dependency to get database session.

    Yields:
        AsyncSession: Database session for the request

    Usage in FastAPI:
        @app.get("/items")
        async def read_items(db: AsyncSession = Depends(get_db)):
            ...
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def create_tables() -> None:
    """Create any missing tables for the registered models."""
    # Import registers the models on Base.metadata
    from .. import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
