"""Database engine and session factory for PostgreSQL (asyncpg)."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from gather.config import Settings

APPLICATION_NAME = "gather-api"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine.

    Connections identify themselves as ``gather-api`` in ``pg_stat_activity``
    and are recycled before server-side idle timeouts drop them.

    Args:
        settings: Application settings with database configuration

    Returns:
        Configured async engine
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        pool_recycle=database.pool_recycle_seconds,
        connect_args={"server_settings": {"application_name": APPLICATION_NAME}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory for request-scoped sessions.

    Domain models are rebuilt from rows, so objects are never expired or
    autoflushed.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
