"""Async engine and session factory for the ballot store."""

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ballot.config import Settings
from ballot.util.error import ConfigurationError

SUPPORTED_DRIVERS = frozenset({"postgresql+asyncpg"})


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL and pool sizes

    Returns:
        Configured async engine

    Raises:
        ConfigurationError: If the URL does not use the asyncpg driver
    """
    url = make_url(settings.database_url)
    if url.drivername not in SUPPORTED_DRIVERS:
        raise ConfigurationError(
            "DATABASE__URL",
            f"unsupported driver {url.drivername!r}, expected postgresql+asyncpg",
        )

    return create_async_engine(
        url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Sessions do not autoflush; repositories flush after each write.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
