"""Async SQLAlchemy engine construction, declarative base, and the store handle."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import asyncpg
from sqlalchemy.engine import make_url
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from lightbnb.config import Settings, get_settings
from lightbnb.errors import ConstraintViolationError, StoreError

logger = logging.getLogger(__name__)

# asyncpg connect() failures reach the session unwrapped by SQLAlchemy
STORE_ERRORS = (SQLAlchemyError, OSError, asyncpg.PostgresError, asyncpg.InterfaceError)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


def create_engine(settings: Settings | None = None) -> AsyncEngine:
    """Build an async engine (and its connection pool) from settings."""
    settings = settings or get_settings()
    url = make_url(settings.async_database_url)

    kwargs: dict = {"echo": settings.debug, "pool_pre_ping": True}
    if url.get_backend_name() != "sqlite":
        kwargs.update(pool_size=settings.pool_size, max_overflow=settings.max_overflow)

    return create_async_engine(url, **kwargs)


class Store:
    """Handle on the relational store shared by every data-access operation.

    Wraps an :class:`AsyncEngine` and hands out one session per operation.
    Construct it once at startup and pass it to the service functions::

        store = Store(create_engine())
        user = await get_user_with_email(store, "tristanbatty@gmail.com")
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "Store":
        return cls(create_engine(settings))

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session that commits on success and rolls back on failure.

        SQLAlchemy and driver-level connection errors are re-raised as
        :class:`StoreError` (or :class:`ConstraintViolationError` for integrity
        failures) chained to the original exception.
        """
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except IntegrityError as exc:
                await session.rollback()
                logger.warning("Rolling back session after integrity error: %s", exc.orig)
                raise ConstraintViolationError(str(exc.orig)) from exc
            except STORE_ERRORS as exc:
                await session.rollback()
                logger.warning("Rolling back session after store error: %s", exc)
                raise StoreError(str(exc)) from exc

    async def create_all(self) -> None:
        """Create every table known to ``Base.metadata`` (development and tests)."""
        import lightbnb.models  # noqa: F401  register mappers

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()
