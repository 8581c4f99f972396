"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL.
"""

from collections.abc import Iterator
from contextlib import contextmanager

import logfire
from sqlalchemy.exc import DBAPIError, OperationalError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from portal.adapter.error import RemoteTimeoutError, RemoteUnavailableError
from portal.config import Settings

# asyncpg's SQLSTATE for statement_timeout / command timeout cancellation
QUERY_CANCELED = "57014"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        pool_timeout=settings.remote.timeout_seconds,
        connect_args={
            # asyncpg: connection establishment and per-statement bounds
            "timeout": settings.remote.timeout_seconds,
            "command_timeout": settings.remote.timeout_seconds,
        },
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
        autocommit=False,  # Explicit transaction management
    )


def sqlstate(error: DBAPIError) -> str | None:
    """SQLSTATE of the driver error wrapped by SQLAlchemy, if any."""
    orig = error.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def constraint_name(error: DBAPIError) -> str | None:
    """Name of the violated constraint or index, if the driver reports it."""
    orig = error.orig
    # The asyncpg adapter keeps the driver exception as the cause
    for candidate in (orig, getattr(orig, "__cause__", None)):
        name = getattr(candidate, "constraint_name", None)
        if name:
            return name
    return None


@contextmanager
def db_errors(operation: str) -> Iterator[None]:
    """Map driver timeouts and connection failures to remote call errors.

    Integrity errors pass through untouched for the repository to translate.

    Args:
        operation: Name used in logs
    """
    try:
        yield
    except TimeoutError as e:
        logfire.error("Database call timed out", operation=operation, error=str(e))
        raise RemoteTimeoutError(f"Database timed out: {operation}")
    except OperationalError as e:
        if sqlstate(e) == QUERY_CANCELED:
            logfire.error("Database query canceled", operation=operation)
            raise RemoteTimeoutError(f"Database timed out: {operation}")
        logfire.error("Database unavailable", operation=operation, error=str(e))
        raise RemoteUnavailableError(f"Database unavailable: {operation}")
    except DBAPIError as e:
        if sqlstate(e) == QUERY_CANCELED:
            logfire.error("Database query canceled", operation=operation)
            raise RemoteTimeoutError(f"Database timed out: {operation}")
        if e.connection_invalidated:
            logfire.error("Database connection lost", operation=operation)
            raise RemoteUnavailableError(f"Database unavailable: {operation}")
        raise
    except OSError as e:
        logfire.error("Database unreachable", operation=operation, error=str(e))
        raise RemoteUnavailableError(f"Database unavailable: {operation}")
