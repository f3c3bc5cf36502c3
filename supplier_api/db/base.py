"""Async SQLAlchemy engine, session factory, declarative Base, and FastAPI dependency."""


from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from supplier_api.core.config import Settings

# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
def _casefold(value: str | None) -> str | None:
    return value.casefold() if value is not None else None

def build_engine(settings: Settings) -> AsyncEngine:
    """Create the process-wide engine for one application instance."""
    engine_kwargs: dict = {
        "pool_pre_ping": True,
        "echo": settings.database_echo,
    }

    is_sqlite = settings.database_url.startswith("sqlite")

    # SQLite (local dev) doesn't support connection pooling parameters
    if is_sqlite:
        engine_kwargs["connect_args"] = {"check_same_thread": False}

    engine = create_async_engine(settings.database_url, **engine_kwargs)

    if is_sqlite:
        # SQLite's lower() only folds ASCII; search uses casefold() instead
        @event.listens_for(engine.sync_engine, "connect")
        def _register_casefold(dbapi_connection, connection_record):
            dbapi_connection.create_function("casefold", 1, _casefold)

    return engine

# ---------------------------------------------------------------------------
# Session factory
# ---------------------------------------------------------------------------
def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )

# ---------------------------------------------------------------------------
# Declarative Base
# ---------------------------------------------------------------------------
class Base(DeclarativeBase):
    """All ORM models inherit from this base."""

async def create_tables(engine: AsyncEngine) -> None:
    # Make sure every model is registered on Base.metadata
    import supplier_api.domain  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

# ---------------------------------------------------------------------------
# FastAPI dependency
# ---------------------------------------------------------------------------
async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield an async database session from the app's factory; roll back on error."""
    async with request.app.state.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
