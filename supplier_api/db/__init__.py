"""Database package — async SQLAlchemy engine, session factory, Base."""
from supplier_api.db.base import (
    Base,
    build_engine,
    build_session_factory,
    create_tables,
    get_db,
)

__all__ = ["Base", "build_engine", "build_session_factory", "create_tables", "get_db"]
