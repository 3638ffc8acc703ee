"""Database engine and session management for the SQL store."""

from __future__ import annotations

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def _is_in_memory_sqlite(database_url: str) -> bool:
    return database_url in ("sqlite://", "sqlite:///:memory:")


def create_db_engine(database_url: str, timeout_seconds: float = 30.0) -> Engine:
    """Build an engine for ``database_url``.

    SQLite gets its lock timeout from ``timeout_seconds``; an in-memory
    SQLite database is pinned to a single connection so every session
    sees the same data.
    """
    if database_url.startswith("sqlite"):
        connect_args = {"timeout": timeout_seconds, "check_same_thread": False}
        if _is_in_memory_sqlite(database_url):
            return create_engine(
                database_url, connect_args=connect_args, poolclass=StaticPool
            )
        return create_engine(database_url, connect_args=connect_args)

    return create_engine(
        database_url,
        pool_pre_ping=True,
        pool_timeout=timeout_seconds,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_schema(engine: Engine) -> None:
    """Create the catalog tables if they do not exist yet."""
    # Importing the models registers them on Base.metadata.
    from catalog.infrastructure.persistence import sqlalchemy_product_repository  # noqa: F401

    Base.metadata.create_all(bind=engine)
