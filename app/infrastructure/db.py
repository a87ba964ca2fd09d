"""Database engine and session factory for the SQL repositories."""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.infrastructure.config.settings import settings

# Created on first use so in-memory mode never needs DATABASE_URL
_engine = None
_SessionLocal = None


def _create_engine(database_url: str) -> Engine:
    """
    Create an engine for the configured database.

    SQLite connections are shared with the event loop thread, and an in-memory
    SQLite database is pinned to a single connection so every session sees
    the same tables.

    Args:
        database_url: SQLAlchemy database URL

    Returns:
        SQLAlchemy engine
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool if database_url.endswith(":memory:") else None,
            echo=settings.debug_mode,
        )
    return create_engine(
        database_url,
        pool_pre_ping=True,  # Verify connections before using
        echo=settings.debug_mode,  # Log SQL queries in debug mode
    )


def _get_engine() -> Engine:
    """Get or create the database engine."""
    global _engine
    if _engine is None:
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required for database operations")
        _engine = _create_engine(settings.database_url)
    return _engine


def get_db_session() -> Session:
    """
    Get a database session.

    Each repository call opens its own session and closes it when done.

    Returns:
        SQLAlchemy session instance
    """
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_get_engine())
    return _SessionLocal()
