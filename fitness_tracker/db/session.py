"""
Database Session Management
Creates and manages SQLAlchemy database engine and session factory.

This module sets up the database connection using SQLAlchemy 2.0 style
and provides helpers for opening sessions around a unit of work.
"""

import logging
from contextlib import contextmanager
from typing import Generator, Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from fitness_tracker.core.config import settings
from fitness_tracker.db.base import Base

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores ON DELETE rules unless foreign keys are switched on per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, echo: bool = False) -> Engine:
    """
    Create a SQLAlchemy engine for the given URL.

    SQLite engines get foreign key enforcement (needed for CASCADE and
    RESTRICT rules). In-memory SQLite shares one connection across the
    whole process, otherwise every new connection would see an empty
    database.

    Args:
        url: SQLAlchemy database URL
        echo: Log all SQL statements

    Returns:
        Configured Engine
    """
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url in ("sqlite://", "sqlite+pysqlite://"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, echo=echo, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_engine(
        url,
        echo=echo,
        pool_pre_ping=True,  # Check connection health before using
        pool_recycle=3600,  # Recycle connections every hour
    )


# Default engine and session factory, built from global settings
engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)

# Configuration:
# - autoflush=False: Require explicit flush() calls (more predictable behavior)
# - expire_on_commit=False: Keep loaded attributes usable after commit
SessionLocal = sessionmaker(
    autoflush=False,
    expire_on_commit=False,
    bind=engine,
)


def init_db(bind: Engine = engine) -> None:
    """
    Create all tables registered on Base.

    Importing the models package registers every table with Base.metadata.
    """
    import fitness_tracker.models  # noqa: F401

    Base.metadata.create_all(bind=bind)
    logger.info("Database tables created (%d tables)", len(Base.metadata.tables))


def get_db() -> Generator[Session, None, None]:
    """
    Yield a database session and close it afterwards.

    The session is always closed, even if the caller raises.

    Usage:
        db = next(get_db())
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def session_scope(factory: sessionmaker = SessionLocal) -> Iterator[Session]:
    """
    Provide a transactional scope around a series of operations.

    Commits on success, rolls back and re-raises on any error.

    Usage:
        with session_scope() as db:
            user_service.create_user(db, ...)
    """
    db = factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
