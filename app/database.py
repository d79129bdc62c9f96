"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the Booklist API.

Users, books, booklists and reviews each live in a table. Ordered
references between them are foreign keys or an association table,
which lets a multi-record change (a booklist plus its owner's collection, a review
plus its booklist's collection) commit as one transaction.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives → create a new session
2. Services stage all changes for the request on that session
3. The service commits once; an exception before the commit leaves
   nothing written
4. Close session when request ends
"""

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from app.config import get_settings

settings = get_settings()


# =============================================================================
# Database Engine
# =============================================================================
# - pool_pre_ping: Test connection health before using (prevents stale connections)
# - echo: Log all SQL statements in debug mode
# SQLite does not accept pool sizing arguments, so they are only passed to
# server databases.

if settings.is_sqlite:
    engine = create_engine(
        settings.database_url,
        connect_args={"check_same_thread": False},
        echo=settings.debug,
    )
else:
    engine = create_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
        echo=settings.debug,
    )


# =============================================================================
# Session Factory
# =============================================================================
# - autocommit=False: services decide when to commit
# - autoflush=False: don't auto-flush before queries (more predictable behavior)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses Base.metadata to discover the tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Creates a session for the request, yields it to the route handler,
    and closes it when the request ends. Uncommitted work is discarded
    on close.

    Usage in Routes:
        @router.get("/all")
        def list_books(db: DbSession):
            return catalog.list_books(db)

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables() -> None:
    """
    Create all database tables.

    Handy for local SQLite development. In production, use Alembic
    migrations instead.
    """
    import app.models  # noqa: F401  registers every table on Base.metadata

    Base.metadata.create_all(bind=engine)
