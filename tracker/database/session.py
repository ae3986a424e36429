"""
Database Session Management
============================

Handles database connections and session lifecycle.
"""

import os
from contextlib import contextmanager
from typing import Generator, Optional
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from tracker.config import settings
from tracker.models import base


def create_db_engine(database_url: Optional[str] = None):
    """Create and configure the database engine."""
    database_url = database_url or settings.database_url

    # SQLite-specific configuration
    if database_url.startswith("sqlite"):
        in_memory = ":memory:" in database_url or database_url.rstrip("/") == "sqlite:"

        # Ensure data directory exists
        if ":///" in database_url and not in_memory:
            db_dir = os.path.dirname(database_url.split(":///")[1])
            if db_dir and not os.path.exists(db_dir):
                os.makedirs(db_dir, exist_ok=True)

        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=settings.app_debug
        )

        # Enable foreign keys, and WAL mode for file databases
        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            if not in_memory:
                cursor.execute("PRAGMA journal_mode=WAL")
            cursor.close()

    else:
        engine = create_engine(database_url, echo=settings.app_debug)

    return engine


# Create global engine and session factory
engine = create_db_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def get_db_context() -> Generator[Session, None, None]:
    """
    Context manager for database sessions.

    Usage:
        with get_db_context() as db:
            repo = ParcelRepository(db)
            repo.add(parcel)
    """
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def create_all_tables(engine_instance=None):
    """Create all tables in the database."""
    if engine_instance is None:
        engine_instance = engine

    base.create_all_tables(engine_instance)


def drop_all_tables(engine_instance=None):
    """Drop all tables in the database."""
    if engine_instance is None:
        engine_instance = engine

    base.drop_all_tables(engine_instance)
