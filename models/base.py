"""
Database configuration and base model.

Uses SQLAlchemy 2.0 declarative style with SQLite.
"""

from pathlib import Path
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from config import PATHS


def get_database_path() -> Path:
    """Get the path to the SQLite database file."""
    PATHS.data_dir.mkdir(parents=True, exist_ok=True)
    return PATHS.database


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


DATABASE_URL = f"sqlite:///{get_database_path()}"
engine = create_engine(DATABASE_URL, echo=False)

# Session factory
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


@contextmanager
def get_session(factory: sessionmaker = SessionLocal) -> Generator[Session, None, None]:
    """Context manager for database sessions."""
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db() -> None:
    """Initialize the database, creating all tables."""
    Base.metadata.create_all(bind=engine)
