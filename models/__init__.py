"""
ClickClick Database Models

SQLAlchemy ORM models for high score persistence.
"""

from models.base import Base, engine, SessionLocal, get_session, init_db
from models.high_score import HighScore

__all__ = [
    "Base",
    "engine",
    "SessionLocal",
    "get_session",
    "init_db",
    "HighScore",
]
