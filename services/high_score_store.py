"""
High Score Store - Persistence for the best score across app runs.

The engine only needs load_high_score() and save_high_score(value);
both stores here provide exactly that.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from models.base import SessionLocal, get_session
from models.high_score import HighScore


logger = logging.getLogger(__name__)


class HighScoreStore:
    """
    SQLite-backed high score store.

    Every new best is appended as a HighScore row; the current high score
    is the largest stored value.

    Usage:
        store = HighScoreStore()
        best = store.load_high_score()
        store.save_high_score(best + 1)
    """

    def __init__(self, session_factory: sessionmaker = SessionLocal):
        self._session_factory = session_factory

    def load_high_score(self) -> int:
        """Return the stored high score, or 0 if none has been saved or it cannot be read."""
        try:
            with get_session(self._session_factory) as session:
                best = session.scalar(select(func.max(HighScore.value)))
        except SQLAlchemyError:
            logger.exception("Failed to load high score")
            return 0
        return best if best is not None else 0

    def save_high_score(self, value: int) -> bool:
        """
        Record a new high score.

        Returns:
            True if the write succeeded
        """
        try:
            with get_session(self._session_factory) as session:
                session.add(HighScore(value=value))
        except SQLAlchemyError:
            logger.exception("Failed to save high score %d", value)
            return False

        logger.debug("Saved high score %d", value)
        return True


class InMemoryHighScoreStore:
    """High score store that keeps the value in memory only."""

    def __init__(self, initial: int = 0):
        self._value = initial
        self.saves: list[int] = []

    def load_high_score(self) -> int:
        return self._value

    def save_high_score(self, value: int) -> bool:
        self._value = value
        self.saves.append(value)
        return True
