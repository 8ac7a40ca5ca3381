"""
Tests for high score persistence.
"""

import pytest
from sqlalchemy import create_engine, select
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from models.base import Base
from models.high_score import HighScore
from services.high_score_store import HighScoreStore, InMemoryHighScoreStore


@pytest.fixture
def session_factory():
    """Session factory bound to a fresh in-memory database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine, autocommit=False, autoflush=False)
    engine.dispose()


class TestHighScoreStore:
    """Tests for the SQLite-backed store."""

    def test_empty_store_loads_zero(self, session_factory):
        """With nothing saved the high score defaults to 0."""
        store = HighScoreStore(session_factory)
        assert store.load_high_score() == 0

    def test_save_then_load(self, session_factory):
        """A saved score is loaded back."""
        store = HighScoreStore(session_factory)

        assert store.save_high_score(12)
        assert store.load_high_score() == 12

    def test_load_returns_best(self, session_factory):
        """Loading returns the largest saved value."""
        store = HighScoreStore(session_factory)
        store.save_high_score(4)
        store.save_high_score(9)

        assert store.load_high_score() == 9

    def test_each_save_is_recorded(self, session_factory):
        """Every new best is kept with a timestamp."""
        store = HighScoreStore(session_factory)
        store.save_high_score(4)
        store.save_high_score(9)

        with session_factory() as session:
            rows = session.scalars(select(HighScore).order_by(HighScore.id)).all()

        assert [row.value for row in rows] == [4, 9]
        assert all(row.achieved_at is not None for row in rows)

    def test_survives_new_store_instance(self, session_factory):
        """A second store over the same database sees earlier saves."""
        HighScoreStore(session_factory).save_high_score(21)
        assert HighScoreStore(session_factory).load_high_score() == 21

    def test_save_failure_returns_false(self):
        """Database errors are logged and reported, not raised."""
        engine = create_engine("sqlite://", poolclass=StaticPool)
        store = HighScoreStore(sessionmaker(bind=engine))

        assert store.save_high_score(3) is False

    def test_load_failure_returns_zero(self):
        """An unreadable database loads as no high score."""
        engine = create_engine("sqlite://", poolclass=StaticPool)
        store = HighScoreStore(sessionmaker(bind=engine))

        assert store.load_high_score() == 0

    def test_engine_starts_on_unreadable_database(self):
        """The game engine still starts when the store cannot be read."""
        from engine.game import GameEngine, GameState

        engine = create_engine("sqlite://", poolclass=StaticPool)
        game = GameEngine(store=HighScoreStore(sessionmaker(bind=engine)))

        assert game.state == GameState.READY
        assert game.session.high_score == 0


class TestInMemoryHighScoreStore:
    """Tests for the in-memory store."""

    def test_initial_value(self):
        store = InMemoryHighScoreStore(initial=6)
        assert store.load_high_score() == 6

    def test_save_records_value(self):
        store = InMemoryHighScoreStore()
        store.save_high_score(2)
        store.save_high_score(5)

        assert store.load_high_score() == 5
        assert store.saves == [2, 5]
