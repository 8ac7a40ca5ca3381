"""
ClickClick Application Controller

Top-level controller that wires together all application components.
"""

import logging
import random
from typing import Optional

from PySide6.QtCore import QObject

from config import GameSettings, load_game_settings
from engine.game import GameEngine, GameState
from engine.timer import GameClock
from services.event_bus import EventBus
from services.feedback import FeedbackSink


logger = logging.getLogger(__name__)


class ClickClickApp(QObject):
    """
    Top-level application controller.
    Wires together the engine, clock, feedback sink and high score store.

    The embedding UI renders from event_bus.session_updated, forwards taps
    to engine.tap_area() and menu buttons to the engine commands.
    """

    def __init__(self, settings: Optional[GameSettings] = None, store=None,
                 rng: Optional[random.Random] = None, scheduler=None):
        super().__init__()

        self.settings = settings or load_game_settings()

        if store is None:
            from models.base import init_db
            from services.high_score_store import HighScoreStore
            init_db()
            store = HighScoreStore()
        self.store = store

        # Core services
        self.event_bus = EventBus()
        self.feedback_sink = FeedbackSink()
        self.clock = GameClock(interval_ms=self.settings.tick_interval_ms)
        self.engine = GameEngine(
            self.settings,
            store=self.store,
            rng=rng,
            scheduler=scheduler,
        )

        # Clock drives the engine
        self.clock.tick.connect(self.engine.tick)
        self.clock.tick.connect(self.event_bus.clock_tick.emit)

        # Wire up signals to event bus
        self.engine.state_changed.connect(self.event_bus.state_changed.emit)
        self.engine.session_updated.connect(self.event_bus.session_updated.emit)
        self.engine.feedback.connect(self.event_bus.feedback_requested.emit)
        self.engine.high_score_changed.connect(self.event_bus.high_score_changed.emit)
        self.engine.round_ended.connect(self.event_bus.round_ended.emit)

        self.engine.feedback.connect(self.feedback_sink.handle)
        self.engine.state_changed.connect(self._on_state_changed)
        self.engine.high_score_changed.connect(self._on_high_score_changed)

    def _on_state_changed(self, state_value: str) -> None:
        """Keep the clock running whenever a game is on screen."""
        state = GameState(state_value)
        if state == GameState.READY:
            self.clock.stop()
        elif state == GameState.STARTING:
            self.clock.restart()
        else:
            self.clock.start()

    def _on_high_score_changed(self, value: int) -> None:
        """Announce a new best."""
        self.event_bus.emit_message("info", f"New high score: {value}")

    def shutdown(self) -> None:
        """Stop the clock before the event loop exits."""
        self.clock.stop()
        logger.info("ClickClick shut down")


def create_app(**kwargs) -> ClickClickApp:
    """Initialize configuration and logging, then build the application."""
    from config import init_config
    init_config()
    return ClickClickApp(**kwargs)
