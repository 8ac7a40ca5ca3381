"""
Game Clock - One-second tick source for ClickClick rounds.

Drives both the pre-round countdown and the 30-second round timer.
"""

import logging
from typing import Callable

from PySide6.QtCore import QObject, Qt, Signal, QTimer


logger = logging.getLogger(__name__)


class GameClock(QObject):
    """
    Periodic clock that emits tick once per interval (1 second by default).

    The clock knows nothing about game state; the application starts it
    when a game leaves the menu and stops it on return.

    Usage:
        clock = GameClock()
        clock.tick.connect(engine.tick)
        clock.start()
    """

    # Signals
    tick = Signal()

    # Constants
    TICK_INTERVAL_MS = 1000

    def __init__(self, interval_ms: int = None):
        """
        Initialize the game clock.

        Args:
            interval_ms: Custom interval in milliseconds (default: 1000)
        """
        super().__init__()

        self._interval_ms = interval_ms or self.TICK_INTERVAL_MS

        self._timer = QTimer(self)
        self._timer.setInterval(self._interval_ms)
        self._timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def interval_ms(self) -> int:
        """Tick interval in milliseconds."""
        return self._interval_ms

    @property
    def is_running(self) -> bool:
        """Check if the clock is currently ticking."""
        return self._timer.isActive()

    def start(self) -> None:
        """Start ticking. The first tick arrives one interval from now."""
        if not self._timer.isActive():
            self._timer.start()
            logger.debug("Game clock started (%d ms)", self._interval_ms)

    def stop(self) -> None:
        """Stop ticking."""
        if self._timer.isActive():
            self._timer.stop()
            logger.debug("Game clock stopped")

    def restart(self) -> None:
        """Restart the interval so the next tick is a full interval away."""
        self._timer.start()
        logger.debug("Game clock restarted")

    def _on_timeout(self) -> None:
        """Handle timer timeout."""
        self.tick.emit()


def schedule_single_shot(delay_ms: int, callback: Callable[[], None]) -> None:
    """Run callback once on the Qt event loop after delay_ms."""
    QTimer.singleShot(delay_ms, callback)
