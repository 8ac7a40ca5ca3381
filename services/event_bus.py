"""
Event Bus - Central signal hub for inter-module communication.

All modules connect to this single object rather than directly to each other,
enabling loose coupling between the game engine, the clock, and whatever UI
embeds them.
"""

from PySide6.QtCore import QObject, Signal


class EventBus(QObject):
    """
    Central signal hub for ClickClick.

    The EventBus acts as a mediator between application components:
    - GameEngine emits state, session and feedback events
    - GameClock emits ticks
    - UI components listen and update displays

    Usage:
        # In the application controller
        engine.session_updated.connect(self.event_bus.session_updated.emit)

        # In a display widget
        self.event_bus.session_updated.connect(self._on_session_updated)
    """

    # ============ Game Lifecycle ============
    state_changed = Signal(str)         # GameState value
    round_ended = Signal(int)           # final score
    high_score_changed = Signal(int)    # new high score

    # ============ Session Updates ============
    session_updated = Signal(object)    # GameSnapshot

    # ============ Feedback ============
    feedback_requested = Signal(object) # FeedbackIntent

    # ============ Clock Events ============
    clock_tick = Signal()

    # ============ System Events ============
    system_message = Signal(str, str)   # (level, message) - e.g., ("info", "New high score")

    def __init__(self):
        super().__init__()

    def emit_message(self, level: str, message: str) -> None:
        """Emit a system message (info, warning, error)."""
        self.system_message.emit(level, message)
