"""
Game Engine - Core state machine for ClickClick.

The GameEngine runs independently of any UI. It is advanced by two
external events, a one-second tick and a tap on a quadrant, and reports
everything else (state changes, haptic feedback, new high scores)
through Qt Signals.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from PySide6.QtCore import QObject, Signal

from config import GAME_SETTINGS, CountdownMode, GameSettings
from engine.rules import InvalidAreaError, pick_next_target, random_area, validate_area
from engine.timer import schedule_single_shot


logger = logging.getLogger(__name__)


class GameState(Enum):
    """State machine states for the game lifecycle."""
    READY = "ready"
    STARTING = "starting"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class FeedbackIntent(Enum):
    """Side effects requested from the presentation layer."""
    IMPACT = "impact"                  # heavy haptic pulse
    WARNING = "warning"                # round-end notification
    NEW_HIGH_SCORE = "new_high_score"


@dataclass
class GameSession:
    """All game variables. One instance per engine, mutated in place."""
    state: GameState = GameState.READY
    score: int = 0
    high_score: int = 0
    time_remaining: int = 30
    countdown: int = 3
    target_area: int = 0


@dataclass(frozen=True)
class GameSnapshot:
    """
    Immutable copy of the session.
    Emitted after every mutation for display updates.
    """
    state: GameState
    score: int
    high_score: int
    time_remaining: int
    countdown: int
    target_area: int
    is_low_time: bool = False


class GameEngine(QObject):
    """
    Timing and scoring logic for ClickClick.
    Emits Qt Signals so UI layers can react without polling.

    The engine calls store.save_high_score() when the high score changes
    but does not wait on or inspect the result.
    """

    # Signals
    state_changed = Signal(str)         # new state value
    session_updated = Signal(object)    # GameSnapshot
    feedback = Signal(object)           # FeedbackIntent
    high_score_changed = Signal(int)    # new high score
    round_ended = Signal(int)           # final score

    def __init__(self, settings: GameSettings = GAME_SETTINGS, store=None,
                 rng: Optional[random.Random] = None,
                 scheduler: Optional[Callable[[int, Callable[[], None]], None]] = None):
        """
        Initialize the game engine.

        Args:
            settings: Round timing and board settings
            store: High score store with load_high_score()/save_high_score()
            rng: Random source for target selection
            scheduler: (delay_ms, callback) runner for the scheduled countdown
        """
        super().__init__()
        self.settings = settings
        self._store = store
        self._rng = rng or random.Random()
        self._scheduler = scheduler or schedule_single_shot

        # Bumped on every start/menu return to invalidate pending countdown steps
        self._epoch = 0

        high_score = store.load_high_score() if store is not None else 0
        self._session = GameSession(
            high_score=high_score,
            time_remaining=settings.round_seconds,
            countdown=settings.countdown_start,
            target_area=random_area(self._rng, settings.area_count),
        )

    @property
    def session(self) -> GameSession:
        """The live game session."""
        return self._session

    @property
    def state(self) -> GameState:
        """Current state of the game."""
        return self._session.state

    @state.setter
    def state(self, new_state: GameState) -> None:
        """Set the game state and emit signal."""
        old_state = self._session.state
        self._session.state = new_state
        logger.info("Game state %s -> %s", old_state.value, new_state.value)
        self.state_changed.emit(new_state.value)

    # ============ External Events ============

    def tick(self) -> None:
        """
        Advance the game by one second.

        Counts down while STARTING (tick-driven countdown only) and runs the
        round timer while PLAYING. Does nothing in any other state.
        """
        if self.state == GameState.PLAYING:
            self._tick_round()
        elif self.state == GameState.STARTING:
            if self.settings.countdown_mode == CountdownMode.TICK:
                self._advance_countdown()

    def tap_area(self, index: int) -> tuple[int, int]:
        """
        Handle a tap on a quadrant.

        A hit on the target scores a point and moves the target; any other
        quadrant costs a point. Taps outside PLAYING and invalid indices are
        ignored.

        Args:
            index: Quadrant index (0-3)

        Returns:
            (score, target_area) after the tap
        """
        try:
            validate_area(index, self.settings.area_count)
        except InvalidAreaError as e:
            logger.warning("Ignoring tap: %s", e)
            return self._session.score, self._session.target_area

        if self.state != GameState.PLAYING:
            logger.debug("Ignoring tap on area %d in state %s", index, self.state.value)
            return self._session.score, self._session.target_area

        if index == self._session.target_area:
            self._session.score += 1
            self.feedback.emit(FeedbackIntent.IMPACT)
            self._session.target_area = pick_next_target(
                self._session.target_area, self._rng, self.settings.area_count
            )
        else:
            self._session.score -= 1

        self._emit_session_update()
        return self._session.score, self._session.target_area

    # ============ Player Commands ============

    def start_game(self) -> None:
        """
        Start (or restart) a round with a fresh countdown.

        Allowed from every state. The high score is kept.
        """
        self._epoch += 1
        self._session.score = 0
        self._session.countdown = self.settings.countdown_start
        self._session.time_remaining = self.settings.round_seconds
        self._session.target_area = random_area(self._rng, self.settings.area_count)

        self.state = GameState.STARTING

        # Pulse for the first countdown value on screen
        self.feedback.emit(FeedbackIntent.IMPACT)
        self._emit_session_update()

        if self.settings.countdown_mode == CountdownMode.SCHEDULED:
            self._schedule_countdown_step(self._epoch)

    def pause(self) -> None:
        """Pause a running round."""
        if self.state == GameState.PLAYING:
            self.state = GameState.PAUSED
            self._emit_session_update()

    def resume(self) -> None:
        """Resume a paused round with score and time untouched."""
        if self.state == GameState.PAUSED:
            self.state = GameState.PLAYING
            self._emit_session_update()

    def return_to_menu(self) -> None:
        """Leave a paused or finished round for the start menu."""
        if self.state in (GameState.PAUSED, GameState.GAME_OVER):
            self._epoch += 1
            self.state = GameState.READY
            self._emit_session_update()

    def snapshot(self) -> GameSnapshot:
        """Return an immutable copy of the current session."""
        session = self._session
        return GameSnapshot(
            state=session.state,
            score=session.score,
            high_score=session.high_score,
            time_remaining=session.time_remaining,
            countdown=session.countdown,
            target_area=session.target_area,
            is_low_time=(
                session.state == GameState.PLAYING
                and session.time_remaining <= self.settings.low_time_threshold
            ),
        )

    # ============ Internal Transitions ============

    def _tick_round(self) -> None:
        """Run the round timer down by one second."""
        if self._session.time_remaining > 0:
            self._session.time_remaining -= 1

        if self._session.time_remaining <= 0:
            self._session.time_remaining = 0
            self._end_round()
        else:
            self._emit_session_update()

    def _advance_countdown(self) -> None:
        """Step the countdown; the step that reaches zero starts play."""
        self._session.countdown -= 1

        if self._session.countdown > 0:
            self.feedback.emit(FeedbackIntent.IMPACT)
            self._emit_session_update()
            return

        self._session.countdown = 0
        self._session.time_remaining = self.settings.round_seconds
        self.state = GameState.PLAYING

        # Double pulse on launch
        self.feedback.emit(FeedbackIntent.IMPACT)
        self.feedback.emit(FeedbackIntent.IMPACT)
        self._emit_session_update()

    def _schedule_countdown_step(self, epoch: int) -> None:
        """Queue the next countdown step of the given epoch."""
        self._scheduler(
            self.settings.tick_interval_ms,
            lambda: self._on_countdown_step(epoch),
        )

    def _on_countdown_step(self, epoch: int) -> None:
        """Apply a scheduled countdown step unless it has gone stale."""
        if epoch != self._epoch or self.state != GameState.STARTING:
            logger.debug("Dropping stale countdown step (epoch %d, current %d, state %s)",
                         epoch, self._epoch, self.state.value)
            return

        self._advance_countdown()

        if self.state == GameState.STARTING:
            self._schedule_countdown_step(epoch)

    def _end_round(self) -> None:
        """Finish the round and settle the high score."""
        final_score = self._session.score
        self.state = GameState.GAME_OVER
        self.feedback.emit(FeedbackIntent.WARNING)

        if final_score > self._session.high_score:
            self._session.high_score = final_score
            logger.info("New high score: %d", final_score)
            if self._store is not None:
                self._store.save_high_score(final_score)
            self.high_score_changed.emit(final_score)
            self.feedback.emit(FeedbackIntent.NEW_HIGH_SCORE)

        logger.info("Round over with score %d (best %d)", final_score, self._session.high_score)
        self.round_ended.emit(final_score)
        self._emit_session_update()

    def _emit_session_update(self) -> None:
        """Emit the current session snapshot."""
        self.session_updated.emit(self.snapshot())
