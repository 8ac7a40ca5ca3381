"""
Feedback Sink - Dispatches engine feedback intents to the platform.

The engine only says *that* a pulse or notification should happen. The
presentation layer registers the calls that make it happen (haptics,
sounds, banners) against each FeedbackIntent.
"""

import logging
from collections import Counter, defaultdict
from typing import Callable

from PySide6.QtCore import QObject, Slot

from engine.game import FeedbackIntent


logger = logging.getLogger(__name__)


class FeedbackSink(QObject):
    """
    Receives FeedbackIntents and forwards them to registered handlers.

    Fire-and-forget: handler return values are ignored and a failing
    handler never affects the engine or the other handlers.

    Usage:
        sink = FeedbackSink()
        sink.register(FeedbackIntent.IMPACT, haptics.heavy_impact)
        engine.feedback.connect(sink.handle)
    """

    def __init__(self):
        super().__init__()
        self._handlers: dict[FeedbackIntent, list[Callable[[], None]]] = defaultdict(list)
        self._counts: Counter = Counter()

    def register(self, intent: FeedbackIntent, handler: Callable[[], None]) -> None:
        """Call handler every time intent is received."""
        self._handlers[intent].append(handler)

    def count(self, intent: FeedbackIntent) -> int:
        """Number of times intent has been received."""
        return self._counts[intent]

    @Slot(object)
    def handle(self, intent: FeedbackIntent) -> None:
        """Dispatch a single intent."""
        self._counts[intent] += 1
        logger.debug("Feedback intent: %s", intent.value)

        for handler in self._handlers.get(intent, []):
            try:
                handler()
            except Exception:
                logger.exception("Feedback handler for %s failed", intent.value)
