"""
ClickClick Services

Application services for event handling, feedback dispatch and high score persistence.
"""

from services.event_bus import EventBus
from services.feedback import FeedbackSink
from services.high_score_store import HighScoreStore, InMemoryHighScoreStore

__all__ = ["EventBus", "FeedbackSink", "HighScoreStore", "InMemoryHighScoreStore"]
