"""
ClickClick Game Engine

Core timing and scoring logic for the quadrant tapping game.
This module contains no GUI dependencies.
"""

from engine.game import GameEngine, GameSession, GameSnapshot, GameState, FeedbackIntent
from engine.timer import GameClock, schedule_single_shot
from engine.rules import InvalidAreaError, validate_area, random_area, pick_next_target, AREA_COUNT

__all__ = [
    "GameEngine",
    "GameSession",
    "GameSnapshot",
    "GameState",
    "FeedbackIntent",
    "GameClock",
    "schedule_single_shot",
    "InvalidAreaError",
    "validate_area",
    "random_area",
    "pick_next_target",
    "AREA_COUNT",
]
