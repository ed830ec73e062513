"""
HoopCount Engine

Core counting logic for the HoopCount scoreboard.
This module contains no GUI dependencies.
"""

from engine.counter import ScoreCounter, ScoreState, Team, FeedbackPulse
from engine.input import RotaryInput, SwipeDetector, SwipeDirection

__all__ = [
    "ScoreCounter",
    "ScoreState",
    "Team",
    "FeedbackPulse",
    "RotaryInput",
    "SwipeDetector",
    "SwipeDirection",
]
