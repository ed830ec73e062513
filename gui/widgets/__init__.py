"""
HoopCount GUI Widgets

Reusable widget components for the scoreboard.
"""

from gui.widgets.score_view import TeamScoreView

__all__ = [
    "TeamScoreView",
]
