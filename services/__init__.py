"""
HoopCount Services

Application services for event routing and feedback playback.
"""

from services.event_bus import EventBus
from services.feedback import FeedbackPlayer

__all__ = ["EventBus", "FeedbackPlayer"]
