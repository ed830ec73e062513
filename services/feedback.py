"""
Feedback Player

Plays the pulse emitted after each score change. On the desktop there is
no haptic engine, so a pulse is logged and, when enabled, sounded with the
system beep.
"""

import logging
from collections import deque
from typing import Optional

from PySide6.QtCore import QObject, Slot
from PySide6.QtWidgets import QApplication

from engine.counter import FeedbackPulse

logger = logging.getLogger(__name__)


class FeedbackPlayer(QObject):
    """
    Consumes FeedbackPulse events independently of the counter.

    Keeps a short history of played pulses so the last feedback can be
    inspected.
    """

    HISTORY_SIZE = 50

    def __init__(self, sound_enabled: bool = False):
        super().__init__()
        self.sound_enabled = sound_enabled
        self.history: deque[FeedbackPulse] = deque(maxlen=self.HISTORY_SIZE)

    @property
    def last_pulse(self) -> Optional[FeedbackPulse]:
        return self.history[-1] if self.history else None

    @Slot(object)
    def play(self, pulse: FeedbackPulse) -> None:
        """Play a single feedback pulse."""
        self.history.append(pulse)
        logger.debug(f"Feedback pulse: {pulse.value}")

        if self.sound_enabled and isinstance(QApplication.instance(), QApplication):
            QApplication.beep()

    def clear(self) -> None:
        self.history.clear()
