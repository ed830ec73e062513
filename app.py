"""
HoopCount Application Controller

Top-level controller that wires together all application components.
"""

from typing import Optional

from PySide6.QtCore import QObject

from services.event_bus import EventBus
from services.feedback import FeedbackPlayer
from engine.counter import ScoreCounter
from models.schemas import UserSettings


class HoopCountApp(QObject):
    """
    Top-level application controller.
    Wires together all application components.
    """

    def __init__(self, settings: Optional[UserSettings] = None, preview: bool = False):
        super().__init__()
        self.settings = settings or UserSettings()

        # Core services
        self.event_bus = EventBus()
        self.counter = ScoreCounter()
        self.feedback_player = FeedbackPlayer(sound_enabled=self.settings.sound_enabled)

        # Wire up counter signals to event bus
        self.counter.score_changed.connect(self.event_bus.score_changed.emit)
        self.counter.feedback_pulse.connect(self.event_bus.feedback_pulse.emit)
        self.counter.scores_reset.connect(self.event_bus.scores_reset.emit)

        self.event_bus.feedback_pulse.connect(self.feedback_player.play)
        self.event_bus.scores_reset.connect(
            lambda: self.event_bus.emit_message("info", "Scores reset")
        )

        # Create main window
        from gui.main_window import MainWindow
        self.main_window = MainWindow(
            self.event_bus, self.counter, self.settings, preview=preview
        )

    def show(self) -> None:
        """Show the main application window."""
        self.main_window.show()
