"""
Event Bus - Central signal hub for inter-module communication.

All modules connect to this single object rather than directly to each other,
enabling loose coupling between the score counter, GUI, and feedback player.
"""

from PySide6.QtCore import QObject, Signal


class EventBus(QObject):
    """
    Central signal hub for HoopCount.

    The EventBus acts as a mediator between all application components:
    - ScoreCounter emits score and feedback events
    - GUI components listen and update displays
    - FeedbackPlayer plays pulses

    Usage:
        # In the application controller
        counter.score_changed.connect(self.event_bus.score_changed.emit)

        # In the main window
        self.event_bus.score_changed.connect(self._on_score_changed)
    """

    # ============ Scoring Events ============
    score_changed = Signal(object)      # ScoreState
    scores_reset = Signal()

    # ============ Feedback Events ============
    feedback_pulse = Signal(object)     # FeedbackPulse

    # ============ UI Events ============
    reset_requested = Signal()          # Reset button pressed, not yet confirmed

    # ============ System Events ============
    system_message = Signal(str, str)   # (level, message) - e.g., ("info", "Scores reset")

    def __init__(self):
        super().__init__()

    def emit_message(self, level: str, message: str) -> None:
        """Emit a system message (info, warning, error)."""
        self.system_message.emit(level, message)
