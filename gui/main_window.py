"""
Main Window - HoopCount scoreboard

The single screen of the application: two team score cards and a reset
button. The mouse wheel plays the part of the crown.
"""

import logging
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QPushButton, QMessageBox, QStatusBar
)
from PySide6.QtCore import Qt, Slot, QSize

from services.event_bus import EventBus
from engine.counter import ScoreCounter, ScoreState, Team
from engine.input import RotaryInput
from gui.widgets.score_view import TeamScoreView
from gui.icons import icon_reset
from gui.styles.theme import SURFACE_DARK, RESET_BUTTON, RESET_BUTTON_HOVER, TEXT_SECONDARY
from models.schemas import UserSettings
from config import UI_SETTINGS

logger = logging.getLogger(__name__)

MESSAGE_LOG_LEVELS = {
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class MainWindow(QMainWindow):
    """
    HoopCount scoreboard window.

    Input mapping:
    - Wheel up: crown forward, scores team A after a full turn
    - Wheel down: crown backward, scores team B after a full turn
    - Left swipe on a card: take a point from that team
    - Reset button: asks for confirmation, then zeroes both scores
    """

    def __init__(self, event_bus: EventBus, counter: ScoreCounter,
                 settings: Optional[UserSettings] = None, preview: bool = False):
        super().__init__()
        self.event_bus = event_bus
        self.counter = counter
        self.settings = settings or UserSettings()
        self.rotary = RotaryInput()

        # Previews show the layout without crown input
        self.crown_enabled = self.settings.crown_enabled and not preview

        self.setWindowTitle("HoopCount")
        self.setStyleSheet(f"QMainWindow {{ background-color: {SURFACE_DARK}; }}")

        self._build_ui()
        self._connect_signals()
        self.set_device(self.settings.device)
        self._on_score_changed(counter.get_score_state())

    def _build_ui(self) -> None:
        """Build the scoreboard layout."""
        central = QWidget()
        self.setCentralWidget(central)
        self._layout = QVBoxLayout(central)

        self.team_a_view = TeamScoreView(
            self.settings.team_a.name, self.settings.team_a.color
        )
        self._layout.addWidget(self.team_a_view)

        self.team_b_view = TeamScoreView(
            self.settings.team_b.name, self.settings.team_b.color
        )
        self._layout.addWidget(self.team_b_view)

        self.reset_button = QPushButton()
        self.reset_button.setObjectName("reset_button")
        self.reset_button.setIcon(icon_reset())
        self.reset_button.setFlat(True)
        self.reset_button.setToolTip("Reset scores")
        self.reset_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.reset_button.setStyleSheet(f"""
            QPushButton#reset_button {{
                border: none;
                color: {RESET_BUTTON};
            }}
            QPushButton#reset_button:hover {{
                color: {RESET_BUTTON_HOVER};
            }}
        """)
        self._layout.addWidget(self.reset_button, alignment=Qt.AlignmentFlag.AlignHCenter)

        self.status_bar = QStatusBar()
        self.status_bar.setSizeGripEnabled(False)
        self.status_bar.setStyleSheet(f"color: {TEXT_SECONDARY};")
        self.setStatusBar(self.status_bar)

    def _connect_signals(self) -> None:
        """Connect widget and event bus signals."""
        self.team_a_view.swiped_left.connect(self.counter.decrement_team_a)
        self.team_b_view.swiped_left.connect(self.counter.decrement_team_b)
        self.reset_button.clicked.connect(self.event_bus.reset_requested.emit)

        self.event_bus.reset_requested.connect(self.confirm_reset)
        self.event_bus.score_changed.connect(self._on_score_changed)
        self.event_bus.system_message.connect(self._on_system_message)

    def set_device(self, device: str) -> None:
        """Resize the window to one of the watch case presets."""
        width, height = UI_SETTINGS.device_presets[device]
        self.resize(width, height)
        self._apply_layout(width, height)

    def _apply_layout(self, width: int, height: int) -> None:
        """Scale spacing, margins, and fonts to the window size."""
        self._layout.setSpacing(int(height * UI_SETTINGS.spacing_ratio))
        margin = int(width * UI_SETTINGS.margin_ratio)
        self._layout.setContentsMargins(margin, 0, margin, 0)

        icon_px = max(8, int(width * UI_SETTINGS.reset_icon_ratio))
        self.reset_button.setIconSize(QSize(icon_px, icon_px))

        for view in (self.team_a_view, self.team_b_view):
            view.apply_size((width, height))

    @Slot()
    def confirm_reset(self) -> bool:
        """
        Ask before zeroing both scores.

        Returns:
            True if the user confirmed and the scores were reset
        """
        box = QMessageBox(self)
        box.setIcon(QMessageBox.Icon.Question)
        box.setWindowTitle("Reset Scores?")
        box.setText("Reset Scores?")
        box.setInformativeText("This will set both scores to zero.")
        reset = box.addButton("Reset", QMessageBox.ButtonRole.DestructiveRole)
        cancel = box.addButton("Cancel", QMessageBox.ButtonRole.RejectRole)
        box.setDefaultButton(cancel)
        box.exec()

        if box.clickedButton() is reset:
            self.counter.reset()
            return True
        return False

    @Slot(object)
    def _on_score_changed(self, state: ScoreState) -> None:
        """Refresh both cards from a ScoreState."""
        self.team_a_view.set_score(
            state.team_a_score, state.is_winning(Team.A), state.is_tied
        )
        self.team_b_view.set_score(
            state.team_b_score, state.is_winning(Team.B), state.is_tied
        )
        self.setWindowTitle(f"HoopCount  {state.team_a_score} - {state.team_b_score}")

    @Slot(str, str)
    def _on_system_message(self, level: str, message: str) -> None:
        """Log a system message and flash it in the status bar."""
        logger.log(MESSAGE_LOG_LEVELS.get(level, logging.INFO), message)
        self.status_bar.showMessage(message, UI_SETTINGS.status_message_ms)

    # ============ Qt Events ============

    def wheelEvent(self, event) -> None:
        """Treat the mouse wheel as the crown."""
        if not self.crown_enabled:
            event.ignore()
            return

        velocity = self.rotary.velocity_from_wheel(event.angleDelta().y())
        if velocity != 0:
            self.counter.apply_rotation(velocity)
        event.accept()

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        size = event.size()
        self._apply_layout(size.width(), size.height())
