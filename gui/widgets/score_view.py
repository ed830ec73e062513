"""
Team Score View

Score card for one team: team name, large score, and a swipe hint.
A left swipe anywhere on the card takes a point away.
"""

from PySide6.QtWidgets import QFrame, QVBoxLayout, QLabel, QGraphicsOpacityEffect
from PySide6.QtCore import (
    Qt, Signal, QEasingCurve, QPropertyAnimation, QVariantAnimation
)

from engine.input import SwipeDetector, SwipeDirection
from gui.styles.theme import (
    SCORE_TIED, SCORE_WINNING, SCORE_LOSING, TEXT_SECONDARY,
    CARD_BACKGROUND_ALPHA, TEAM_NAME_ALPHA, FONT_UI, with_alpha,
)
from config import UI_SETTINGS


def score_color(is_winning: bool, is_tied: bool) -> str:
    """Blue while level, green for the leader, red otherwise."""
    if is_tied:
        return SCORE_TIED
    return SCORE_WINNING if is_winning else SCORE_LOSING


class TeamScoreView(QFrame):
    """
    Score card for a single team.

    Signals:
        swiped_left: Emitted when the user swipes left across the card
    """

    swiped_left = Signal()

    def __init__(self, team_name: str, color: str, parent=None):
        super().__init__(parent)
        self.team_name = team_name
        self.color = color
        self._score = 0
        self._score_color = SCORE_TIED
        self._hint_offset = 0
        self._swipe = SwipeDetector()

        self._build_ui()
        self._build_animations()
        self.apply_size(UI_SETTINGS.device_presets[UI_SETTINGS.default_device])

    def _build_ui(self) -> None:
        """Build the card UI."""
        self.setObjectName("team_score_view")

        layout = QVBoxLayout(self)
        layout.setSpacing(0)

        self.name_label = QLabel(self.team_name)
        self.name_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.name_label)

        self.score_label = QLabel("0")
        self.score_label.setObjectName("score")
        self.score_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.score_label)

        # Overlaid on the trailing edge, positioned by _place_hint
        self.hint_label = QLabel("« -1", self)
        self.hint_label.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)

    def _build_animations(self) -> None:
        """Set up the idle swipe hint and the score change fade."""
        self._hint_anim = QVariantAnimation(self)
        self._hint_anim.setStartValue(0)
        self._hint_anim.setKeyValueAt(0.5, -UI_SETTINGS.hint_offset_px)
        self._hint_anim.setEndValue(0)
        self._hint_anim.setDuration(UI_SETTINGS.hint_animation_ms * 2)
        self._hint_anim.setEasingCurve(QEasingCurve.Type.InOutSine)
        self._hint_anim.setLoopCount(-1)
        self._hint_anim.valueChanged.connect(self._on_hint_offset)

        self._score_effect = QGraphicsOpacityEffect(self.score_label)
        self._score_effect.setOpacity(1.0)
        self.score_label.setGraphicsEffect(self._score_effect)

        self._score_anim = QPropertyAnimation(self._score_effect, b"opacity", self)
        self._score_anim.setDuration(UI_SETTINGS.score_animation_ms)
        self._score_anim.setStartValue(0.3)
        self._score_anim.setEndValue(1.0)
        self._score_anim.setEasingCurve(QEasingCurve.Type.InOutQuad)

    @property
    def score(self) -> int:
        return self._score

    @property
    def current_score_color(self) -> str:
        return self._score_color

    def apply_size(self, size: tuple[int, int]) -> None:
        """Scale fonts and padding to the window size."""
        width, height = size
        self._width = width
        self._height = height

        self.name_label.setStyleSheet(
            f"font-family: {FONT_UI}; font-weight: bold; "
            f"font-size: {max(1, int(width * UI_SETTINGS.team_name_ratio))}px; "
            f"color: {with_alpha(self.color, TEAM_NAME_ALPHA)};"
        )
        self.score_label.setFixedHeight(int(height * 0.25))
        self.hint_label.setStyleSheet(
            f"font-weight: 600; font-size: {max(1, int(width * 0.06))}px; "
            f"color: {TEXT_SECONDARY}; background: transparent;"
        )
        self.hint_label.adjustSize()

        self.setStyleSheet(
            f"#team_score_view {{ background-color: "
            f"{with_alpha(self.color, CARD_BACKGROUND_ALPHA)}; "
            f"border-radius: {int(width * 0.04)}px; }}"
        )
        self.layout().setContentsMargins(0, int(height * 0.02), 0, int(height * 0.02))
        self._apply_score_style()
        self._place_hint()

    def set_score(self, score: int, is_winning: bool, is_tied: bool) -> None:
        """Show a new score and recolor it for the lead state."""
        changed = score != self._score
        self._score = score
        self._score_color = score_color(is_winning, is_tied)
        self.score_label.setText(str(score))
        self._apply_score_style()

        if changed:
            self._score_anim.stop()
            self._score_anim.start()

    def _apply_score_style(self) -> None:
        self.score_label.setStyleSheet(
            f"font-family: {FONT_UI}; font-weight: 900; "
            f"font-size: {max(1, int(self._width * UI_SETTINGS.score_font_ratio))}px; "
            f"color: {self._score_color};"
        )

    def _place_hint(self) -> None:
        x = self.width() - self.hint_label.width() - 12 + self._hint_offset
        y = (self.height() - self.hint_label.height()) // 2
        self.hint_label.move(x, y)

    def _on_hint_offset(self, value) -> None:
        self._hint_offset = int(value)
        self._place_hint()

    # ============ Qt Events ============

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self._hint_anim.start()

    def hideEvent(self, event) -> None:
        self._hint_anim.stop()
        super().hideEvent(event)

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._place_hint()

    def mousePressEvent(self, event) -> None:
        """Start tracking a possible swipe."""
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self._swipe.press(pos.x(), pos.y())
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event) -> None:
        """Emit swiped_left for a long enough leftward drag."""
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            if self._swipe.release(pos.x(), pos.y()) == SwipeDirection.LEFT:
                self.swiped_left.emit()
        super().mouseReleaseEvent(event)
