"""
Tests for the scoreboard window and the application controller.

Covers wheel-as-crown input, preview mode, swipe decrements, the reset
confirmation dialog, and the event bus wiring in HoopCountApp.
"""

import logging

import pytest
from PySide6.QtCore import Qt, QPoint, QPointF, QTimer
from PySide6.QtGui import QWheelEvent
from PySide6.QtTest import QTest
from PySide6.QtWidgets import QApplication, QMessageBox

from app import HoopCountApp
from engine.counter import FeedbackPulse
from engine.input import WHEEL_UNITS_PER_NOTCH
from models.schemas import UserSettings


def send_wheel(widget, notches: int) -> None:
    """Scroll the wheel over a widget by whole notches (positive is up)."""
    center = QPointF(widget.width() / 2, widget.height() / 2)
    event = QWheelEvent(
        center,
        widget.mapToGlobal(center),
        QPoint(0, 0),
        QPoint(0, notches * WHEEL_UNITS_PER_NOTCH),
        Qt.MouseButton.NoButton,
        Qt.KeyboardModifier.NoModifier,
        Qt.ScrollPhase.NoScrollPhase,
        False,
    )
    QApplication.sendEvent(widget, event)


def scroll_notches(widget, count: int, direction: int = 1) -> None:
    for _ in range(count):
        send_wheel(widget, direction)


def drag(widget, start: QPoint, end: QPoint) -> None:
    QTest.mousePress(widget, Qt.MouseButton.LeftButton, Qt.KeyboardModifier.NoModifier, start)
    QTest.mouseRelease(widget, Qt.MouseButton.LeftButton, Qt.KeyboardModifier.NoModifier, end)


def answer_reset_dialog(button_text: str, attempts: int = 50) -> None:
    """Click a button on the reset dialog once it is open."""
    def click():
        for widget in QApplication.topLevelWidgets():
            if isinstance(widget, QMessageBox) and widget.isVisible():
                for button in widget.buttons():
                    if button.text().replace("&", "") == button_text:
                        button.click()
                        return
        if attempts > 0:
            answer_reset_dialog(button_text, attempts - 1)

    QTimer.singleShot(10, click)


@pytest.fixture
def hoop_app(qapp):
    """A shown HoopCountApp with crown input enabled."""
    app = HoopCountApp(UserSettings())
    app.show()
    QTest.qWaitForWindowExposed(app.main_window)
    yield app
    app.main_window.close()


@pytest.fixture
def preview_app(qapp):
    app = HoopCountApp(UserSettings(), preview=True)
    app.show()
    yield app
    app.main_window.close()


class TestCrownInput:
    """Wheel events drive ScoreCounter.apply_rotation."""

    def test_full_set_of_notches_scores_team_a(self, hoop_app):
        window = hoop_app.main_window
        notches = window.rotary.notches_per_rotation

        scroll_notches(window, notches - 1)
        assert hoop_app.counter.team_a_score == 0

        scroll_notches(window, 1)
        assert hoop_app.counter.team_a_score == 1

    def test_partial_second_turn_does_not_score(self, hoop_app):
        window = hoop_app.main_window
        notches = window.rotary.notches_per_rotation

        scroll_notches(window, notches)
        scroll_notches(window, notches - 1)

        assert hoop_app.counter.team_a_score == 1

    def test_scrolling_down_scores_team_b(self, hoop_app):
        window = hoop_app.main_window

        scroll_notches(window, window.rotary.notches_per_rotation, direction=-1)

        assert hoop_app.counter.team_b_score == 1
        assert hoop_app.counter.team_a_score == 0

    def test_score_label_follows_counter(self, hoop_app):
        window = hoop_app.main_window

        scroll_notches(window, window.rotary.notches_per_rotation)

        assert window.team_a_view.score_label.text() == "1"
        assert window.team_a_view.score == 1


class TestCrownDisabled:
    """Preview mode and crown_enabled=False ignore the wheel."""

    def test_preview_ignores_wheel(self, preview_app):
        window = preview_app.main_window

        scroll_notches(window, window.rotary.notches_per_rotation * 2)

        assert not window.crown_enabled
        assert preview_app.counter.team_a_score == 0
        assert preview_app.counter.rotation_accumulator == 0

    def test_crown_disabled_setting_ignores_wheel(self, qapp):
        app = HoopCountApp(UserSettings(crown_enabled=False))
        window = app.main_window

        scroll_notches(window, window.rotary.notches_per_rotation * 2, direction=-1)

        assert app.counter.team_b_score == 0
        window.close()


class TestSwipeInput:
    """Left drags across a card take a point from that team."""

    def _left_drag(self, view, distance: int = 80) -> None:
        y = view.height() // 2
        start = QPoint(view.width() - 20, y)
        drag(view, start, QPoint(start.x() - distance, y))

    def test_left_swipe_decrements_team_a(self, hoop_app):
        hoop_app.counter.increment_team_a()
        hoop_app.counter.increment_team_a()

        self._left_drag(hoop_app.main_window.team_a_view)

        assert hoop_app.counter.team_a_score == 1
        assert hoop_app.feedback_player.last_pulse == FeedbackPulse.DIRECTION_DOWN

    def test_left_swipe_decrements_team_b_only(self, hoop_app):
        hoop_app.counter.increment_team_a()
        hoop_app.counter.increment_team_b()

        self._left_drag(hoop_app.main_window.team_b_view)

        assert hoop_app.counter.team_b_score == 0
        assert hoop_app.counter.team_a_score == 1

    def test_short_drag_does_nothing(self, hoop_app):
        hoop_app.counter.increment_team_a()

        self._left_drag(hoop_app.main_window.team_a_view, distance=5)

        assert hoop_app.counter.team_a_score == 1

    def test_right_swipe_does_nothing(self, hoop_app):
        hoop_app.counter.increment_team_a()
        view = hoop_app.main_window.team_a_view
        y = view.height() // 2

        drag(view, QPoint(20, y), QPoint(120, y))

        assert hoop_app.counter.team_a_score == 1


class TestResetConfirmation:
    """Only the Reset button of the dialog clears the scores."""

    def setup_scores(self, app) -> None:
        for _ in range(3):
            app.counter.increment_team_a()
            app.counter.increment_team_b()

    def test_cancel_keeps_scores(self, hoop_app):
        self.setup_scores(hoop_app)

        answer_reset_dialog("Cancel")
        confirmed = hoop_app.main_window.confirm_reset()

        assert not confirmed
        assert hoop_app.counter.team_a_score == 3
        assert hoop_app.counter.team_b_score == 3

    def test_reset_clears_scores(self, hoop_app):
        self.setup_scores(hoop_app)

        answer_reset_dialog("Reset")
        confirmed = hoop_app.main_window.confirm_reset()

        assert confirmed
        assert hoop_app.counter.team_a_score == 0
        assert hoop_app.counter.team_b_score == 0

    def test_reset_button_opens_dialog(self, hoop_app):
        self.setup_scores(hoop_app)

        answer_reset_dialog("Reset")
        hoop_app.main_window.reset_button.click()

        assert hoop_app.counter.team_a_score == 0


class TestHoopCountApp:
    """Controller wiring between counter, bus, player, and window."""

    def test_increment_reaches_feedback_player(self, hoop_app):
        hoop_app.counter.increment_team_b()

        assert hoop_app.feedback_player.last_pulse == FeedbackPulse.CLICK

    def test_decrement_reaches_feedback_player(self, hoop_app):
        hoop_app.counter.decrement_team_a()

        assert hoop_app.feedback_player.last_pulse == FeedbackPulse.DIRECTION_DOWN

    def test_reset_shows_status_message(self, hoop_app, caplog):
        with caplog.at_level(logging.INFO, logger="gui.main_window"):
            hoop_app.counter.reset()

        assert hoop_app.main_window.status_bar.currentMessage() == "Scores reset"
        assert "Scores reset" in caplog.text

    def test_system_message_is_logged_at_level(self, hoop_app, caplog):
        with caplog.at_level(logging.INFO, logger="gui.main_window"):
            hoop_app.event_bus.emit_message("warning", "Low battery")

        assert hoop_app.main_window.status_bar.currentMessage() == "Low battery"
        assert any(
            r.levelno == logging.WARNING and r.getMessage() == "Low battery"
            for r in caplog.records
        )

    def test_team_names_from_settings(self, qapp):
        settings = UserSettings.model_validate({
            "team_a": {"name": "Home", "color": "#00FF00"},
        })
        app = HoopCountApp(settings)

        assert app.main_window.team_a_view.name_label.text() == "Home"
        assert app.main_window.team_b_view.name_label.text() == "TEAM 2"
        app.main_window.close()
