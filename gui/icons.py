"""
App icons using Qt theme icons and standard pixmaps.

Uses QIcon.fromTheme() where available (e.g. Linux) and falls back to
QStyle.StandardPixmap for cross-platform consistency.
"""

from PySide6.QtWidgets import QApplication, QStyle
from PySide6.QtGui import QIcon


def _style():
    app = QApplication.instance()
    return app.style() if app else None


def icon_reset() -> QIcon:
    """Counter-clockwise arrow for the reset button."""
    icon = QIcon.fromTheme("view-refresh")
    if not icon.isNull():
        return icon
    style = _style()
    if style:
        return style.standardIcon(QStyle.StandardPixmap.SP_BrowserReload)
    return QIcon()
