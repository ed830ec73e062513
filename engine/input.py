"""
Input Translation - Turns raw pointer input into counter input.

Pure logic with no widget dependencies, so the mapping from wheel
notches and drags to crown velocity and swipes can be tested directly.
"""

import math
from enum import Enum
from typing import Optional

from config import INPUT_SETTINGS


# Qt reports wheel movement in eighths of a degree, 120 units per notch
WHEEL_UNITS_PER_NOTCH = 120


class SwipeDirection(Enum):
    """Horizontal direction of a completed swipe."""
    LEFT = "left"
    RIGHT = "right"


class RotaryInput:
    """
    Maps mouse wheel deltas onto crown rotation.

    notches_per_rotation wheel notches make up one full turn (2π), so
    that many notches in the same direction score one point.
    """

    def __init__(self, notches_per_rotation: Optional[int] = None):
        if notches_per_rotation is None:
            notches_per_rotation = INPUT_SETTINGS.notches_per_rotation
        self.notches_per_rotation = notches_per_rotation
        if self.notches_per_rotation <= 0:
            raise ValueError("notches_per_rotation must be positive")

    @property
    def radians_per_notch(self) -> float:
        return 2 * math.pi / self.notches_per_rotation

    def velocity_from_wheel(self, angle_delta_y: int) -> float:
        """
        Convert a wheel angleDelta().y() into a signed rotation amount.

        Scrolling up gives a positive value, scrolling down a negative one.
        """
        notches = angle_delta_y / WHEEL_UNITS_PER_NOTCH
        return notches * self.radians_per_notch


class SwipeDetector:
    """
    Classifies a press/release pair as a horizontal swipe.

    Usage:
        detector = SwipeDetector()
        detector.press(x, y)
        if detector.release(x, y) == SwipeDirection.LEFT:
            ...
    """

    def __init__(self, minimum_distance: Optional[float] = None):
        if minimum_distance is None:
            minimum_distance = INPUT_SETTINGS.swipe_min_distance_px
        if minimum_distance < 0:
            raise ValueError("minimum_distance cannot be negative")
        self.minimum_distance = minimum_distance
        self._origin: Optional[tuple[float, float]] = None

    @property
    def is_tracking(self) -> bool:
        return self._origin is not None

    def press(self, x: float, y: float) -> None:
        """Start tracking a drag at the given position."""
        self._origin = (x, y)

    def cancel(self) -> None:
        self._origin = None

    def release(self, x: float, y: float) -> Optional[SwipeDirection]:
        """
        Finish the drag and classify it.

        Returns:
            LEFT or RIGHT for drags at least minimum_distance long with a
            horizontal component, None otherwise.
        """
        if self._origin is None:
            return None

        start_x, start_y = self._origin
        self._origin = None

        dx = x - start_x
        dy = y - start_y
        if math.hypot(dx, dy) < self.minimum_distance:
            return None

        if dx < 0:
            return SwipeDirection.LEFT
        if dx > 0:
            return SwipeDirection.RIGHT
        return None
