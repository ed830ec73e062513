"""
HoopCount Configuration

Centralized settings, paths, and constants for the application.
"""

import json
import logging
import math
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional

import appdirs
from pydantic import ValidationError

from models.schemas import UserSettings

logger = logging.getLogger(__name__)


# Application info
APP_NAME = "HoopCount"
APP_AUTHOR = "HoopCount"
APP_VERSION = "1.0.0"


@dataclass(frozen=True)
class Paths:
    """Application paths."""
    # Config directory (stores user preferences)
    config_dir: Path = Path(appdirs.user_config_dir(APP_NAME, APP_AUTHOR))

    # Log directory
    log_dir: Path = Path(appdirs.user_log_dir(APP_NAME, APP_AUTHOR))

    @property
    def settings(self) -> Path:
        return self.config_dir / "settings.json"

    @property
    def log_file(self) -> Path:
        return self.log_dir / "hoopcount.log"

    def ensure_directories(self) -> None:
        """Create all required directories."""
        for dir_path in [self.config_dir, self.log_dir]:
            dir_path.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class CounterSettings:
    """Score counter limits."""
    min_score: int = 0
    max_score: int = 999

    # One full turn of the crown, in radians
    full_rotation: float = 2 * math.pi


@dataclass(frozen=True)
class InputSettings:
    """Crown and swipe input settings."""
    # Wheel notches that add up to one full crown turn
    notches_per_rotation: int = 8

    # Minimum drag distance in pixels before a drag counts as a swipe
    swipe_min_distance_px: float = 20.0


@dataclass(frozen=True)
class UISettings:
    """UI-related settings."""
    # Window sizes matching the watch case sizes (width, height)
    device_presets: dict[str, tuple[int, int]] = field(default_factory=lambda: {
        "41mm": (352, 430),
        "45mm": (396, 484),
        "49mm": (410, 502),
    })
    default_device: str = "45mm"

    # Relative sizes (fraction of window width/height)
    spacing_ratio: float = 0.03
    margin_ratio: float = 0.03
    team_name_ratio: float = 0.06
    score_font_ratio: float = 0.25
    reset_icon_ratio: float = 0.1

    # Animation durations in milliseconds
    score_animation_ms: int = 200
    hint_animation_ms: int = 1000

    # How long a system message stays in the status bar
    status_message_ms: int = 3000

    # How far the swipe hint drifts left, in pixels
    hint_offset_px: int = 5


# Singleton instances
PATHS = Paths()
COUNTER_SETTINGS = CounterSettings()
INPUT_SETTINGS = InputSettings()
UI_SETTINGS = UISettings()


def init_config() -> None:
    """Initialize configuration and create required directories."""
    PATHS.ensure_directories()


def load_user_settings(path: Optional[Path] = None) -> UserSettings:
    """
    Load user preferences from a JSON file.

    Falls back to defaults when the file is missing, unreadable or invalid.

    Args:
        path: Preferences file (default: PATHS.settings)

    Returns:
        Validated UserSettings
    """
    path = path or PATHS.settings

    if not path.exists():
        logger.info(f"No settings file at {path}, using defaults")
        return UserSettings()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        settings = UserSettings.model_validate(data)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.warning(f"Failed to load settings from {path}: {e}, using defaults")
        return UserSettings()

    logger.info(f"Settings loaded from {path}")
    return settings
