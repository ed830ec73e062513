"""
HoopCount Models

Validation schemas for user preferences.
"""

from models.schemas import TeamPreferences, UserSettings

__all__ = [
    "TeamPreferences",
    "UserSettings",
]
