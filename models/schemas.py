"""
Pydantic schemas for user preferences validation.
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator


# ============ Team Schemas ============

class TeamPreferences(BaseModel):
    """Display preferences for one team."""
    name: str = Field(..., min_length=1, max_length=20)
    color: str = Field(..., pattern=r"^#[0-9A-Fa-f]{6}$")

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Team name cannot be empty")
        return v.strip()


# ============ Settings Schema ============

class UserSettings(BaseModel):
    """
    Contents of the user's settings.json.

    Scores are never stored here, only display and input preferences.
    """
    team_a: TeamPreferences = Field(
        default_factory=lambda: TeamPreferences(name="TEAM 1", color="#0A84FF")
    )
    team_b: TeamPreferences = Field(
        default_factory=lambda: TeamPreferences(name="TEAM 2", color="#FF453A")
    )
    device: Literal["41mm", "45mm", "49mm"] = "45mm"
    sound_enabled: bool = False
    crown_enabled: bool = True
