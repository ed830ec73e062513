"""
HoopCount theme: colors and typography constants.

Black watch-face background with system-style accent colors.
"""

# Surfaces
SURFACE_DARK = "#000000"      # Watch face background

# Text
TEXT_SECONDARY = "#8E8E93"

# Score colors
SCORE_TIED = "#0A84FF"        # Blue while level
SCORE_WINNING = "#30D158"     # Green for the leader
SCORE_LOSING = "#FF453A"      # Red for the trailing team

# Controls
RESET_BUTTON = "#8E8E93"
RESET_BUTTON_HOVER = "#AEAEB2"

# Card
CARD_BACKGROUND_ALPHA = 0.1   # Team color opacity behind the score
TEAM_NAME_ALPHA = 0.8

# Font families
FONT_UI = '"SF Pro Rounded", "Segoe UI", "Ubuntu", sans-serif'


def with_alpha(hex_color: str, alpha: float) -> str:
    """Return an rgba() stylesheet color from #RRGGBB and an opacity."""
    r = int(hex_color[1:3], 16)
    g = int(hex_color[3:5], 16)
    b = int(hex_color[5:7], 16)
    return f"rgba({r}, {g}, {b}, {round(alpha * 255)})"
