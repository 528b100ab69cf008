"""
Dashboard styles - dark, minimal design system.

- COLORS, JOB_STATUS_COLORS, DIFF_COLORS: palette
- SPACING, RADIUS, FONTS, UI, COL_WIDTH, ICONS: dimension constants
- format_progress, format_count: formatting helpers
- get_stylesheet: QSS stylesheet generator
"""

from .colors import COLORS, JOB_STATUS_COLORS, DIFF_COLORS
from .dimensions import SPACING, RADIUS, FONTS, UI, COL_WIDTH, ICONS
from .utils import format_progress, format_count
from .stylesheet import get_stylesheet

__all__ = [
    "COLORS",
    "JOB_STATUS_COLORS",
    "DIFF_COLORS",
    "SPACING",
    "RADIUS",
    "FONTS",
    "UI",
    "COL_WIDTH",
    "ICONS",
    "format_progress",
    "format_count",
    "get_stylesheet",
]
