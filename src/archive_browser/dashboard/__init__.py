"""
Archive Browser Dashboard - PyQt6 desktop interface.

- Sidebar with repositories, their archives and history buttons
- File list section: tree/flat listing, search, diff against another
  archive, job progress while the backup server computes a listing
"""

from .window import DashboardWindow
from .styles import COLORS, SPACING, RADIUS, FONTS, ICONS, get_stylesheet
from .widgets import (
    Sidebar,
    PageHeader,
    SegmentedControl,
    EmptyState,
    ErrorAlert,
    FilterBar,
    BreadcrumbBar,
    FileListTable,
    JobProgressPanel,
)
from .sections import FileListSection

__all__ = [
    "DashboardWindow",
    # Styles
    "COLORS",
    "SPACING",
    "RADIUS",
    "FONTS",
    "ICONS",
    "get_stylesheet",
    # Widgets
    "Sidebar",
    "PageHeader",
    "SegmentedControl",
    "EmptyState",
    "ErrorAlert",
    "FilterBar",
    "BreadcrumbBar",
    "FileListTable",
    "JobProgressPanel",
    # Sections
    "FileListSection",
]
