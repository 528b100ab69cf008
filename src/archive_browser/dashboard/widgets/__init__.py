"""
Dashboard widgets.
"""

from .controls import PageHeader, SegmentedControl, EmptyState, ErrorAlert
from .navigation import Sidebar
from .filter_bar import FilterBar
from .breadcrumb import BreadcrumbBar
from .tables import FileListTable
from .job_monitor import JobProgressPanel, JobRow, summarize_jobs

__all__ = [
    "PageHeader",
    "SegmentedControl",
    "EmptyState",
    "ErrorAlert",
    "Sidebar",
    "FilterBar",
    "BreadcrumbBar",
    "FileListTable",
    "JobProgressPanel",
    "JobRow",
    "summarize_jobs",
]
