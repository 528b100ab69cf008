"""
Dashboard window package.

Signals and the job poller come first: the file list section imports them
while the main window module is loading.
"""

from .signals import DataSignals
from .jobs import JobStatusPoller
from .main import DashboardWindow

__all__ = [
    "DataSignals",
    "JobStatusPoller",
    "DashboardWindow",
]
