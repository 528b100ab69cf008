"""
Qt signals for thread-safe data updates in the dashboard.

Background fetchers emit these; the connected slots run on the Qt UI thread.
"""

from PyQt6.QtCore import QObject, pyqtSignal


class DataSignals(QObject):
    """Signals for thread-safe data updates."""

    # (callback, ListingResult) handed back to the controller
    listing_ready = pyqtSignal(object, object)
    repositories_loaded = pyqtSignal(object)
    repositories_failed = pyqtSignal(str)
