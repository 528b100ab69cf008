"""
Test doubles for archive_browser.
"""

from .api_client import MockArchiveAPIClient
from .sources import ImmediateFileListSource, ManualFileListSource

__all__ = [
    "MockArchiveAPIClient",
    "ImmediateFileListSource",
    "ManualFileListSource",
]
