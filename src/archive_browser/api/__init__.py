"""
Archive REST API - HTTP interface between the desktop browser and the
listing backend.

- server: Flask app serving /rest/* from FileListService
- client: aiohttp client used by the dashboard
"""

from .client import ArchiveAPIClient, create_api_client
from .exceptions import ArchiveAPIError, BackendFailure, NetworkFailure
from .server import ArchiveAPIServer

__all__ = [
    "ArchiveAPIClient",
    "create_api_client",
    "ArchiveAPIError",
    "BackendFailure",
    "NetworkFailure",
    "ArchiveAPIServer",
]
