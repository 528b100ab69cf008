"""
Errors raised while talking to the archive REST API.
"""

from typing import Optional


class ArchiveAPIError(Exception):
    """Base class for REST API errors"""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class NetworkFailure(ArchiveAPIError):
    """Request rejected, timed out or the connection failed"""


class BackendFailure(ArchiveAPIError):
    """Non-2xx status or a body that is not what the endpoint promises"""
