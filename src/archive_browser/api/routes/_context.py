"""
Route Context - Shared dependencies for API routes.

The server configures the context once; blueprints fetch the file list
service through it.
"""

import threading
from typing import Callable, Optional

from ...backend import FileListService


class RouteContext:
    """Singleton holding shared dependencies for routes."""

    _instance: Optional["RouteContext"] = None
    _lock = threading.Lock()

    def __init__(self):
        self._get_service: Optional[Callable[[], FileListService]] = None

    @classmethod
    def get_instance(cls) -> "RouteContext":
        """Get or create the singleton instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def configure(self, get_service: Callable[[], FileListService]) -> None:
        self._get_service = get_service

    def get_service(self) -> FileListService:
        if self._get_service is None:
            raise RuntimeError("RouteContext not configured - call configure() first")
        return self._get_service()


def get_context() -> RouteContext:
    """Get the route context singleton."""
    return RouteContext.get_instance()


def get_service() -> FileListService:
    """Get the file list service."""
    return get_context().get_service()
