"""
Archive listing backend.

- db: DuckDB connection and schema
- source: borg json-lines listings and repository catalogues on disk
- cache: stored listings per archive
- query: tree/flat/search/diff selection
- jobs: scan job registry feeding the job status endpoint
- service: FileListService used by the REST routes
"""

from .db import ListingDB
from .source import ListingSource, ArchiveNotFound, ScanError
from .cache import ArchiveFilelistCache
from .jobs import JobRegistry
from .service import FileListService

__all__ = [
    "ListingDB",
    "ListingSource",
    "ArchiveNotFound",
    "ScanError",
    "ArchiveFilelistCache",
    "JobRegistry",
    "FileListService",
]
