"""
DuckDB storage for archive listings.

One connection per database file, shared by all request threads behind a
lock; DuckDB does not like concurrent use of a single connection.
"""

import threading
from pathlib import Path
from typing import Optional

import duckdb

from ..utils.logger import debug


def get_db_path(cache_dir: Optional[str] = None) -> Path:
    """Path of the listing database inside ``cache_dir``."""
    if cache_dir is None:
        from ..utils.settings import get_settings

        cache_dir = get_settings().cache_dir
    directory = Path(cache_dir).expanduser()
    directory.mkdir(parents=True, exist_ok=True)
    return directory / "listings.duckdb"


class ListingDB:
    """Owns the DuckDB connection holding cached archive listings."""

    def __init__(self, db_path: Optional[Path] = None):
        """Initialize the listing database.

        Args:
            db_path: Database file, ":memory:" for a throwaway database.
                Uses the settings cache directory if not provided.
        """
        self._db_path = db_path if db_path is not None else get_db_path()
        self._conn: Optional[duckdb.DuckDBPyConnection] = None
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        """Hold while using the connection"""
        return self._lock

    def connect(self) -> duckdb.DuckDBPyConnection:
        """Get or create the connection (thread-safe)."""
        with self._lock:
            if self._conn is None:
                self._conn = duckdb.connect(str(self._db_path))
                self._create_schema()
                debug(f"[ListingDB] Connected to {self._db_path}")
            return self._conn

    def close(self) -> None:
        with self._lock:
            if self._conn:
                self._conn.close()
                self._conn = None

    def _create_schema(self) -> None:
        conn = self._conn
        if not conn:
            return

        conn.execute("""
            CREATE TABLE IF NOT EXISTS archives (
                archive_id VARCHAR PRIMARY KEY,
                repo_id VARCHAR,
                archive_name VARCHAR,
                entry_count INTEGER DEFAULT 0,
                loaded_at TIMESTAMP
            )
        """)

        # position keeps the order borg listed the items in
        conn.execute("""
            CREATE TABLE IF NOT EXISTS file_entries (
                archive_id VARCHAR,
                position INTEGER,
                path VARCHAR,
                parent VARCHAR,
                type VARCHAR,
                mode VARCHAR,
                mtime VARCHAR,
                size BIGINT,
                owner VARCHAR,
                grp VARCHAR,
                message VARCHAR
            )
        """)

        conn.execute("""
            CREATE INDEX IF NOT EXISTS idx_entries_archive_parent
            ON file_entries(archive_id, parent)
        """)
        conn.execute("""
            CREATE INDEX IF NOT EXISTS idx_entries_archive_path
            ON file_entries(archive_id, path)
        """)
