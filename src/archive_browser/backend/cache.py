"""
Archive file list cache on top of ListingDB.
"""

from datetime import datetime
from typing import Iterable

from ..utils.logger import info
from .db import ListingDB
from .source import BorgItem

INSERT_BATCH_SIZE = 1000


class ArchiveFilelistCache:
    """Which archive listings are loaded, and their rows."""

    def __init__(self, db: ListingDB):
        self._db = db

    def is_loaded(self, archive_id: str) -> bool:
        with self._db.lock:
            row = (
                self._db.connect()
                .execute(
                    "SELECT 1 FROM archives WHERE archive_id = ?", [archive_id]
                )
                .fetchone()
            )
        return row is not None

    def save(
        self,
        repo_id: str,
        archive_id: str,
        archive_name: str,
        items: Iterable[BorgItem],
    ) -> int:
        """Replace the cached listing of an archive; returns the entry count.

        ``items`` is consumed before the database lock is taken, so a slow
        scan never blocks other requests.
        """
        rows = [
            (
                archive_id,
                position,
                item.path,
                item.parent,
                item.type,
                item.mode,
                item.mtime,
                item.size,
                item.user,
                item.group,
                item.message,
            )
            for position, item in enumerate(items)
        ]

        with self._db.lock:
            conn = self._db.connect()
            conn.execute("BEGIN TRANSACTION")
            try:
                conn.execute("DELETE FROM file_entries WHERE archive_id = ?", [archive_id])
                conn.execute("DELETE FROM archives WHERE archive_id = ?", [archive_id])
                for start in range(0, len(rows), INSERT_BATCH_SIZE):
                    conn.executemany(
                        "INSERT INTO file_entries VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
                        rows[start : start + INSERT_BATCH_SIZE],
                    )
                conn.execute(
                    "INSERT INTO archives VALUES (?, ?, ?, ?, ?)",
                    [archive_id, repo_id, archive_name, len(rows), datetime.now()],
                )
                conn.execute("COMMIT")
            except Exception:
                conn.execute("ROLLBACK")
                raise

        info(f"[Cache] Stored {len(rows)} entries of archive {archive_name}")
        return len(rows)

    def remove(self, archive_id: str) -> None:
        """Drop the cached listing of one archive"""
        with self._db.lock:
            conn = self._db.connect()
            conn.execute("DELETE FROM file_entries WHERE archive_id = ?", [archive_id])
            conn.execute("DELETE FROM archives WHERE archive_id = ?", [archive_id])
        info(f"[Cache] Removed listing of archive {archive_id}")

    def clear(self) -> None:
        with self._db.lock:
            conn = self._db.connect()
            conn.execute("DELETE FROM file_entries")
            conn.execute("DELETE FROM archives")
        info("[Cache] Cleared all archive listings")
