"""
File list queries over the cached listings.

Tree mode selects the immediate children of a directory, flat mode every
path. Search is a case-insensitive substring match on the message. In diff
mode the same selection is made in both archives and joined on path:
entries only in the browsed archive are ``new``, only in the other one
``removed``, and those whose mode, size or mtime differ ``modified``.
Identical entries are left out.
"""

from typing import Any

import duckdb

from ..core.models import FileEntry, ListMode
from .source import format_mtime, format_size

DIFF_NEW = "new"
DIFF_REMOVED = "removed"
DIFF_MODIFIED = "modified"


def _selection(
    mode: ListMode, current_directory: str, search: str
) -> tuple[str, list[Any]]:
    """WHERE clause (without archive id) and its parameters."""
    clauses: list[str] = []
    params: list[Any] = []
    if mode is ListMode.TREE:
        clauses.append("parent = ?")
        params.append(current_directory.strip("/"))
    if search:
        clauses.append("strpos(lower(message), lower(?)) > 0")
        params.append(search)
    where = "".join(f" AND {clause}" for clause in clauses)
    return where, params


def _entry(row: tuple, diff_status: str | None = None) -> FileEntry:
    mode, path, mtime, size, message = row
    return FileEntry(
        mode=mode,
        date=format_mtime(mtime),
        size=format_size(size),
        path=path,
        message=message,
        diff_status=diff_status,
    )


def query_file_list(
    conn: duckdb.DuckDBPyConnection,
    archive_id: str,
    mode: ListMode = ListMode.TREE,
    current_directory: str = "",
    search: str = "",
    max_results: int = 50,
) -> list[FileEntry]:
    """Entries of one cached archive in listing order, at most ``max_results``."""
    where, params = _selection(mode, current_directory, search)
    rows = conn.execute(
        f"""
        SELECT mode, path, mtime, size, message
        FROM file_entries
        WHERE archive_id = ?{where}
        ORDER BY position
        LIMIT ?
        """,  # nosec B608 - where is built from fixed clauses
        [archive_id, *params, max_results],
    ).fetchall()
    return [_entry(row) for row in rows]


def query_file_list_diff(
    conn: duckdb.DuckDBPyConnection,
    archive_id: str,
    diff_archive_id: str,
    mode: ListMode = ListMode.TREE,
    current_directory: str = "",
    search: str = "",
    max_results: int = 50,
) -> list[FileEntry]:
    """Differences of ``archive_id`` against ``diff_archive_id``, ordered by path."""
    where, params = _selection(mode, current_directory, search)
    rows = conn.execute(
        f"""
        WITH cur AS (
            SELECT mode, path, mtime, size, message FROM file_entries
            WHERE archive_id = ?{where}
        ),
        old AS (
            SELECT mode, path, mtime, size, message FROM file_entries
            WHERE archive_id = ?{where}
        )
        SELECT
            cur.mode, cur.path, cur.mtime, cur.size, cur.message,
            old.mode, old.path, old.mtime, old.size, old.message
        FROM cur
        FULL OUTER JOIN old ON cur.path = old.path
        WHERE cur.path IS NULL
           OR old.path IS NULL
           OR cur.mode <> old.mode
           OR cur.size <> old.size
           OR cur.mtime <> old.mtime
        ORDER BY coalesce(cur.path, old.path)
        LIMIT ?
        """,  # nosec B608 - where is built from fixed clauses
        [archive_id, *params, diff_archive_id, *params, max_results],
    ).fetchall()

    entries = []
    for row in rows:
        current, previous = row[:5], row[5:]
        if previous[1] is None:
            entries.append(_entry(current, DIFF_NEW))
        elif current[1] is None:
            entries.append(_entry(previous, DIFF_REMOVED))
        else:
            entries.append(_entry(current, DIFF_MODIFIED))
    return entries
