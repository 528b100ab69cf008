"""
File list service - what GET archives/filelist answers.

A listing that is not cached yet is answered with the notLoaded sentinel
unless the request forces a scan. A forced request scans the archive (and,
in diff mode, the other archive when it is not cached either), records the
scan as a job, stores the result and then answers the query.
"""

import threading
from typing import Optional, Union

from ..core.listing import Entries, NotComputed
from ..core.models import JobQueue, JobStatus, ListMode
from ..utils.logger import error, info
from .cache import ArchiveFilelistCache
from .db import ListingDB
from .jobs import JobRegistry
from .query import query_file_list, query_file_list_diff
from .source import ListingSource


class FileListService:
    """Answers listing, repository and job requests of the REST API."""

    def __init__(
        self,
        db: Optional[ListingDB] = None,
        source: Optional[ListingSource] = None,
        jobs: Optional[JobRegistry] = None,
    ):
        self._db = db or ListingDB()
        self._source = source or ListingSource()
        self._cache = ArchiveFilelistCache(self._db)
        self._jobs = jobs or JobRegistry()
        self._scan_locks: dict[str, threading.Lock] = {}
        self._scan_locks_guard = threading.Lock()

    @property
    def cache(self) -> ArchiveFilelistCache:
        return self._cache

    @property
    def jobs(self) -> JobRegistry:
        return self._jobs

    def get_file_list(
        self,
        archive_id: str,
        diff_archive_id: str = "",
        force: bool = False,
        search: str = "",
        mode: ListMode = ListMode.TREE,
        current_directory: str = "",
        max_results: int = 50,
    ) -> Union[NotComputed, Entries]:
        """Listing of an archive, or its difference to ``diff_archive_id``.

        Raises:
            ArchiveNotFound: unknown archive or diff archive
            ScanError: a forced scan could not read the listing
        """
        repo_id, archive = self._source.find_archive(archive_id)
        archive_key = archive["id"]
        diff_key = ""
        if diff_archive_id:
            diff_repo_id, diff_archive = self._source.find_archive(diff_archive_id)
            diff_key = diff_archive["id"]

        if force:
            self._scan(repo_id, archive)
            if diff_key and not self._cache.is_loaded(diff_key):
                self._scan(diff_repo_id, diff_archive)
        elif not self._cache.is_loaded(archive_key) or (
            diff_key and not self._cache.is_loaded(diff_key)
        ):
            return NotComputed()

        with self._db.lock:
            conn = self._db.connect()
            if diff_key:
                entries = query_file_list_diff(
                    conn,
                    archive_key,
                    diff_key,
                    mode=mode,
                    current_directory=current_directory,
                    search=search,
                    max_results=max_results,
                )
            else:
                entries = query_file_list(
                    conn,
                    archive_key,
                    mode=mode,
                    current_directory=current_directory,
                    search=search,
                    max_results=max_results,
                )
        return Entries.of(entries)

    def clear_cache(self, archive_id: str = "") -> None:
        """Forget the cached listing of ``archive_id``, or of every archive.

        A scan of the same archive that is running finishes first.

        Raises:
            ArchiveNotFound: unknown archive
        """
        if not archive_id:
            self._cache.clear()
            return
        _, archive = self._source.find_archive(archive_id)
        with self._scan_lock(archive["id"]):
            self._cache.remove(archive["id"])

    def get_repositories(self) -> list[dict]:
        """Repositories without their archive lists"""
        return [
            {key: value for key, value in repo.items() if key != "archives"}
            for repo in self._source.list_repositories()
        ]

    def get_repository_archives(self, repo_id: str) -> dict:
        """Repository catalogue including archives.

        Raises:
            ArchiveNotFound: unknown repository
        """
        return self._source.get_repository(repo_id)

    def get_job_queues(self, repo_id: Optional[str] = None) -> list[JobQueue]:
        return self._jobs.queues(repo_id)

    def _scan(self, repo_id: str, archive: dict) -> int:
        """Scan one archive into the cache, one scan per archive at a time."""
        archive_key = archive["id"]
        name = archive.get("name") or archive_key
        with self._scan_lock(archive_key):
            job = self._jobs.create(
                repo_id,
                title=f"Loading file list of {name}",
                description=f"borg list --json-lines {repo_id}::{name}",
            )
            self._jobs.start(job)
            try:
                items = self._source.scan(
                    repo_id,
                    archive,
                    progress=lambda current, total, message: self._jobs.update_progress(
                        job, current, total, message
                    ),
                )
                count = self._cache.save(repo_id, archive_key, name, items)
            except Exception as e:
                self._jobs.finish(job, JobStatus.FAILED)
                error(f"[Service] Scan of {repo_id}::{name} failed: {e}")
                raise
            self._jobs.finish(job, JobStatus.DONE)
        info(f"[Service] Scanned {repo_id}::{name}: {count} entries")
        return count

    def _scan_lock(self, archive_id: str) -> threading.Lock:
        with self._scan_locks_guard:
            return self._scan_locks.setdefault(archive_id, threading.Lock())
