"""
Backend job registry.

Scans are recorded here so the job feed can show what the server is busy
with while a forced file list request is pending.
"""

import itertools
import threading
from collections import deque
from typing import Optional

from ..core.models import JobInfo, JobQueue, JobStatus, ProgressInfo


class Job:
    """A running or finished backend job"""

    def __init__(self, number: int, repo_id: str, title: str, description: str = ""):
        self.number = number
        self.repo_id = repo_id
        self.title = title
        self.description = description
        self.status = JobStatus.QUEUED
        self.progress: Optional[ProgressInfo] = None

    def snapshot(self) -> JobInfo:
        progress = None
        if self.progress is not None:
            progress = ProgressInfo(
                self.progress.message, self.progress.current, self.progress.total
            )
        return JobInfo(
            unique_job_number=self.number,
            title=self.title,
            description=self.description,
            status=self.status,
            progress=progress,
        )


class JobRegistry:
    """Thread-safe record of jobs per repository.

    Finished jobs are kept, up to ``keep_finished`` per repository, so the
    feed can still show how the last scan ended.
    """

    def __init__(self, keep_finished: int = 10):
        self._lock = threading.Lock()
        self._numbers = itertools.count(1)
        self._active: dict[int, Job] = {}
        self._finished: dict[str, deque[Job]] = {}
        self._keep_finished = keep_finished

    def create(self, repo_id: str, title: str, description: str = "") -> Job:
        with self._lock:
            job = Job(next(self._numbers), repo_id, title, description)
            self._active[job.number] = job
            return job

    def start(self, job: Job) -> None:
        with self._lock:
            job.status = JobStatus.RUNNING

    def update_progress(self, job: Job, current: int, total: int, message: str) -> None:
        with self._lock:
            job.progress = ProgressInfo(message=message, current=current, total=total)

    def finish(self, job: Job, status: JobStatus = JobStatus.DONE) -> None:
        with self._lock:
            job.status = status
            self._active.pop(job.number, None)
            finished = self._finished.setdefault(
                job.repo_id, deque(maxlen=self._keep_finished)
            )
            finished.append(job)

    def queues(self, repo_id: Optional[str] = None) -> list[JobQueue]:
        """Snapshot of active then finished jobs, one queue per repository."""
        with self._lock:
            by_repo: dict[str, list[JobInfo]] = {}
            for job in sorted(self._active.values(), key=lambda j: j.number):
                by_repo.setdefault(job.repo_id, []).append(job.snapshot())
            for repo, jobs in self._finished.items():
                for job in reversed(jobs):
                    by_repo.setdefault(repo, []).append(job.snapshot())

        return [
            JobQueue(repo=repo, jobs=jobs)
            for repo, jobs in sorted(by_repo.items())
            if repo_id is None or repo == repo_id
        ]
