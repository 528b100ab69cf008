"""
Job status poller.

Polls the backend job feed of one repository while a file list request is
pending. Only one poll is in flight at a time; answers that arrive after
stop() (or after a repository switch) are dropped.
"""

from typing import Callable, Optional

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from ...api.client import ArchiveAPIClient, create_api_client
from ...api.exceptions import ArchiveAPIError
from ...core.models import JobQueue
from ...utils.logger import debug, exception
from ...utils.threading import run_coroutine, start_background_task

DEFAULT_INTERVAL_MS = 1000


class JobStatusPoller(QObject):
    """Emits ``jobs_updated(list[JobQueue])`` on every successful poll."""

    jobs_updated = pyqtSignal(object)
    _fetched = pyqtSignal(int, object, str)  # token, queues, error

    def __init__(
        self,
        interval_ms: int = DEFAULT_INTERVAL_MS,
        client_factory: Callable[[], ArchiveAPIClient] = create_api_client,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self._client_factory = client_factory
        self._repo_id = ""
        self._token = 0
        self._in_flight = False

        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self.poll)
        self._fetched.connect(self._on_fetched)

    @property
    def repo_id(self) -> str:
        return self._repo_id

    @property
    def is_active(self) -> bool:
        return self._timer.isActive()

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    def set_repo(self, repo_id: str) -> None:
        if repo_id != self._repo_id:
            self._repo_id = repo_id
            self._invalidate()

    def start(self) -> None:
        if self._timer.isActive():
            return
        self._timer.start()
        self.poll()

    def stop(self) -> None:
        if self._timer.isActive():
            self._timer.stop()
        self._invalidate()

    def _invalidate(self) -> None:
        # The outstanding worker, if any, still clears _in_flight when it answers
        self._token += 1

    def poll(self) -> None:
        if self._in_flight or not self._repo_id:
            return
        self._in_flight = True
        token = self._token
        repo_id = self._repo_id

        def run() -> None:
            try:
                queues = run_coroutine(self._fetch(repo_id))
            except ArchiveAPIError as e:
                debug(f"[Jobs] Job feed unavailable: {e}")
                self._fetched.emit(token, None, str(e))
                return
            except Exception as e:  # Intentional catch-all: polling must go on
                exception(f"[Jobs] Job feed poll failed: {e}")
                self._fetched.emit(token, None, str(e))
                return
            self._fetched.emit(token, queues, "")

        start_background_task(run)

    async def _fetch(self, repo_id: str) -> list[JobQueue]:
        async with self._client_factory() as client:
            return await client.get_job_queues(repo_id)

    def _on_fetched(self, token: int, queues: object, error: str) -> None:
        self._in_flight = False
        if token != self._token:
            debug("[Jobs] Dropping job feed answer of a stopped poll")
            return
        if error:
            return
        self.jobs_updated.emit(queues)
