"""
Background file list source.

Runs each request on a daemon thread with its own event loop and hands the
result to ``deliver``. The dashboard passes a Qt signal emitter as
``deliver`` so results reach the controller on the main thread.
"""

from typing import Callable, Optional

from ..api.client import ArchiveAPIClient, create_api_client
from ..utils.logger import exception
from ..utils.threading import run_coroutine, start_background_task
from .listing import Failure, FailureKind, ListingResult
from .models import FileListRequest

ResultCallback = Callable[[ListingResult], None]
Deliver = Callable[[ResultCallback, ListingResult], None]


def deliver_inline(callback: ResultCallback, result: ListingResult) -> None:
    callback(result)


class ThreadedFileListSource:
    """FileListSource backed by the REST API"""

    def __init__(
        self,
        client_factory: Callable[[], ArchiveAPIClient] = create_api_client,
        deliver: Optional[Deliver] = None,
    ):
        self._client_factory = client_factory
        self._deliver = deliver or deliver_inline

    def submit(self, request: FileListRequest, on_result: ResultCallback) -> None:
        def run() -> None:
            try:
                result = run_coroutine(self._fetch(request))
            except Exception as e:  # Intentional catch-all: the panel must leave Fetching
                exception(f"[Fetcher] Unexpected error fetching file list: {e}")
                result = Failure(FailureKind.NETWORK, str(e))
            self._deliver(on_result, result)

        start_background_task(run)

    async def _fetch(self, request: FileListRequest) -> ListingResult:
        async with self._client_factory() as client:
            return await client.fetch_file_list(request)
