"""
File list controller.

Holds the filter of one panel, turns every filter change into a fetch and
folds fetch results into the immutable PanelState. All calls are expected on
one thread (the Qt main thread); results produced elsewhere must be handed
back to that thread before reaching on_result callbacks.
"""

from dataclasses import replace
from typing import Any, Callable, Optional, Protocol

from ..utils.logger import get_logger, log_context
from .listing import Entries, Failure, ListingResult, NotComputed
from .models import Archive, FileFilter, FileListRequest
from .state import PanelState, fetch_resolved, fetch_started, initial_state

logger = get_logger("controller")

StateListener = Callable[[PanelState, FileFilter], None]


class FileListSource(Protocol):
    """Anything that can answer a file list request, now or later."""

    def submit(
        self, request: FileListRequest, on_result: Callable[[ListingResult], None]
    ) -> None: ...


def describe_result(result: ListingResult) -> str:
    if isinstance(result, NotComputed):
        return "not computed"
    if isinstance(result, Entries):
        return f"{len(result)} entries"
    if isinstance(result, Failure):
        return f"{result.kind.value} failure: {result.description}"
    return repr(result)


class FileListController:
    """Filter state controller and file list fetcher of one panel."""

    def __init__(
        self,
        archive: Archive,
        source: FileListSource,
        default_filter: Optional[FileFilter] = None,
    ):
        self._archive = archive
        self._source = source
        self._default_filter = default_filter or FileFilter()
        self._filter = self._default_filter
        self._state = initial_state()
        self._listeners: list[StateListener] = []
        self._torn_down = False

    @property
    def archive(self) -> Archive:
        return self._archive

    @property
    def filter(self) -> FileFilter:
        return self._filter

    @property
    def state(self) -> PanelState:
        return self._state

    @property
    def is_torn_down(self) -> bool:
        return self._torn_down

    def add_listener(self, listener: StateListener) -> Callable[[], None]:
        """Call ``listener(state, filter)`` after every change."""
        self._listeners.append(listener)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    # Filter commits

    def update_field(self, name: str, value: Any) -> None:
        """Replace one filter field and fetch.

        A mode update always fetches since it changes the shape of the backend
        answer; any other field only fetches when its value actually changed.

        Raises:
            ValueError: unknown field name or invalid value
        """
        attr = FileFilter.field_name(name)
        new_filter = self._filter.with_field(attr, value)
        changed = new_filter != self._filter
        self._filter = new_filter
        if attr == "mode" or changed:
            self.fetch()

    def change_directory(self, path: str) -> None:
        """Set the current directory and fetch; every navigation fetches."""
        self._filter = self._filter.with_field("current_directory", path)
        self.fetch()

    def set_archive(self, archive: Archive) -> None:
        """Bind another archive with a fresh default filter.

        Does not fetch: the location sync of the new mount does. The
        generation is kept so answers for the old archive stay stale.
        """
        self._archive = archive
        self._filter = self._default_filter
        self._state = replace(initial_state(), generation=self._state.generation)
        self._notify()

    # Fetching

    def fetch(self, force: bool = False) -> None:
        request = FileListRequest.from_filter(self._archive.id, self._filter, force)
        self._dispatch(request)

    def force_load(self) -> None:
        """Ask the backend to compute a listing it reported as not loaded."""
        self.fetch(force=True)

    def retry(self) -> None:
        """Re-issue the last request with identical parameters."""
        if self._state.last_request is None:
            self.fetch()
        else:
            self._dispatch(self._state.last_request)

    def teardown(self) -> None:
        """Stop reacting; results still in flight are dropped when they land."""
        if self._torn_down:
            return
        self._torn_down = True
        self._listeners.clear()
        logger.debug(f"Controller for archive {self._archive.id} torn down")

    def _dispatch(self, request: FileListRequest) -> None:
        if self._torn_down:
            logger.debug("Fetch requested after teardown, ignored")
            return

        self._state = fetch_started(self._state, request)
        generation = self._state.generation
        with log_context(archive_id=request.archive_id, generation=generation):
            logger.info(
                f"Fetching file list mode={request.mode.value} "
                f"dir={request.current_directory!r} force={request.force} "
                f"diff={request.diff_archive_id or '-'}"
            )
        self._notify()
        self._source.submit(
            request, lambda result: self._on_result(generation, result)
        )

    def _on_result(self, generation: int, result: ListingResult) -> None:
        with log_context(archive_id=self._archive.id, generation=generation):
            if self._torn_down:
                logger.debug("Result arrived after teardown, dropped")
                return

            new_state = fetch_resolved(self._state, generation, result)
            if new_state is self._state:
                logger.debug(
                    f"Discarding stale result (latest generation "
                    f"{self._state.generation})"
                )
                return

            self._state = new_state
            if isinstance(result, Failure):
                logger.warning(f"File list fetch failed: {describe_result(result)}")
            else:
                logger.info(f"File list resolved: {describe_result(result)}")
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._state, self._filter)
