"""
File list section - browse one archive, optionally diffed against another.

Binds a FileListController to the widgets: the filter bar commits filter
fields, the location synchronizer turns history moves into directory
changes, and every controller state change is redrawn from
build_listing_view(). While a request is pending the job feed is polled.
"""

from contextlib import ExitStack
from functools import partial
from typing import Callable, Optional

from PyQt6.QtWidgets import QStackedWidget, QVBoxLayout, QWidget

from ...api.client import create_api_client
from ...core.controller import FileListController, FileListSource
from ...core.fetcher import ThreadedFileListSource
from ...core.listing import ListingResult
from ...core.models import Archive, FileEntry, FileFilter, ListMode
from ...core.navigation import (
    LocationSynchronizer,
    NavigationHistory,
    archive_mount_url,
)
from ...core.rendering import (
    FAILURE_TITLE,
    FORCE_LOAD_LABEL,
    RETRY_LABEL,
    ListingView,
    ViewKind,
    build_listing_view,
)
from ...core.state import PanelState
from ...utils.logger import debug, warn
from ...utils.settings import Settings, get_settings
from ..styles import ICONS, SPACING
from ..widgets import (
    BreadcrumbBar,
    EmptyState,
    ErrorAlert,
    FileListTable,
    FilterBar,
    JobProgressPanel,
    PageHeader,
)
from ..window.jobs import JobStatusPoller
from ..window.signals import DataSignals


class FileListSection(QWidget):
    """File list panel of the archive currently shown."""

    def __init__(
        self,
        history: NavigationHistory,
        source: Optional[FileListSource] = None,
        poller: Optional[JobStatusPoller] = None,
        settings: Optional[Settings] = None,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self._history = history
        self._settings = settings or get_settings()

        self._signals = DataSignals()
        self._signals.listing_ready.connect(self._on_listing_ready)
        client_factory = partial(create_api_client, self._settings)
        self._source = source or ThreadedFileListSource(
            client_factory=client_factory,
            deliver=self._signals.listing_ready.emit,
        )
        self._poller = poller or JobStatusPoller(
            interval_ms=self._settings.job_poll_interval_ms,
            client_factory=client_factory,
            parent=self,
        )

        self._controller: Optional[FileListController] = None
        self._synchronizer: Optional[LocationSynchronizer] = None
        self._view: Optional[ListingView] = None
        self._torn_down = False

        # Whole-panel resources, then the per-archive history subscription
        self._lifetime = ExitStack()
        self._mount = ExitStack()
        self._lifetime.callback(self._poller.stop)
        self._lifetime.enter_context(self._mount)

        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(
            SPACING["xl"], SPACING["lg"], SPACING["xl"], SPACING["lg"]
        )
        layout.setSpacing(SPACING["sm"])

        self._header = PageHeader(
            "No archive selected", "Pick an archive in the sidebar"
        )
        layout.addWidget(self._header)

        self._filter_bar = FilterBar(debounce_ms=self._settings.search_debounce_ms)
        layout.addWidget(self._filter_bar)

        self._breadcrumb = BreadcrumbBar()
        self._breadcrumb.hide()
        layout.addWidget(self._breadcrumb)

        self._pages = QStackedWidget()

        self._idle_page = EmptyState(
            icon=ICONS["archive"],
            title="Nothing to show",
            subtitle="Select an archive to list its files",
        )
        self._job_panel = JobProgressPanel()
        self._error_alert = ErrorAlert(FAILURE_TITLE, action=RETRY_LABEL)
        error_page = QWidget()
        error_layout = QVBoxLayout(error_page)
        error_layout.setContentsMargins(0, SPACING["lg"], 0, 0)
        error_layout.addWidget(self._error_alert)
        error_layout.addStretch()
        self._error_page = error_page
        self._not_loaded_page = EmptyState(
            icon=ICONS["not_loaded"],
            title="File list not loaded",
            subtitle="The backup server has not listed this archive yet.",
            action=FORCE_LOAD_LABEL,
        )
        self._table = FileListTable()

        for page in (
            self._idle_page,
            self._job_panel,
            self._error_page,
            self._not_loaded_page,
            self._table,
        ):
            self._pages.addWidget(page)
        layout.addWidget(self._pages, 1)

    def _connect_signals(self) -> None:
        self._filter_bar.field_changed.connect(self._on_field_changed)
        self._filter_bar.reload_requested.connect(self._on_reload)
        self._breadcrumb.directory_requested.connect(self.navigate)
        self._table.entry_activated.connect(self._on_entry_activated)
        self._error_alert.action_clicked.connect(self._on_retry)
        self._not_loaded_page.action_clicked.connect(self._on_force_load)
        self._poller.jobs_updated.connect(self._job_panel.set_queues)

    # Accessors

    @property
    def controller(self) -> Optional[FileListController]:
        return self._controller

    @property
    def synchronizer(self) -> Optional[LocationSynchronizer]:
        return self._synchronizer

    @property
    def poller(self) -> JobStatusPoller:
        return self._poller

    @property
    def view(self) -> Optional[ListingView]:
        return self._view

    @property
    def is_torn_down(self) -> bool:
        return self._torn_down

    @property
    def header(self) -> PageHeader:
        return self._header

    @property
    def filter_bar(self) -> FilterBar:
        return self._filter_bar

    @property
    def breadcrumb(self) -> BreadcrumbBar:
        return self._breadcrumb

    @property
    def pages(self) -> QStackedWidget:
        return self._pages

    @property
    def table(self) -> FileListTable:
        return self._table

    @property
    def job_panel(self) -> JobProgressPanel:
        return self._job_panel

    @property
    def error_alert(self) -> ErrorAlert:
        return self._error_alert

    @property
    def error_page(self) -> QWidget:
        return self._error_page

    @property
    def not_loaded_page(self) -> EmptyState:
        return self._not_loaded_page

    @property
    def idle_page(self) -> EmptyState:
        return self._idle_page

    # Binding

    def bind_archive(self, archive: Archive) -> None:
        """Show ``archive``; the current location decides the directory."""
        if self._torn_down:
            debug("[FileList] bind_archive after teardown ignored")
            return

        # The old mount stops listening before the new one syncs
        self._mount.close()
        self._synchronizer = None

        if self._controller is None:
            self._controller = FileListController(
                archive, self._source, self._settings.default_filter()
            )
            self._lifetime.callback(self._controller.teardown)
            self._lifetime.callback(self._controller.add_listener(self._render))
            self._render(self._controller.state, self._controller.filter)
        else:
            self._controller.set_archive(archive)

        self._poller.set_repo(archive.repo_id)
        self._header.set_title(
            archive.display_name, archive.repo_display_name or archive.repo_id
        )
        synchronizer = LocationSynchronizer(
            self._history,
            archive_mount_url(archive.repo_id, archive.id),
            self._controller.change_directory,
        )
        self._synchronizer = self._mount.enter_context(synchronizer)

    def set_diff_targets(self, archives: list[Archive]) -> None:
        exclude = self._controller.archive.id if self._controller else ""
        self._filter_bar.set_diff_targets(archives, exclude=exclude)

    def navigate(self, directory: str) -> None:
        """Move to ``directory`` through the history, so back/forward work."""
        if self._synchronizer is None or not self._synchronizer.is_active:
            return
        self._synchronizer.navigate(directory)

    def teardown(self) -> None:
        """Release the history subscription, the controller and the poller."""
        if self._torn_down:
            return
        self._torn_down = True
        self._lifetime.close()
        self._synchronizer = None
        debug("[FileList] Section torn down")

    # Result delivery (UI thread)

    def _on_listing_ready(
        self, callback: Callable[[ListingResult], None], result: ListingResult
    ) -> None:
        callback(result)

    # User actions

    def _on_field_changed(self, name: str, value: str) -> None:
        if self._controller is None:
            return
        try:
            self._controller.update_field(name, value)
        except ValueError as e:
            warn(f"[FileList] Rejected filter value {name}={value!r}: {e}")

    def _on_reload(self) -> None:
        if self._controller is not None:
            self._controller.fetch()

    def _on_retry(self) -> None:
        if self._controller is not None:
            self._controller.retry()

    def _on_force_load(self) -> None:
        if self._controller is not None:
            self._controller.force_load()

    def _on_entry_activated(self, entry: FileEntry) -> None:
        if self._controller is None or not entry.is_directory:
            return
        if self._controller.filter.mode is ListMode.TREE:
            self.navigate(entry.path)

    # Rendering

    def _render(self, state: PanelState, file_filter: FileFilter) -> None:
        view = build_listing_view(state, file_filter)
        self._view = view
        self._filter_bar.set_filter(file_filter)

        self._breadcrumb.set_segments(view.breadcrumb)
        self._breadcrumb.setVisible(bool(view.breadcrumb))

        if view.kind is ViewKind.JOB_PROGRESS:
            self._pages.setCurrentWidget(self._job_panel)
            self._poller.start()
            return

        self._poller.stop()
        self._job_panel.clear()
        if view.kind is ViewKind.FAILED:
            description = view.failure.description if view.failure else ""
            self._error_alert.set_description(description)
            self._pages.setCurrentWidget(self._error_page)
        elif view.kind is ViewKind.NOT_LOADED:
            self._pages.setCurrentWidget(self._not_loaded_page)
        elif view.kind is ViewKind.TABLE:
            self._table.set_entries(view.rows, view.headers)
            self._pages.setCurrentWidget(self._table)
        else:
            self._pages.setCurrentWidget(self._idle_page)
