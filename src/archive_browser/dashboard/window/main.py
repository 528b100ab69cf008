"""
Dashboard main window: archive sidebar and the file list section.

The window owns the navigation history. Its own history listener is
registered before any file list mount, so an archive switch rebinds the
section first and the new mount then syncs from the location once.
"""

from functools import partial
from typing import Callable, Optional

from PyQt6.QtWidgets import (
    QMainWindow,
    QWidget,
    QHBoxLayout,
    QVBoxLayout,
    QFrame,
)
from PyQt6.QtGui import QCloseEvent

from ...api.client import ArchiveAPIClient, create_api_client
from ...api.exceptions import ArchiveAPIError
from ...core.controller import FileListSource
from ...core.models import Archive, Repository
from ...core.navigation import (
    Location,
    NavigationHistory,
    archive_mount_url,
    directory_from_location,
    parse_archive_location,
)
from ...utils.logger import debug, exception, info, warn
from ...utils.settings import Settings
from ...utils.threading import run_coroutine, start_background_task
from ..sections import FileListSection
from ..styles import COLORS, UI, get_stylesheet
from ..widgets import Sidebar
from .jobs import JobStatusPoller
from .signals import DataSignals


class DashboardWindow(QMainWindow):
    """Main dashboard window with the archive sidebar."""

    def __init__(
        self,
        history: Optional[NavigationHistory] = None,
        initial_location: Optional[str] = None,
        client_factory: Optional[Callable[[], ArchiveAPIClient]] = None,
        source: Optional[FileListSource] = None,
        poller: Optional[JobStatusPoller] = None,
        settings: Optional[Settings] = None,
        autoload: bool = True,
        parent: QWidget | None = None,
    ):
        """Initialize dashboard window.

        Args:
            history: Navigation history to drive (a fresh one by default)
            initial_location: Start location of a fresh history
            client_factory: Builds the API client of each background request
                (configured from ``settings`` by default)
            source: File list source (REST backed by default)
            poller: Job status poller (REST backed by default)
            settings: User settings (loaded from disk by default)
            autoload: Load the repository list right away
            parent: Parent widget (optional)
        """
        super().__init__(parent)

        self._history = history or NavigationHistory(initial_location or "/")
        self._client_factory = client_factory or partial(create_api_client, settings)
        self._signals = DataSignals()
        self._repositories: list[Repository] = []
        self._current: Optional[tuple[str, str]] = None
        self._unlisten: Optional[Callable[[], None]] = None

        self._setup_window()
        self._setup_ui(source, poller, settings)
        self._connect_signals()

        self._unlisten = self._history.listen(self._on_location)
        self._sync_location(self._history.location)
        if autoload:
            self.load_repositories()

    def _setup_window(self) -> None:
        self.setWindowTitle("Archive Browser")
        self.setMinimumSize(UI["window_min_width"], UI["window_min_height"])
        self.resize(UI["window_default_width"], UI["window_default_height"])
        self.setStyleSheet(get_stylesheet())

    def _setup_ui(
        self,
        source: Optional[FileListSource],
        poller: Optional[JobStatusPoller],
        settings: Optional[Settings],
    ) -> None:
        central = QWidget()
        self.setCentralWidget(central)

        main_layout = QHBoxLayout(central)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        self._sidebar = Sidebar()
        main_layout.addWidget(self._sidebar)

        content_frame = QFrame()
        content_frame.setObjectName("content-area")
        content_frame.setStyleSheet(f"""
            QFrame#content-area {{
                background-color: {COLORS["bg_base"]};
            }}
        """)
        content_layout = QVBoxLayout(content_frame)
        content_layout.setContentsMargins(0, 0, 0, 0)
        content_layout.setSpacing(0)

        self._file_list = FileListSection(
            self._history, source=source, poller=poller, settings=settings
        )
        content_layout.addWidget(self._file_list)
        main_layout.addWidget(content_frame)

    def _connect_signals(self) -> None:
        self._signals.repositories_loaded.connect(self._on_repositories_loaded)
        self._signals.repositories_failed.connect(self._on_repositories_failed)
        self._sidebar.archive_selected.connect(self._on_archive_selected)
        self._sidebar.back_requested.connect(self._history.back)
        self._sidebar.forward_requested.connect(self._history.forward)

    @property
    def history(self) -> NavigationHistory:
        return self._history

    @property
    def sidebar(self) -> Sidebar:
        return self._sidebar

    @property
    def file_list(self) -> FileListSection:
        return self._file_list

    @property
    def repositories(self) -> list[Repository]:
        return list(self._repositories)

    # Repositories

    def load_repositories(self) -> None:
        """Fetch repositories and their archives in a background thread."""

        def run() -> None:
            try:
                repositories = run_coroutine(self._fetch_repositories())
            except ArchiveAPIError as e:
                warn(f"[Dashboard] Cannot load repositories: {e}")
                self._signals.repositories_failed.emit(str(e))
                return
            except Exception as e:  # Intentional catch-all: the window stays usable
                exception(f"[Dashboard] Repository loading crashed: {e}")
                self._signals.repositories_failed.emit(str(e))
                return
            self._signals.repositories_loaded.emit(repositories)

        start_background_task(run)

    async def _fetch_repositories(self) -> list[Repository]:
        async with self._client_factory() as client:
            repositories = []
            for repo in await client.get_repositories():
                repositories.append(await client.get_repository_archives(repo.id))
            return repositories

    def _on_repositories_loaded(self, repositories: list[Repository]) -> None:
        self._repositories = list(repositories)
        self._sidebar.set_repositories(self._repositories)
        self._sidebar.set_status(True, f"{len(self._repositories)} repositories")
        info(f"[Dashboard] Loaded {len(self._repositories)} repositories")

        if self._current is not None:
            repo_id, archive_id = self._current
            self._sidebar.select_archive(repo_id, archive_id)
            self._file_list.set_diff_targets(self._archives_of(repo_id))

    def _on_repositories_failed(self, message: str) -> None:
        self._sidebar.set_status(False, "Backend unavailable")

    def _find_archive(self, repo_id: str, archive_id: str) -> Optional[Archive]:
        for archive in self._archives_of(repo_id):
            if archive_id in (archive.id, archive.name):
                return archive
        return None

    def _archives_of(self, repo_id: str) -> list[Archive]:
        for repo in self._repositories:
            if repo.id == repo_id:
                return list(repo.archives)
        return []

    # Navigation

    def _on_archive_selected(self, repo_id: str, archive_id: str) -> None:
        mount_url = archive_mount_url(repo_id, archive_id)
        if directory_from_location(self._history.location.pathname, mount_url) is None:
            self._history.push(mount_url)

    def _on_location(self, location: Location, action: str) -> None:
        self._sidebar.set_history_state(
            self._history.can_go_back, self._history.can_go_forward
        )
        self._sync_location(location)

    def _sync_location(self, location: Location) -> None:
        parsed = parse_archive_location(location.pathname)
        if parsed is None:
            debug(f"[Dashboard] {location.pathname} is not an archive location")
            return
        repo_id, archive_id, _ = parsed
        if (repo_id, archive_id) == self._current:
            return

        archive = self._find_archive(repo_id, archive_id) or Archive(
            id=archive_id, repo_id=repo_id
        )
        self._current = (repo_id, archive_id)
        self._file_list.bind_archive(archive)
        self._file_list.set_diff_targets(self._archives_of(repo_id))
        self._sidebar.select_archive(repo_id, archive_id)

    # Lifetime

    def teardown(self) -> None:
        if self._unlisten is not None:
            self._unlisten()
            self._unlisten = None
        self._file_list.teardown()

    def closeEvent(self, event: QCloseEvent | None) -> None:
        """Release the history subscriptions before the window goes away."""
        self.teardown()
        super().closeEvent(event)
