"""
Listing view model.

Pure functions deciding what the file list panel shows for a given state and
filter. The Qt widgets only draw what build_listing_view() returns.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from .listing import Failure
from .models import FileEntry, FileFilter, ListMode
from .state import PanelPhase, PanelState

TABLE_HEADERS = ("Mode", "Date", "Size", "Path")
DIFF_HEADER = "Diff"

FAILURE_TITLE = "Cannot load archive file list"
RETRY_LABEL = "Try again"
FORCE_LOAD_LABEL = "Load file list from borg backup server"


class ViewKind(Enum):
    IDLE = "idle"
    JOB_PROGRESS = "job_progress"
    FAILED = "failed"
    NOT_LOADED = "not_loaded"
    TABLE = "table"


@dataclass(frozen=True)
class BreadcrumbSegment:
    label: str
    path: str  # Directory this segment navigates to


@dataclass(frozen=True)
class ListingView:
    kind: ViewKind
    rows: tuple[FileEntry, ...] = ()
    headers: tuple[str, ...] = TABLE_HEADERS
    breadcrumb: tuple[BreadcrumbSegment, ...] = ()
    failure: Optional[Failure] = None
    show_diff: bool = False

    @property
    def shows_table(self) -> bool:
        return self.kind is ViewKind.TABLE


def filter_entries(entries: Iterable[FileEntry], search: str) -> list[FileEntry]:
    """Entries whose message contains ``search``, ignoring case.

    Plain substring containment, order preserved; an empty search keeps all.
    """
    needle = search.lower()
    return [entry for entry in entries if needle in entry.message.lower()]


def breadcrumb_segments(current_directory: str) -> list[BreadcrumbSegment]:
    """One segment per directory level; segment k leads to segments 0..k."""
    parts = [part for part in current_directory.strip("/").split("/") if part]
    return [
        BreadcrumbSegment(label=part, path="/".join(parts[: index + 1]))
        for index, part in enumerate(parts)
    ]


def build_listing_view(state: PanelState, file_filter: FileFilter) -> ListingView:
    if state.phase is PanelPhase.IDLE:
        return ListingView(kind=ViewKind.IDLE)
    if state.phase is PanelPhase.FETCHING:
        return ListingView(kind=ViewKind.JOB_PROGRESS)
    if state.phase is PanelPhase.FAILED:
        return ListingView(kind=ViewKind.FAILED, failure=state.failure)
    if state.phase is PanelPhase.SENTINEL:
        # Never the table, whatever the search says
        return ListingView(kind=ViewKind.NOT_LOADED)

    rows = tuple(filter_entries(state.entries, file_filter.search))
    breadcrumb: tuple[BreadcrumbSegment, ...] = ()
    if file_filter.mode is ListMode.TREE and file_filter.current_directory:
        breadcrumb = tuple(breadcrumb_segments(file_filter.current_directory))

    show_diff = file_filter.is_diff or any(
        entry.diff_status is not None for entry in state.entries
    )
    headers = TABLE_HEADERS + (DIFF_HEADER,) if show_diff else TABLE_HEADERS
    return ListingView(
        kind=ViewKind.TABLE,
        rows=rows,
        headers=headers,
        breadcrumb=breadcrumb,
        show_diff=show_diff,
    )
