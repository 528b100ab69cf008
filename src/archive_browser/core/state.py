"""
Panel state and its reducers.

PanelState is immutable; every transition returns a new value. The panel
moves Idle -> Fetching -> {Loaded | Sentinel | Failed} and every filter
change re-enters Fetching. Idle only exists before mount.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from .listing import Entries, Failure, ListingResult, NotComputed
from .models import FileEntry, FileListRequest


class PanelPhase(Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    LOADED = "loaded"
    SENTINEL = "sentinel"
    FAILED = "failed"


@dataclass(frozen=True)
class PanelState:
    phase: PanelPhase = PanelPhase.IDLE
    entries: tuple[FileEntry, ...] = ()
    failure: Optional[Failure] = None
    generation: int = 0  # Latest issued fetch
    last_request: Optional[FileListRequest] = None

    @property
    def is_fetching(self) -> bool:
        return self.phase is PanelPhase.FETCHING

    @property
    def failed(self) -> bool:
        return self.phase is PanelPhase.FAILED

    @property
    def is_not_loaded(self) -> bool:
        return self.phase is PanelPhase.SENTINEL


def initial_state() -> PanelState:
    return PanelState()


def fetch_started(state: PanelState, request: FileListRequest) -> PanelState:
    """Enter Fetching for a new request and bump the generation.

    Entries of the previous cycle stay until the result replaces them; the
    renderer does not show them while fetching.
    """
    return replace(
        state,
        phase=PanelPhase.FETCHING,
        failure=None,
        generation=state.generation + 1,
        last_request=request,
    )


def is_current(state: PanelState, generation: int) -> bool:
    return state.is_fetching and generation == state.generation


def fetch_resolved(
    state: PanelState, generation: int, result: ListingResult
) -> PanelState:
    """Apply the result of fetch ``generation``.

    A result from any generation other than the latest is stale and leaves the
    state untouched (the same object is returned).
    """
    if not is_current(state, generation):
        return state

    if isinstance(result, NotComputed):
        return replace(state, phase=PanelPhase.SENTINEL, entries=(), failure=None)
    if isinstance(result, Entries):
        return replace(
            state, phase=PanelPhase.LOADED, entries=result.entries, failure=None
        )
    if isinstance(result, Failure):
        return replace(state, phase=PanelPhase.FAILED, entries=(), failure=result)
    raise TypeError(f"Unsupported listing result: {result!r}")
