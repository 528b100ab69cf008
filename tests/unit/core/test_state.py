"""
Tests for archive_browser.core.state reducers
"""

import pytest

from archive_browser.core.listing import Entries, Failure, FailureKind, NotComputed
from archive_browser.core.models import FileEntry, FileListRequest
from archive_browser.core.state import (
    PanelPhase,
    fetch_resolved,
    fetch_started,
    initial_state,
)

REQUEST = FileListRequest(archive_id="a1")


class TestFetchStarted:
    def test_enters_fetching_and_bumps_generation(self):
        state = fetch_started(initial_state(), REQUEST)
        assert state.phase is PanelPhase.FETCHING
        assert state.generation == 1
        assert state.last_request == REQUEST
        assert fetch_started(state, REQUEST).generation == 2

    def test_clears_failure(self):
        failed = fetch_resolved(
            fetch_started(initial_state(), REQUEST),
            1,
            Failure(FailureKind.NETWORK, "refused"),
        )
        restarted = fetch_started(failed, REQUEST)
        assert restarted.failure is None
        assert not restarted.failed


class TestFetchResolved:
    @pytest.fixture
    def fetching(self):
        return fetch_started(initial_state(), REQUEST)

    def test_entries_load(self, fetching):
        entry = FileEntry(mode="-", path="a")
        state = fetch_resolved(fetching, 1, Entries.of([entry]))
        assert state.phase is PanelPhase.LOADED
        assert state.entries == (entry,)
        assert not state.is_fetching

    def test_sentinel(self, fetching):
        state = fetch_resolved(fetching, 1, NotComputed())
        assert state.is_not_loaded
        assert state.entries == ()

    def test_failure(self, fetching):
        failure = Failure(FailureKind.BACKEND, "HTTP 500")
        state = fetch_resolved(fetching, 1, failure)
        assert state.failed
        assert state.failure == failure
        assert not state.is_fetching

    def test_stale_generation_returns_same_state(self, fetching):
        newer = fetch_started(fetching, REQUEST)
        assert fetch_resolved(newer, 1, NotComputed()) is newer

    def test_result_after_resolution_is_ignored(self, fetching):
        loaded = fetch_resolved(fetching, 1, Entries())
        assert fetch_resolved(loaded, 1, NotComputed()) is loaded

    def test_unknown_result_type(self, fetching):
        with pytest.raises(TypeError):
            fetch_resolved(fetching, 1, ["not", "a", "result"])
