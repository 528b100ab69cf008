"""
Tests for archive_browser.core.rendering
"""

import pytest
from faker import Faker

from archive_browser.core.listing import Entries, Failure, FailureKind, NotComputed
from archive_browser.core.models import FileFilter, FileListRequest, ListMode
from archive_browser.core.rendering import (
    DIFF_HEADER,
    TABLE_HEADERS,
    ViewKind,
    breadcrumb_segments,
    build_listing_view,
    filter_entries,
)
from archive_browser.core.state import fetch_resolved, fetch_started, initial_state

from ...factories import make_entry

fake = Faker()


def resolved(result):
    state = fetch_started(initial_state(), FileListRequest(archive_id="a1"))
    return fetch_resolved(state, state.generation, result)


class TestFilterEntries:
    def test_empty_search_keeps_everything_in_order(self, random_entries):
        assert filter_entries(random_entries, "") == random_entries

    def test_result_is_ordered_subset(self, random_entries):
        needle = random_entries[3].path[:3]
        result = filter_entries(random_entries, needle)
        assert all(needle.lower() in entry.message.lower() for entry in result)
        indexes = [random_entries.index(entry) for entry in result]
        assert indexes == sorted(indexes)
        assert random_entries[3] in result

    def test_case_insensitive(self):
        entries = [make_entry("etc/Hosts"), make_entry("var/log")]
        assert filter_entries(entries, "HOSTS") == [entries[0]]

    def test_subset_property_for_random_needles(self, random_entries):
        for _ in range(20):
            needle = fake.pystr(min_chars=1, max_chars=2)
            result = filter_entries(random_entries, needle)
            assert set(result) <= set(random_entries)
            assert all(needle.lower() in e.message.lower() for e in result)


class TestBreadcrumb:
    def test_root_has_no_segments(self):
        assert breadcrumb_segments("") == []

    def test_segments_lead_to_prefixes(self):
        segments = breadcrumb_segments("a/b")
        assert [s.label for s in segments] == ["a", "b"]
        assert [s.path for s in segments] == ["a", "a/b"]

    def test_slashes_ignored(self):
        assert [s.path for s in breadcrumb_segments("/usr//lib/")] == ["usr", "usr/lib"]


class TestBuildListingView:
    def test_idle_before_first_fetch(self):
        assert build_listing_view(initial_state(), FileFilter()).kind is ViewKind.IDLE

    def test_fetching_shows_job_progress(self):
        state = fetch_started(initial_state(), FileListRequest(archive_id="a1"))
        assert build_listing_view(state, FileFilter()).kind is ViewKind.JOB_PROGRESS

    @pytest.mark.parametrize("search", ["", "anything"])
    def test_sentinel_never_shows_table(self, search):
        view = build_listing_view(resolved(NotComputed()), FileFilter(search=search))
        assert view.kind is ViewKind.NOT_LOADED
        assert not view.shows_table
        assert view.rows == ()

    def test_failure_carries_description(self):
        failure = Failure(FailureKind.NETWORK, "Connection refused")
        view = build_listing_view(resolved(failure), FileFilter())
        assert view.kind is ViewKind.FAILED
        assert view.failure == failure

    def test_empty_listing_is_empty_table_with_headers(self):
        view = build_listing_view(resolved(Entries()), FileFilter())
        assert view.kind is ViewKind.TABLE
        assert view.rows == ()
        assert view.headers == TABLE_HEADERS

    def test_rows_filtered_by_search(self):
        entries = [make_entry("etc/hosts"), make_entry("etc/passwd")]
        view = build_listing_view(
            resolved(Entries.of(entries)), FileFilter(search="pass")
        )
        assert view.rows == (entries[1],)

    def test_breadcrumb_only_in_tree_mode_below_root(self):
        state = resolved(Entries())
        tree = build_listing_view(state, FileFilter(current_directory="a/b"))
        flat = build_listing_view(
            state, FileFilter(mode=ListMode.FLAT, current_directory="a/b")
        )
        root = build_listing_view(state, FileFilter())
        assert [s.label for s in tree.breadcrumb] == ["a", "b"]
        assert flat.breadcrumb == ()
        assert root.breadcrumb == ()

    def test_diff_column_when_diffing(self):
        entries = [make_entry("etc/hosts", diff_status="new")]
        view = build_listing_view(
            resolved(Entries.of(entries)), FileFilter(diff_archive_id="b2")
        )
        assert view.show_diff
        assert view.headers == TABLE_HEADERS + (DIFF_HEADER,)

    def test_diff_column_when_entries_are_annotated(self):
        entries = [make_entry("etc/hosts", diff_status="removed")]
        view = build_listing_view(resolved(Entries.of(entries)), FileFilter())
        assert view.show_diff
