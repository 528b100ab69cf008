"""
Tests for archive_browser.dashboard.widgets
"""

import pytest

from archive_browser.core.models import (
    Archive,
    FileFilter,
    JobInfo,
    JobQueue,
    JobStatus,
    ListMode,
    ProgressInfo,
    Repository,
)
from archive_browser.core.rendering import (
    DIFF_HEADER,
    TABLE_HEADERS,
    breadcrumb_segments,
)
from archive_browser.dashboard.widgets import (
    BreadcrumbBar,
    EmptyState,
    ErrorAlert,
    FileListTable,
    FilterBar,
    JobProgressPanel,
    SegmentedControl,
    Sidebar,
    summarize_jobs,
)
from archive_browser.dashboard.widgets.job_monitor import WAITING_TEXT
from archive_browser.dashboard.widgets.navigation import ARCHIVE_ROLE

from ...factories import make_entry, make_job_queue


# =============================================================================
# Controls
# =============================================================================


class TestSegmentedControl:
    @pytest.fixture
    def control(self, qtbot):
        widget = SegmentedControl([("Tree", "tree"), ("Flat", "flat")])
        qtbot.addWidget(widget)
        return widget

    def test_first_option_selected(self, control):
        assert control.value() == "tree"
        assert control.button("tree").isChecked()

    def test_click_emits_value(self, qtbot, control):
        with qtbot.waitSignal(control.value_changed) as blocker:
            control.button("flat").click()
        assert blocker.args == ["flat"]
        assert control.value() == "flat"
        assert not control.button("tree").isChecked()

    def test_reclick_current_value_emits(self, qtbot, control):
        with qtbot.waitSignal(control.value_changed) as blocker:
            control.button("tree").click()
        assert blocker.args == ["tree"]

    def test_set_value_is_silent(self, qtbot, control):
        with qtbot.assertNotEmitted(control.value_changed):
            control.set_value("flat")
        assert control.value() == "flat"

    def test_set_unknown_value_ignored(self, control):
        control.set_value("sideways")
        assert control.value() == "tree"


class TestEmptyStateAndAlert:
    def test_empty_state_action(self, qtbot):
        widget = EmptyState(title="Nothing", action="Load")
        qtbot.addWidget(widget)
        with qtbot.waitSignal(widget.action_clicked):
            widget.action_button.click()

    def test_empty_state_without_action(self, qtbot):
        widget = EmptyState(title="Nothing", subtitle="Pick one")
        qtbot.addWidget(widget)
        assert widget.action_button is None
        assert widget.subtitle() == "Pick one"

    def test_error_alert(self, qtbot):
        alert = ErrorAlert("Cannot load", "HTTP 500")
        qtbot.addWidget(alert)
        alert.set_description("Connection refused")
        assert alert.description() == "Connection refused"
        with qtbot.waitSignal(alert.action_clicked):
            alert.action_button.click()


# =============================================================================
# Filter bar
# =============================================================================


class TestFilterBar:
    @pytest.fixture
    def bar(self, qtbot):
        widget = FilterBar(debounce_ms=10)
        qtbot.addWidget(widget)
        return widget

    def test_search_commits_after_debounce(self, qtbot, bar):
        with qtbot.waitSignal(bar.field_changed, timeout=1000) as blocker:
            bar.search_input.setText("hosts")
        assert blocker.args == ["search", "hosts"]

    def test_search_typing_commits_once(self, qtbot, bar):
        committed = []
        bar.field_changed.connect(lambda name, value: committed.append((name, value)))
        for text in ("h", "ho", "hos"):
            bar.search_input.setText(text)
        qtbot.waitUntil(lambda: bool(committed), timeout=1000)
        qtbot.wait(50)
        assert committed == [("search", "hos")]

    def test_unchanged_search_not_recommitted(self, qtbot, bar):
        bar.search_input.setText("etc")
        bar.commit_search()
        with qtbot.assertNotEmitted(bar.field_changed):
            bar.commit_search()

    def test_mode_emits_wire_name(self, qtbot, bar):
        with qtbot.waitSignal(bar.field_changed) as blocker:
            bar.mode_control.button("flat").click()
        assert blocker.args == ["mode", "flat"]

    def test_max_size_emits(self, qtbot, bar):
        with qtbot.waitSignal(bar.field_changed) as blocker:
            bar.max_size_combo.setCurrentText("500")
        assert blocker.args == ["maxSize", "500"]

    def test_diff_targets_exclude_current_archive(self, bar):
        archives = [Archive(id="a1", name="first"), Archive(id="a2", name="second")]
        bar.set_diff_targets(archives, exclude="a1")
        combo = bar.diff_combo
        assert [combo.itemData(i) for i in range(combo.count())] == ["", "a2"]

    def test_diff_selection_emits(self, qtbot, bar):
        bar.set_diff_targets([Archive(id="a2", name="second")])
        with qtbot.waitSignal(bar.field_changed) as blocker:
            bar.diff_combo.setCurrentIndex(1)
        assert blocker.args == ["diffArchiveId", "a2"]

    def test_set_filter_is_silent(self, qtbot, bar):
        bar.set_diff_targets([Archive(id="a2", name="second")])
        file_filter = FileFilter(
            search="log", mode=ListMode.FLAT, max_size="1000", diff_archive_id="a2"
        )
        with qtbot.assertNotEmitted(bar.field_changed, wait=50):
            bar.set_filter(file_filter)
        assert bar.search_input.text() == "log"
        assert bar.mode_control.value() == "flat"
        assert bar.max_size_combo.currentText() == "1000"
        assert bar.diff_combo.currentData() == "a2"

    def test_set_filter_adds_unknown_max_size(self, bar):
        bar.set_filter(FileFilter(max_size="77"))
        assert bar.max_size_combo.currentText() == "77"

    def test_set_filter_keeps_text_being_typed(self, qtbot, bar):
        bar.search_input.setText("conf")
        bar.set_filter(FileFilter(mode=ListMode.FLAT))
        assert bar.search_input.text() == "conf"
        assert bar.mode_control.value() == "flat"
        with qtbot.waitSignal(bar.field_changed, timeout=1000) as blocker:
            pass
        assert blocker.args == ["search", "conf"]

    def test_set_filter_replaces_committed_search(self, bar):
        bar.search_input.setText("conf")
        bar.commit_search()
        bar.set_filter(FileFilter(search=""))
        assert bar.search_input.text() == ""

    def test_reload(self, qtbot, bar):
        with qtbot.waitSignal(bar.reload_requested):
            bar.reload_button.click()


# =============================================================================
# Breadcrumb
# =============================================================================


class TestBreadcrumbBar:
    def test_root_only(self, qtbot):
        bar = BreadcrumbBar()
        qtbot.addWidget(bar)
        assert [link.text() for link in bar.links] == ["/"]

    def test_segment_links(self, qtbot):
        bar = BreadcrumbBar()
        qtbot.addWidget(bar)
        bar.set_segments(breadcrumb_segments("etc/ssl/certs"))
        assert [link.text() for link in bar.links] == ["/", "etc", "ssl", "certs"]

        with qtbot.waitSignal(bar.directory_requested) as blocker:
            bar.links[2].click()
        assert blocker.args == ["etc/ssl"]

        with qtbot.waitSignal(bar.directory_requested) as blocker:
            bar.links[0].click()
        assert blocker.args == [""]


# =============================================================================
# Table
# =============================================================================


class TestFileListTable:
    @pytest.fixture
    def table(self, qtbot):
        widget = FileListTable()
        qtbot.addWidget(widget)
        return widget

    def test_empty_listing_keeps_headers(self, table):
        table.set_entries([])
        assert table.rowCount() == 0
        assert table.header_labels() == list(TABLE_HEADERS)

    def test_rows_in_backend_order(self, table):
        entries = [make_entry("var"), make_entry("etc"), make_entry("bin")]
        table.set_entries(entries)
        assert [table.item(row, 3).text() for row in range(3)] == ["var", "etc", "bin"]
        assert not table.isSortingEnabled()

    def test_diff_column(self, table):
        entries = [make_entry("etc/hosts", diff_status="modified")]
        table.set_entries(entries, TABLE_HEADERS + (DIFF_HEADER,))
        assert table.header_labels()[-1] == DIFF_HEADER
        assert table.item(0, 4).text() == "modified"

    def test_double_click_emits_entry(self, qtbot, table):
        entry = make_entry("etc", mode="drwxr-xr-x")
        table.set_entries([entry])
        with qtbot.waitSignal(table.entry_activated) as blocker:
            table.cellDoubleClicked.emit(0, 3)
        assert blocker.args == [entry]

    def test_entry_at_out_of_range(self, table):
        assert table.entry_at(3) is None


# =============================================================================
# Job progress
# =============================================================================


class TestSummarizeJobs:
    def test_progress_text(self):
        rows = summarize_jobs([make_job_queue(current=50, total=200)])
        assert len(rows) == 1
        assert rows[0].status == "Running"
        assert rows[0].percent == 25
        assert rows[0].progress == "Scanning 25% (50 / 200)"

    def test_title_fallbacks(self):
        queue = JobQueue(
            repo="repo1",
            jobs=[
                JobInfo(unique_job_number=7, title="", description="borg list"),
                JobInfo(unique_job_number=8, title=""),
            ],
        )
        assert [row.title for row in summarize_jobs([queue])] == ["borg list", "Job 8"]

    def test_unknown_total_has_no_percent(self):
        queue = JobQueue(
            repo="repo1",
            jobs=[
                JobInfo(
                    unique_job_number=1,
                    title="Scan",
                    status=JobStatus.QUEUED,
                    progress=ProgressInfo("", 1500, 0),
                )
            ],
        )
        row = summarize_jobs([queue])[0]
        assert row.percent is None
        assert row.progress == "1.5K"


class TestJobProgressPanel:
    def test_waiting_until_jobs_arrive(self, qtbot):
        panel = JobProgressPanel()
        qtbot.addWidget(panel)
        assert panel.rows == []
        assert panel._waiting.text() == WAITING_TEXT
        assert not panel._spinner.isHidden()

        panel.set_queues([make_job_queue()])
        assert len(panel.job_widgets) == 1
        assert panel._spinner.isHidden()

        panel.clear()
        assert panel.job_widgets == []
        assert not panel._spinner.isHidden()


# =============================================================================
# Sidebar
# =============================================================================


class TestSidebar:
    @pytest.fixture
    def sidebar(self, qtbot):
        widget = Sidebar()
        qtbot.addWidget(widget)
        repo = Repository(
            id="repo1",
            display_name="Host backups",
            archives=(Archive(id="a1", name="first"), Archive(id="a2", name="second")),
        )
        widget.set_repositories([repo, Repository(id="repo2")])
        return widget

    def test_tree_layout(self, sidebar):
        tree = sidebar.tree
        assert tree.topLevelItemCount() == 2
        assert "Host backups" in tree.topLevelItem(0).text(0)
        assert "repo2" in tree.topLevelItem(1).text(0)
        assert tree.topLevelItem(0).child(1).data(0, ARCHIVE_ROLE) == ("repo1", "a2")

    def test_archive_click_emits(self, qtbot, sidebar):
        child = sidebar.tree.topLevelItem(0).child(0)
        with qtbot.waitSignal(sidebar.archive_selected) as blocker:
            sidebar.tree.itemClicked.emit(child, 0)
        assert blocker.args == ["repo1", "a1"]

    def test_repository_click_is_ignored(self, qtbot, sidebar):
        with qtbot.assertNotEmitted(sidebar.archive_selected):
            sidebar.tree.itemClicked.emit(sidebar.tree.topLevelItem(0), 0)

    def test_select_archive_is_silent(self, qtbot, sidebar):
        with qtbot.assertNotEmitted(sidebar.archive_selected):
            sidebar.select_archive("repo1", "a2")
        assert sidebar.tree.currentItem().data(0, ARCHIVE_ROLE) == ("repo1", "a2")

    def test_history_buttons(self, qtbot, sidebar):
        assert not sidebar.back_button.isEnabled()
        sidebar.set_history_state(True, False)
        assert sidebar.back_button.isEnabled()
        assert not sidebar.forward_button.isEnabled()
        with qtbot.waitSignal(sidebar.back_requested):
            sidebar.back_button.click()

    def test_status(self, sidebar):
        sidebar.set_status(False, "Backend unavailable")
        assert sidebar.status_text() == "Backend unavailable"
