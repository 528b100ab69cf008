"""
Tests for archive_browser.core.models
"""

import pytest

from archive_browser.core.models import (
    Archive,
    FileEntry,
    FileFilter,
    FileListRequest,
    JobInfo,
    JobQueue,
    JobStatus,
    ListMode,
    ProgressInfo,
    Repository,
)


class TestFileEntry:
    def test_message_defaults_to_path(self):
        entry = FileEntry(mode="-rw-r--r--", path="etc/hosts")
        assert entry.message == "etc/hosts"
        assert entry.name == "hosts"
        assert not entry.is_directory

    def test_directory_detection(self):
        assert FileEntry(mode="drwxr-xr-x", path="etc").is_directory

    def test_from_dict_reads_diff_status(self):
        entry = FileEntry.from_dict(
            {
                "mode": "-rw-r--r--",
                "date": "2024-01-15 10:30:00",
                "size": "12 B",
                "path": "etc/hosts",
                "message": "-rw-r--r-- root root 12 B etc/hosts",
                "diffStatus": "modified",
            }
        )
        assert entry.diff_status == "modified"
        assert entry.to_dict()["diffStatus"] == "modified"

    @pytest.mark.parametrize("data", [[], "text", {"path": "x"}, {"mode": 3}])
    def test_from_dict_rejects_non_entries(self, data):
        with pytest.raises(ValueError):
            FileEntry.from_dict(data)

    def test_to_dict_omits_missing_diff_status(self):
        assert "diffStatus" not in FileEntry(mode="-", path="a").to_dict()


class TestFileFilter:
    def test_defaults(self):
        file_filter = FileFilter()
        assert file_filter.search == ""
        assert file_filter.mode is ListMode.TREE
        assert file_filter.current_directory == ""
        assert file_filter.max_size == "50"
        assert not file_filter.is_diff

    @pytest.mark.parametrize(
        "name,value,attr,expected",
        [
            ("search", "hosts", "search", "hosts"),
            ("mode", "flat", "mode", ListMode.FLAT),
            ("mode", ListMode.FLAT, "mode", ListMode.FLAT),
            ("currentDirectory", "/etc/ssh/", "current_directory", "etc/ssh"),
            ("maxSize", "500", "max_size", "500"),
            ("maxSize", 100, "max_size", "100"),
            ("diffArchiveId", "d4e5f6", "diff_archive_id", "d4e5f6"),
        ],
    )
    def test_with_field_replaces_one_field(self, name, value, attr, expected):
        original = FileFilter(search="keep", current_directory="var")
        updated = original.with_field(name, value)
        assert getattr(updated, attr) == expected
        for other in ("search", "mode", "current_directory", "max_size"):
            if other != attr:
                assert getattr(updated, other) == getattr(original, other)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValueError, match="Unknown filter field"):
            FileFilter().with_field("colour", "red")

    @pytest.mark.parametrize("value", ["0", "-5", "many", ""])
    def test_invalid_max_size_rejected(self, value):
        with pytest.raises(ValueError):
            FileFilter().with_field("maxSize", value)

    def test_invalid_mode_rejected(self):
        with pytest.raises(ValueError, match="Unknown list mode"):
            FileFilter().with_field("mode", "sideways")

    def test_to_dict_uses_wire_names(self):
        assert FileFilter(diff_archive_id="x").to_dict() == {
            "search": "",
            "mode": "tree",
            "currentDirectory": "",
            "maxSize": "50",
            "diffArchiveId": "x",
        }


class TestFileListRequest:
    def test_params_from_filter(self):
        file_filter = FileFilter(
            search="conf", mode=ListMode.FLAT, current_directory="etc", max_size="100"
        )
        request = FileListRequest.from_filter("a1", file_filter, force=True)
        assert request.to_params() == {
            "archiveId": "a1",
            "force": "true",
            "searchString": "conf",
            "mode": "flat",
            "currentDirectory": "etc",
            "maxResultSize": "100",
        }

    def test_diff_archive_only_sent_when_set(self):
        request = FileListRequest.from_filter("a1", FileFilter(diff_archive_id="b2"))
        params = request.to_params()
        assert params["diffArchiveId"] == "b2"
        assert params["force"] == "false"


class TestRepository:
    def test_from_dict_links_archives_to_repo(self):
        repo = Repository.from_dict(
            {
                "id": "repo1",
                "name": "host",
                "displayName": "Host backups",
                "archives": [{"id": "a1", "name": "host-1", "time": "2024"}],
            }
        )
        assert repo.display_name == "Host backups"
        assert repo.archives == (
            Archive(
                id="a1",
                name="host-1",
                repo_id="repo1",
                repo_name="host",
                repo_display_name="Host backups",
                time="2024",
            ),
        )
        assert repo.to_dict()["archives"] == [
            {"id": "a1", "name": "host-1", "time": "2024"}
        ]

    def test_archive_display_name_falls_back_to_id(self):
        assert Archive(id="a1").display_name == "a1"


class TestJobs:
    @pytest.mark.parametrize(
        "current,total,expected",
        [(50, 200, 25), (0, 0, None), (300, 200, 100), (-1, 10, 0)],
    )
    def test_progress_percent(self, current, total, expected):
        assert ProgressInfo("scan", current, total).percent == expected

    def test_status_parse_defaults_to_queued(self):
        assert JobStatus.parse("running") is JobStatus.RUNNING
        assert JobStatus.parse("exploded") is JobStatus.QUEUED
        assert JobStatus.parse(None) is JobStatus.QUEUED

    def test_queue_from_wire(self):
        queue = JobQueue.from_dict(
            {
                "repo": "repo1",
                "jobs": [
                    {
                        "uniqueJobNumber": 7,
                        "title": "Loading",
                        "description": "borg list",
                        "status": "RUNNING",
                        "progressInfo": {"message": "m", "current": 1, "total": 4},
                    }
                ],
            }
        )
        job = queue.jobs[0]
        assert job == JobInfo(
            unique_job_number=7,
            title="Loading",
            description="borg list",
            status=JobStatus.RUNNING,
            progress=ProgressInfo("m", 1, 4),
        )
        assert JobQueue.from_dict(queue.to_dict()) == queue
