"""
Pytest configuration and shared fixtures for archive_browser tests.

This module provides:
- Headless Qt and a throwaway log directory, set before any import
- Common fixtures for models, sources and test data
"""

import os
import tempfile

# Must be set before PyQt6 or the logger are imported
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault(
    "ARCHIVE_BROWSER_LOG_DIR", tempfile.mkdtemp(prefix="archive-browser-logs-")
)

import pytest
from aioresponses import aioresponses
from faker import Faker

from archive_browser.core.models import Archive, FileEntry, FileFilter
from archive_browser.utils.settings import Settings

from .factories import make_entry
from .mocks import ManualFileListSource

fake = Faker()


@pytest.fixture
def mock_aioresponse():
    """Intercept aiohttp requests."""
    with aioresponses() as mocked:
        yield mocked


@pytest.fixture
def archive() -> Archive:
    return Archive(
        id="a1b2c3",
        name="host-2024-01-15",
        repo_id="repo1",
        repo_name="host",
        repo_display_name="Host backups",
        time="2024-01-15T10:30:00",
    )


@pytest.fixture
def other_archive() -> Archive:
    return Archive(
        id="d4e5f6",
        name="host-2024-01-16",
        repo_id="repo1",
        repo_name="host",
        repo_display_name="Host backups",
        time="2024-01-16T10:30:00",
    )


@pytest.fixture
def source() -> ManualFileListSource:
    return ManualFileListSource()


@pytest.fixture
def settings() -> Settings:
    """Default settings with a short debounce"""
    return Settings(search_debounce_ms=10, job_poll_interval_ms=50)


@pytest.fixture
def default_filter() -> FileFilter:
    return FileFilter()


@pytest.fixture
def entry_factory():
    return make_entry


@pytest.fixture
def random_entries() -> list[FileEntry]:
    """A few file entries with generated paths"""
    return [make_entry(fake.file_path(depth=2).strip("/")) for _ in range(8)]
