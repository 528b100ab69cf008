"""
Dashboard fixtures: a history already at an archive location, a section
wired to a ManualFileListSource and a mocked job poller.
"""

from unittest.mock import MagicMock

import pytest

from archive_browser.core.navigation import NavigationHistory, archive_mount_url
from archive_browser.dashboard.sections import FileListSection
from archive_browser.dashboard.window.jobs import JobStatusPoller


@pytest.fixture
def mount_url(archive) -> str:
    return archive_mount_url(archive.repo_id, archive.id)


@pytest.fixture
def history(mount_url) -> NavigationHistory:
    return NavigationHistory(mount_url)


@pytest.fixture
def poller() -> MagicMock:
    return MagicMock(spec=JobStatusPoller)


@pytest.fixture
def section(qtbot, history, source, poller, settings):
    widget = FileListSection(history, source=source, poller=poller, settings=settings)
    qtbot.addWidget(widget)
    yield widget
    widget.teardown()


@pytest.fixture
def bound_section(section, archive):
    """Section showing ``archive``; its first fetch is still pending."""
    section.bind_archive(archive)
    return section
