"""
Integration fixtures: a live REST server over listings written to tmp_path.

The server binds an ephemeral port; clients reach it through settings or an
explicit base URL.
"""

import pytest

from archive_browser.api.client import ArchiveAPIClient
from archive_browser.api.server import ArchiveAPIServer
from archive_browser.backend import FileListService, ListingDB, ListingSource
from archive_browser.core.models import Archive
from archive_browser.utils.settings import Settings

from ..factories import borg_item, write_repository

OLD = "host-2024-01-15"
NEW = "host-2024-01-16"

SIGNAL_WAIT_MS = 5000


@pytest.fixture
def listing_dir(tmp_path):
    write_repository(
        tmp_path / "listings",
        "repo1",
        {
            OLD: [
                borg_item("etc", type="d", size=0),
                borg_item("etc/hosts", size=100),
                borg_item("var", type="d", size=0),
            ],
            NEW: [
                borg_item("etc", type="d", size=0),
                borg_item("etc/hosts", size=150),
                borg_item("home", type="d", size=0),
                borg_item("var", type="d", size=0),
            ],
        },
        display_name="Host backups",
    )
    return tmp_path / "listings"


@pytest.fixture
def live_server(tmp_path, listing_dir):
    (tmp_path / "cache").mkdir()
    db = ListingDB(tmp_path / "cache" / "listings.duckdb")
    service = FileListService(db=db, source=ListingSource(str(listing_dir)))
    server = ArchiveAPIServer(host="127.0.0.1", port=0, service=service)
    server.start()
    yield server
    server.stop()
    db.close()


@pytest.fixture
def live_settings(live_server) -> Settings:
    return Settings(
        api_host="127.0.0.1",
        api_port=live_server.port,
        request_timeout=5,
        search_debounce_ms=10,
        job_poll_interval_ms=50,
    )


@pytest.fixture
def client_factory(live_server):
    return lambda: ArchiveAPIClient(base_url=f"{live_server.url}/rest", timeout=5)


@pytest.fixture
def old_archive() -> Archive:
    return Archive(id=f"{OLD}-id", name=OLD, repo_id="repo1")


@pytest.fixture
def new_archive() -> Archive:
    return Archive(id=f"{NEW}-id", name=NEW, repo_id="repo1")
