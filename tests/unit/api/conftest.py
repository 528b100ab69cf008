"""
API fixtures: a Flask test client over a real service in tmp_path.
"""

import pytest

from archive_browser.api.server import ArchiveAPIServer
from archive_browser.backend import FileListService, ListingDB, ListingSource

from ...factories import borg_item, write_repository

ARCHIVE = "host-2024-01-15"
ARCHIVE_ID = f"{ARCHIVE}-id"


@pytest.fixture
def service(tmp_path):
    write_repository(
        tmp_path / "listings",
        "repo1",
        {
            ARCHIVE: [
                borg_item("etc", type="d", size=0),
                borg_item("etc/hosts", size=12),
                borg_item("var", type="d", size=0),
            ]
        },
    )
    db = ListingDB(tmp_path / "listings.duckdb")
    yield FileListService(db=db, source=ListingSource(str(tmp_path / "listings")))
    db.close()


@pytest.fixture
def api_server(service):
    return ArchiveAPIServer(host="127.0.0.1", port=0, service=service)


@pytest.fixture
def client(api_server):
    api_server.app.config["TESTING"] = True
    return api_server.app.test_client()
