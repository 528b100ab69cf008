"""
Backend fixtures: listing files on disk and a DuckDB cache in tmp_path.
"""

import pytest

from archive_browser.backend import FileListService, ListingDB, ListingSource
from archive_browser.backend.jobs import JobRegistry

from ...factories import write_repository
from .listings import NEW, NEW_ITEMS, OLD, OLD_ITEMS


@pytest.fixture
def listing_root(tmp_path):
    root = tmp_path / "listings"
    write_repository(
        root, "repo1", {OLD: OLD_ITEMS, NEW: NEW_ITEMS}, display_name="Host backups"
    )
    return root


@pytest.fixture
def listing_source(listing_root) -> ListingSource:
    return ListingSource(str(listing_root))


@pytest.fixture
def listing_db(tmp_path):
    (tmp_path / "cache").mkdir()
    db = ListingDB(tmp_path / "cache" / "listings.duckdb")
    yield db
    db.close()


@pytest.fixture
def job_registry() -> JobRegistry:
    return JobRegistry()


@pytest.fixture
def service(listing_db, listing_source, job_registry) -> FileListService:
    return FileListService(db=listing_db, source=listing_source, jobs=job_registry)
