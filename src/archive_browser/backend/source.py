"""
Listing source: the expensive scan behind a forced fetch.

Reads what ``borg list --json-lines <repo>::<archive>`` printed, stored as
``<source_dir>/<repo_id>/<archive_name>.jsonl``, plus the archive catalogue
``<source_dir>/<repo_id>/archives.json``::

    {"id": "repo1", "name": "...", "displayName": "...",
     "archives": [{"id": "...", "name": "...", "time": "..."}]}
"""

import json
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterator, Optional

from ..utils.logger import debug, warn

CATALOGUE_FILE = "archives.json"
LISTING_SUFFIX = ".jsonl"

ProgressCallback = Callable[[int, int, str], None]


class ArchiveNotFound(LookupError):
    """No repository or archive with that id"""


class ScanError(RuntimeError):
    """The listing of an archive could not be read"""


def format_size(size: int) -> str:
    """Human readable byte count (binary units)."""
    value = float(size)
    for unit in ("B", "KiB", "MiB", "GiB", "TiB"):
        if value < 1024 or unit == "TiB":
            return f"{int(value)} {unit}" if unit == "B" else f"{value:.1f} {unit}"
        value /= 1024
    return f"{size} B"


def format_mtime(mtime: str) -> str:
    """borg's ISO timestamp as 'YYYY-MM-DD HH:MM:SS'."""
    try:
        return datetime.fromisoformat(mtime).strftime("%Y-%m-%d %H:%M:%S")
    except ValueError:
        return mtime


@dataclass(frozen=True)
class BorgItem:
    """One item of a borg json-lines listing"""

    type: str
    mode: str
    path: str
    mtime: str = ""
    size: int = 0
    user: str = ""
    group: str = ""

    @classmethod
    def from_json(cls, data: dict) -> "BorgItem":
        return cls(
            type=str(data.get("type") or "-"),
            mode=str(data.get("mode") or ""),
            path=str(data.get("path") or "").strip("/"),
            mtime=str(data.get("mtime") or ""),
            size=int(data.get("size") or 0),
            user=str(data.get("user") or ""),
            group=str(data.get("group") or ""),
        )

    @property
    def parent(self) -> str:
        return self.path.rsplit("/", 1)[0] if "/" in self.path else ""

    @property
    def display_date(self) -> str:
        return format_mtime(self.mtime)

    @property
    def display_size(self) -> str:
        return format_size(self.size)

    @property
    def message(self) -> str:
        """Searchable line, laid out like borg's default list format"""
        return (
            f"{self.mode} {self.user} {self.group} {self.display_size} "
            f"{self.display_date} {self.path}"
        )


class ListingSource:
    """Repository catalogues and archive listings on disk"""

    def __init__(self, source_dir: Optional[str] = None):
        if source_dir is None:
            from ..utils.settings import get_settings

            source_dir = get_settings().source_dir
        self._root = Path(source_dir).expanduser()

    @property
    def root(self) -> Path:
        return self._root

    def list_repositories(self) -> list[dict]:
        """Catalogues of every repository directory, sorted by id."""
        if not self._root.is_dir():
            return []
        repos = []
        for directory in sorted(p for p in self._root.iterdir() if p.is_dir()):
            catalogue = self._read_catalogue(directory)
            if catalogue is not None:
                repos.append(catalogue)
        return repos

    def get_repository(self, repo_id: str) -> dict:
        """Catalogue of ``repo_id``.

        Raises:
            ArchiveNotFound: unknown repository
        """
        catalogue = self._read_catalogue(self._root / repo_id)
        if catalogue is None:
            raise ArchiveNotFound(f"Unknown repository: {repo_id}")
        return catalogue

    def find_archive(self, archive_id: str) -> tuple[str, dict]:
        """(repo_id, archive record) of ``archive_id``, matched by id or name.

        Raises:
            ArchiveNotFound: no repository contains that archive
        """
        for repo in self.list_repositories():
            for archive in repo.get("archives", []):
                if archive_id in (archive.get("id"), archive.get("name")):
                    return repo["id"], archive
        raise ArchiveNotFound(f"Unknown archive: {archive_id}")

    def listing_path(self, repo_id: str, archive: dict) -> Path:
        """json-lines file of an archive; by name, falling back to id."""
        repo_dir = self._root / repo_id
        by_name = repo_dir / f"{archive.get('name', '')}{LISTING_SUFFIX}"
        if by_name.is_file():
            return by_name
        return repo_dir / f"{archive.get('id', '')}{LISTING_SUFFIX}"

    def scan(
        self,
        repo_id: str,
        archive: dict,
        progress: Optional[ProgressCallback] = None,
    ) -> Iterator[BorgItem]:
        """Yield the items of an archive listing in borg order.

        ``progress(current, total, message)`` is called with bytes read.

        Raises:
            ScanError: listing missing or unreadable
        """
        path = self.listing_path(repo_id, archive)
        if not path.is_file():
            raise ScanError(f"No listing for archive {archive.get('name')} at {path}")

        total = path.stat().st_size
        done = 0
        label = f"Scanning {archive.get('name') or archive.get('id')}"
        debug(f"[Source] {label} from {path} ({total} bytes)")
        try:
            with open(path, "r", encoding="utf-8") as f:
                for number, line in enumerate(f, start=1):
                    done += len(line.encode("utf-8"))
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        item = BorgItem.from_json(json.loads(line))
                    except (ValueError, TypeError) as e:
                        raise ScanError(f"{path}:{number}: invalid item: {e}") from e
                    if item.path:
                        yield item
                    if progress and number % 500 == 0:
                        progress(done, total, label)
        except OSError as e:
            raise ScanError(f"Cannot read {path}: {e}") from e

        if progress:
            progress(total, total, label)

    def _read_catalogue(self, directory: Path) -> Optional[dict]:
        path = directory / CATALOGUE_FILE
        if not path.is_file():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            warn(f"[Source] Skipping unreadable catalogue {path}: {e}")
            return None
        if not isinstance(data, dict):
            warn(f"[Source] Skipping catalogue {path}: not an object")
            return None
        data.setdefault("id", directory.name)
        data.setdefault("name", directory.name)
        data.setdefault("displayName", data["name"])
        data.setdefault("archives", [])
        for archive in data["archives"]:
            if isinstance(archive, dict):
                archive.setdefault("id", archive.get("name", ""))
                archive.setdefault("name", archive["id"])
        return data
