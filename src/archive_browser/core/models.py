"""
Data models for Archive Browser
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Optional

# Reserved FileEntry.mode of the "listing not computed yet" answer
NOT_LOADED_MODE = "notLoaded"


class ListMode(Enum):
    """How a listing is traversed"""

    TREE = "tree"  # Immediate children of current_directory only
    FLAT = "flat"  # Every matching path, recursively


@dataclass(frozen=True)
class FileEntry:
    """One line of an archive listing"""

    mode: str
    date: str = ""
    size: str = ""
    path: str = ""
    message: str = ""  # Searchable text, defaults to the path
    diff_status: Optional[str] = None  # new / removed / modified in diff mode

    def __post_init__(self) -> None:
        if not self.message:
            object.__setattr__(self, "message", self.path)

    @property
    def name(self) -> str:
        """Last path segment"""
        return self.path.rstrip("/").rsplit("/", 1)[-1]

    @property
    def is_directory(self) -> bool:
        return self.mode.startswith("d")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FileEntry":
        """Build from a wire object; raises on anything that is not one."""
        if not isinstance(data, dict):
            raise ValueError(f"File entry must be an object, got {type(data).__name__}")
        mode = data.get("mode")
        if not isinstance(mode, str):
            raise ValueError("File entry without a string 'mode'")
        return cls(
            mode=mode,
            date=str(data.get("date") or ""),
            size=str(data.get("size") or ""),
            path=str(data.get("path") or ""),
            message=str(data.get("message") or ""),
            diff_status=data.get("diffStatus"),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "mode": self.mode,
            "date": self.date,
            "size": self.size,
            "path": self.path,
            "message": self.message,
        }
        if self.diff_status is not None:
            result["diffStatus"] = self.diff_status
        return result


# Wire names accepted for FileFilter fields
FILTER_FIELD_ALIASES = {
    "search": "search",
    "mode": "mode",
    "currentDirectory": "current_directory",
    "current_directory": "current_directory",
    "maxSize": "max_size",
    "max_size": "max_size",
    "diffArchiveId": "diff_archive_id",
    "diff_archive_id": "diff_archive_id",
}


@dataclass(frozen=True)
class FileFilter:
    """The query controlling what is fetched and how it is displayed.

    current_directory is kept in flat mode (the backend ignores it there) so
    that switching back to tree mode restores the position.
    """

    search: str = ""
    mode: ListMode = ListMode.TREE
    current_directory: str = ""
    max_size: str = "50"
    diff_archive_id: str = ""

    @staticmethod
    def field_name(name: str) -> str:
        """Resolve a wire or attribute name; ValueError when unknown."""
        try:
            return FILTER_FIELD_ALIASES[name]
        except KeyError:
            raise ValueError(f"Unknown filter field: {name!r}") from None

    @staticmethod
    def coerce(field_name: str, value: Any) -> Any:
        """Validate and normalize a value for ``field_name``."""
        if field_name == "mode":
            if isinstance(value, ListMode):
                return value
            try:
                return ListMode(str(value))
            except ValueError:
                raise ValueError(f"Unknown list mode: {value!r}") from None
        if field_name == "max_size":
            text = str(value).strip()
            if not text.isdigit() or int(text) <= 0:
                raise ValueError(f"Max size must be a positive integer, got {value!r}")
            return text
        if field_name == "current_directory":
            return str(value or "").strip("/")
        return "" if value is None else str(value)

    def with_field(self, name: str, value: Any) -> "FileFilter":
        """Copy with one field replaced, every other field preserved."""
        attr = self.field_name(name)
        return replace(self, **{attr: self.coerce(attr, value)})

    @property
    def is_diff(self) -> bool:
        return bool(self.diff_archive_id)

    def to_dict(self) -> dict[str, str]:
        return {
            "search": self.search,
            "mode": self.mode.value,
            "currentDirectory": self.current_directory,
            "maxSize": self.max_size,
            "diffArchiveId": self.diff_archive_id,
        }


@dataclass(frozen=True)
class Archive:
    """The archive being browsed; owned by the caller"""

    id: str
    name: str = ""
    repo_id: str = ""
    repo_name: str = ""
    repo_display_name: str = ""
    time: str = ""

    @property
    def display_name(self) -> str:
        return self.name or self.id

    @classmethod
    def from_dict(cls, data: dict[str, Any], repo: Optional[dict] = None) -> "Archive":
        repo = repo or {}
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            repo_id=str(repo.get("id", data.get("repoId", ""))),
            repo_name=str(repo.get("name", data.get("repoName", ""))),
            repo_display_name=str(
                repo.get("displayName", data.get("repoDisplayName", ""))
            ),
            time=str(data.get("time", "")),
        )


@dataclass(frozen=True)
class Repository:
    """A borg repository and its archives"""

    id: str
    name: str = ""
    display_name: str = ""
    archives: tuple[Archive, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Repository":
        archives = tuple(
            Archive.from_dict(item, data) for item in data.get("archives") or []
        )
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            display_name=str(data.get("displayName") or data.get("name", "")),
            archives=archives,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "displayName": self.display_name,
            "archives": [
                {"id": a.id, "name": a.name, "time": a.time} for a in self.archives
            ],
        }


@dataclass(frozen=True)
class FileListRequest:
    """Exact parameter set of one file list fetch"""

    archive_id: str
    diff_archive_id: str = ""
    force: bool = False
    search_string: str = ""
    mode: ListMode = ListMode.TREE
    current_directory: str = ""
    max_result_size: str = "50"

    @classmethod
    def from_filter(
        cls, archive_id: str, file_filter: FileFilter, force: bool = False
    ) -> "FileListRequest":
        return cls(
            archive_id=archive_id,
            diff_archive_id=file_filter.diff_archive_id,
            force=force,
            search_string=file_filter.search,
            mode=file_filter.mode,
            current_directory=file_filter.current_directory,
            max_result_size=file_filter.max_size,
        )

    def to_params(self) -> dict[str, str]:
        """Query parameters of GET archives/filelist"""
        params = {
            "archiveId": self.archive_id,
            "force": "true" if self.force else "false",
            "searchString": self.search_string,
            "mode": self.mode.value,
            "currentDirectory": self.current_directory,
            "maxResultSize": self.max_result_size,
        }
        if self.diff_archive_id:
            params["diffArchiveId"] = self.diff_archive_id
        return params


class JobStatus(Enum):
    QUEUED = "QUEUED"
    RUNNING = "RUNNING"
    DONE = "DONE"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"

    @classmethod
    def parse(cls, value: Any) -> "JobStatus":
        try:
            return cls(str(value).upper())
        except ValueError:
            return cls.QUEUED


@dataclass
class ProgressInfo:
    """Progress of a backend job as reported by the job feed"""

    message: str = ""
    current: int = 0
    total: int = 0

    @property
    def percent(self) -> Optional[int]:
        """0-100, or None when the total is unknown"""
        if self.total <= 0:
            return None
        return max(0, min(100, round(self.current * 100 / self.total)))

    def to_dict(self) -> dict:
        return {"message": self.message, "current": self.current, "total": self.total}


@dataclass
class JobInfo:
    """A single backend job"""

    unique_job_number: int
    title: str
    description: str = ""
    status: JobStatus = JobStatus.QUEUED
    progress: Optional[ProgressInfo] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "JobInfo":
        progress_data = data.get("progressInfo")
        progress = None
        if isinstance(progress_data, dict):
            progress = ProgressInfo(
                message=str(progress_data.get("message") or ""),
                current=int(progress_data.get("current") or 0),
                total=int(progress_data.get("total") or 0),
            )
        return cls(
            unique_job_number=int(data.get("uniqueJobNumber") or 0),
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            status=JobStatus.parse(data.get("status")),
            progress=progress,
        )

    def to_dict(self) -> dict:
        return {
            "uniqueJobNumber": self.unique_job_number,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "progressInfo": self.progress.to_dict() if self.progress else None,
        }


@dataclass
class JobQueue:
    """Jobs of one repository"""

    repo: str
    jobs: list[JobInfo] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "JobQueue":
        return cls(
            repo=str(data.get("repo") or ""),
            jobs=[JobInfo.from_dict(j) for j in data.get("jobs") or []],
        )

    def to_dict(self) -> dict:
        return {"repo": self.repo, "jobs": [j.to_dict() for j in self.jobs]}

