"""
Archive API Client - async HTTP client for the archive REST server.

One client owns one aiohttp session, and a session belongs to the event loop
that created it. Background fetches therefore create a client on their own
loop and close it when done (see core/fetcher.py).
"""

import asyncio
import json
import re
from typing import Any, Optional

import aiohttp

from ..core.listing import (
    Failure,
    FailureKind,
    ListingResult,
    MalformedListing,
    parse_listing,
)
from ..core.models import FileListRequest, JobQueue, Repository
from ..utils.logger import debug, warn
from ..utils.settings import Settings
from .config import (
    API_HOST,
    API_PORT,
    API_TIMEOUT,
    HEALTH_TIMEOUT,
    SCAN_TIMEOUT,
    get_base_url,
)
from .exceptions import ArchiveAPIError, BackendFailure, NetworkFailure


def _clean_json(raw: str) -> str:
    """Replace control characters that borg sometimes leaves in paths"""
    return re.sub(r"[\x00-\x08\x0b\x0c\x0e-\x1f]", " ", raw)


class ArchiveAPIClient:
    """HTTP client for the archive REST API."""

    def __init__(
        self,
        host: str = API_HOST,
        port: int = API_PORT,
        timeout: float = API_TIMEOUT,
        base_url: Optional[str] = None,
        scan_timeout: float = SCAN_TIMEOUT,
    ):
        """Initialize the API client.

        Args:
            host: API server host
            port: API server port
            timeout: Request timeout in seconds
            base_url: Full base URL, overrides host and port
            scan_timeout: Timeout in seconds of forced file list requests,
                which return only after the archive has been scanned
        """
        self._base_url = (base_url or get_base_url(host, port)).rstrip("/")
        self._timeout = timeout
        self._scan_timeout = scan_timeout
        self._session: Optional[aiohttp.ClientSession] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "ArchiveAPIClient":
        return cls(
            host=settings.api_host,
            port=settings.api_port,
            timeout=settings.request_timeout,
            scan_timeout=settings.scan_timeout,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> "ArchiveAPIClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout)
            )
        return self._session

    async def close(self) -> None:
        """Close the underlying session"""
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def _get_json(
        self,
        endpoint: str,
        params: Optional[dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """GET ``endpoint`` and decode the JSON body.

        Raises:
            NetworkFailure: transport error or timeout
            BackendFailure: non-2xx status or a body that is not JSON
        """
        url = f"{self._base_url}{endpoint}"
        session = await self._get_session()
        request_timeout = aiohttp.ClientTimeout(total=timeout or self._timeout)
        try:
            async with session.get(
                url,
                params=params,
                headers={"Accept": "application/json"},
                timeout=request_timeout,
            ) as response:
                raw = await response.text()
                status = response.status
        except asyncio.TimeoutError as e:
            raise NetworkFailure(f"Request to {endpoint} timed out") from e
        except aiohttp.ClientError as e:
            raise NetworkFailure(f"Request to {endpoint} failed: {e}") from e

        if not 200 <= status < 300:
            raise BackendFailure(
                f"{endpoint} answered HTTP {status}", status=status
            )
        try:
            return json.loads(_clean_json(raw))
        except json.JSONDecodeError as e:
            raise BackendFailure(
                f"{endpoint} returned malformed JSON: {e.msg}", status=status
            ) from e

    async def fetch_file_list(self, request: FileListRequest) -> ListingResult:
        """Fetch one file listing. Never raises: errors become a Failure."""
        try:
            payload = await self._get_json(
                "/archives/filelist",
                request.to_params(),
                timeout=self._scan_timeout if request.force else None,
            )
            return parse_listing(payload)
        except NetworkFailure as e:
            debug(f"[API Client] File list network failure: {e}")
            return Failure(FailureKind.NETWORK, str(e))
        except BackendFailure as e:
            warn(f"[API Client] File list backend failure: {e}")
            return Failure(FailureKind.BACKEND, str(e))
        except MalformedListing as e:
            warn(f"[API Client] Malformed file list: {e}")
            return Failure(FailureKind.BACKEND, f"Malformed file list: {e}")

    async def get_job_queues(self, repo_id: str) -> list[JobQueue]:
        """Current job queues of ``repo_id``.

        Raises:
            ArchiveAPIError: request failed or the body is not a queue list
        """
        payload = await self._get_json("/jobs", {"repo": repo_id})
        if not isinstance(payload, list):
            raise BackendFailure("/jobs did not return a list")
        try:
            return [JobQueue.from_dict(item) for item in payload]
        except (AttributeError, TypeError, ValueError) as e:
            raise BackendFailure(f"/jobs returned an invalid queue: {e}") from e

    async def get_repository_archives(self, repo_id: str) -> Repository:
        """Repository with its archive list.

        Raises:
            ArchiveAPIError: request failed or the body is not a repository
        """
        payload = await self._get_json("/repos/repoArchiveList", {"id": repo_id})
        if not isinstance(payload, dict):
            raise BackendFailure("/repos/repoArchiveList did not return an object")
        return Repository.from_dict(payload)

    async def get_repositories(self) -> list[Repository]:
        """All known repositories, without their archives.

        Raises:
            ArchiveAPIError: request failed or the body is not a list
        """
        payload = await self._get_json("/repos/list")
        if not isinstance(payload, list):
            raise BackendFailure("/repos/list did not return a list")
        return [Repository.from_dict(item) for item in payload]

    async def health_check(self) -> bool:
        """Check if the API server is responding."""
        try:
            payload = await self._get_json("/health", timeout=HEALTH_TIMEOUT)
        except ArchiveAPIError:
            return False
        return isinstance(payload, dict) and payload.get("status") == "ok"


def create_api_client(settings: Optional[Settings] = None) -> ArchiveAPIClient:
    """Client configured from the user settings."""
    if settings is None:
        from ..utils.settings import get_settings

        settings = get_settings()
    return ArchiveAPIClient.from_settings(settings)
