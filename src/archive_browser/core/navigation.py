"""
Navigation history and the location <-> directory synchronizer.

Locations look like ``/archives/<repo_id>/<archive_id>/<directory>``. The
part after the archive mount URL is the tree-mode current directory, so
back/forward and bookmarks restore the browsing position.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from ..utils.logger import debug

ARCHIVES_ROOT = "/archives"

PUSH = "PUSH"
REPLACE = "REPLACE"
POP = "POP"


@dataclass(frozen=True)
class Location:
    pathname: str


LocationListener = Callable[[Location, str], None]


class NavigationHistory:
    """In-process history stack with listeners.

    listen() returns the function that removes the listener again. Listeners
    are notified over a snapshot, so a listener may unsubscribe (itself or
    another one) while a notification is running.
    """

    def __init__(self, initial: str = "/"):
        self._entries: list[Location] = [Location(initial)]
        self._index = 0
        self._listeners: list[LocationListener] = []

    @property
    def location(self) -> Location:
        return self._entries[self._index]

    @property
    def can_go_back(self) -> bool:
        return self._index > 0

    @property
    def can_go_forward(self) -> bool:
        return self._index < len(self._entries) - 1

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def listen(self, listener: LocationListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def push(self, pathname: str) -> None:
        del self._entries[self._index + 1 :]
        self._entries.append(Location(pathname))
        self._index += 1
        self._notify(PUSH)

    def replace(self, pathname: str) -> None:
        self._entries[self._index] = Location(pathname)
        self._notify(REPLACE)

    def back(self) -> bool:
        if not self.can_go_back:
            return False
        self._index -= 1
        self._notify(POP)
        return True

    def forward(self) -> bool:
        if not self.can_go_forward:
            return False
        self._index += 1
        self._notify(POP)
        return True

    def _notify(self, action: str) -> None:
        location = self.location
        for listener in list(self._listeners):
            listener(location, action)


def archive_mount_url(repo_id: str, archive_id: str) -> str:
    return f"{ARCHIVES_ROOT}/{repo_id}/{archive_id}"


def directory_from_location(pathname: str, mount_url: str) -> Optional[str]:
    """Directory below ``mount_url``, or None when outside of it."""
    mount = mount_url.rstrip("/")
    if pathname != mount and not pathname.startswith(mount + "/"):
        return None
    return pathname[len(mount) :].strip("/")


def location_for_directory(mount_url: str, directory: str) -> str:
    mount = mount_url.rstrip("/")
    directory = directory.strip("/")
    return f"{mount}/{directory}" if directory else mount


def parse_archive_location(pathname: str) -> Optional[tuple[str, str, str]]:
    """Split an archive location into (repo_id, archive_id, directory)."""
    if not pathname.startswith(ARCHIVES_ROOT + "/"):
        return None
    parts = pathname[len(ARCHIVES_ROOT) + 1 :].split("/", 2)
    if len(parts) < 2 or not parts[0] or not parts[1]:
        return None
    directory = parts[2].strip("/") if len(parts) == 3 else ""
    return parts[0], parts[1], directory


class LocationSynchronizer:
    """Feeds the directory part of the current location into a callback.

    The history subscription is a scoped resource: acquire() subscribes and
    syncs once from the current location, release() unsubscribes exactly
    once. Use it as a context manager to tie it to the panel's lifetime.
    """

    def __init__(
        self,
        history: NavigationHistory,
        mount_url: str,
        on_directory: Callable[[str], None],
    ):
        self._history = history
        self._mount_url = mount_url.rstrip("/")
        self._on_directory = on_directory
        self._unsubscribe: Optional[Callable[[], None]] = None
        self._released = False

    @property
    def mount_url(self) -> str:
        return self._mount_url

    @property
    def is_active(self) -> bool:
        return self._unsubscribe is not None

    def acquire(self) -> "LocationSynchronizer":
        if self._released:
            raise RuntimeError("LocationSynchronizer cannot be acquired twice")
        if self._unsubscribe is not None:
            return self
        self._unsubscribe = self._history.listen(self._on_location)
        try:
            self._sync(self._history.location)
        except BaseException:
            self.release()
            raise
        return self

    def release(self) -> None:
        if self._unsubscribe is None:
            return
        unsubscribe, self._unsubscribe = self._unsubscribe, None
        self._released = True
        unsubscribe()
        debug(f"[Navigation] Released history subscription for {self._mount_url}")

    def __enter__(self) -> "LocationSynchronizer":
        return self.acquire()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def navigate(self, directory: str) -> None:
        """Move the history to ``directory``; the listener does the rest."""
        self._history.push(location_for_directory(self._mount_url, directory))

    def _on_location(self, location: Location, action: str) -> None:
        if self.is_active:
            self._sync(location)

    def _sync(self, location: Location) -> None:
        directory = directory_from_location(location.pathname, self._mount_url)
        if directory is None:
            return
        self._on_directory(directory)
