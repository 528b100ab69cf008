"""
Listing results.

A file list fetch ends in exactly one of three shapes:
- NotComputed: the backend has not scanned this listing yet
- Entries: zero or more genuine file entries, in backend order
- Failure: transport or backend error
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Union

from .models import FileEntry, NOT_LOADED_MODE


class FailureKind(Enum):
    NETWORK = "network"  # Request rejected or transport error
    BACKEND = "backend"  # Non-2xx status or malformed body


@dataclass(frozen=True)
class NotComputed:
    """Backend answered the notLoaded sentinel; a forced fetch is required"""


@dataclass(frozen=True)
class Entries:
    """A genuine listing, possibly empty"""

    entries: tuple[FileEntry, ...] = ()

    @classmethod
    def of(cls, entries: Iterable[FileEntry]) -> "Entries":
        return cls(tuple(entries))

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    description: str


ListingResult = Union[NotComputed, Entries, Failure]


class MalformedListing(ValueError):
    """Payload is not a valid file list body"""


def is_sentinel_payload(payload: Any) -> bool:
    return (
        isinstance(payload, list)
        and len(payload) == 1
        and isinstance(payload[0], dict)
        and payload[0].get("mode") == NOT_LOADED_MODE
    )


def parse_listing(payload: Any) -> Union[NotComputed, Entries]:
    """Turn a decoded JSON body into a listing result.

    Raises:
        MalformedListing: not a list, an element that is not an entry, or the
            sentinel mixed in with genuine entries
    """
    if not isinstance(payload, list):
        raise MalformedListing(
            f"Expected a JSON array, got {type(payload).__name__}"
        )
    if is_sentinel_payload(payload):
        return NotComputed()

    entries = []
    for index, item in enumerate(payload):
        try:
            entry = FileEntry.from_dict(item)
        except ValueError as e:
            raise MalformedListing(f"Invalid entry at index {index}: {e}") from e
        if entry.mode == NOT_LOADED_MODE:
            raise MalformedListing(
                "notLoaded sentinel mixed with genuine entries"
            )
        entries.append(entry)
    return Entries(tuple(entries))


def listing_to_payload(result: Union[NotComputed, Entries]) -> list[dict]:
    """Wire body for a listing result"""
    if isinstance(result, NotComputed):
        return [{"mode": NOT_LOADED_MODE}]
    return [entry.to_dict() for entry in result.entries]
