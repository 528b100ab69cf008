"""
Logging context for Archive Browser.

Tracks which archive is being browsed and which fetch generation is in
flight so that every log line of a fetch cycle can be correlated.
"""

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Generator, Optional

archive_id_var: ContextVar[Optional[str]] = ContextVar("archive_id", default=None)
generation_var: ContextVar[Optional[int]] = ContextVar(
    "fetch_generation", default=None
)


def get_archive_id() -> Optional[str]:
    return archive_id_var.get()


def get_generation() -> Optional[int]:
    return generation_var.get()


@contextmanager
def log_context(
    archive_id: Optional[str] = None,
    generation: Optional[int] = None,
) -> Generator[dict[str, object], None, None]:
    """Scope the archive id and fetch generation attached to log records.

    Values left as None keep whatever the enclosing context had. Previous
    values are restored on exit.

    Example:
        with log_context(archive_id="a1", generation=3):
            logger.info("Fetching file list")
    """
    archive_token = archive_id_var.set(
        archive_id if archive_id is not None else archive_id_var.get()
    )
    generation_token = generation_var.set(
        generation if generation is not None else generation_var.get()
    )
    try:
        yield {
            "archive_id": archive_id_var.get(),
            "generation": generation_var.get(),
        }
    finally:
        generation_var.reset(generation_token)
        archive_id_var.reset(archive_token)


class ContextFilter(logging.Filter):
    """Copies the archive/generation context onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.archive_id = archive_id_var.get()
        record.generation = generation_var.get()
        return True
