"""
Log formatters for Archive Browser.

HumanFormatter writes one aligned line per record; JsonFormatter writes
JSON Lines for tooling.
"""

import json
import logging
import traceback
from datetime import datetime, timezone
from typing import Any


def _context_of(record: logging.LogRecord) -> dict[str, Any]:
    context: dict[str, Any] = {}
    archive_id = getattr(record, "archive_id", None)
    generation = getattr(record, "generation", None)
    if archive_id:
        context["archive_id"] = archive_id
    if generation is not None:
        context["generation"] = generation
    return context


class HumanFormatter(logging.Formatter):
    """Format: YYYY-MM-DD HH:MM:SS.mmm | LEVEL | logger | file:line | message [ctx]

    Example:
        2024-01-15 14:23:45.123 | INFO  | archive_browser.controller | controller.py:88 | Fetch started [archive=a1 gen=3]
    """

    LEVEL_WIDTH = 5
    NAME_WIDTH = 26

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        stamp = created.strftime("%Y-%m-%d %H:%M:%S.") + f"{int(record.msecs):03d}"

        name = record.name
        if len(name) > self.NAME_WIDTH:
            name = "..." + name[-(self.NAME_WIDTH - 3) :]

        message = record.getMessage()
        context = _context_of(record)
        if context:
            parts = []
            if "archive_id" in context:
                parts.append(f"archive={context['archive_id']}")
            if "generation" in context:
                parts.append(f"gen={context['generation']}")
            message = f"{message} [{' '.join(parts)}]"

        line = (
            f"{stamp} | {record.levelname.ljust(self.LEVEL_WIDTH)} | "
            f"{name.ljust(self.NAME_WIDTH)} | {record.filename}:{record.lineno} | "
            f"{message}"
        )
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class JsonFormatter(logging.Formatter):
    """JSON Lines formatter.

    Fields: timestamp, level, logger, message, file, line, function, plus
    archive_id/generation when set and an exception object when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }
        payload.update(_context_of(record))

        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            payload["exception"] = {
                "type": exc_type.__name__ if exc_type else None,
                "message": str(exc_value) if exc_value else None,
                "traceback": [
                    line
                    for chunk in traceback.format_exception(exc_type, exc_value, exc_tb)
                    for line in chunk.splitlines()
                    if line.strip()
                ],
            }

        return json.dumps(payload, ensure_ascii=False, default=str)
