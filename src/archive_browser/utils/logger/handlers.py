"""
Log handlers for Archive Browser: rotating files plus an optional console.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .config import LogConfig, ensure_log_directory
from .formatters import HumanFormatter, JsonFormatter


def _rotating_handler(
    path: Path, max_bytes: int, backups: int, formatter: logging.Formatter
) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        filename=path,
        maxBytes=max_bytes,
        backupCount=backups,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)  # files keep everything the logger lets through
    handler.setFormatter(formatter)
    return handler


def create_file_handler(config: LogConfig) -> RotatingFileHandler:
    ensure_log_directory(config)
    return _rotating_handler(
        config.human_log_path,
        config.human_log_max_bytes,
        config.human_log_backup_count,
        HumanFormatter(),
    )


def create_json_handler(config: LogConfig) -> RotatingFileHandler:
    ensure_log_directory(config)
    return _rotating_handler(
        config.json_log_path,
        config.json_log_max_bytes,
        config.json_log_backup_count,
        JsonFormatter(),
    )


def create_console_handler(config: LogConfig) -> logging.StreamHandler:
    """stderr handler; warnings and up unless running at debug level."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(
        logging.DEBUG if config.default_level == logging.DEBUG else logging.WARNING
    )
    handler.setFormatter(HumanFormatter())
    return handler


def setup_handlers(logger: logging.Logger, config: LogConfig) -> None:
    """Replace the handlers of ``logger`` according to ``config``."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(create_file_handler(config))
    logger.addHandler(create_json_handler(config))
    if config.console_enabled:
        logger.addHandler(create_console_handler(config))

    logger.setLevel(config.default_level)
