"""
Logging configuration for Archive Browser.

Reads logging preferences from the environment and resolves log file paths.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# Environment variable names
DEBUG_ENV = "ARCHIVE_BROWSER_DEBUG"
LOG_LEVEL_ENV = "ARCHIVE_BROWSER_LOG_LEVEL"
LOG_CONSOLE_ENV = "ARCHIVE_BROWSER_LOG_CONSOLE"
LOG_DIR_ENV = "ARCHIVE_BROWSER_LOG_DIR"

LOG_DIR = Path.home() / ".cache" / "archive-browser" / "logs"

HUMAN_LOG_FILE = "archive-browser.log"
JSON_LOG_FILE = "archive-browser.json"

LOG_LEVEL_MAP = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

_TRUTHY = ("1", "true", "yes")
_FALSY = ("0", "false", "no")


@dataclass
class LogConfig:
    """Configuration for the logging system.

    Attributes:
        log_dir: Directory holding the log files
        human_log_max_bytes: Rotation threshold of the human-readable log
        human_log_backup_count: Rotated human-readable files to keep
        json_log_max_bytes: Rotation threshold of the JSON Lines log
        json_log_backup_count: Rotated JSON Lines files to keep
        default_level: Level applied to the root application logger
        console_enabled: Mirror records to stderr
    """

    log_dir: Path = field(default_factory=lambda: LOG_DIR)
    human_log_max_bytes: int = 5 * 1024 * 1024
    human_log_backup_count: int = 3
    json_log_max_bytes: int = 10 * 1024 * 1024
    json_log_backup_count: int = 2
    default_level: int = logging.INFO
    console_enabled: bool = False

    @property
    def human_log_path(self) -> Path:
        return self.log_dir / HUMAN_LOG_FILE

    @property
    def json_log_path(self) -> Path:
        return self.log_dir / JSON_LOG_FILE


def get_config() -> LogConfig:
    """Build a LogConfig from environment variables.

    Environment variables:
        ARCHIVE_BROWSER_DEBUG: '1', 'true' or 'yes' turns on debug level and console
        ARCHIVE_BROWSER_LOG_LEVEL: explicit level name, wins over debug mode
        ARCHIVE_BROWSER_LOG_CONSOLE: force console output on or off
        ARCHIVE_BROWSER_LOG_DIR: alternative log directory
    """
    config = LogConfig()

    if os.environ.get(DEBUG_ENV, "").lower() in _TRUTHY:
        config.default_level = logging.DEBUG
        config.console_enabled = True

    level_name = os.environ.get(LOG_LEVEL_ENV, "").lower()
    if level_name in LOG_LEVEL_MAP:
        config.default_level = LOG_LEVEL_MAP[level_name]

    console = os.environ.get(LOG_CONSOLE_ENV, "").lower()
    if console in _TRUTHY:
        config.console_enabled = True
    elif console in _FALSY:
        config.console_enabled = False

    log_dir = os.environ.get(LOG_DIR_ENV)
    if log_dir:
        config.log_dir = Path(log_dir).expanduser()

    return config


def ensure_log_directory(config: Optional[LogConfig] = None) -> Path:
    """Create the log directory if needed and return it."""
    log_dir = config.log_dir if config else LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir
