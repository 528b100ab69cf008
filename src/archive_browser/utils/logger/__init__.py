"""
Structured logging for Archive Browser.

Simple API:
    from archive_browser.utils.logger import debug, info, warn, error

    info("Server started")

Component loggers and context:
    from archive_browser.utils.logger import get_logger, log_context

    logger = get_logger("controller")
    with log_context(archive_id="a1", generation=4):
        logger.info("Fetch started")  # logged as archive_browser.controller
"""

import logging
from typing import Any, Optional

from .config import LogConfig, get_config, ensure_log_directory
from .context import ContextFilter, log_context, get_archive_id, get_generation
from .handlers import setup_handlers

ROOT_LOGGER_NAME = "archive_browser"

_initialized = False


def setup_logging(config: Optional[LogConfig] = None) -> logging.Logger:
    """Configure the application logger. Safe to call more than once.

    Args:
        config: Optional LogConfig; read from the environment when omitted.

    Returns:
        The root application logger.
    """
    global _initialized

    if config is None:
        config = get_config()

    ensure_log_directory(config)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    setup_handlers(logger, config)

    if not any(isinstance(f, ContextFilter) for f in logger.filters):
        logger.addFilter(ContextFilter())
    # Child loggers do not run the parent's filters, so handlers get one too.
    for handler in logger.handlers:
        handler.addFilter(ContextFilter())

    logger.propagate = False
    _initialized = True
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the root application logger or one of its children.

    Logging is initialised on first use.
    """
    if not _initialized:
        setup_logging()
    if name:
        return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
    return logging.getLogger(ROOT_LOGGER_NAME)


def debug(msg: str, *args: Any, **kwargs: Any) -> None:
    get_logger().debug(msg, *args, **kwargs)


def info(msg: str, *args: Any, **kwargs: Any) -> None:
    get_logger().info(msg, *args, **kwargs)


def warn(msg: str, *args: Any, **kwargs: Any) -> None:
    get_logger().warning(msg, *args, **kwargs)


warning = warn


def error(msg: str, *args: Any, **kwargs: Any) -> None:
    get_logger().error(msg, *args, **kwargs)


def exception(msg: str, *args: Any, **kwargs: Any) -> None:
    """Log at error level with the active exception attached."""
    get_logger().exception(msg, *args, **kwargs)


__all__ = [
    "debug",
    "info",
    "warn",
    "warning",
    "error",
    "exception",
    "setup_logging",
    "get_logger",
    "LogConfig",
    "get_config",
    "log_context",
    "get_archive_id",
    "get_generation",
    "ContextFilter",
    "ROOT_LOGGER_NAME",
]
