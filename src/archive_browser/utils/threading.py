"""Threading helpers for work that must stay off the Qt main thread."""

import asyncio
import threading
from typing import Any, Callable, Coroutine, TypeVar

T = TypeVar("T")


def start_background_task(func: Callable[[], None]) -> threading.Thread:
    """Start a function in a background daemon thread.

    Args:
        func: Function to run (no arguments)

    Returns:
        The started thread
    """
    thread = threading.Thread(target=func, daemon=True)
    thread.start()
    return thread


def run_coroutine(coro: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine to completion on a private event loop.

    Background threads have no running loop, so each one gets its own.
    """
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()
