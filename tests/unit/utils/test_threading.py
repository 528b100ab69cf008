"""
Tests for archive_browser.utils.threading
"""

import asyncio
import threading

import pytest

from archive_browser.utils.threading import run_coroutine, start_background_task


def test_background_task_runs_on_daemon_thread():
    done = threading.Event()
    seen = []

    def work():
        seen.append(threading.current_thread())
        done.set()

    thread = start_background_task(work)
    assert done.wait(5.0)
    assert thread.daemon
    assert seen == [thread]


def test_run_coroutine_returns_result():
    async def answer():
        await asyncio.sleep(0)
        return 42

    assert run_coroutine(answer()) == 42


def test_run_coroutine_propagates_errors():
    async def broken():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        run_coroutine(broken())


def test_run_coroutine_from_worker_thread():
    results = []

    async def answer():
        return "ok"

    thread = start_background_task(lambda: results.append(run_coroutine(answer())))
    thread.join(5.0)
    assert results == ["ok"]
