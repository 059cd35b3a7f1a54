# app_deploy/utils/async_utils.py
"""Asynchronous operation utilities"""

import asyncio
import concurrent.futures
from typing import Any, Coroutine, TypeVar

T = TypeVar('T')


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """
    Run a coroutine to completion from synchronous code

    Inside a running event loop the coroutine gets its own loop on a
    worker thread, so callers block either way.

    Args:
        coro: Coroutine to run

    Returns:
        Coroutine result
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)

    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
        return pool.submit(asyncio.run, coro).result()
