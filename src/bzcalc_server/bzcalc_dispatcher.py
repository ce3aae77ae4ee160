"""Runs calculator evaluations on worker threads so the event loop is never blocked."""

import asyncio
from concurrent.futures import ThreadPoolExecutor
import logging
import threading
from typing import Callable, TypeVar

from bzcalc_server.bzcalc_server_settings import BZCalcDispatchMode


T = TypeVar("T")


class BZCalcDispatcher:
    """
    Dispatches blocking work either to a shared thread pool or to a new thread per call.

    Exceptions raised by the work function are re-raised in the awaiting coroutine.
    """

    def __init__(self, mode: BZCalcDispatchMode, max_workers: int) -> None:
        """
        Initialize dispatcher.

        Args:
            mode: Thread pool or thread per request
            max_workers: Number of pool threads (ignored in thread per request mode)
        """
        self._mode = mode
        self._logger = logging.getLogger("BZCalcDispatcher")
        self._executor: ThreadPoolExecutor | None = None
        if mode == BZCalcDispatchMode.POOL:
            self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="bzcalc")

    @property
    def mode(self) -> BZCalcDispatchMode:
        """Dispatch mode in use."""
        return self._mode

    async def run(self, func: Callable[..., T], *args: object) -> T:
        """
        Run func(*args) on a worker thread and wait for its result.

        Args:
            func: Blocking callable
            args: Positional arguments for func

        Returns:
            The value returned by func
        """
        loop = asyncio.get_running_loop()

        if self._mode == BZCalcDispatchMode.POOL:
            assert self._executor is not None, "Pool dispatcher has no executor"
            return await loop.run_in_executor(self._executor, func, *args)

        future: asyncio.Future[T] = loop.create_future()

        def set_result(result: T) -> None:
            if not future.done():
                future.set_result(result)

        def set_exception(exc: BaseException) -> None:
            if not future.done():
                future.set_exception(exc)

        def worker() -> None:
            try:
                result = func(*args)

            except BaseException as e:  # pylint: disable=broad-exception-caught
                loop.call_soon_threadsafe(set_exception, e)
                return

            loop.call_soon_threadsafe(set_result, result)

        thread = threading.Thread(target=worker, name="bzcalc-request", daemon=True)
        thread.start()
        return await future

    def shutdown(self) -> None:
        """Stop the worker pool, waiting for running evaluations to finish."""
        if self._executor is not None:
            self._logger.debug("Shutting down worker pool")
            self._executor.shutdown(wait=True)
            self._executor = None
