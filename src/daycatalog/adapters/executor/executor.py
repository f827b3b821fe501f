"""Executor adapters implementing ExecutorPort."""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Callable

    from daycatalog.core.ports import ExecutorPort


class SynchronousExecutor:
    """Runs each submitted task to completion in the calling thread.

    Used when a build is limited to a single worker, and in tests that need
    deterministic execution order.
    """

    def submit(
        self,
        fn: Callable[..., object],
        *args: object,
        **kwargs: object,
    ) -> Future[object]:
        """Run ``fn`` now and return an already-completed future."""
        future: Future[object] = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as e:
            future.set_exception(e)
        return future

    def __enter__(self) -> SynchronousExecutor:
        return self

    def __exit__(
        self, exc_type: object, exc_val: object, exc_tb: object
    ) -> object | None:
        return None


class ThreadPoolExecutorAdapter:
    """Bounded thread pool for per-day fetches.

    Keeps thread management in the adapter layer so the builder only sees
    ExecutorPort. A pool is single-use: leaving the context shuts it down.
    """

    def __init__(self, max_workers: int | None = None) -> None:
        """Create the pool.

        Args:
            max_workers: Upper bound on concurrent fetches. None uses the
                ThreadPoolExecutor default.
        """
        self.max_workers = max_workers
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="daycatalog-fetch"
        )

    def submit(
        self,
        fn: Callable[..., object],
        *args: object,
        **kwargs: object,
    ) -> Future[object]:
        """Queue ``fn`` on the pool."""
        return self._executor.submit(fn, *args, **kwargs)

    def __enter__(self) -> ThreadPoolExecutorAdapter:
        self._executor.__enter__()
        return self

    def __exit__(
        self, exc_type: object, exc_val: object, exc_tb: object
    ) -> object | None:
        # ThreadPoolExecutor.__exit__ wants concrete exception types
        return self._executor.__exit__(exc_type, exc_val, exc_tb)  # type: ignore[arg-type]


def create_executor(max_workers: int) -> ExecutorPort:
    """Return a synchronous executor for one worker, a thread pool otherwise."""
    if max_workers <= 1:
        return SynchronousExecutor()
    return ThreadPoolExecutorAdapter(max_workers=max_workers)
