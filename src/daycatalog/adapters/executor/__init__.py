"""Executor adapters for parallel execution."""

from daycatalog.adapters.executor.executor import (
    SynchronousExecutor,
    ThreadPoolExecutorAdapter,
    create_executor,
)


__all__ = ["SynchronousExecutor", "ThreadPoolExecutorAdapter", "create_executor"]
