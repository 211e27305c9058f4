"""Fan-out/fan-in helper shared by the loading and writing stages."""

from __future__ import annotations

import typing as typ
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait

if typ.TYPE_CHECKING:
    import collections.abc as cabc

K = typ.TypeVar("K")
V = typ.TypeVar("V")

DEFAULT_MAX_WORKERS = 8


def gather(
    tasks: cabc.Mapping[K, cabc.Callable[[], V]],
    *,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> dict[K, V]:
    """Run every task concurrently and return their results keyed like ``tasks``.

    Parameters
    ----------
    tasks : Mapping[K, Callable[[], V]]
        Zero-argument callables keyed by an identifier (source path, output
        path, ...). Iteration order of ``tasks`` is preserved in the result.
    max_workers : int, optional
        Upper bound on worker threads. Defaults to ``8``.

    Returns
    -------
    dict[K, V]
        Results of every task, in the same key order as ``tasks``.

    Raises
    ------
    Exception
        The exception of the first task observed to fail. Tasks that have not
        started yet are cancelled; tasks already in flight run to completion
        but their results are discarded.
    """
    if not tasks:
        return {}
    executor = ThreadPoolExecutor(max_workers=max_workers)
    try:
        futures: dict[K, Future[V]] = {
            key: executor.submit(task) for key, task in tasks.items()
        }
        done, _pending = wait(futures.values(), return_when=FIRST_EXCEPTION)
        for future in futures.values():
            if future in done and future.exception() is not None:
                raise typ.cast("BaseException", future.exception())
        return {key: future.result() for key, future in futures.items()}
    finally:
        executor.shutdown(wait=True, cancel_futures=True)


__all__ = ["gather"]
