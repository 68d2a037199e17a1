"""Wall-clock timing for NetworkService calls.

Off unless the CLI runs with ``--verbose``; then every ``@traced`` call
records ``elapsed_ms`` in its result's meta and logs a ``service.call``
event.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from contextvars import ContextVar
from typing import Concatenate

import structlog

from socialgraph.services.result import ServiceResult

log = structlog.get_logger(__name__)

_timing_on: ContextVar[bool] = ContextVar("socialgraph_timing", default=False)


def set_timing(enabled: bool) -> None:
    """Turn per-call timing on or off for the current context."""
    _timing_on.set(enabled)


def traced[S, **P](
    method: Callable[Concatenate[S, P], ServiceResult],
) -> Callable[Concatenate[S, P], ServiceResult]:
    """Time a service method and stamp ``meta["elapsed_ms"]`` on its result."""

    @functools.wraps(method)
    def wrapper(self: S, *args: P.args, **kwargs: P.kwargs) -> ServiceResult:
        if not _timing_on.get():
            return method(self, *args, **kwargs)

        started = time.perf_counter()
        result = method(self, *args, **kwargs)
        elapsed = round((time.perf_counter() - started) * 1000, 3)
        log.debug("service.call", op=result.op, ok=result.ok, elapsed_ms=elapsed)
        return result.model_copy(update={"meta": {**(result.meta or {}), "elapsed_ms": elapsed}})

    return wrapper
