"""Fire-and-notify entry point.

Runs exactly one :func:`scan_sync` on a dedicated worker thread and reports
the outcome through a callback pair. The worker is retired as soon as the scan
completes; there is no cancellation, timeout or retry.

    future = scan_async(
        text,
        DelimiterSpec("*(", ")*"),
        {"name": "Ann"},
        on_done=print,
        on_error=handle_failure,
    )
    future.result()  # optional: block for the same outcome
"""
from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Mapping

from .delimiters import DelimiterSpec
from .exceptions import InvalidInputError, ParseError
from .scanner import scan_sync

logger = logging.getLogger(__name__)

WORKER_THREAD_PREFIX = "textparser-scan"


def scan_async(
    text: str,
    delimiters: DelimiterSpec,
    bindings: Mapping[str, str],
    strict_syntax_check: bool = False,
    *,
    on_done: Callable[[str], None],
    on_error: Callable[[ParseError], None],
) -> "Future[str]":
    """Schedule one scan on a one-shot worker.

    Exactly one of ``on_done(result)`` or ``on_error(error)`` is invoked,
    exactly once, on the worker thread. The returned future resolves to the
    same result or holds the same :class:`ParseError`.

    Raises:
        InvalidInputError: either callback is missing (raised before anything
            is scheduled).
    """
    if on_done is None or on_error is None:
        raise InvalidInputError("The on_done and on_error callbacks cannot be null.")
    if not callable(on_done) or not callable(on_error):
        raise InvalidInputError("The on_done and on_error callbacks must be callable.")

    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix=WORKER_THREAD_PREFIX)
    try:
        future = executor.submit(
            _scan_once,
            text,
            delimiters,
            bindings,
            strict_syntax_check,
            on_done,
            on_error,
        )
    finally:
        # Pending work still runs; the thread exits once it is done.
        executor.shutdown(wait=False)
    logger.debug("Scheduled async scan on a one-shot worker")
    return future


def _scan_once(
    text: str,
    delimiters: DelimiterSpec,
    bindings: Mapping[str, str],
    strict_syntax_check: bool,
    on_done: Callable[[str], None],
    on_error: Callable[[ParseError], None],
) -> str:
    try:
        result = scan_sync(text, delimiters, bindings, strict_syntax_check)
    except ParseError as exc:
        on_error(exc)
        raise
    on_done(result)
    return result


__all__ = ["scan_async", "WORKER_THREAD_PREFIX"]
