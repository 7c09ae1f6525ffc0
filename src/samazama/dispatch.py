"""Background execution of variant generation and encoding.

Work is submitted to a shared thread pool as a module-level function plus
plain values: the input string and a frozen config. Nothing in flight holds
a reference to the matcher that started it, so a caller may drop its matcher
while results are still pending. Results arrive through the returned Future
and, optionally, a callback run on the worker thread.
"""

from __future__ import annotations

import os
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable

from samazama.config import SamazamaConfig
from samazama.errors import SamazamaError
from samazama.logging import get_logger, log_operation_complete, log_operation_failed
from samazama.phonetic.soundex import encode
from samazama.variants import generate_variants

logger = get_logger(__name__)

_executor: ThreadPoolExecutor | None = None
_executor_lock = threading.Lock()


@dataclass(frozen=True)
class VariantResult:
    """Outcome of one background variant generation.

    Attributes:
        text: Input the result belongs to
        variants: Generated variants on success
        error: Failure reason, e.g. RecursionExceeded
    """

    text: str
    variants: list[str] = field(default_factory=list)
    error: SamazamaError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class EncodeResult:
    """Outcome of one background Soundex encoding."""

    text: str
    code: str = ""
    error: SamazamaError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def get_executor() -> ThreadPoolExecutor:
    """Return the shared worker pool, creating it on first use."""
    global _executor

    with _executor_lock:
        if _executor is None:
            _executor = ThreadPoolExecutor(
                max_workers=min(4, os.cpu_count() or 1),
                thread_name_prefix="samazama",
            )
        return _executor


def _run_variants(text: str, config: SamazamaConfig, only_unique: bool) -> VariantResult:
    start = time.monotonic()
    try:
        variants = generate_variants(
            text,
            only_unique=only_unique,
            groups=config.sound_group_table(),
            digraphs=config.digraph_table(),
            ceiling=config.recursion_ceiling,
            lowercase=config.lowercase,
        )
    except SamazamaError as e:
        log_operation_failed(logger, "generate variants", e, text=text)
        return VariantResult(text=text, error=e)

    log_operation_complete(
        logger,
        "generate variants",
        duration=time.monotonic() - start,
        text=text,
        variants=len(variants),
    )
    return VariantResult(text=text, variants=variants)


def _run_encode(text: str, config: SamazamaConfig) -> EncodeResult:
    folded = text.lower() if config.lowercase else text
    code = encode(
        folded,
        config.sound_group_table(),
        config.digraph_table(),
        config.code_length,
    )
    return EncodeResult(text=text, code=code)


def _deliver(
    callback: Callable[[Any], None] | None,
    on_failure: Callable[[SamazamaError], Any],
) -> Callable[[Future], None]:
    def on_done(future: Future) -> None:
        if callback is None:
            return
        error = future.exception()
        if error is None:
            callback(future.result())
            return
        # The Future still raises; the callback gets the failure as a result
        if not isinstance(error, SamazamaError):
            error = SamazamaError(
                f"Worker failed: {error}",
                context={"error_type": type(error).__name__},
            )
        callback(on_failure(error))

    return on_done


def dispatch_variants(
    text: str,
    config: SamazamaConfig,
    callback: Callable[[VariantResult], None] | None = None,
    only_unique: bool = False,
    executor: ThreadPoolExecutor | None = None,
) -> "Future[VariantResult]":
    """Generate variants on a worker thread.

    Budget failures are reported inside the VariantResult rather than
    raised from the Future.

    Args:
        text: Input word or phrase
        config: Frozen settings, passed by value to the worker
        callback: Called with the result once it is ready
        only_unique: Return distinct variants only
        executor: Pool to use instead of the shared one

    Returns:
        Future resolving to a VariantResult
    """
    pool = executor or get_executor()
    future = pool.submit(_run_variants, text, config, only_unique)
    future.add_done_callback(_deliver(callback, lambda error: VariantResult(text=text, error=error)))
    return future


def dispatch_encode(
    text: str,
    config: SamazamaConfig,
    callback: Callable[[EncodeResult], None] | None = None,
    executor: ThreadPoolExecutor | None = None,
) -> "Future[EncodeResult]":
    """Soundex encode on a worker thread."""
    pool = executor or get_executor()
    future = pool.submit(_run_encode, text, config)
    future.add_done_callback(_deliver(callback, lambda error: EncodeResult(text=text, error=error)))
    return future
