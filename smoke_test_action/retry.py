"""Retry policy for idempotent, read-only probe actions."""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable

from smoke_test_action.models.result import ProbeResult

log = logging.getLogger(__name__)

type Action = Callable[[], Awaitable[None]]
type Backoff = Callable[[int], float]
type Sleep = Callable[[float], Awaitable[None]]


def exponential_backoff(attempt: int) -> float:
    """Seconds to wait before retry ``attempt`` (1-indexed): 2, 4, 8, ..."""
    return float(2**attempt)


async def execute_with_retry(
    name: str,
    action: Action,
    max_retries: int,
    *,
    backoff: Backoff = exponential_backoff,
    sleep: Sleep = asyncio.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> ProbeResult:
    """Run ``action`` until it succeeds or ``max_retries + 1`` attempts fail.

    The action signals failure by raising. It is re-invoked from scratch on
    every retry, so it must not have side effects: only pass read-only checks
    here, never anything that writes.

    Args:
        name: Probe name recorded in the result
        action: Zero-argument coroutine function to run
        max_retries: Retries allowed after the first attempt
        backoff: Maps the 1-indexed retry number to a delay in seconds
        sleep: Awaitable used to wait between attempts
        clock: Monotonic clock in seconds, used for the duration

    Returns:
        Result with the attempts used and wall-clock duration including waits

    """
    if max_retries < 0:
        raise ValueError(f"max_retries must be >= 0, got {max_retries}")

    start = clock()
    last_error: Exception | None = None

    for attempt in range(max_retries + 1):
        if attempt > 0:
            delay = backoff(attempt)
            log.info("  Retry %d/%d after %gs...", attempt, max_retries, delay)
            await sleep(delay)

        try:
            await action()
        except Exception as e:
            last_error = e
            if attempt < max_retries:
                log.info("  Attempt %d failed: %s", attempt + 1, describe_error(e))
            continue

        return ProbeResult(
            name=name,
            status="passed",
            duration_ms=elapsed_ms(start, clock()),
            attempts=attempt + 1,
        )

    assert last_error is not None
    return ProbeResult(
        name=name,
        status="failed",
        duration_ms=elapsed_ms(start, clock()),
        attempts=max_retries + 1,
        error=describe_error(last_error),
    )


def describe_error(error: BaseException) -> str:
    """Human-readable failure reason, falling back to the exception type."""
    return str(error) or type(error).__name__


def elapsed_ms(start: float, end: float) -> int:
    return round((end - start) * 1000)
