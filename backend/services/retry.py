"""Async retry with linear backoff.

Every failure is retried the same way: a 404 from upstream waits and retries
exactly like a timeout does.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class RetryPolicy:
    """Configuration for retry attempts."""

    retries: int = 2  # retries after the first attempt
    step: float = 0.5  # seconds added per attempt

    def delay(self, attempt: int) -> float:
        """Wait before the attempt following ``attempt`` (0-based)."""
        return (attempt + 1) * self.step


NO_RETRY = RetryPolicy(retries=0)


async def retry_async(
    fn: Callable[[], Awaitable[T]],
    *,
    policy: RetryPolicy,
    sleep: Sleep = asyncio.sleep,
) -> T:
    """Run ``fn`` until it succeeds or the retry budget is spent.

    Args:
        fn: Zero-arg async function to execute.
        policy: RetryPolicy defining count/backoff.
        sleep: Awaitable sleep, swapped out in tests.

    Returns:
        The return value of ``fn`` if successful.

    Raises:
        The last exception if retries are exhausted.
    """
    attempt = 0
    while True:
        try:
            return await fn()
        except Exception as exc:
            if attempt >= policy.retries:
                raise
            backoff = policy.delay(attempt)
            logger.warning(
                "Attempt %d/%d failed (%s); retrying in %.1fs",
                attempt + 1,
                policy.retries + 1,
                exc,
                backoff,
            )
        await sleep(backoff)
        attempt += 1
