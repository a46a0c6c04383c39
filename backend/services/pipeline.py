"""Request stages: cache lookup → upstream fetch → cache store.

Each stage takes a RequestContext and returns a new one. UpstreamProxy puts
the stages a route needs into an ordered list and runs it with
``run_stages``; the rate-limit check runs earlier, in middleware.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field, replace
from typing import Any

from errors import UpstreamError
from services.cache import MISSING, TTLCache
from services.nasa_client import NasaClient, describe_error
from services.retry import NO_RETRY, RetryPolicy, Sleep, retry_async

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestContext:
    url: str
    params: dict = field(default_factory=dict)
    cache_key: str | None = None
    ttl: int | None = None
    payload: Any = None
    cache_hit: bool = False
    fetched: bool = False

    @property
    def done(self) -> bool:
        return self.cache_hit or self.fetched


Stage = Callable[[RequestContext], Awaitable[RequestContext]]


def cache_lookup(cache: TTLCache) -> Stage:
    async def stage(ctx: RequestContext) -> RequestContext:
        if ctx.cache_key is None:
            return ctx
        cached = cache.get(ctx.cache_key, MISSING)
        if cached is MISSING:
            return ctx
        logger.debug("Cache hit: %s", ctx.cache_key)
        return replace(ctx, payload=cached, cache_hit=True)

    return stage


def upstream_fetch(client: NasaClient, policy: RetryPolicy, sleep: Sleep = asyncio.sleep) -> Stage:
    async def stage(ctx: RequestContext) -> RequestContext:
        if ctx.done:
            return ctx
        payload = await retry_async(
            lambda: client.get_json(ctx.url, ctx.params),
            policy=policy,
            sleep=sleep,
        )
        return replace(ctx, payload=payload, fetched=True)

    return stage


def cache_store(cache: TTLCache) -> Stage:
    async def stage(ctx: RequestContext) -> RequestContext:
        if not ctx.fetched or ctx.cache_key is None:
            return ctx
        cache.set(ctx.cache_key, ctx.payload, ttl_seconds=ctx.ttl)
        return ctx

    return stage


async def run_stages(ctx: RequestContext, stages: Sequence[Stage]) -> RequestContext:
    for stage in stages:
        ctx = await stage(ctx)
    return ctx


class UpstreamProxy:
    """Holds the per-app cache, client and retry policy, and builds stage chains."""

    def __init__(
        self,
        client: NasaClient,
        cache: TTLCache,
        default_ttl: int = 3600,
        policy: RetryPolicy | None = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self.client = client
        self.cache = cache
        self.default_ttl = default_ttl
        self.policy = policy or RetryPolicy()
        self.sleep = sleep

    def cached_stages(self) -> list[Stage]:
        return [
            cache_lookup(self.cache),
            upstream_fetch(self.client, self.policy, self.sleep),
            cache_store(self.cache),
        ]

    async def fetch(self, label: str, url: str, params: dict, key: str, ttl: int | None = None) -> Any:
        """Cache-aside fetch with retries. Raises UpstreamError("<label> failed") when exhausted."""
        ctx = RequestContext(url=url, params=params, cache_key=key, ttl=ttl or self.default_ttl)
        return await self._run(label, ctx, self.cached_stages())

    async def passthrough(self, label: str, url: str, params: dict) -> Any:
        """Single uncached attempt."""
        ctx = RequestContext(url=url, params=params)
        return await self._run(label, ctx, [upstream_fetch(self.client, NO_RETRY, self.sleep)])

    async def _run(self, label: str, ctx: RequestContext, stages: Sequence[Stage]) -> Any:
        try:
            ctx = await run_stages(ctx, stages)
        except Exception as e:
            detail = describe_error(e)
            logger.error("%s error: %s", label, detail)
            raise UpstreamError(f"{label} failed", detail=detail) from e
        return ctx.payload
