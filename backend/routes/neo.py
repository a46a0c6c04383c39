"""NeoWs (near-Earth objects) routes — approach feed and single-object lookup."""

from urllib.parse import quote

from fastapi import APIRouter, Depends, Query

from dependencies import get_proxy
from services.cache import cache_key
from services.nasa_client import NASA_BASE
from services.pipeline import UpstreamProxy

router = APIRouter(prefix="/api/neo")

FEED_TTL = 1800
LOOKUP_TTL = 86400


@router.get("")
async def neo_feed(
    start_date: str | None = Query(None),
    end_date: str | None = Query(None),
    proxy: UpstreamProxy = Depends(get_proxy),
):
    """Close approaches between start_date and end_date (upstream defaults to today)."""
    params = {}
    if start_date:
        params["start_date"] = start_date
    if end_date:
        params["end_date"] = end_date

    return await proxy.fetch(
        "NEO feed",
        f"{NASA_BASE}/neo/rest/v1/feed",
        proxy.client.keyed(params),
        key=cache_key("neo", "feed", start_date or "today", end_date or "today"),
        ttl=FEED_TTL,
    )


@router.get("/{neo_id}")
async def neo_lookup(neo_id: str, proxy: UpstreamProxy = Depends(get_proxy)):
    return await proxy.fetch(
        "NEO id",
        f"{NASA_BASE}/neo/rest/v1/neo/{quote(neo_id, safe='')}",
        proxy.client.keyed(),
        key=cache_key("neo", "id", neo_id),
        ttl=LOOKUP_TTL,
    )
