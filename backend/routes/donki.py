"""DONKI space weather routes — solar flares, CMEs, and any other DONKI event type."""

import json
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query, Request

from dependencies import get_proxy
from services.cache import cache_key
from services.nasa_client import NASA_BASE
from services.pipeline import UpstreamProxy

router = APIRouter(prefix="/api/donki")

DONKI_TTL = 1800


def _date_params(start_date: str | None, end_date: str | None) -> dict:
    params = {}
    if start_date:
        params["startDate"] = start_date
    if end_date:
        params["endDate"] = end_date
    return params


@router.get("/flare")
async def solar_flares(
    start_date: str | None = Query(None, alias="startDate"),
    end_date: str | None = Query(None, alias="endDate"),
    proxy: UpstreamProxy = Depends(get_proxy),
):
    return await proxy.fetch(
        "DONKI FLR",
        f"{NASA_BASE}/DONKI/FLR",
        proxy.client.keyed(_date_params(start_date, end_date)),
        key=cache_key("donki", "flare", start_date or "", end_date or ""),
        ttl=DONKI_TTL,
    )


@router.get("/cme")
async def coronal_mass_ejections(
    start_date: str | None = Query(None, alias="startDate"),
    end_date: str | None = Query(None, alias="endDate"),
    proxy: UpstreamProxy = Depends(get_proxy),
):
    return await proxy.fetch(
        "DONKI CME",
        f"{NASA_BASE}/DONKI/CME",
        proxy.client.keyed(_date_params(start_date, end_date)),
        key=cache_key("donki", "cme", start_date or "", end_date or ""),
        ttl=DONKI_TTL,
    )


@router.get("/{event_type}")
async def donki_events(event_type: str, request: Request, proxy: UpstreamProxy = Depends(get_proxy)):
    """Generic DONKI endpoint (IPS, GST, RBE, ...). Every query param is forwarded."""
    event_type = event_type.upper()
    query = dict(request.query_params)
    query.pop("api_key", None)
    return await proxy.fetch(
        "DONKI request",
        f"{NASA_BASE}/DONKI/{quote(event_type, safe='')}",
        proxy.client.keyed(query),
        key=cache_key("donki", event_type, json.dumps(query, sort_keys=True)),
        ttl=DONKI_TTL,
    )
