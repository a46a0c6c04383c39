"""Mars rover photos."""

from urllib.parse import quote

from fastapi import APIRouter, Depends, Query

from dependencies import get_proxy
from services.cache import cache_key
from services.nasa_client import NASA_BASE
from services.pipeline import UpstreamProxy

router = APIRouter()

PHOTOS_TTL = 1800


@router.get("/api/mars")
async def rover_photos(
    rover: str = Query("curiosity"),
    sol: str | None = Query(None),
    earth_date: str | None = Query(None),
    camera: str | None = Query(None),
    page: str = Query("1"),
    proxy: UpstreamProxy = Depends(get_proxy),
):
    rover = rover or "curiosity"
    page = page or "1"
    params = {"page": page}
    if sol:
        params["sol"] = sol
    if earth_date:
        params["earth_date"] = earth_date
    if camera:
        params["camera"] = camera

    return await proxy.fetch(
        "Mars photos",
        f"{NASA_BASE}/mars-photos/api/v1/rovers/{quote(rover, safe='')}/photos",
        proxy.client.keyed(params),
        key=cache_key("mars", rover, sol or "", earth_date or "", camera or "", page),
        ttl=PHOTOS_TTL,
    )
