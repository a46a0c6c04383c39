"""NASA Image and Video Library search."""

from fastapi import APIRouter, Depends, Query

from dependencies import get_proxy
from services.cache import cache_key
from services.nasa_client import IMAGES_BASE
from services.pipeline import UpstreamProxy

router = APIRouter()

SEARCH_TTL = 1800


@router.get("/api/imagesearch")
async def image_search(
    q: str = Query("space"),
    page: str = Query("1"),
    proxy: UpstreamProxy = Depends(get_proxy),
):
    q = q or "space"
    page = page or "1"
    # images-api is unkeyed; no api_key param
    return await proxy.fetch(
        "Image search",
        f"{IMAGES_BASE}/search",
        {"q": q, "page": page},
        key=cache_key("imagesearch", q, page),
        ttl=SEARCH_TTL,
    )
