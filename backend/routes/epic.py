"""EPIC (Earth Polychromatic Imaging Camera) routes.

Metadata comes from api.nasa.gov; image files live in the epic.gsfc.nasa.gov
archive, whose URLs are derived from the metadata without a network call.
"""

from datetime import datetime, timezone
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query

from config import Settings
from dependencies import get_proxy, get_settings
from errors import MissingParameterError
from services.cache import cache_key
from services.nasa_client import EPIC_ARCHIVE, NASA_BASE
from services.pipeline import UpstreamProxy

router = APIRouter(prefix="/api/epic")

DEFAULT_COLLECTION = "natural"


async def _metadata(collection: str, date: str | None, proxy: UpstreamProxy, ttl: int):
    params = {"date": date} if date else {}
    return await proxy.fetch(
        f"EPIC {collection}",
        f"{NASA_BASE}/EPIC/api/{collection}",
        proxy.client.keyed(params),
        key=cache_key("epic", collection, date or "latest"),
        ttl=ttl,
    )


@router.get("/natural")
async def natural(
    date: str | None = Query(None),
    proxy: UpstreamProxy = Depends(get_proxy),
    settings: Settings = Depends(get_settings),
):
    return await _metadata("natural", date, proxy, settings.cache_ttl_seconds)


@router.get("/enhanced")
async def enhanced(
    date: str | None = Query(None),
    proxy: UpstreamProxy = Depends(get_proxy),
    settings: Settings = Depends(get_settings),
):
    return await _metadata("enhanced", date, proxy, settings.cache_ttl_seconds)


def archive_url(image: str, date: str, collection: str = DEFAULT_COLLECTION) -> str:
    """Canonical archive PNG URL for an EPIC image name and capture date.

    ``date`` is ISO-8601; aware datetimes are converted to UTC first.

    >>> archive_url("abc", "2021-03-04")
    'https://epic.gsfc.nasa.gov/archive/natural/2021/03/04/png/abc.png'
    """
    # fromisoformat only accepts a trailing Z from Python 3.11 on
    if date[-1:] in ("Z", "z"):
        date = date[:-1] + "+00:00"
    try:
        captured = datetime.fromisoformat(date)
    except ValueError as e:
        raise ValueError(f"Invalid date: {date}") from e
    if captured.tzinfo is not None:
        captured = captured.astimezone(timezone.utc)

    return (
        f"{EPIC_ARCHIVE}/{quote(collection, safe='')}/"
        f"{captured.year:04d}/{captured.month:02d}/{captured.day:02d}/png/{quote(image, safe='')}.png"
    )


@router.get("/image-url")
async def image_url(
    image: str | None = Query(None),
    date: str | None = Query(None),
    collection: str | None = Query(None, alias="type"),
) -> dict:
    if not image or not date:
        raise MissingParameterError("image and date are required")
    return {"url": archive_url(image, date, collection or DEFAULT_COLLECTION)}
