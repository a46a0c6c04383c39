"""InSight lander weather — uncached pass-through."""

from fastapi import APIRouter, Depends

from dependencies import get_proxy
from services.nasa_client import NASA_BASE
from services.pipeline import UpstreamProxy

router = APIRouter()


@router.get("/api/insight")
async def insight_weather(proxy: UpstreamProxy = Depends(get_proxy)):
    return await proxy.passthrough(
        "InSight weather",
        f"{NASA_BASE}/insight_weather/",
        proxy.client.keyed({"feedtype": "json", "ver": "1.0"}),
    )
