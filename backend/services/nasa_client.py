"""NASA open API client — one shared httpx.AsyncClient per app.

Covers api.nasa.gov (keyed by ``api_key`` query param), images-api.nasa.gov
and the EPIC archive. Payloads are returned as parsed JSON and never
inspected.
"""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

NASA_BASE = "https://api.nasa.gov"
IMAGES_BASE = "https://images-api.nasa.gov"
EPIC_ARCHIVE = "https://epic.gsfc.nasa.gov/archive"

USER_AGENT = "NASA-Explorer-Server/1.0"


class NasaClient:
    def __init__(self, api_key: str, timeout: float = 15.0, http: httpx.AsyncClient | None = None):
        self.api_key = api_key
        self._http = http or httpx.AsyncClient(
            timeout=timeout,
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
        )

    def keyed(self, params: dict | None = None) -> dict:
        """Query params with the API credential added."""
        return {"api_key": self.api_key, **(params or {})}

    async def get_json(self, url: str, params: dict | None = None) -> Any:
        """Single GET. Raises on transport errors, non-2xx status or a non-JSON body."""
        resp = await self._http.get(url, params=params)
        resp.raise_for_status()
        return resp.json()

    async def aclose(self) -> None:
        await self._http.aclose()


def describe_error(exc: Exception) -> Any:
    """Best-effort detail for an upstream failure: JSON body, text body, or message."""
    if isinstance(exc, httpx.HTTPStatusError):
        try:
            return exc.response.json()
        except ValueError:
            return exc.response.text or str(exc)
    return str(exc) or exc.__class__.__name__
