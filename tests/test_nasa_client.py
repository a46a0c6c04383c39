from __future__ import annotations

import httpx
import pytest
import respx

from services.nasa_client import NASA_BASE, USER_AGENT, NasaClient, describe_error


@pytest.mark.asyncio
@respx.mock
async def test_get_json_sends_params_and_user_agent() -> None:
    route = respx.get(f"{NASA_BASE}/neo/rest/v1/feed").mock(
        return_value=httpx.Response(200, json={"element_count": 3})
    )
    client = NasaClient(api_key="k")
    try:
        data = await client.get_json(f"{NASA_BASE}/neo/rest/v1/feed", client.keyed({"start_date": "2024-01-01"}))
    finally:
        await client.aclose()

    assert data == {"element_count": 3}
    request = route.calls.last.request
    assert request.url.params["api_key"] == "k"
    assert request.url.params["start_date"] == "2024-01-01"
    assert request.headers["User-Agent"] == USER_AGENT


@pytest.mark.asyncio
@respx.mock
async def test_non_2xx_raises_status_error() -> None:
    respx.get(f"{NASA_BASE}/DONKI/FLR").mock(return_value=httpx.Response(403, json={"error": "bad key"}))
    client = NasaClient(api_key="k")
    try:
        with pytest.raises(httpx.HTTPStatusError) as info:
            await client.get_json(f"{NASA_BASE}/DONKI/FLR")
    finally:
        await client.aclose()

    assert describe_error(info.value) == {"error": "bad key"}


def test_describe_error_falls_back_to_text_then_message() -> None:
    request = httpx.Request("GET", f"{NASA_BASE}/x")
    response = httpx.Response(502, text="Bad Gateway", request=request)
    status_error = httpx.HTTPStatusError("502", request=request, response=response)
    assert describe_error(status_error) == "Bad Gateway"

    assert describe_error(httpx.ConnectError("connection refused")) == "connection refused"
    assert describe_error(httpx.ReadTimeout("")) == "ReadTimeout"


def test_keyed_adds_credential() -> None:
    client = NasaClient(api_key="secret", http=httpx.AsyncClient())
    assert client.keyed() == {"api_key": "secret"}
    assert client.keyed({"date": "2024-01-01"}) == {"api_key": "secret", "date": "2024-01-01"}
