from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from errors import ExplorerError, MissingParameterError, UpstreamError, register_error_handlers


def _app() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/upstream")
    async def upstream():
        raise UpstreamError("Thing failed", detail={"code": 503})

    @app.get("/missing")
    async def missing():
        raise MissingParameterError("image and date are required")

    @app.get("/bad-value")
    async def bad_value():
        raise ValueError("Invalid date: soon")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaput")

    return app


def test_envelopes() -> None:
    client = TestClient(_app(), raise_server_exceptions=False)

    assert client.get("/upstream").status_code == 500
    assert client.get("/upstream").json() == {"error": "Thing failed", "detail": {"code": 503}}
    assert client.get("/missing").status_code == 400
    assert client.get("/missing").json() == {"error": "image and date are required"}
    assert client.get("/bad-value").json() == {"error": "Invalid date: soon"}
    assert client.get("/nowhere").json() == {"error": "not found"}

    boom = client.get("/boom")
    assert boom.status_code == 500
    assert boom.json() == {"error": "server error", "detail": "kaput"}


def test_to_body_omits_empty_detail() -> None:
    assert ExplorerError("oops").to_body() == {"error": "oops"}
    assert UpstreamError("x failed", detail="timeout").to_body() == {"error": "x failed", "detail": "timeout"}
