"""FastAPI application entry point for the NASA explorer proxy."""

import asyncio
import logging
import sys
import time

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from config import Settings, settings
from errors import register_error_handlers
from services.cache import TTLCache
from services.nasa_client import NasaClient
from services.pipeline import UpstreamProxy
from services.rate_limit import RateLimitMiddleware, application_limit, build_limiter
from services.retry import Sleep

# Structured logging: JSON for production, human-readable for local
if settings.is_production:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        stream=sys.stdout,
    )
else:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

logger = logging.getLogger(__name__)


def create_app(
    app_settings: Settings | None = None,
    *,
    clock=time.monotonic,
    sleep: Sleep = asyncio.sleep,
) -> FastAPI:
    """Build the app with its own cache, upstream client and rate limiter."""
    app_settings = app_settings or settings
    app = FastAPI(title="NASA Explorer API", version="1.0.0")

    client = NasaClient(api_key=app_settings.nasa_api_key, timeout=app_settings.upstream_timeout)
    app.state.settings = app_settings
    app.state.proxy = UpstreamProxy(
        client=client,
        cache=TTLCache(clock=clock),
        default_ttl=app_settings.cache_ttl_seconds,
        sleep=sleep,
    )
    app.state.limiter = build_limiter()

    # Security headers
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        if app_settings.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    # Rate limiting runs before routing, so before cache and upstream
    app.add_middleware(
        RateLimitMiddleware,
        limiter=app.state.limiter,
        limit=application_limit(app_settings.rate_limit_max),
    )

    # CORS (outermost, so 429s still carry CORS headers)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.allowed_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Centralized error handlers
    register_error_handlers(app)

    from routes.donki import router as donki_router
    from routes.epic import router as epic_router
    from routes.gibs import router as gibs_router
    from routes.health import router as health_router
    from routes.images import router as images_router
    from routes.insight import router as insight_router
    from routes.mars import router as mars_router
    from routes.neo import router as neo_router

    app.include_router(health_router)
    app.include_router(neo_router)
    app.include_router(insight_router)
    app.include_router(images_router)
    app.include_router(donki_router)
    app.include_router(epic_router)
    app.include_router(gibs_router)
    app.include_router(mars_router)

    @app.on_event("startup")
    async def _validate_config() -> None:
        missing = app_settings.validate()
        if missing:
            logger.warning("Missing env vars (upstream calls may be rejected): %s", ", ".join(missing))

    @app.on_event("shutdown")
    async def _close_upstream() -> None:
        await client.aclose()

    return app


def main() -> None:
    """Serve via ``uvicorn app:create_app --factory``; nothing is built at import time."""
    logger.info("API server starting on %s:%d", settings.host, settings.port)
    uvicorn.run("app:create_app", factory=True, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
