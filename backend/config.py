"""Centralized configuration — all env vars in one place."""

import os


def _positive_int(name: str, default: int) -> int:
    """Integer env var; unset, non-numeric, zero or negative values fall back to the default."""
    try:
        value = int(os.getenv(name, ""))
    except ValueError:
        return default
    return value if value > 0 else default


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.allowed_origins: list[str] = [
            origin.strip()
            for origin in os.getenv("ALLOWED_ORIGINS", "http://localhost:5173").split(",")
            if origin.strip()
        ]
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = _positive_int("PORT", 5000)

        # Protect both this server and the upstream quota
        self.rate_limit_max: int = _positive_int("RATE_LIMIT_MAX", 120)
        self.cache_ttl_seconds: int = _positive_int("CACHE_TTL_SECONDS", 3600)

        # NASA
        self.nasa_api_key: str = os.getenv("NASA_API_KEY", "")
        self.upstream_timeout_ms: int = _positive_int("UPSTREAM_TIMEOUT_MS", 15000)

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def upstream_timeout(self) -> float:
        """Per-call upstream timeout in seconds."""
        return self.upstream_timeout_ms / 1000

    def validate(self) -> list[str]:
        """Return list of missing required env vars."""
        required = ["NASA_API_KEY"]
        return [var for var in required if not getattr(self, var.lower())]


settings = Settings()
