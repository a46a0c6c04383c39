from __future__ import annotations

import pytest

from config import Settings

ENV_VARS = (
    "ALLOWED_ORIGINS",
    "RATE_LIMIT_MAX",
    "CACHE_TTL_SECONDS",
    "UPSTREAM_TIMEOUT_MS",
    "NASA_API_KEY",
    "PORT",
    "ENVIRONMENT",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    s = Settings()
    assert s.allowed_origins == ["http://localhost:5173"]
    assert s.rate_limit_max == 120
    assert s.cache_ttl_seconds == 3600
    assert s.upstream_timeout == 15.0
    assert s.port == 5000
    assert s.is_production is False
    assert s.validate() == ["NASA_API_KEY"]


def test_overrides(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example,")
    clean_env.setenv("UPSTREAM_TIMEOUT_MS", "2500")
    clean_env.setenv("NASA_API_KEY", "abc")
    clean_env.setenv("ENVIRONMENT", "production")

    s = Settings()
    assert s.allowed_origins == ["https://a.example", "https://b.example"]
    assert s.upstream_timeout == 2.5
    assert s.is_production is True
    assert s.validate() == []


@pytest.mark.parametrize("raw", ["0", "-5", "lots", ""])
def test_bad_numbers_fall_back_to_defaults(clean_env: pytest.MonkeyPatch, raw: str) -> None:
    for var in ("RATE_LIMIT_MAX", "CACHE_TTL_SECONDS", "UPSTREAM_TIMEOUT_MS", "PORT"):
        clean_env.setenv(var, raw)

    s = Settings()
    assert s.rate_limit_max == 120
    assert s.cache_ttl_seconds == 3600
    assert s.upstream_timeout_ms == 15000
    assert s.port == 5000
