"""FastAPI dependencies: per-app objects built by create_app, read from app.state."""

from fastapi import Request

from config import Settings
from services.pipeline import UpstreamProxy


def get_proxy(request: Request) -> UpstreamProxy:
    return request.app.state.proxy


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
