"""Request-scoped accessors for objects configured on ``app.state``."""
from __future__ import annotations

from fastapi import Request

from portfolio.core.config import Settings
from portfolio.repositories.factory import ContentStore
from portfolio.services.content_service import ContentService
from portfolio.services.github_service import GitHubService


def _state(request: Request, name: str):
    value = getattr(getattr(request.app, "state", None), name, None)
    if value is None:
        raise RuntimeError(f"{name} not configured")
    return value


def get_settings_dep(request: Request) -> Settings:
    return _state(request, "settings")


def get_store(request: Request) -> ContentStore:
    return _state(request, "store")


def get_content_service(request: Request) -> ContentService:
    return ContentService(get_store(request))


def get_github_service(request: Request) -> GitHubService:
    return _state(request, "github")
