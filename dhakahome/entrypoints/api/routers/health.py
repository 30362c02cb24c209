# dhakahome/entrypoints/api/routers/health.py
from __future__ import annotations

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Depends

from ..deps import get_listings, get_settings, require_api_key
from ....config import Settings
from ....service_layer.listings import ListingService

router = APIRouter(tags=["health"])


@router.get("/health")
@router.get("/healthz")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/debug/config", dependencies=[Depends(require_api_key)])
def debug_config(settings: Settings = Depends(get_settings)) -> dict[str, Any]:
    """Settings of the running server. Secrets are redacted."""
    def _redact(v: str | None) -> str | None:
        if not v:
            return v
        if len(v) <= 8:
            return "***"
        return v[:4] + "***" + v[-4:]

    return {
        "ENV": settings.ENV,
        "API_BASE_URL": settings.API_BASE_URL,
        "API_TOKEN_URL": settings.token_url,
        "API_TOKEN_SCOPE": settings.API_TOKEN_SCOPE,
        "API_AUTH_TOKEN_SET": bool(settings.API_AUTH_TOKEN),
        "API_CLIENT_ID": _redact(settings.API_CLIENT_ID),
        "API_CLIENT_SECRET": "***" if settings.API_CLIENT_SECRET else None,
        "MOCK_ENABLED": settings.MOCK_ENABLED,
        "HTTP_TIMEOUT_S": settings.HTTP_TIMEOUT_S,
        "DEFAULT_PAGE_SIZE": settings.DEFAULT_PAGE_SIZE,
        "DEBUG_API_KEY_SET": bool(settings.DEBUG_API_KEY),
    }


@router.get("/debug/upstream", dependencies=[Depends(require_api_key)])
def debug_upstream(listings: ListingService = Depends(get_listings)) -> dict[str, Any]:
    trace = listings.client.last_request
    return {
        "mock_enabled": listings.mock_enabled,
        "last_request": asdict(trace) if trace is not None else None,
    }
