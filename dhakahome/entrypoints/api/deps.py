# dhakahome/entrypoints/api/deps.py
from __future__ import annotations

from fastapi import Header, HTTPException, Request

from ...config import Settings
from ...service_layer.listings import ListingService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def require_api_key(request: Request, x_api_key: str | None = Header(default=None, alias="X-API-Key")) -> None:
    api_key = get_settings(request).DEBUG_API_KEY
    if api_key:
        if not x_api_key or x_api_key != api_key:
            raise HTTPException(status_code=401, detail="Invalid API key")


def get_listings(request: Request) -> ListingService:
    return request.app.state.listings
