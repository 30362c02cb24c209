# dhakahome/entrypoints/fastapi_app.py
from __future__ import annotations

import logging

import httpx
from fastapi import FastAPI

from ..adapters.clients.property_api import PropertyApiClient
from ..adapters.clients.token_cache import TokenCache
from ..adapters.mock.engine import MockPropertyEngine
from ..config import Settings, settings as default_settings
from ..service_layer.listings import ListingService
from .api.routers import health, leads, listings, search_filters

log = logging.getLogger(__name__)


def build_listing_service(cfg: Settings, http: httpx.AsyncClient) -> ListingService:
    token_cache = TokenCache(
        token_url=cfg.token_url,
        client_id=cfg.API_CLIENT_ID,
        client_secret=cfg.API_CLIENT_SECRET,
        scope=cfg.API_TOKEN_SCOPE,
        http=http,
    )

    client = PropertyApiClient(
        base_url=cfg.API_BASE_URL,
        http=http,
        static_token=cfg.API_AUTH_TOKEN,
        token_cache=token_cache if token_cache.configured else None,
        currency=cfg.CURRENCY_SYMBOL,
    )
    return ListingService(
        client=client,
        mock=MockPropertyEngine(currency=cfg.CURRENCY_SYMBOL),
        mock_enabled=cfg.MOCK_ENABLED,
        default_page_size=cfg.DEFAULT_PAGE_SIZE,
    )


def create_app(service: ListingService | None = None, cfg: Settings | None = None) -> FastAPI:
    cfg = cfg or default_settings
    logging.basicConfig(
        level=cfg.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="DhakaHome - Property Listings")

    # Injected services (tests) own their HTTP client.
    http: httpx.AsyncClient | None = None
    if service is None:
        http = httpx.AsyncClient(timeout=cfg.HTTP_TIMEOUT_S)
        service = build_listing_service(cfg, http)
        log.info("app: upstream=%s mock=%s", cfg.API_BASE_URL, cfg.MOCK_ENABLED)

    app.state.settings = cfg
    app.state.listings = service

    @app.on_event("shutdown")
    async def _shutdown() -> None:
        if http is not None:
            await http.aclose()

    # Routers
    app.include_router(health.router)
    app.include_router(listings.router)
    app.include_router(search_filters.router)
    app.include_router(leads.router)

    return app
