# dhakahome/service_layer/listings.py
from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Mapping, TypeVar

from ..adapters.clients.property_api import PropertyApiClient
from ..adapters.mock.engine import MockPropertyEngine
from ..domain.errors import UpstreamError
from ..domain.parsing import clean_any_value
from ..domain.search_params import DEFAULT_PAGE_SIZE, SearchParams, build_search_params
from ..domain.types import Document, LeadRequest, NeighborhoodStat, Property, PropertyList

log = logging.getLogger(__name__)

T = TypeVar("T")

SIMILAR_FETCH_LIMIT = 12
SIMILAR_MAX = 6


class ListingService:
    """
    Caller-facing listings API.

    Reads never fail because of the upstream: in mock mode they go straight to
    the mock engine, otherwise an UpstreamError from the client is logged and
    replaced by the mock engine's answer for the same arguments. Lead
    submission is the exception and always propagates.
    """

    def __init__(
        self,
        *,
        client: PropertyApiClient,
        mock: MockPropertyEngine | None = None,
        mock_enabled: bool = False,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self.client = client
        self.mock = mock or MockPropertyEngine(currency=client.currency)
        self.mock_enabled = mock_enabled
        self.default_page_size = default_page_size
        if mock_enabled:
            log.info("listings: MOCK MODE enabled, reads use mock data; leads still go upstream")

    async def _with_fallback(self, op: str, remote: Callable[[], Awaitable[T]], fallback: Callable[[], T]) -> T:
        if self.mock_enabled:
            return fallback()
        try:
            return await remote()
        except UpstreamError as e:
            log.warning("api: %s failed (%s): %s - using mock data", op, e.reason.value, e.detail)
            return fallback()

    def normalize(self, query: Mapping[str, Any]) -> SearchParams:
        return build_search_params(query, default_limit=self.default_page_size)

    async def search(self, query: Mapping[str, Any] | SearchParams) -> PropertyList:
        params = query if isinstance(query, SearchParams) else self.normalize(query)
        return await self._with_fallback(
            "search",
            lambda: self.client.search_assets(params),
            lambda: self.mock.search(params),
        )

    async def get_property(self, property_id: str) -> Property | None:
        property_id = (property_id or "").strip()
        if not property_id:
            return None
        return await self._with_fallback(
            f"property id={property_id}",
            lambda: self.client.get_asset(property_id),
            lambda: self.mock.get(property_id),
        )

    async def cities(self) -> list[str]:
        return await self._with_fallback("cities", self.client.get_cities, self.mock.cities)

    async def neighborhoods(self, city: str) -> list[str]:
        city = clean_any_value(city)
        if not city:
            raise ValueError("city is required")
        return await self._with_fallback(
            f"neighborhoods city={city}",
            lambda: self.client.get_neighborhoods(city),
            lambda: self.mock.neighborhoods(city),
        )

    async def top_neighborhoods(self, limit: int = 10, city: str | None = None) -> list[NeighborhoodStat]:
        if limit <= 0:
            limit = 10
        city = clean_any_value(city) or None
        return await self._with_fallback(
            "top neighborhoods",
            lambda: self.client.get_top_neighborhoods(limit, city),
            lambda: self.mock.top_neighborhoods(limit, city),
        )

    async def required_documents(self, asset_type: str | None) -> list[Document]:
        asset_type = (asset_type or "").strip().lower() or "default"
        return await self._with_fallback(
            f"documents type={asset_type}",
            lambda: self.client.get_required_documents(asset_type),
            lambda: self.mock.required_documents(asset_type),
        )

    async def similar_properties(self, prop: Property, *, limit: int = SIMILAR_MAX) -> list[Property]:
        """Same type, same listing type when possible, never the property itself."""
        query = {"limit": str(SIMILAR_FETCH_LIMIT)}
        if prop.type:
            query["type"] = prop.type
        listing = await self.search(query)

        others = [p for p in listing.items if p.id != prop.id]
        wanted = prop.listing_type.lower()
        same_listing = [p for p in others if p.listing_type.lower() == wanted]
        rest = [p for p in others if p.listing_type.lower() != wanted]
        return (same_listing + rest)[:limit]

    async def submit_lead(self, lead: LeadRequest) -> None:
        await self.client.submit_lead(lead)
