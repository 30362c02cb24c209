# dhakahome/adapters/clients/property_api.py
from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from ...domain.errors import FallbackReason, LeadSubmissionError, TokenError, UpstreamError
from ...domain.mapping import DEFAULT_CURRENCY, map_asset_to_property
from ...domain.pagination import clamp_page, page_count
from ...domain.parsing import bool_from, first_string, int_from, parse_string_list
from ...domain.search_params import SearchParams
from ...domain.types import (
    DEFAULT_STATUS_FILTER,
    Document,
    LeadRequest,
    NeighborhoodStat,
    Property,
    PropertyList,
)
from .http_resilience import RequestTrace, get_json, upstream_request
from .token_cache import TokenCache

log = logging.getLogger(__name__)

_DEFAULT_STATUS = ",".join(DEFAULT_STATUS_FILTER)


class PropertyApiClient:
    """
    Client for the upstream property (asset) REST API.

    Read methods raise UpstreamError for network, status and decode failures;
    deciding what to do about it is the caller's job. submit_lead raises
    LeadSubmissionError.
    """

    def __init__(
        self,
        *,
        base_url: str,
        http: httpx.AsyncClient,
        static_token: str | None = None,
        token_cache: TokenCache | None = None,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self.base_url = (base_url or "").rstrip("/")
        self.static_token = (static_token or "").strip() or None
        self.token_cache = token_cache
        self.currency = currency
        self.last_request: RequestTrace | None = None
        self._http = http

    # -------------------------
    # Plumbing
    # -------------------------

    def build_url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _trace(self, trace: RequestTrace) -> None:
        self.last_request = trace

    async def _authorization(self) -> str | None:
        if self.static_token:
            return f"Bearer {self.static_token}"
        if self.token_cache is None:
            return None
        try:
            token = await self.token_cache.get_token()
        except TokenError as e:
            # Upstream will reject the unauthenticated call; that goes through the normal failure path.
            log.warning("api: no bearer token, sending unauthenticated request: %s", e)
            return None
        return f"Bearer {token}"

    async def _headers(self) -> dict[str, str]:
        headers = {"accept": "application/json"}
        auth = await self._authorization()
        if auth:
            headers["authorization"] = auth
        return headers

    async def _get(self, path: str, params: Any | None = None) -> Any:
        return await get_json(
            self._http,
            self.build_url(path),
            headers=await self._headers(),
            params=params,
            on_trace=self._trace,
        )

    # -------------------------
    # Reads
    # -------------------------

    async def search_assets(self, params: SearchParams) -> PropertyList:
        log.info("api: GET /assets?%s", params.encode())
        payload = await self._get("/assets", params.to_query())

        if not isinstance(payload, dict):
            raise UpstreamError(FallbackReason.decode, "assets: expected an object envelope")
        rows = payload.get("data") or []
        if not isinstance(rows, list):
            raise UpstreamError(FallbackReason.decode, "assets: 'data' is not a list")

        items: list[Property] = []
        for raw in rows:
            if not isinstance(raw, dict):
                continue
            prop = map_asset_to_property(raw, currency=self.currency)
            if prop.id:
                items.append(prop)
        log.info("api: fetched %d properties", len(items))

        limit = int_from(payload, "limit") or 0
        if limit <= 0:
            limit = params.limit
        total = int_from(payload, "total") or 0
        if total <= 0:
            total = len(items)
        page = int_from(payload, "page") or 0
        if page <= 0:
            page = params.page

        pages = page_count(total, limit)
        return PropertyList(items=items, page=clamp_page(page, pages), pages=pages, total=total)

    async def get_asset(self, property_id: str) -> Property:
        payload = await self._get(f"/assets/{quote(property_id, safe='')}")
        if not isinstance(payload, dict):
            raise UpstreamError(FallbackReason.decode, f"asset {property_id}: expected an object")
        prop = map_asset_to_property(payload, currency=self.currency)
        if not prop.id:
            prop.id = property_id
        return prop

    async def get_cities(self) -> list[str]:
        cities = parse_string_list(await self._get("/assets/cities", {"status": _DEFAULT_STATUS}))
        if not cities:
            raise UpstreamError(FallbackReason.decode, "cities: empty response")
        return cities

    async def get_neighborhoods(self, city: str) -> list[str]:
        areas = parse_string_list(
            await self._get("/assets/neighborhoods", {"city": city, "status": _DEFAULT_STATUS})
        )
        if not areas:
            raise UpstreamError(FallbackReason.decode, f"neighborhoods for city={city}: empty response")
        return areas

    async def get_top_neighborhoods(self, limit: int, city: str | None = None) -> list[NeighborhoodStat]:
        params: dict[str, Any] = {"limit": limit, "status": _DEFAULT_STATUS}
        if city:
            params["city"] = city
        payload = await self._get("/assets/neighborhoods/top", params)
        if not isinstance(payload, list):
            raise UpstreamError(FallbackReason.decode, "top neighborhoods: expected a list")

        stats: list[NeighborhoodStat] = []
        for row in payload:
            if not isinstance(row, dict):
                continue
            name = first_string(row, "neighborhood")
            if not name:
                continue
            stats.append(
                NeighborhoodStat(
                    neighborhood=name,
                    city=first_string(row, "city") or (city or ""),
                    count=int_from(row, "count") or 0,
                )
            )
        if not stats:
            raise UpstreamError(FallbackReason.decode, "top neighborhoods: empty response")
        return stats[:limit]

    async def get_required_documents(self, asset_type: str) -> list[Document]:
        payload = await self._get(f"/config/asset/{quote(asset_type, safe='')}/documents")
        rows = payload.get("data") if isinstance(payload, dict) else payload
        if not isinstance(rows, list):
            raise UpstreamError(FallbackReason.decode, "documents: expected a list")

        docs: list[Document] = []
        for row in rows:
            if not isinstance(row, dict):
                continue
            label = first_string(row, "label", "name", "title")
            if not label:
                continue
            docs.append(
                Document(
                    id=first_string(row, "id", "ID") or label,
                    label=label,
                    is_required=bool(bool_from(row, "isRequired", "required", "is_required")),
                )
            )
        return docs

    # -------------------------
    # Writes
    # -------------------------

    async def submit_lead(self, lead: LeadRequest) -> None:
        headers = await self._headers()
        try:
            resp = await upstream_request(
                self._http,
                "POST",
                self.build_url("/leads"),
                headers=headers,
                json=lead.to_payload(),
                on_trace=self._trace,
            )
        except UpstreamError as e:
            raise LeadSubmissionError(f"lead: {e.detail}") from e

        if resp.status_code >= 300:
            raise LeadSubmissionError(f"lead: {resp.status_code} {resp.reason_phrase}".strip(), status_code=resp.status_code)
