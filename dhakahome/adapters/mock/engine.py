# dhakahome/adapters/mock/engine.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from ...domain.mapping import DEFAULT_CURRENCY, finalize_property
from ...domain.pagination import paginate
from ...domain.parsing import clean_any_value, first_non_empty, titleize
from ...domain.search_params import SearchParams
from ...domain.types import Document, NeighborhoodStat, Property, PropertyList
from .dataset import (
    DEFAULT_NEIGHBORHOODS,
    MOCK_CITIES,
    MOCK_NEIGHBORHOODS,
    MOCK_PROPERTIES,
    MOCK_REQUIRED_DOCUMENTS,
)

log = logging.getLogger(__name__)

SORTABLE_FIELDS = ("price", "area", "bedrooms", "bathrooms", "parking")


def _contains(s: str, sub: str) -> bool:
    return sub.lower() in s.lower()


def _contains_any(values: Iterable[str], *needles: str) -> bool:
    """Case-insensitive: any value equal to, or containing, any needle."""
    lowered = [v.lower() for v in values]
    for needle in needles:
        n = needle.lower()
        if any(v == n or n in v for v in lowered):
            return True
    return False


def normalize_mock_status(status: str) -> str:
    """Backend status value -> display badge."""
    clean = status.strip().lower()
    if clean in ("listed_rental", "ready_for_listing", "active", "available"):
        return "To-let"
    if clean in ("listed_sale", "for_sale", "sale"):
        return "For Sale"
    if clean in ("leased", "rented"):
        return "Leased"
    return titleize(clean)


def _flag_ok(wanted: bool | None, present: bool) -> bool:
    return wanted is None or wanted == present


def matches_filters(prop: Property, params: SearchParams) -> bool:
    """Every supplied predicate must pass; unset fields impose no constraint."""
    if params.query:
        if not (
            _contains(prop.title, params.query)
            or _contains(prop.address, params.query)
            or _contains_any(prop.badges, params.query)
        ):
            return False

    if params.neighborhood:
        if not (_contains(prop.address, params.neighborhood) or _contains(prop.title, params.neighborhood)):
            return False

    if params.types and not any(_contains_any(prop.badges, t) for t in params.types):
        return False

    if params.status and not any(_contains_any(prop.badges, normalize_mock_status(s)) for s in params.status):
        return False

    if params.price_min and prop.price < params.price_min:
        return False
    if params.price_max and prop.price > params.price_max:
        return False

    if params.parking is not None:
        if params.parking >= 3:
            if prop.parking < params.parking:
                return False
        elif prop.parking != params.parking:
            return False

    # Records without a known size are not excluded by size bounds
    if params.area_min and prop.area > 0 and prop.area < params.area_min:
        return False
    if params.area_max and prop.area > 0 and prop.area > params.area_max:
        return False

    if params.bedrooms and prop.bedrooms < params.bedrooms:
        return False
    if params.bathrooms and prop.bathrooms < params.bathrooms:
        return False

    if not _flag_ok(params.furnished, _contains_any(prop.badges, "Furnished")):
        return False

    is_serviced = _contains_any(prop.badges, "Serviced") or _contains(prop.title, "serviced")
    if not _flag_ok(params.serviced, is_serviced):
        return False

    is_shared = _contains(prop.title, "shared") or _contains_any(prop.badges, "Shared", "Shared Room")
    if not _flag_ok(params.shared_room, is_shared):
        return False

    return True


@dataclass
class MockPropertyEngine:
    """
    In-process stand-in for the property API.

    Filtering mirrors what the upstream /assets endpoint does so callers can
    not tell the two apart by shape.
    """

    properties: tuple[Property, ...] = MOCK_PROPERTIES
    currency: str = DEFAULT_CURRENCY

    def search(self, params: SearchParams) -> PropertyList:
        log.debug("mock search: %s", params.encode())
        filtered = [p for p in self.properties if matches_filters(p, params)]

        if params.sort_by in SORTABLE_FIELDS:
            key = params.sort_by
            filtered.sort(key=lambda p: getattr(p, key), reverse=params.order == "desc")

        items, page, pages = paginate(filtered, params.page, params.limit)
        log.debug("mock search: %d matches, page %d/%d", len(filtered), page, pages)
        return PropertyList(
            items=[finalize_property(p, currency=self.currency) for p in items],
            page=page,
            pages=pages,
            total=len(filtered),
        )

    def get(self, property_id: str) -> Property | None:
        pid = (property_id or "").strip().lower()
        for p in self.properties:
            if p.id.lower() == pid:
                return finalize_property(p, currency=self.currency)
        return None

    def cities(self) -> list[str]:
        return list(MOCK_CITIES)

    def neighborhoods(self, city: str) -> list[str]:
        return list(MOCK_NEIGHBORHOODS.get(city.strip().lower(), DEFAULT_NEIGHBORHOODS))

    def top_neighborhoods(self, limit: int = 10, city: str | None = None) -> list[NeighborhoodStat]:
        if limit <= 0:
            limit = 10
        city_name = titleize(first_non_empty(clean_any_value(city), "Dhaka"))

        stats: list[NeighborhoodStat] = []
        for area in dict.fromkeys(a.strip() for a in self.neighborhoods(city_name) if a.strip()):
            count = sum(1 for p in self.properties if _contains(p.address, area) or _contains(p.title, area))
            if count:
                stats.append(NeighborhoodStat(neighborhood=area, city=city_name, count=count))

        stats.sort(key=lambda s: (-s.count, s.neighborhood))
        return stats[:limit]

    def required_documents(self, asset_type: str = "default") -> list[Document]:
        return [Document(id=i, label=label, is_required=req) for i, label, req in MOCK_REQUIRED_DOCUMENTS]
