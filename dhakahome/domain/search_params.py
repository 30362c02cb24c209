# dhakahome/domain/search_params.py
"""
Search query normalization.

Raw query strings arrive with several historical spellings for the same
filter (``type``/``types``, ``neighborhood``/``area``/``location``,
``price_min``/``minPrice`` ...). ``build_search_params`` folds them into one
``SearchParams`` value. It never raises: anything it cannot parse is dropped,
which widens the search instead of rejecting it.

Precedence (left wins):
  status        status > listing_type > listingType > "listed_rental,listed_sale"
  neighborhood  neighborhood > area > location
  types         types > type
  price_min     price_min > minPrice
  price_max     price_max > maxPrice
  shared_room   shared_room > sharedRoom
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import urlencode

from .parsing import (
    clean_any_value,
    dedup_strings,
    first_non_empty,
    format_number,
    parse_price_field,
    titleize,
    to_int,
)
from .types import DEFAULT_STATUS_FILTER, ListingStatus

DEFAULT_PAGE_SIZE = 9

_TRUE_FLAGS = {"true", "yes", "1"}
_FALSE_FLAGS = {"false", "no", "0"}


@dataclass(frozen=True)
class SearchParams:
    query: str | None = None
    city: str | None = None
    neighborhood: str | None = None
    types: tuple[str, ...] = ()
    status: tuple[str, ...] = DEFAULT_STATUS_FILTER
    price_min: float | None = None
    price_max: float | None = None
    bedrooms: int | None = None
    bathrooms: int | None = None
    parking: int | None = None  # 0-2 exact, >=3 means "at least"
    furnished: bool | None = None
    serviced: bool | None = None
    shared_room: bool | None = None
    area_min: float | None = None
    area_max: float | None = None
    subunit_type: str | None = None
    exclude_leased: str | None = None
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE
    sort_by: str | None = None
    order: str | None = None

    def to_query(self) -> list[tuple[str, str]]:
        """Upstream /assets query pairs, in a stable order."""
        pairs: list[tuple[str, str]] = [("status", ",".join(self.status))]

        def add(key: str, value: Any) -> None:
            if value is None or value == "" or value == ():
                return
            if isinstance(value, bool):
                pairs.append((key, "true" if value else "false"))
            elif isinstance(value, float):
                pairs.append((key, format_number(value)))
            elif isinstance(value, tuple):
                pairs.append((key, ",".join(value)))
            else:
                pairs.append((key, str(value)))

        add("q", self.query)
        add("city", self.city)
        add("neighborhood", self.neighborhood)
        add("types", self.types)
        add("bedrooms", self.bedrooms)
        add("bathrooms", self.bathrooms)
        add("price_min", self.price_min)
        add("price_max", self.price_max)
        add("parking", self.parking)
        add("serviced", self.serviced)
        add("shared_room", self.shared_room)
        add("furnished", self.furnished)
        add("area_min", self.area_min)
        add("area_max", self.area_max)
        add("subunit_type", self.subunit_type)
        add("exclude_leased", self.exclude_leased)
        add("page", self.page)
        add("limit", self.limit)
        add("sort_by", self.sort_by)
        add("order", self.order)
        return pairs

    def encode(self) -> str:
        return urlencode(self.to_query())


def _first(query: Mapping[str, Any], key: str) -> str:
    """First value for `key`: works for plain dicts, dicts of lists and multi-dicts."""
    getlist = getattr(query, "getlist", None)
    if callable(getlist):
        values = getlist(key)
        return str(values[0]) if values else ""
    v = query.get(key)
    if v is None:
        return ""
    if isinstance(v, (list, tuple)):
        return str(v[0]) if v else ""
    return str(v)


def _get(query: Mapping[str, Any], *keys: str) -> str:
    return first_non_empty(*(clean_any_value(_first(query, k)) for k in keys))


def normalize_listing_type(v: str) -> str:
    clean = v.strip().lower()
    if clean in ("", "both"):
        return ""
    if clean in ("rent", "rental", "listed_rental", "lease", "to-let", "to_let", "tolet"):
        return ListingStatus.listed_rental.value
    if clean in ("sale", "sell", "listed_sale", "for_sale"):
        return ListingStatus.listed_sale.value
    return clean


def normalize_type_value(v: str) -> str:
    clean = v.strip().lower()
    if clean in ("", "any"):
        return ""
    if clean == "residential":
        return "Residential"
    if clean == "commercial":
        return "Commercial"
    if clean == "land":
        return "Plot"
    return titleize(clean)


def _split(raw: str) -> list[str]:
    return [p for p in (clean_any_value(x) for x in raw.split(",")) if p]


def _positive_int(raw: str) -> int | None:
    n = to_int(raw)
    return n if n is not None and n > 0 else None


def _tri_state(raw: str) -> bool | None:
    clean = raw.strip().lower()
    if clean in _TRUE_FLAGS:
        return True
    if clean in _FALSE_FLAGS:
        return False
    return None


def _status(query: Mapping[str, Any]) -> tuple[str, ...]:
    explicit = _split(_get(query, "status"))
    if explicit:
        return tuple(dedup_strings(explicit))
    listing_type = normalize_listing_type(_get(query, "listing_type", "listingType"))
    if listing_type:
        return (listing_type,)
    return DEFAULT_STATUS_FILTER


def build_search_params(query: Mapping[str, Any], *, default_limit: int = DEFAULT_PAGE_SIZE) -> SearchParams:
    page = _positive_int(_get(query, "page")) or 1
    limit = _positive_int(_get(query, "limit")) or max(default_limit, 1)

    types = dedup_strings(normalize_type_value(t) for t in _split(_get(query, "types", "type")))

    parking = to_int(_get(query, "parking"))
    if parking is not None and parking < 0:
        parking = None

    order = _get(query, "order").lower()

    return SearchParams(
        query=_get(query, "q") or None,
        city=_get(query, "city") or None,
        neighborhood=_get(query, "neighborhood", "area", "location") or None,
        types=tuple(types),
        status=_status(query),
        price_min=parse_price_field(_get(query, "price_min", "minPrice")),
        price_max=parse_price_field(_get(query, "price_max", "maxPrice")),
        bedrooms=_positive_int(_get(query, "bedrooms")),
        bathrooms=_positive_int(_get(query, "bathrooms")),
        parking=parking,
        furnished=_tri_state(_get(query, "furnished")),
        serviced=_tri_state(_get(query, "serviced")),
        shared_room=_tri_state(_get(query, "shared_room", "sharedRoom")),
        area_min=parse_price_field(_get(query, "area_min")),
        area_max=parse_price_field(_get(query, "area_max")),
        subunit_type=_get(query, "subunit_type") or None,
        exclude_leased=_get(query, "exclude_leased") or None,
        page=page,
        limit=limit,
        sort_by=_get(query, "sort_by") or None,
        order=order if order in ("asc", "desc") else None,
    )
