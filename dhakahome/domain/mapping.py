# dhakahome/domain/mapping.py
from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

from .parsing import (
    bool_from,
    dedup_strings,
    first_non_empty,
    first_string,
    float_from,
    int_from,
    parse_number,
    pick_map,
    pick_slice,
    strings_from_list,
    titleize,
)
from .types import Property

DEFAULT_CURRENCY = "৳"
DEFAULT_TITLE = "Property"

# Approximate neighborhood centroids (lat, lng) used when an asset has no coordinates.
APPROXIMATE_AREA_COORDS: dict[str, tuple[float, float]] = {
    "uttara": (23.874219, 90.396475),
    "gulshan": (23.792521, 90.414047),
    "banani": (23.793478, 90.404137),
    "dhanmondi": (23.746105, 90.374007),
    "mirpur": (23.804174, 90.353605),
    "bashundhara": (23.815216, 90.423018),
    "mohammadpur": (23.758726, 90.358072),
    "mohakhali": (23.780195, 90.400438),
    "baridhara": (23.810151, 90.422426),
    "nikunja": (23.826702, 90.422935),
    "badda": (23.780917, 90.426642),
}

DEFAULT_AMENITIES: tuple[str, ...] = (
    "Gas Supply",
    "Boundary Wall",
    "Kitchen Cabinet",
    "Power Backup",
    "Parking",
    "Lift",
    "Servant Room",
    "Furnished",
)

_DATE_LAYOUTS = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%d %b %Y",
    "%b %d, %Y",
    "%d-%m-%Y",
    "%d/%m/%Y",
)

_AMENITY_KEYS = ("amenities", "Amenities", "features", "featureList", "features_list", "Features")


def parse_datetime(raw: str) -> datetime | None:
    clean = (raw or "").strip()
    if not clean:
        return None
    try:
        return datetime.fromisoformat(clean.replace("Z", "+00:00"))
    except ValueError:
        pass
    for layout in _DATE_LAYOUTS:
        try:
            return datetime.strptime(clean, layout)
        except ValueError:
            continue
    if clean.lstrip("-").isdigit():
        try:
            return datetime.fromtimestamp(int(clean), tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    return None


def coords_from_slice(values: list[Any]) -> tuple[float, float] | None:
    """
    Best-effort (lat, lng) from an ambiguous 2-element array.

    Dhaka sits around lat 23 / lng 90: a magnitude above 60 is taken as the
    longitude; otherwise the larger magnitude is assumed to be the longitude.
    """
    if len(values) < 2:
        return None
    first = parse_number(values[0])
    second = parse_number(values[1])
    if first is None or second is None:
        return None
    if abs(first) > 60 and abs(second) <= 60:
        return second, first  # [lng, lat]
    if abs(second) > 60 and abs(first) <= 60:
        return first, second
    if abs(second) > abs(first):
        return first, second
    return second, first


def fallback_coordinates(prop: Property) -> tuple[float, float] | None:
    haystack = " ".join([prop.address, " ".join(prop.badges), prop.title]).lower()
    for key, coords in APPROXIMATE_AREA_COORDS.items():
        if key in haystack:
            return coords
    return None


def build_address(location: dict[str, Any] | None) -> str:
    if not location:
        return ""
    parts = [first_string(location, k) for k in ("address", "neighborhood", "city")]
    parts = [p for p in parts if p]
    if parts:
        return ", ".join(parts)
    return first_string(location, "raw")


def select_photo_urls(items: list[Any]) -> list[str]:
    """Cover photos first, then the rest in declaration order."""
    cover: list[str] = []
    others: list[str] = []
    for item in items:
        if not isinstance(item, dict) or not item:
            continue
        url = first_string(item, "FileURL", "file_url", "fileUrl")
        if not url:
            continue
        if bool_from(item, "IsCover", "is_cover"):
            cover.append(url)
        else:
            others.append(url)
    return cover + others


def extract_price(details: dict[str, Any] | None) -> float:
    if not details:
        return 0.0
    pricing = pick_map(details, "pricing", "Pricing")
    candidates = []
    if pricing:
        candidates.append(float_from(pricing, "monthly_rent", "rent_price"))
        candidates.append(float_from(pricing, "sale_price", "SalePrice"))
    candidates.append(float_from(details, "sale_price", "SalePrice"))
    candidates.append(float_from(details, "rent_price", "RentPrice"))
    for v in candidates:
        if v is not None and v > 0:
            return v
    return 0.0


def extract_amenities(m: dict[str, Any] | None) -> list[str]:
    if not m:
        return []
    for key in _AMENITY_KEYS:
        if key not in m:
            continue
        v = m[key]
        if isinstance(v, list):
            return strings_from_list(v)
        if isinstance(v, str) and v:
            return v.split(",")
    return []


def derive_type_from_badges(badges: list[str]) -> str:
    for badge in badges:
        clean = badge.strip().lower()
        if clean in ("residential", "commercial", "land", "plot"):
            return titleize(clean)
    return ""


def derive_listing_type_from_badges(badges: list[str]) -> str:
    for badge in badges:
        clean = badge.strip().lower()
        if "sale" in clean:
            return "For Sale"
        if "to-let" in clean or "rent" in clean:
            return "To-let"
        if "lease" in clean:
            return "Lease"
    return ""


def finalize_property(prop: Property, *, currency: str = DEFAULT_CURRENCY) -> Property:
    """Fill display defaults. Returns a new Property; the input is left untouched."""
    gallery = list(prop.gallery) or list(prop.images)
    images = list(prop.images) or list(gallery)
    badges = list(prop.badges)

    lat, lng = prop.latitude, prop.longitude
    out = replace(
        prop,
        gallery=gallery,
        images=images,
        badges=badges,
        has_images=bool(gallery),
        type=prop.type or derive_type_from_badges(badges),
        listing_type=prop.listing_type or derive_listing_type_from_badges(badges),
        currency=prop.currency or currency,
        title=prop.title or DEFAULT_TITLE,
        amenities=list(prop.amenities) or list(DEFAULT_AMENITIES),
    )
    if lat == 0 and lng == 0:
        coords = fallback_coordinates(out)
        if coords:
            out.latitude, out.longitude = coords
    return out


def _coordinates(raw: dict[str, Any], location: dict[str, Any] | None) -> tuple[float, float]:
    lat = float_from(location, "lat", "latitude", "Lat", "Latitude") or 0.0
    lng = float_from(location, "lng", "lon", "longitude", "Longitude", "Long") or 0.0
    if lat == 0 and lng == 0:
        pair = coords_from_slice(pick_slice(location, "coordinates", "coords"))
        if pair:
            lat, lng = pair
    if lat == 0 and lng == 0:
        lat = float_from(raw, "lat", "latitude") or 0.0
        lng = float_from(raw, "lng", "lon", "longitude", "long") or 0.0
    return lat, lng


def map_asset_to_property(raw: dict[str, Any] | None, *, currency: str = DEFAULT_CURRENCY) -> Property:
    """
    Convert an upstream asset object into a Property.

    Keys are looked up under PascalCase, snake_case and camelCase spellings,
    at the top level and one level down in `details` / `location`.
    """
    if raw is None:
        return finalize_property(Property(), currency=currency)

    details = pick_map(raw, "Details", "details")
    location = pick_map(raw, "Location", "location")

    prop = Property(
        id=first_string(raw, "ID", "id"),
        currency=currency,
        type=titleize(first_string(raw, "Type", "type")),
        listing_type=titleize(first_string(raw, "Status", "status")),
        title=first_non_empty(
            first_string(details, "listing_title", "listingTitle", "title"),
            first_string(raw, "Name", "name"),
        )
        or DEFAULT_TITLE,
    )
    prop.latitude, prop.longitude = _coordinates(raw, location)

    prop.address = first_non_empty(
        first_string(raw, "Address", "address"),
        build_address(location),
        first_string(location, "raw"),
    )
    prop.description = first_non_empty(
        first_string(details, "description", "listing_description", "listingDescription", "overview", "remarks"),
        first_string(raw, "description", "Description"),
    )
    prop.contact_phone = first_non_empty(
        first_string(details, "contact_phone", "contactPhone", "phone", "owner_phone", "ownerPhone"),
        first_string(raw, "contact_phone", "contactPhone", "phone"),
    )
    prop.contact_email = first_non_empty(
        first_string(details, "contact_email", "contactEmail", "email"),
        first_string(raw, "contact_email", "contactEmail", "email"),
    )
    prop.gallery = select_photo_urls(pick_slice(raw, "photos", "Photos"))

    if details:
        prop.bedrooms = int_from(details, "bedrooms") or 0
        prop.bathrooms = int_from(details, "bathrooms") or 0
        size = float_from(details, "sizeSqft", "size_sqft")
        if size is not None:
            prop.area = int(size)
        if bool_from(details, "hasParking", "has_parking"):
            prop.parking = 1
        prop.price = extract_price(details)
        if not prop.listing_type:
            prop.listing_type = titleize(first_string(details, "listing_type", "listingType"))
        if not prop.type:
            prop.type = titleize(first_string(details, "property_type", "propertyType"))

        build_year = int_from(details, "build_year", "buildYear", "year_built", "yearBuilt")
        if build_year and build_year > 0:
            prop.build_year = build_year

        listed = first_string(
            details, "listing_date", "listingDate", "available_from", "availableFrom", "created_at", "createdAt"
        )
        if listed:
            parsed = parse_datetime(listed)
            if parsed:
                prop.listing_year = parsed.year
                prop.listing_date = parsed.strftime("%b %d, %Y")
            else:
                prop.listing_date = listed

    if prop.price == 0:
        prop.price = float_from(raw, "rent_price", "RentPrice", "monthly_rent") or 0.0

    prop.badges = dedup_strings(
        [
            prop.type,
            prop.listing_type,
            titleize(first_string(location, "city")),
            titleize(first_string(location, "neighborhood")),
            titleize(first_string(details, "furnishingStatus", "furnishing_status")),
        ]
    )
    prop.amenities = dedup_strings(extract_amenities(details) or extract_amenities(raw))

    return finalize_property(prop, currency=currency)
