# dhakahome/domain/types.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ListingStatus(str, Enum):
    listed_rental = "listed_rental"
    listed_sale = "listed_sale"


DEFAULT_STATUS_FILTER: tuple[str, ...] = (ListingStatus.listed_rental.value, ListingStatus.listed_sale.value)


@dataclass
class Property:
    id: str = ""
    title: str = ""
    address: str = ""
    description: str = ""
    price: float = 0.0
    currency: str = ""
    type: str = ""
    listing_type: str = ""
    build_year: int = 0
    images: list[str] = field(default_factory=list)
    badges: list[str] = field(default_factory=list)
    amenities: list[str] = field(default_factory=list)
    listing_year: int = 0
    listing_date: str = ""
    bedrooms: int = 0
    bathrooms: int = 0
    area: int = 0  # square feet
    parking: int = 0
    gallery: list[str] = field(default_factory=list)
    has_images: bool = False
    contact_phone: str = ""
    contact_email: str = ""
    latitude: float = 0.0
    longitude: float = 0.0


@dataclass(frozen=True)
class PropertyList:
    items: list[Property]
    page: int
    pages: int
    total: int


@dataclass(frozen=True)
class NeighborhoodStat:
    neighborhood: str
    city: str
    count: int


@dataclass(frozen=True)
class Document:
    id: str
    label: str
    is_required: bool = False


@dataclass(frozen=True)
class LeadRequest:
    name: str
    email: str
    phone: str
    property_id: str = ""
    message: str = ""
    contact_email: str = ""
    utm_source: str = ""
    utm_campaign: str = ""
    captcha_token: str = ""

    def to_payload(self) -> dict[str, str]:
        """Upstream wire shape: camelCase, optional fields omitted when blank."""
        payload = {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "propertyId": self.property_id,
        }
        optional = {
            "message": self.message,
            "contactEmail": self.contact_email,
            "utmSource": self.utm_source,
            "utmCampaign": self.utm_campaign,
            "captchaToken": self.captcha_token,
        }
        payload.update({k: v for k, v in optional.items() if v})
        return payload
