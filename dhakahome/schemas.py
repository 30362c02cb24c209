# dhakahome/schemas.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class PropertyOut(_CamelModel):
    id: str
    title: str
    address: str
    description: str = ""
    price: float = 0.0
    currency: str = ""
    type: str = ""
    listing_type: str = ""
    build_year: int = 0
    images: list[str] = []
    badges: list[str] = []
    amenities: list[str] = []
    listing_year: int = 0
    listing_date: str = ""
    bedrooms: int = 0
    bathrooms: int = 0
    area: int = 0
    parking: int = 0
    gallery: list[str] = []
    has_images: bool = False
    contact_phone: str = ""
    contact_email: str = ""
    latitude: float = 0.0
    longitude: float = 0.0


class PropertyListOut(_CamelModel):
    items: list[PropertyOut]
    page: int
    pages: int
    total: int


class NeighborhoodStatOut(_CamelModel):
    neighborhood: str
    city: str
    count: int


class DocumentOut(_CamelModel):
    id: str
    label: str
    is_required: bool = False


class PropertyDetailOut(_CamelModel):
    property: PropertyOut
    similar: list[PropertyOut]
    documents: list[DocumentOut]


class StringListOut(BaseModel):
    data: list[str]


class LeadAccepted(BaseModel):
    status: str = "ok"
