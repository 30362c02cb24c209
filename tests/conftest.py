# tests/conftest.py
from typing import Any, Callable

import httpx
import pytest

from dhakahome.adapters.clients.property_api import PropertyApiClient
from dhakahome.adapters.mock.engine import MockPropertyEngine
from dhakahome.service_layer.listings import ListingService

BASE_URL = "http://upstream.test/api/v1"

Handler = Callable[[httpx.Request], httpx.Response]


class Recorder:
    """MockTransport handler that remembers every request it served."""

    def __init__(self, handler: Handler) -> None:
        self.handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


def _sample_asset(**overrides: Any) -> dict[str, Any]:
    asset = {
        "ID": "asset-1",
        "Name": "Lake View Flat",
        "Type": "residential",
        "Status": "listed_rental",
        "Location": {"address": "Road 8/A", "neighborhood": "Dhanmondi", "city": "Dhaka"},
        "Details": {
            "bedrooms": 3,
            "bathrooms": 2,
            "sizeSqft": 1450.6,
            "hasParking": True,
            "pricing": {"monthly_rent": 55000},
            "furnishingStatus": "semi_furnished",
        },
        "photos": [
            {"FileURL": "https://cdn.test/b.jpg"},
            {"FileURL": "https://cdn.test/a.jpg", "IsCover": True},
        ],
    }
    asset.update(overrides)
    return asset


@pytest.fixture
def sample_asset():
    return _sample_asset


@pytest.fixture
async def make_http():
    clients: list[httpx.AsyncClient] = []

    def _make(handler: Handler) -> httpx.AsyncClient:
        c = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(c)
        return c

    yield _make

    for c in clients:
        await c.aclose()


@pytest.fixture
def make_service(make_http):
    def _make(handler: Handler, *, mock_enabled: bool = False, **client_kw: Any) -> ListingService:
        client = PropertyApiClient(base_url=BASE_URL, http=make_http(handler), **client_kw)
        return ListingService(client=client, mock=MockPropertyEngine(), mock_enabled=mock_enabled)

    return _make


@pytest.fixture
def record():
    """record(handler) -> Recorder, a MockTransport handler that keeps the requests it served."""
    return Recorder
