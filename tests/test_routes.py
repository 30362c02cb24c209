import json

import httpx
import pytest
from fastapi.testclient import TestClient

from dhakahome.adapters.clients.property_api import PropertyApiClient
from dhakahome.config import Settings, settings
from dhakahome.entrypoints.fastapi_app import build_listing_service, create_app
from dhakahome.service_layer.listings import ListingService


def _app(handler, cfg: Settings | None = None) -> TestClient:
    # MockTransport holds no connections, so the client needs no closing here.
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = PropertyApiClient(base_url="http://upstream.test/api/v1", http=http)
    return TestClient(create_app(service=ListingService(client=client), cfg=cfg))


@pytest.fixture
def api():
    """App whose upstream is down for reads and accepts leads."""
    def handler(request):
        if request.url.path.endswith("/leads"):
            return httpx.Response(201, json={"ok": True})
        return httpx.Response(500)

    return _app(handler)


def test_health(api):
    assert api.get("/health").json() == {"status": "ok"}
    assert api.get("/healthz").json() == {"status": "ok"}


def test_property_search_uses_camel_case(api):
    resp = api.get("/api/properties", params={"type": "commercial", "limit": "2"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 4
    assert body["pages"] == 2
    assert len(body["items"]) == 2
    item = body["items"][0]
    assert {"listingType", "hasImages", "buildYear", "contactPhone"} <= set(item)


def test_repeated_query_params_first_wins(api):
    resp = api.get("/api/properties?type=commercial&type=residential&limit=50")
    assert resp.json()["total"] == 4


def test_property_detail(api):
    resp = api.get("/api/properties/mock-res-gulshan-02")
    assert resp.status_code == 200
    body = resp.json()
    assert body["property"]["id"] == "mock-res-gulshan-02"
    assert body["similar"]
    assert all(p["id"] != "mock-res-gulshan-02" for p in body["similar"])
    assert {"id", "label", "isRequired"} <= set(body["documents"][0])


def test_property_detail_404(api):
    assert api.get("/api/properties/does-not-exist").status_code == 404


def test_cities_and_neighborhoods(api):
    assert "Dhaka" in api.get("/api/search/cities").json()["data"]
    assert "Banani" in api.get("/api/search/neighborhoods", params={"city": "Dhaka"}).json()["data"]
    assert api.get("/api/search/neighborhoods").status_code == 400


def test_top_neighborhoods(api):
    rows = api.get("/api/neighborhoods/top", params={"limit": 2}).json()
    assert [r["neighborhood"] for r in rows] == ["Uttara", "Gulshan"]
    assert rows[0]["city"] == "Dhaka"


def test_lead_json_ok(api):
    resp = api.post(
        "/lead",
        json={"name": "Rahim", "email": "r@example.com", "phone": "01712345678", "message": "Hello", "propertyId": "p1"},
    )
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_lead_form_validation_errors(api):
    resp = api.post("/lead", data={"name": "R", "email": "r@example.com", "phone": "017", "message": ""})
    assert resp.status_code == 400
    assert set(resp.json()["errors"]) == {"name", "phone", "message"}


def test_lead_upstream_failure_is_502():
    api = _app(lambda r: httpx.Response(500))
    resp = api.post(
        "/lead",
        json={"name": "Rahim", "email": "r@example.com", "phone": "01712345678", "message": "Hello"},
    )
    assert resp.status_code == 502


def test_debug_routes_require_key(api, monkeypatch):
    monkeypatch.setattr(settings, "DEBUG_API_KEY", "k3y")
    assert api.get("/debug/config").status_code == 401

    cfg = api.get("/debug/config", headers={"X-API-Key": "k3y"}).json()
    assert cfg["DEBUG_API_KEY_SET"] is True

    api.get("/api/search/cities")
    trace = api.get("/debug/upstream", headers={"X-API-Key": "k3y"}).json()["last_request"]
    assert trace["status"] == 500
    assert "/api/v1/assets/cities" in trace["url"]


def _accepting_leads(request):
    if request.url.path.endswith("/leads"):
        return httpx.Response(201, json={})
    return httpx.Response(500)


def test_explicit_settings_guard_debug_routes():
    api = _app(_accepting_leads, cfg=Settings(DEBUG_API_KEY="app-key", ENV="test"))

    assert api.get("/debug/config").status_code == 401
    assert api.get("/debug/config", headers={"X-API-Key": "wrong"}).status_code == 401

    cfg = api.get("/debug/config", headers={"X-API-Key": "app-key"}).json()
    assert cfg["ENV"] == "test"
    assert api.get("/debug/upstream", headers={"X-API-Key": "app-key"}).status_code == 200


def test_explicit_settings_drive_lead_contact_email():
    sent = []

    def handler(request):
        sent.append(json.loads(request.content))
        return httpx.Response(201, json={})

    api = _app(handler, cfg=Settings(ENQUIRY_EMAIL="sales@example.org"))
    resp = api.post(
        "/lead",
        json={"name": "Rahim", "email": "r@example.com", "phone": "01712345678", "message": "Hello"},
    )
    assert resp.status_code == 200
    assert sent[0]["contactEmail"] == "sales@example.org"


def test_explicit_settings_drive_top_areas_city():
    api = _app(_accepting_leads, cfg=Settings(TOP_AREAS_CITY="Rajshahi"))
    rows = api.get("/api/neighborhoods/top").json()
    assert rows
    assert all(r["city"] == "Rajshahi" for r in rows)


async def test_token_cache_only_wired_with_credentials():
    async with httpx.AsyncClient(transport=httpx.MockTransport(_accepting_leads)) as http:
        bare = build_listing_service(Settings(API_CLIENT_ID=None, API_CLIENT_SECRET=None), http)
        assert bare.client.token_cache is None

        oauth = build_listing_service(Settings(API_CLIENT_ID="cid", API_CLIENT_SECRET="secret"), http)
        assert oauth.client.token_cache is not None
        assert oauth.client.token_cache.scope == "assets.read"
