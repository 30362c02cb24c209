import json

import httpx
import pytest

from dhakahome.adapters.clients.property_api import PropertyApiClient
from dhakahome.adapters.clients.token_cache import TokenCache
from dhakahome.domain.errors import FallbackReason, LeadSubmissionError, UpstreamError
from dhakahome.domain.search_params import build_search_params
from dhakahome.domain.types import LeadRequest

BASE_URL = "http://upstream.test/api/v1"


def _client(make_http, handler, **kw):
    return PropertyApiClient(base_url=BASE_URL, http=make_http(handler), **kw)


async def test_search_sends_normalized_query(make_http, record, sample_asset):
    rec = record(lambda r: httpx.Response(200, json={"data": [sample_asset()], "total": 11, "page": 2, "limit": 5}))
    client = _client(make_http, rec, static_token="static-abc")

    result = await client.search_assets(build_search_params({"area": "Dhanmondi", "page": "2", "limit": "5"}))

    req = rec.requests[0]
    assert req.url.path == "/api/v1/assets"
    assert list(req.url.params.multi_items()) == [
        ("status", "listed_rental,listed_sale"),
        ("neighborhood", "Dhanmondi"),
        ("page", "2"),
        ("limit", "5"),
    ]
    assert req.headers["authorization"] == "Bearer static-abc"
    assert [p.id for p in result.items] == ["asset-1"]
    assert (result.page, result.pages, result.total) == (2, 3, 11)


async def test_search_without_pagination_fields_falls_back(make_http, sample_asset):
    assets = [sample_asset(ID=f"a{i}") for i in range(3)] + [{"Name": "no id"}]
    client = _client(make_http, lambda r: httpx.Response(200, json={"data": assets}))

    result = await client.search_assets(build_search_params({"page": "7"}))
    assert len(result.items) == 3
    assert (result.page, result.pages, result.total) == (1, 1, 3)


@pytest.mark.parametrize(
    "response, reason",
    [
        (httpx.Response(500, text="boom"), FallbackReason.status),
        (httpx.Response(404, json={"error": "nope"}), FallbackReason.status),
        (httpx.Response(200, text="not json"), FallbackReason.decode),
        (httpx.Response(200, json=["a", "b"]), FallbackReason.decode),
        (httpx.Response(200, json={"data": "nope"}), FallbackReason.decode),
    ],
)
async def test_search_failures_are_classified(make_http, response, reason):
    client = _client(make_http, lambda r: response)
    with pytest.raises(UpstreamError) as exc:
        await client.search_assets(build_search_params({}))
    assert exc.value.reason is reason


async def test_network_error_is_classified(make_http):
    def boom(request):
        raise httpx.ConnectTimeout("timed out", request=request)

    client = _client(make_http, boom)
    with pytest.raises(UpstreamError) as exc:
        await client.get_cities()
    assert exc.value.reason is FallbackReason.network
    assert client.last_request.error


async def test_oauth_token_used_for_reads(make_http, record):
    def handler(request):
        if request.url.path == "/oauth/token":
            return httpx.Response(200, json={"access_token": "oauth-1", "expires_in": 900})
        return httpx.Response(200, json={"data": ["Dhaka", "Sylhet", "Dhaka"]})

    rec = record(handler)
    http = make_http(rec)
    cache = TokenCache(token_url="http://upstream.test/oauth/token", client_id="c", client_secret="s", http=http)
    client = PropertyApiClient(base_url=BASE_URL, http=http, token_cache=cache)

    assert await client.get_cities() == ["Dhaka", "Sylhet"]
    assert await client.get_cities() == ["Dhaka", "Sylhet"]

    assert rec.paths() == ["/oauth/token", "/api/v1/assets/cities", "/api/v1/assets/cities"]
    assert rec.requests[1].headers["authorization"] == "Bearer oauth-1"


async def test_token_failure_sends_unauthenticated_request(make_http, record):
    def handler(request):
        if request.url.path == "/oauth/token":
            return httpx.Response(503)
        assert "authorization" not in request.headers
        return httpx.Response(401)

    http = make_http(record(handler))
    cache = TokenCache(token_url="http://upstream.test/oauth/token", client_id="c", client_secret="s", http=http)
    client = PropertyApiClient(base_url=BASE_URL, http=http, token_cache=cache)

    with pytest.raises(UpstreamError) as exc:
        await client.get_cities()
    assert exc.value.status_code == 401


async def test_empty_lists_count_as_decode_failures(make_http):
    client = _client(make_http, lambda r: httpx.Response(200, json={"data": []}))
    with pytest.raises(UpstreamError) as exc:
        await client.get_neighborhoods("Dhaka")
    assert exc.value.reason is FallbackReason.decode


async def test_get_asset_and_documents(make_http, record, sample_asset):
    def handler(request):
        if request.url.path.endswith("/documents"):
            return httpx.Response(200, json={"data": [{"id": "nid", "label": "NID", "isRequired": True}, {"label": ""}]})
        return httpx.Response(200, json=sample_asset(ID=""))

    rec = record(handler)
    client = _client(make_http, rec)

    prop = await client.get_asset("x y")
    assert prop.id == "x y"
    assert rec.requests[0].url.raw_path == b"/api/v1/assets/x%20y"

    docs = await client.get_required_documents("residential")
    assert [(d.id, d.label, d.is_required) for d in docs] == [("nid", "NID", True)]


async def test_top_neighborhoods(make_http, record):
    rows = [{"neighborhood": "Gulshan", "count": 4}, {"neighborhood": "", "count": 9}, {"neighborhood": "Banani", "count": "3"}]
    rec = record(lambda r: httpx.Response(200, json=rows))
    client = _client(make_http, rec)

    stats = await client.get_top_neighborhoods(5, "Dhaka")
    assert [(s.neighborhood, s.city, s.count) for s in stats] == [("Gulshan", "Dhaka", 4), ("Banani", "Dhaka", 3)]
    assert rec.requests[0].url.params["limit"] == "5"


async def test_submit_lead_posts_camel_case(make_http, record):
    rec = record(lambda r: httpx.Response(201, json={"id": "lead-1"}))
    client = _client(make_http, rec)

    await client.submit_lead(
        LeadRequest(name="Rahim", email="r@example.com", phone="+8801712345678", property_id="p1", message="Hi")
    )

    req = rec.requests[0]
    assert req.method == "POST"
    assert req.url.path == "/api/v1/leads"
    assert json.loads(req.content) == {
        "name": "Rahim",
        "email": "r@example.com",
        "phone": "+8801712345678",
        "propertyId": "p1",
        "message": "Hi",
    }


async def test_submit_lead_errors(make_http):
    lead = LeadRequest(name="Rahim", email="r@example.com", phone="+8801712345678")

    client = _client(make_http, lambda r: httpx.Response(302))
    with pytest.raises(LeadSubmissionError) as exc:
        await client.submit_lead(lead)
    assert exc.value.status_code == 302

    def boom(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(LeadSubmissionError):
        await _client(make_http, boom).submit_lead(lead)
