# dhakahome/adapters/clients/http_resilience.py
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable

import httpx

from ...domain.errors import FallbackReason, UpstreamError


@dataclass
class RequestTrace:
    """Last upstream call, kept for the debug endpoint."""

    method: str
    url: str
    duration_ms: int = 0
    status: int | None = None
    error: str | None = None


async def upstream_request(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    headers: dict[str, str] | None = None,
    params: Any | None = None,
    json: Any | None = None,
    on_trace: Callable[[RequestTrace], None] | None = None,
) -> httpx.Response:
    """
    Single attempt, no retries. Transport failures (including the client
    timeout) surface as UpstreamError(network); the response is returned as-is.
    """
    trace = RequestTrace(method=method, url=url)
    started = time.monotonic()
    try:
        resp = await client.request(method, url, headers=headers, params=params, json=json)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        trace.error = repr(e)
        raise UpstreamError(FallbackReason.network, f"{method} {url}: {e!r}") from e
    finally:
        trace.duration_ms = int((time.monotonic() - started) * 1000)
        if on_trace is not None:
            on_trace(trace)

    trace.url = str(resp.request.url)
    trace.status = resp.status_code
    return resp


def require_status(resp: httpx.Response, *expected: int) -> None:
    expected = expected or (200,)
    if resp.status_code not in expected:
        raise UpstreamError(
            FallbackReason.status,
            f"{resp.request.method} {resp.request.url}: {resp.status_code} {resp.reason_phrase}".strip(),
            status_code=resp.status_code,
        )


def decode_json(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError as e:
        raise UpstreamError(FallbackReason.decode, f"{resp.request.url}: {e}") from e


async def get_json(
    client: httpx.AsyncClient,
    url: str,
    *,
    headers: dict[str, str] | None = None,
    params: Any | None = None,
    on_trace: Callable[[RequestTrace], None] | None = None,
) -> Any:
    resp = await upstream_request(client, "GET", url, headers=headers, params=params, on_trace=on_trace)
    require_status(resp, 200)
    return decode_json(resp)
