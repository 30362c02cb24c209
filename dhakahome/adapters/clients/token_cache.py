# dhakahome/adapters/clients/token_cache.py
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable

import httpx

from ...domain.errors import TokenError

log = logging.getLogger(__name__)

DEFAULT_LIFETIME = timedelta(minutes=15)
MAX_REFRESH_BUFFER = timedelta(minutes=2)
MIN_REMAINING = timedelta(minutes=1)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def refresh_buffer(lifetime: timedelta) -> timedelta:
    """min(2 minutes, 10% of the issued lifetime)."""
    return min(MAX_REFRESH_BUFFER, lifetime / 10)


@dataclass
class _Token:
    access_token: str
    expires_at: datetime


class TokenCache:
    """
    Single-slot OAuth client-credentials token cache.

    One instance per process, shared by every request. The lock is held for
    the check-and-maybe-refresh only, so once a token is cached concurrent
    callers just read it.
    """

    def __init__(
        self,
        *,
        token_url: str,
        client_id: str | None,
        client_secret: str | None,
        scope: str | None = None,
        http: httpx.AsyncClient,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.token_url = token_url
        self.client_id = client_id
        self.client_secret = client_secret
        self.scope = scope
        self._http = http
        self._clock = clock
        self._lock = asyncio.Lock()
        self._token: _Token | None = None

    @property
    def configured(self) -> bool:
        return bool(self.client_id and self.client_secret and self.token_url)

    async def get_token(self) -> str:
        if not (self.client_id and self.client_secret):
            raise TokenError("oauth credentials missing")
        if not self.token_url:
            raise TokenError("oauth token URL missing")

        async with self._lock:
            now = self._clock()
            if self._token and self._token.expires_at - now > MIN_REMAINING:
                log.debug("oauth: cached token (expires in %s)", self._token.expires_at - now)
                return self._token.access_token

            self._token = await self._fetch(now)
            return self._token.access_token

    async def _fetch(self, now: datetime) -> _Token:
        body = {
            "grant_type": "client_credentials",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
        }
        if self.scope:
            body["scope"] = self.scope

        log.info("oauth: requesting token from %s", self.token_url)
        try:
            resp = await self._http.post(self.token_url, json=body, headers={"accept": "application/json"})
        except httpx.HTTPError as e:
            raise TokenError(f"oauth token: {e!r}") from e

        if resp.status_code != 200:
            detail = resp.text[:2048].strip()
            log.warning("oauth: token request failed: %s %s", resp.status_code, detail)
            raise TokenError(f"oauth token: {resp.status_code} {detail}".strip())

        try:
            payload = resp.json()
        except ValueError as e:
            raise TokenError(f"oauth token: malformed response: {e}") from e
        if not isinstance(payload, dict):
            raise TokenError("oauth token: malformed response")

        token = str(payload.get("access_token") or "").strip()
        if not token:
            raise TokenError("oauth token: empty access_token")

        try:
            expires_in = int(payload.get("expires_in") or 0)
        except (TypeError, ValueError):
            expires_in = 0
        lifetime = timedelta(seconds=expires_in) if expires_in > 0 else DEFAULT_LIFETIME

        expires_at = now + lifetime - refresh_buffer(lifetime)
        log.info("oauth: token obtained (lifetime %s, refresh at %s)", lifetime, expires_at.isoformat())
        return _Token(access_token=token, expires_at=expires_at)
