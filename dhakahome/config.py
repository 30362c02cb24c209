# dhakahome/config.py
from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def derive_token_url(base_url: str) -> str:
    """Token endpoint lives at the origin of the API base: scheme://host/oauth/token."""
    try:
        parts = urlsplit(base_url)
    except ValueError:
        return "http://localhost:3000/oauth/token"
    if not parts.scheme or not parts.netloc:
        return "http://localhost:3000/oauth/token"
    return urlunsplit((parts.scheme, parts.netloc, "/oauth/token", "", ""))


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # --- Runtime ---
    ENV: str = "dev"  # dev|staging|prod
    LOG_LEVEL: str = "INFO"

    # --- Upstream property API ---
    API_BASE_URL: str = "http://localhost:3000/api/v1"
    HTTP_TIMEOUT_S: float = 10.0

    # Static token wins over OAuth when set
    API_AUTH_TOKEN: str | None = None

    # --- OAuth client credentials ---
    API_CLIENT_ID: str | None = None
    API_CLIENT_SECRET: str | None = None
    API_TOKEN_SCOPE: str = "assets.read"
    API_AUTH_URL: str | None = None

    # --- Mock mode: searches/reads never touch the network ---
    MOCK_ENABLED: bool = False

    # --- Listing defaults ---
    DEFAULT_PAGE_SIZE: int = 9
    CURRENCY_SYMBOL: str = "৳"
    TOP_AREAS_CITY: str = "Dhaka"
    ENQUIRY_EMAIL: str = "enquiry@dhakahome.com"

    # Send: X-API-Key: <key> (debug routes only)
    DEBUG_API_KEY: str | None = None

    @field_validator("MOCK_ENABLED", mode="before")
    @classmethod
    def _parse_flag(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower() in ("true", "1", "yes")
        return v

    @field_validator("API_AUTH_TOKEN", "API_CLIENT_ID", "API_CLIENT_SECRET", "API_AUTH_URL", mode="before")
    @classmethod
    def _blank_is_none(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v.strip() if isinstance(v, str) else v

    @field_validator("API_TOKEN_SCOPE", mode="before")
    @classmethod
    def _default_scope(cls, v: object) -> object:
        if v is None or (isinstance(v, str) and not v.strip()):
            return "assets.read"
        return v.strip() if isinstance(v, str) else v

    @property
    def token_url(self) -> str:
        return self.API_AUTH_URL or derive_token_url(self.API_BASE_URL)


settings = Settings()
