"""Unified configuration via Pydantic Settings."""

from __future__ import annotations

import enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_INSECURE_SECRET = "secret"


class AuthMode(str, enum.Enum):
    INSECURE = "insecure"  # unauthenticated requests continue as the placeholder
    STRICT = "strict"  # unauthenticated requests are rejected with 401


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="AUTH_", env_file=".env", extra="ignore")

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    auth_log_level: str | None = None  # AUTH_AUTH_LOG_LEVEL, authenticator logger only

    # Mode
    mode: AuthMode = AuthMode.STRICT

    # Token verification
    jwt_secret: str | None = None
    jwt_algorithms: list[str] = Field(default_factory=lambda: ["HS256"])
    user_id_claim: str = "userId"
    leeway_seconds: int = 0
    audience: str | None = None
    issuer: str | None = None

    # Fallback identity
    placeholder_principal: str = Field(default="demo-user", min_length=1)

    # Paths that bypass strict-mode rejection
    public_paths: list[str] = Field(default_factory=lambda: ["/health", "/version", "/metrics"])

    # Development token minting
    token_ttl_seconds: int = 7 * 24 * 3600


@lru_cache
def get_settings() -> Settings:
    return Settings()
