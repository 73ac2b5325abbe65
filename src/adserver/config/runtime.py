"""Pydantic-based runtime settings for the ad server.

Loads from environment variables (with optional .env file).
Invalid values fail fast on first access.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings


class RuntimeSettings(BaseSettings):
    """All configuration for the ad server, validated at startup."""

    model_config = {"env_prefix": "", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # --- Impression tracking ---
    base_url: str = Field(
        default="http://localhost:8000",
        validation_alias=AliasChoices("BASE_URL", "IMPRESSION_BASE_URL"),
        description="Base URL that impression tokens are appended to",
    )

    # --- HTTP server ---
    host: str = Field(default="0.0.0.0", description="Bind address for the HTTP server")
    port: int = Field(default=8000, description="Bind port for the HTTP server")

    # --- Store ---
    campaign_id_offset: int = Field(
        default=1000,
        ge=0,
        description="Campaign ids are allocated starting at offset + 1",
    )
    token_mint_attempts: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Attempts to mint a fresh impression token before giving up",
    )

    # --- Logging ---
    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("port")
    @classmethod
    def _port_range(cls, v: int) -> int:
        if not (1 <= v <= 65535):
            raise ValueError(f"port must be 1-65535, got {v}")
        return v

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


@lru_cache(maxsize=1)
def get_settings() -> RuntimeSettings:
    """Return the singleton RuntimeSettings (cached after first call)."""
    return RuntimeSettings()
