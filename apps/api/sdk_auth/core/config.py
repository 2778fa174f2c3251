"""Application configuration for the Meeting SDK auth endpoint."""
from __future__ import annotations

import json
from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    app_env: str = Field(default="development")
    port: int = Field(default=4000)
    log_level: str = Field(default="INFO")
    cors_allow_origins: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["*"])

    # Host credential: one key/secret pair signs SDK tokens and authenticates the OAuth exchange.
    zoom_meeting_account_id: str = Field(default="")
    zoom_meeting_host_key: str = Field(default="")
    zoom_meeting_host_secret: str = Field(default="")

    zoom_oauth_token_url: str = Field(default="https://zoom.us/oauth/token")
    zoom_api_base_url: str = Field(default="https://api.zoom.us/v2")

    default_token_ttl_seconds: int = Field(default=7200, ge=1)

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: object) -> object:
        """Allow comma-separated or JSON list env values for CORS origins."""

        if isinstance(value, str):
            if value.strip().startswith("["):
                return json.loads(value)
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


settings = get_settings()
