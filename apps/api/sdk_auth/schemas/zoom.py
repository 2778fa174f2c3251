"""Data contracts for the Zoom proxy endpoints."""
from __future__ import annotations

import json

from pydantic import BaseModel, Field, field_validator


class ZakTokenRequest(BaseModel):
    accesstoken: str = Field(default="", description="OAuth access token of the user starting the meeting")

    @field_validator("accesstoken", mode="before")
    @classmethod
    def _stringify(cls, value: object) -> object:
        """Forward non-string tokens as their JSON text and let Zoom reject them."""

        if isinstance(value, str):
            return value
        return json.dumps(value)


class UpstreamErrorResponse(BaseModel):
    error: str
    details: str | None = None
