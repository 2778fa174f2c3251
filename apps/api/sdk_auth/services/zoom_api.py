"""Thin client for the two Zoom REST calls the SDK frontend needs."""
from __future__ import annotations

import logging
from typing import Any

import httpx

from ..core.config import Settings

logger = logging.getLogger(__name__)


class UpstreamError(RuntimeError):
    """Raised when Zoom answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int, details: str) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


def _client() -> httpx.AsyncClient:
    """Open a client for one outbound call. Library default timeouts apply."""

    return httpx.AsyncClient()


async def fetch_access_token(settings: Settings) -> dict[str, Any]:
    """Exchange the account credentials for a server-to-server OAuth token."""

    form = {
        "grant_type": "account_credentials",
        "account_id": settings.zoom_meeting_account_id,
        "client_id": settings.zoom_meeting_host_key,
        "client_secret": settings.zoom_meeting_host_secret,
    }
    async with _client() as client:
        response = await client.post(
            settings.zoom_oauth_token_url,
            data=form,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )

    if not response.is_success:
        logger.warning("Zoom OAuth token request failed with status %s", response.status_code)
        raise UpstreamError("Failed to fetch access token", response.status_code, response.text)

    return response.json()


async def fetch_zak_token(access_token: str, settings: Settings) -> dict[str, Any]:
    """Fetch the caller's ZAK (start token) using their OAuth access token."""

    url = f"{settings.zoom_api_base_url.rstrip('/')}/users/me/token"
    async with _client() as client:
        response = await client.get(
            url,
            params={"type": "zak"},
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {access_token}",
            },
        )

    if not response.is_success:
        logger.warning("Zoom ZAK token request failed with status %s", response.status_code)
        raise UpstreamError("Failed to fetch Zak token", response.status_code, response.text)

    return response.json()
