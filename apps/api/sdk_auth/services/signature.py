"""Meeting SDK signature issuance.

The signature is an HS256 JWT the web/native SDK presents when joining a
meeting. It is signed with the host credential and never stored.
"""
from __future__ import annotations

import logging
import time
from typing import Any

import jwt

from ..core.config import Settings

ALGORITHM = "HS256"
DEFAULT_TTL_SECONDS = 60 * 60 * 2

logger = logging.getLogger(__name__)


class SignatureConfigurationError(RuntimeError):
    """Raised when the host key or secret is not configured."""


def build_payload(
    meeting_number: Any,
    role: Any,
    expiration_seconds: int | float | None,
    *,
    sdk_key: str,
    issued_at: int,
    default_ttl: int = DEFAULT_TTL_SECONDS,
) -> dict[str, Any]:
    """Assemble the claim set for one signature."""

    ttl = int(expiration_seconds) if expiration_seconds else default_ttl
    expires_at = issued_at + ttl
    return {
        "appKey": sdk_key,
        "sdkKey": sdk_key,
        "mn": meeting_number,
        "role": role,
        "iat": issued_at,
        "exp": expires_at,
        "tokenExp": expires_at,
    }


def generate_signature(
    meeting_number: Any,
    role: Any,
    expiration_seconds: int | float | None = None,
    *,
    sdk_key: str,
    sdk_secret: str,
    now: float | None = None,
    default_ttl: int = DEFAULT_TTL_SECONDS,
) -> str:
    """Return a compact HS256 token for the given meeting and role."""

    if not sdk_key or not sdk_secret:
        raise SignatureConfigurationError("ZOOM_MEETING_HOST_KEY and ZOOM_MEETING_HOST_SECRET must be set")

    issued_at = int(now if now is not None else time.time())
    payload = build_payload(
        meeting_number,
        role,
        expiration_seconds,
        sdk_key=sdk_key,
        issued_at=issued_at,
        default_ttl=default_ttl,
    )
    token = jwt.encode(payload, sdk_secret, algorithm=ALGORITHM, headers={"typ": "JWT"})
    logger.info("Issued SDK signature for meeting=%s role=%s exp=%s", meeting_number, role, payload["exp"])
    return token


def signature_for_settings(
    meeting_number: Any,
    role: Any,
    expiration_seconds: int | float | None,
    settings: Settings,
) -> str:
    """Sign with the host credential held in ``settings``."""

    return generate_signature(
        meeting_number,
        role,
        expiration_seconds,
        sdk_key=settings.zoom_meeting_host_key,
        sdk_secret=settings.zoom_meeting_host_secret,
        default_ttl=settings.default_token_ttl_seconds,
    )
