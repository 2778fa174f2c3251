"""Pass-through endpoints for Zoom OAuth and ZAK tokens."""
from __future__ import annotations

import logging
from typing import Any, Awaitable

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..core.config import Settings, get_settings
from ..schemas.zoom import UpstreamErrorResponse, ZakTokenRequest
from ..services import zoom_api

logger = logging.getLogger(__name__)

router = APIRouter(tags=["zoom"])

_UPSTREAM_FAILURE_RESPONSES: dict[int | str, dict[str, Any]] = {
    "4XX": {"model": UpstreamErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": UpstreamErrorResponse},
}


async def _relay(call: Awaitable[dict[str, Any]], action: str) -> Any:
    """Await an upstream call and map its failures onto HTTP responses."""

    try:
        return await call
    except zoom_api.UpstreamError as exc:
        body = UpstreamErrorResponse(error=exc.message, details=exc.details)
        return JSONResponse(status_code=exc.status_code, content=body.model_dump())
    except Exception as exc:  # noqa: BLE001 - transport and decode failures share one path
        logger.exception("Error fetching %s: %s", action, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal Server Error"},
        )


@router.get("/get-access-token", responses=_UPSTREAM_FAILURE_RESPONSES)
async def get_access_token(settings: Settings = Depends(get_settings)) -> Any:
    """Return a server-to-server OAuth token for the configured account."""

    return await _relay(zoom_api.fetch_access_token(settings), "access token")


@router.post("/zakToken", responses=_UPSTREAM_FAILURE_RESPONSES)
async def get_zak_token(
    payload: ZakTokenRequest | None = None,
    settings: Settings = Depends(get_settings),
) -> Any:
    """Return the ZAK for the user owning ``accesstoken``."""

    access_token = payload.accesstoken if payload is not None else ""
    return await _relay(zoom_api.fetch_zak_token(access_token, settings), "ZAK token")
