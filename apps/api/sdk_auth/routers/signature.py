"""Meeting SDK signature endpoint."""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from ..core.config import Settings, get_settings
from ..schemas.signature import SignatureErrorResponse, SignatureResponse, ValidationIssueOut
from ..services import signature as signature_service
from ..services.coercion import coerce_request_body
from ..services.validation import (
    ValidationRule,
    in_number_array,
    is_between,
    is_required_all_or_none,
    validate_request,
)

logger = logging.getLogger(__name__)

router = APIRouter()

PROPERTY_RULES: dict[str, ValidationRule] = {
    "role": in_number_array([0, 1]),
    "expirationSeconds": is_between(1800, 172800),
}

SCHEMA_RULES: list[ValidationRule] = [is_required_all_or_none(["meetingNumber", "role"])]


@router.post(
    "/",
    response_model=SignatureResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": SignatureErrorResponse}},
    tags=["sdk"],
)
async def create_signature(
    payload: dict[str, Any] | None = Body(default=None),
    settings: Settings = Depends(get_settings),
) -> SignatureResponse | JSONResponse:
    """Validate the join parameters and return a signed SDK token."""

    body = coerce_request_body(payload or {})
    issues = validate_request(body, PROPERTY_RULES, SCHEMA_RULES)

    if issues:
        logger.info("Rejected signature request: %s", [issue.error_code for issue in issues])
        content = SignatureErrorResponse(errors=[ValidationIssueOut(**issue.as_dict()) for issue in issues])
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content.model_dump())

    try:
        token = signature_service.signature_for_settings(
            body.get("meetingNumber"),
            body.get("role"),
            body.get("expirationSeconds"),
            settings,
        )
    except Exception as exc:  # noqa: BLE001 - single generic failure path
        logger.exception("Failed to sign SDK token: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal Server Error"},
        )

    return SignatureResponse(signature=token)
