"""Data contracts for the SDK signature endpoint."""
from __future__ import annotations

from pydantic import BaseModel, Field


class SignatureResponse(BaseModel):
    signature: str = Field(..., description="HS256 JWT for the Meeting SDK join call")


class ValidationIssueOut(BaseModel):
    field: str | None = Field(default=None, description="Offending field, null for cross-field rules")
    message: str
    error_code: str


class SignatureErrorResponse(BaseModel):
    errors: list[ValidationIssueOut]
