"""Pydantic models for API request/response serialization."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class ValidationRequest(BaseModel):
    """A schema plus the candidate to check. Omitting ``body`` means absent."""
    shape: dict[str, Any]
    body: Any = None
    partial: bool = False


class FieldErrorDetail(BaseModel):
    path: str
    message: str
    kind: str


class ValidationResponse(BaseModel):
    valid: bool
    errors: list[str] = Field(default_factory=list)
    details: list[FieldErrorDetail] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Query projection
# ---------------------------------------------------------------------------

class ProjectionRequest(BaseModel):
    fn: str = Field(..., min_length=1)
    params: dict[str, Any] | None = None
    shape: dict[str, Any]


class ProjectionResponse(BaseModel):
    query: str


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------

class HealthResponse(BaseModel):
    status: str = "healthy"
    environment: str
    version: str
