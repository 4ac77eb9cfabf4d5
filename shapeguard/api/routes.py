"""
FastAPI routes – validation and query projection over HTTP.

Schemas arrive as JSON objects, so they are compiled per request.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request

from shapeguard.config import settings
from shapeguard.exceptions import AccessFault, SchemaDefinitionError
from shapeguard.format.gql import to_gql
from shapeguard.schemas.api import (
    FieldErrorDetail,
    HealthResponse,
    ProjectionRequest,
    ProjectionResponse,
    ValidationRequest,
    ValidationResponse,
)
from shapeguard.services.candidate import UNDEFINED
from shapeguard.services.validation import validate

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------

@router.get("/health", response_model=HealthResponse)
def health_check(request: Request):
    return HealthResponse(
        status="healthy",
        environment=settings.ENVIRONMENT,
        version=request.app.version,
    )


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

@router.post("/validate", response_model=ValidationResponse)
def validate_candidate(request: ValidationRequest):
    """
    Check ``body`` against ``shape`` and return every recorded error.
    A body that cannot be indexed at all is a client error (400).
    """
    candidate = request.body if "body" in request.model_fields_set else UNDEFINED

    try:
        result = validate(request.shape, candidate, partial=request.partial)
    except (AccessFault, SchemaDefinitionError) as exc:
        logger.info("Validation aborted: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc))

    if not result.ok:
        logger.info("Candidate rejected with %d error(s)", len(result.errors))

    return ValidationResponse(
        valid=result.ok,
        errors=result.messages(),
        details=[
            FieldErrorDetail(path=error.path, message=error.message, kind=error.kind.value)
            for error in result.errors
        ],
    )


# ---------------------------------------------------------------------------
# Query projection
# ---------------------------------------------------------------------------

@router.post("/project", response_model=ProjectionResponse)
def project_query(request: ProjectionRequest):
    """Render ``shape`` as a GraphQL selection set under a call to ``fn``."""
    try:
        query = to_gql(request.fn, request.params, request.shape)
    except TypeError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return ProjectionResponse(query=query)
