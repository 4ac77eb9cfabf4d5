"""FastAPI dependency that guards a route with a shapeguard schema."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Awaitable, Callable

from fastapi import HTTPException, Request

from shapeguard.exceptions import AccessFault, BodyValidationError
from shapeguard.schemas.nodes import Schema
from shapeguard.services.candidate import UNDEFINED
from shapeguard.services.validation import assert_valid

logger = logging.getLogger(__name__)


def validated_body(
    schema: Schema | Mapping[str, Any], partial: bool = False
) -> Callable[[Request], Awaitable[Any]]:
    """
    Build a dependency that returns the decoded JSON body once it conforms.

    Usage:
        NEW_USER = {"name": "string", "role": ["admin", "member"]}

        @router.post("/users")
        def create_user(body: dict = Depends(validated_body(NEW_USER))):
            ...

    A non-conforming body halts the request with 422 and the error strings
    as ``detail``; an empty request body counts as absent.
    """
    compiled = Schema.compile(schema)

    async def dependency(request: Request) -> Any:
        raw = await request.body()
        try:
            payload = json.loads(raw) if raw else UNDEFINED
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise HTTPException(status_code=400, detail=f"Malformed JSON body: {exc}")

        try:
            assert_valid(compiled, payload, partial=partial)
        except BodyValidationError as exc:
            logger.info("Rejected body on %s: %s", request.url.path, exc)
            raise HTTPException(status_code=422, detail=exc.messages)
        except AccessFault as exc:
            logger.info("Rejected body on %s: %s", request.url.path, exc)
            raise HTTPException(status_code=400, detail=str(exc))

        return None if payload is UNDEFINED else payload

    return dependency
