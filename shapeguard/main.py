"""
FastAPI application entrypoint.

Run locally:  uvicorn shapeguard.main:app --reload
"""

import logging

from fastapi import FastAPI

from shapeguard.api.routes import router
from shapeguard.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(levelname)s | %(name)s | %(message)s",
)

app = FastAPI(
    title="shapeguard",
    description=(
        "Validate JSON bodies against plain-mapping schemas and render the "
        "same schemas as GraphQL selection sets."
    ),
    version="1.0.0",
)

app.include_router(router, prefix="/api/v1")
