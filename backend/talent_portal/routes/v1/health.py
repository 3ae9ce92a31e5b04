# backend/talent_portal/routes/v1/health.py
"""
Health check endpoints for monitoring and load balancer probes.
"""

from __future__ import annotations

from datetime import datetime, timezone
import logging

from fastapi import APIRouter
from pydantic import BaseModel

from ...core.config import settings
from ...core.constants import API_VERSION, BRAND_NAME

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    environment: str
    timestamp: str


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """
    Health check endpoint.

    Returns basic health status including service info and environment.
    Does not touch the database.
    """
    return HealthResponse(
        status="healthy",
        service=f"{BRAND_NAME.lower().replace(' ', '-')}-api",
        version=API_VERSION,
        environment=settings.environment,
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    )
