# backend/talent_portal/main.py
"""
FastAPI application entry point for the Talent Portal API.

Run locally with:
    uvicorn talent_portal.main:app --reload --app-dir backend
"""

from contextlib import asynccontextmanager
import logging
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from .core.config import is_running_tests, settings
from .core.constants import API_DESCRIPTION, API_TITLE, API_VERSION, BRAND_NAME
from .database import get_db_pool_status
from .errors import register_error_handlers
from .routes.v1 import (
    contact as contact_v1,
    health as health_v1,
    metadata as metadata_v1,
    profiles as profiles_v1,
    prometheus as prometheus_v1,
)

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def app_lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup/shutdown without deprecated events."""
    logger.info(f"{BRAND_NAME} API starting up...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(
        "Geocoding provider=%s zip_radius_configured=%s spatial_search_enabled=%s",
        settings.geocoding_provider,
        settings.zip_radius_configured,
        settings.spatial_search_enabled,
    )
    logger.info("Email provider=%s", settings.email_provider)
    if is_running_tests():
        logger.info("Running under pytest (test mode active)")
    logger.debug("Database pool: %s", get_db_pool_status())

    yield

    logger.info(f"{BRAND_NAME} API shutting down...")


def _unique_operation_id(route: APIRoute) -> str:
    methods = "_".join(sorted(m.lower() for m in route.methods or []))
    path = route.path_format.replace("/", "_").replace("{", "").replace("}", "").strip("_")
    name = (route.name or "operation").lower().replace(" ", "_")
    return f"{methods}__{path}__{name}".strip("_")


app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=app_lifespan,
    generate_unique_id_function=_unique_operation_id,
)

# Register unified error envelope handlers
register_error_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "HEAD", "OPTIONS", "POST"],
    allow_headers=["*"],
)
logger.info("CORS allow_origins=%s", settings.cors_allowed_origins)

api_v1 = APIRouter(prefix="/api/v1")
api_v1.include_router(profiles_v1.router, prefix="/profiles")
api_v1.include_router(metadata_v1.router, prefix="/metadata")
api_v1.include_router(contact_v1.router, prefix="/contact")
api_v1.include_router(health_v1.router, prefix="/health")
api_v1.include_router(prometheus_v1.router, prefix="/metrics")

app.include_router(api_v1)


@app.get("/", include_in_schema=False)
def root() -> dict:
    return {"message": f"{BRAND_NAME} API", "version": API_VERSION, "docs": "/docs"}
