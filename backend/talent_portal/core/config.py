# backend/talent_portal/core/config.py
import logging
import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import BRAND_NAME, DEFAULT_CONTACT_EMAIL, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


def is_running_tests() -> bool:
    """
    Detect if code is running under pytest.

    PYTEST_CURRENT_TEST is set automatically by pytest during test runs, and is
    not expected to be present in production environments.
    """
    return os.getenv("PYTEST_CURRENT_TEST") is not None


logger = logging.getLogger(__name__)

# Load .env file only if not in CI
if not os.getenv("CI"):
    env_path = Path(__file__).parent.parent.parent / ".env"  # Goes up to backend/.env
    logger.debug("[CONFIG] Looking for .env at: %s (exists=%s)", env_path, env_path.exists())
    load_dotenv(env_path)


class Settings(BaseSettings):
    environment: str = Field(default="development", description="Deployment environment name")
    log_level: str = Field(default="INFO", description="Root log level")

    # Database
    database_url: str = Field(
        default="sqlite:///./talent_portal.db",
        validation_alias=AliasChoices("DATABASE_URL", "database_url"),
        description="SQLAlchemy URL for the profile store",
    )
    db_pool_size: int = Field(default=5, ge=1, description="Connection pool size (non-SQLite)")
    db_max_overflow: int = Field(default=10, ge=0, description="Extra connections above pool size")
    db_pool_timeout: int = Field(
        default=5, ge=1, description="Seconds to wait for a pooled connection"
    )
    db_statement_timeout_ms: int = Field(default=15000, description="Postgres statement timeout")

    # Geocoding
    geocoding_provider: Literal["live", "mock"] = Field(
        default="live", description="Geocoding provider: live|mock"
    )
    zip_lookup_base_url: str = Field(
        default="https://api.zippopotam.us/us",
        description="Postal-code lookup service base URL",
    )
    city_search_base_url: str = Field(
        default="https://nominatim.openstreetmap.org/search",
        description="City/address text search service URL",
    )
    geocoding_user_agent: str = Field(
        default="InterTalentPortal/1.0",
        description="User-Agent sent to the city search service (required by Nominatim)",
    )
    geocode_timeout_seconds: float = Field(
        default=10.0, gt=0, description="Per-call timeout for external geocoding lookups"
    )
    geocode_max_concurrency: int = Field(
        default=20, ge=1, description="Max concurrent geocoding calls within one request"
    )

    # Radius search
    zip_radius_api_base_url: str = Field(
        default="https://www.zipcodeapi.com/rest",
        description="Bulk postal-code radius service base URL",
    )
    zip_radius_api_key: str = Field(
        default="", description="API key for the bulk radius service (empty disables it)"
    )
    spatial_search_enabled: bool = Field(
        default=True, description="Allow PostGIS geography queries when the column is populated"
    )

    # Pagination
    default_page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)
    max_page_size: int = Field(default=MAX_PAGE_SIZE, ge=1)

    # Email settings
    email_provider: Literal["console", "resend"] = Field(
        default="console",
        alias="EMAIL_PROVIDER",
        description="Email provider name",
    )
    resend_api_key: str | None = Field(
        default=None,
        alias="RESEND_API_KEY",
        description="API key for Resend provider (optional)",
    )
    from_email: str = f"{BRAND_NAME} <no-reply@intersolutions.com>"
    default_contact_email: str = Field(
        default=DEFAULT_CONTACT_EMAIL,
        description="Destination for contact requests with no location mapping",
    )

    cors_allowed_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Origins allowed to call the API from a browser",
    )

    model_config = SettingsConfigDict(
        env_file=".env" if not os.getenv("CI") else None,
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return (value or "INFO").strip().upper()

    @property
    def zip_radius_configured(self) -> bool:
        return bool((self.zip_radius_api_key or "").strip())

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


settings = Settings()
