# backend/talent_portal/services/dependencies.py
"""
Dependency injection providers for services.

Routes receive services through these FastAPI dependencies; tests override
``get_db``, ``get_geocoder`` or ``get_email_service`` on the app.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from ..core.config import settings
from ..database import get_db
from .contact_service import ContactService
from .email import EmailService
from .email_console import ConsoleEmailService
from .geocoding import Geocoder
from .profile_search_service import ProfileSearchService
from .search.zip_radius_client import ZipRadiusClient


def get_geocoder() -> Geocoder:
    return Geocoder()


def get_zip_radius_client() -> ZipRadiusClient:
    return ZipRadiusClient()


def get_profile_search_service(
    db: Session = Depends(get_db),
    geocoder: Geocoder = Depends(get_geocoder),
    zip_radius_client: ZipRadiusClient = Depends(get_zip_radius_client),
) -> ProfileSearchService:
    return ProfileSearchService(db, geocoder=geocoder, zip_radius_client=zip_radius_client)


def get_email_service() -> EmailService | ConsoleEmailService:
    provider = (settings.email_provider or "console").lower()
    missing_key = not settings.resend_api_key
    if provider == "console" or missing_key:
        return ConsoleEmailService()
    return EmailService()


def get_contact_service(
    db: Session = Depends(get_db),
    email_service: EmailService | ConsoleEmailService = Depends(get_email_service),
) -> ContactService:
    return ContactService(db, email_service)
