# backend/tests/conftest.py
"""
Shared fixtures for the Talent Portal test suite.

Every test gets a fresh in-memory SQLite database built from the model
metadata. Geocoding runs against FakeGeocodingProvider (a fixed table of
coordinates) so radius tests never touch the network.
"""

from fastapi.testclient import TestClient
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from talent_portal.database import Base, get_db
from talent_portal.main import app
from talent_portal.models import LocationEmail, Profile
from talent_portal.services.dependencies import (
    get_email_service,
    get_geocoder,
    get_zip_radius_client,
)
from talent_portal.services.email_console import ConsoleEmailService
from talent_portal.services.geocoding import Geocoder
from talent_portal.services.search.zip_radius_client import ZipRadiusClient

from tests.helpers.fakes import FakeGeocodingProvider

test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSessionLocal = sessionmaker(
    bind=test_engine, autocommit=False, autoflush=False, expire_on_commit=False
)


@pytest.fixture
def db() -> Session:
    """Fresh schema per test on a shared in-memory connection."""
    Base.metadata.create_all(bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def geocoding_provider() -> FakeGeocodingProvider:
    return FakeGeocodingProvider()


@pytest.fixture
def geocoder(geocoding_provider: FakeGeocodingProvider) -> Geocoder:
    return Geocoder(provider=geocoding_provider)


@pytest.fixture
def email_outbox() -> ConsoleEmailService:
    return ConsoleEmailService()


@pytest.fixture
def client(db: Session, geocoder: Geocoder, email_outbox: ConsoleEmailService):
    """Create a test client with the test database and offline collaborators."""

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_geocoder] = lambda: geocoder
    app.dependency_overrides[get_zip_radius_client] = lambda: ZipRadiusClient(api_key="")
    app.dependency_overrides[get_email_service] = lambda: email_outbox
    test_client = TestClient(app)
    try:
        yield test_client
    finally:
        app.dependency_overrides.clear()
        test_client.close()


@pytest.fixture
def profile_factory(db: Session):
    """Insert one active profile; keyword overrides replace the defaults."""
    counter = {"n": 0}

    def _create(**overrides) -> Profile:
        counter["n"] += 1
        data = {
            "first_name": f"Associate{counter['n']}",
            "last_initial": "T",
            "city": "Akron",
            "state": "OH",
            "zip_code": "44312",
            "professional_summary": "Experienced team member",
            "office": "Akron",
            "profession_type": "Administrative",
            "skills": ["Scheduling"],
            "is_active": True,
        }
        data.update(overrides)
        profile = Profile(**data)
        db.add(profile)
        db.flush()
        return profile

    return _create


@pytest.fixture
def location_email_factory(db: Session):
    def _create(location_name: str, distribution_email: str) -> LocationEmail:
        row = LocationEmail(location_name=location_name, distribution_email=distribution_email)
        db.add(row)
        db.flush()
        return row

    return _create
