from talent_portal.core.config import settings
from talent_portal.repositories import LocationEmailRepository


def test_mapping_lookup_is_case_insensitive(db, location_email_factory):
    location_email_factory("Cuyahoga Falls", "cf@example.com")

    result = LocationEmailRepository(db).get_location_email("  cuyahoga FALLS ")

    assert result.email == "cf@example.com"
    assert result.is_default is False


def test_unknown_or_blank_location_uses_default(db):
    repo = LocationEmailRepository(db)

    for location in ["Toledo", "", None]:
        result = repo.get_location_email(location)
        assert result.email == settings.default_contact_email
        assert result.is_default is True


def test_custom_default_mailbox(db):
    repo = LocationEmailRepository(db, default_email="fallback@example.com")
    assert repo.get_location_email("Nowhere").email == "fallback@example.com"


def test_upsert_creates_then_repoints(db):
    repo = LocationEmailRepository(db)

    created = repo.upsert("Akron", "akron@example.com")
    updated = repo.upsert("Akron", "akron-new@example.com")

    assert created.id == updated.id
    assert repo.get_location_email("akron").email == "akron-new@example.com"
