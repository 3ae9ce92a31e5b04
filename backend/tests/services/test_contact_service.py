import pytest

from talent_portal.core.config import settings
from talent_portal.core.exceptions import (
    MissingContactFieldsException,
    RepositoryException,
    ServiceException,
)
from talent_portal.schemas.contact import ContactRequest
from talent_portal.services.contact_service import ContactService
from talent_portal.services.email_console import ConsoleEmailService


class FailingEmailService:
    def __init__(self):
        self.attempts = 0

    def send_email(self, **kwargs):
        self.attempts += 1
        raise ServiceException("Email sending failed: provider down")


class BrokenLocationEmailRepository:
    def get_location_email(self, location):
        raise RepositoryException("database unavailable")


def make_request(**overrides):
    data = {
        "profile_id": "01J0000000000000000000000",
        "profile_name": "Alice T.",
        "location": "Akron",
        "office_email": "akron-office@example.com",
        "name": "Pat Requester",
        "email": "pat@example.com",
        "phone": "330-555-0100",
        "comment": "Looking for\nwarehouse help",
    }
    data.update(overrides)
    return ContactRequest(**data)


@pytest.fixture
def outbox():
    return ConsoleEmailService()


@pytest.fixture
def service(db, outbox):
    return ContactService(db, outbox)


@pytest.mark.parametrize("field", ["name", "email", "comment", "profile_name"])
def test_missing_required_field_rejects_without_sending(service, outbox, field):
    with pytest.raises(MissingContactFieldsException) as exc:
        service.submit(make_request(**{field: "   "}))

    assert exc.value.details == {"missing_fields": [field]}
    assert exc.value.code == "MISSING_REQUIRED_FIELDS"
    assert outbox.sent == []


def test_all_missing_fields_are_reported_in_order(service):
    with pytest.raises(MissingContactFieldsException) as exc:
        service.submit(ContactRequest())
    assert exc.value.details["missing_fields"] == ["name", "email", "comment", "profile_name"]


def test_location_mapping_takes_precedence(service, outbox, location_email_factory):
    location_email_factory("Akron", "akron-team@example.com")

    response = service.submit(make_request(location="akron"))

    assert response.success
    assert outbox.sent[0]["to"] == "akron-team@example.com"


def test_office_email_used_when_location_unmapped(service, outbox):
    service.submit(make_request(location="Toledo"))
    assert outbox.sent[0]["to"] == "akron-office@example.com"


def test_default_mailbox_when_nothing_else_known(service, outbox):
    service.submit(make_request(location=None, office_email=None))
    assert outbox.sent[0]["to"] == settings.default_contact_email


def test_lookup_failure_falls_back_to_office_email(db, outbox):
    service = ContactService(db, outbox, location_email_repository=BrokenLocationEmailRepository())
    service.submit(make_request())
    assert outbox.sent[0]["to"] == "akron-office@example.com"


def test_message_subject_body_and_reply_to(service, outbox):
    service.submit(make_request())

    message = outbox.sent[0]
    assert message["subject"] == "Associate Request: Alice T. - Akron"
    assert message["reply_to"] == "pat@example.com"
    assert "Looking for<br>" in message["html"]
    assert "330-555-0100" in message["html"]
    assert "Pat Requester" in message["text"]
    assert "<" not in message["text"]


def test_unspecified_location_in_subject(service, outbox):
    service.submit(make_request(location=""))
    assert outbox.sent[0]["subject"] == "Associate Request: Alice T. - Not specified"


def test_blank_phone_rendered_as_not_provided(service, outbox):
    service.submit(make_request(phone=None))
    assert "Not provided" in outbox.sent[0]["html"]


def test_requester_input_is_escaped(service, outbox):
    service.submit(make_request(name="<script>alert(1)</script>"))
    html = outbox.sent[0]["html"]
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_email_failure_still_reports_success(db):
    failing = FailingEmailService()
    service = ContactService(db, failing)

    response = service.submit(make_request())

    assert failing.attempts == 1
    assert response.success
    assert response.message == "Contact request received successfully"
