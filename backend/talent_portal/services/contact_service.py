# backend/talent_portal/services/contact_service.py
"""
Contact ("request this associate") service.

Validates the form, routes it to the right office mailbox and sends it.
Email delivery problems never fail the request; they are logged and counted.
"""

from typing import List, Optional, Protocol

from sqlalchemy.orm import Session

from ..core.config import settings
from ..core.exceptions import MissingContactFieldsException, RepositoryException, ServiceException
from ..monitoring.prometheus_metrics import prometheus_metrics
from ..repositories.location_email_repository import LocationEmailRepository
from ..schemas.contact import ContactRequest, ContactResponse
from .base import BaseService
from .email import html_to_text
from .template_service import TemplateService

CONTACT_TEMPLATE = "email/contact_request.html"
REQUIRED_FIELDS = ("name", "email", "comment", "profile_name")
UNSPECIFIED_LOCATION = "Not specified"


class EmailSender(Protocol):
    def send_email(
        self,
        to_email: str,
        subject: str,
        html_content: str,
        text_content: Optional[str] = None,
        reply_to: Optional[str] = None,
    ) -> dict: ...


class ContactService(BaseService):
    def __init__(
        self,
        db: Session,
        email_service: EmailSender,
        location_email_repository: Optional[LocationEmailRepository] = None,
        template_service: Optional[TemplateService] = None,
    ):
        super().__init__(db)
        self.email_service = email_service
        self.location_email_repository = location_email_repository or LocationEmailRepository(db)
        self.template_service = template_service or TemplateService()

    @staticmethod
    def missing_fields(request: ContactRequest) -> List[str]:
        return [name for name in REQUIRED_FIELDS if not (getattr(request, name) or "").strip()]

    def resolve_destination(self, location: Optional[str], office_email: Optional[str]) -> str:
        """Location mapping, then the caller-supplied office email, then the default mailbox."""
        if location and location.strip():
            try:
                result = self.location_email_repository.get_location_email(location)
                if not result.is_default:
                    return result.email
            except RepositoryException as exc:
                self.logger.warning(f"Location email lookup failed for {location}: {exc}")

        if office_email and office_email.strip():
            return office_email.strip()
        return settings.default_contact_email

    @BaseService.measure_operation("submit_contact_request")
    def submit(self, request: ContactRequest) -> ContactResponse:
        """
        Send a contact request to the owning office.

        Raises:
            MissingContactFieldsException: If name, email, comment or
                profile_name is missing or blank (no email is sent)
        """
        missing = self.missing_fields(request)
        if missing:
            prometheus_metrics.record_contact_request("rejected")
            raise MissingContactFieldsException(missing)

        profile_name = (request.profile_name or "").strip()
        location = (request.location or "").strip() or UNSPECIFIED_LOCATION
        to_email = self.resolve_destination(request.location, request.office_email)
        requester_email = (request.email or "").strip()

        subject = f"Associate Request: {profile_name} - {location}"
        html_content = self.template_service.render_template(
            CONTACT_TEMPLATE,
            profile_name=profile_name,
            location=location,
            requester_name=(request.name or "").strip(),
            requester_email=requester_email,
            requester_phone=request.phone,
            comment=request.comment or "",
        )

        email_status = "sent"
        try:
            self.email_service.send_email(
                to_email=to_email,
                subject=subject,
                html_content=html_content,
                text_content=html_to_text(html_content),
                reply_to=requester_email,
            )
        except ServiceException as exc:
            email_status = "failed"
            self.logger.error(
                f"Contact email for {profile_name} to {to_email} not sent: {exc.message}"
            )

        prometheus_metrics.record_contact_request(email_status)
        self.log_operation(
            "contact_request",
            profile_id=request.profile_id,
            to_email=to_email,
            email_status=email_status,
        )
        return ContactResponse(success=True, message="Contact request received successfully")
