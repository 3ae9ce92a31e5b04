# backend/talent_portal/routes/v1/contact.py
"""
Contact routes - API v1

POST /api/v1/contact sends a "request this associate" inquiry to the office
that owns the profile's location.
"""

from fastapi import APIRouter, Depends

from ...schemas.contact import ContactRequest, ContactResponse
from ...services.contact_service import ContactService
from ...services.dependencies import get_contact_service

router = APIRouter(tags=["contact-v1"])


@router.post("", response_model=ContactResponse)
def submit_contact_request(
    payload: ContactRequest,
    service: ContactService = Depends(get_contact_service),
) -> ContactResponse:
    """
    Submit a contact request.

    Missing name, email, comment or profile_name returns 400
    (MISSING_REQUIRED_FIELDS). Email delivery failures still return success.
    """
    return service.submit(payload)
