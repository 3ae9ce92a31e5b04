# backend/talent_portal/services/email.py
"""
Email Service for the Talent Portal

Sends email through the Resend API. Provider selection (Resend vs console)
happens in ``services.dependencies.get_email_service``.
"""

import logging
import re
from typing import Any, Dict, Optional

import resend

from ..core.config import settings
from ..core.exceptions import ServiceException
from .base import BaseService

logger = logging.getLogger(__name__)


def html_to_text(html_content: str) -> str:
    """Plain-text rendition of an HTML body for the text/plain part."""
    text = re.sub(r"<br\s*/?>", "\n", html_content, flags=re.IGNORECASE)
    text = re.sub(r"</(p|div|tr|h[1-6])>", "\n", text, flags=re.IGNORECASE)
    text = re.sub(r"<[^>]+>", "", text)
    lines = [re.sub(r"[ \t]+", " ", line).strip() for line in text.splitlines()]
    return "\n".join(line for line in lines if line)


class EmailService(BaseService):
    """
    Service for sending emails using Resend API.

    Extends BaseService for consistent metrics collection and logging.
    """

    def __init__(self, api_key: Optional[str] = None):
        super().__init__(None)

        api_key = api_key or settings.resend_api_key
        if not api_key:
            raise ServiceException("Resend API key not configured")

        resend.api_key = api_key
        self.from_email = settings.from_email
        self.logger.info("EmailService initialized successfully")

    @BaseService.measure_operation("send_email")
    def send_email(
        self,
        to_email: str,
        subject: str,
        html_content: str,
        text_content: Optional[str] = None,
        reply_to: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Send an email using Resend.

        Args:
            to_email: Recipient email address
            subject: Email subject
            html_content: HTML content of the email
            text_content: Optional plain text version (derived from HTML when omitted)
            reply_to: Optional Reply-To address

        Returns:
            Dict containing the Resend API response

        Raises:
            ServiceException: If email sending fails
        """
        email_data: Dict[str, Any] = {
            "from": self.from_email,
            "to": [to_email],
            "subject": subject,
            "html": html_content,
            "text": text_content or html_to_text(html_content),
        }
        if reply_to:
            email_data["reply_to"] = reply_to

        try:
            response = resend.Emails.send(email_data)
        except Exception as e:
            error_msg = str(e) or type(e).__name__
            self.logger.error(f"Failed to send email to {to_email}: {error_msg}")
            self.log_operation("email_failed", to_email=to_email, subject=subject, error=error_msg)
            raise ServiceException(f"Email sending failed: {error_msg}")

        self.logger.info(f"Email sent successfully to {to_email} - Subject: {subject}")
        self.log_operation("email_sent", to_email=to_email, subject=subject)
        return dict(response) if response else {}
