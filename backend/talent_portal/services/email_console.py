import logging
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class ConsoleEmailService:
    """Logs outgoing email instead of sending it; used when no provider is configured."""

    def __init__(self, *_: Any, **__: Any) -> None:
        self.sent: List[Dict[str, Any]] = []

    def send_email(
        self,
        to_email: str,
        subject: str,
        html_content: str,
        text_content: Optional[str] = None,
        reply_to: Optional[str] = None,
    ) -> Dict[str, Any]:
        message = {
            "to": to_email,
            "subject": subject,
            "html": html_content,
            "text": text_content,
            "reply_to": reply_to,
        }
        self.sent.append(message)
        logger.info("[console email] to=%s reply_to=%s subject=%s", to_email, reply_to, subject)
        return {"id": f"console-{len(self.sent)}"}
