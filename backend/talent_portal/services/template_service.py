# backend/talent_portal/services/template_service.py
"""
Template rendering service for the Talent Portal.

Renders the Jinja2 templates under ``talent_portal/templates`` (currently the
contact-request email) with a shared set of common context variables.
"""

from datetime import datetime
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import Environment, FileSystemLoader, TemplateNotFound

from ..core.config import settings
from ..core.constants import BRAND_NAME
from .base import BaseService

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent.parent / "templates"


class TemplateService(BaseService):
    """
    Centralized template rendering service using Jinja2.

    Holds no database session; rendering is pure.
    """

    def __init__(self, template_dir: Optional[Path] = None):
        super().__init__(None)

        # Create the Jinja2 environment
        self.env = Environment(
            loader=FileSystemLoader(template_dir or TEMPLATE_DIR),
            autoescape=True,  # Enable autoescaping for security
            trim_blocks=True,  # Remove trailing newlines from blocks
            lstrip_blocks=True,  # Remove leading whitespace from blocks
        )
        self._register_custom_filters()

    def _register_custom_filters(self):
        """Register custom Jinja2 filters."""

        def or_default(value: Optional[str], default: str = "Not provided") -> str:
            """Substitute a placeholder for blank values."""
            text = (value or "").strip()
            return text or default

        self.env.filters["or_default"] = or_default

    def get_common_context(self) -> Dict[str, Any]:
        return {
            "brand_name": BRAND_NAME,
            "current_year": datetime.now().year,
            "support_email": settings.default_contact_email,
        }

    @BaseService.measure_operation("render_template")
    def render_template(
        self, template_name: str, context: Optional[Dict[str, Any]] = None, **kwargs
    ) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Path to template relative to templates directory
            context: Dictionary of template variables
            **kwargs: Additional template variables

        Returns:
            Rendered template as string

        Raises:
            TemplateNotFound: If template doesn't exist
        """
        try:
            template = self.env.get_template(template_name)

            full_context = self.get_common_context()
            if context:
                full_context.update(context)
            full_context.update(kwargs)

            rendered = template.render(full_context)
            self.logger.debug(f"Successfully rendered template: {template_name}")
            return rendered

        except TemplateNotFound:
            self.logger.error(f"Template not found: {template_name}")
            raise
