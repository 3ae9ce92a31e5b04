# backend/talent_portal/routes/v1/__init__.py
"""
API v1 Routes

Versioned API endpoints under /api/v1.
"""

from . import contact, health, metadata, profiles, prometheus

__all__ = ["contact", "health", "metadata", "profiles", "prometheus"]
