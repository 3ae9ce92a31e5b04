# backend/talent_portal/repositories/location_email_repository.py
"""Repository for office/location -> distribution mailbox mappings."""

from typing import NamedTuple, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.config import settings
from ..core.exceptions import RepositoryException
from ..models.location_email import LocationEmail
from .base_repository import BaseRepository


class LocationEmailResult(NamedTuple):
    email: str
    is_default: bool


class LocationEmailRepository(BaseRepository[LocationEmail]):
    def __init__(self, db: Session, default_email: Optional[str] = None):
        super().__init__(db, LocationEmail)
        self.default_email = default_email or settings.default_contact_email

    def get_location_email(self, location: Optional[str]) -> LocationEmailResult:
        """
        Mailbox for ``location`` (case-insensitive), or the default mailbox.

        Raises:
            RepositoryException: If the lookup itself fails
        """
        name = (location or "").strip()
        if not name:
            return LocationEmailResult(self.default_email, True)

        try:
            row = (
                self.db.query(LocationEmail.distribution_email)
                .filter(func.lower(LocationEmail.location_name) == name.lower())
                .first()
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error looking up location email for {name}: {str(e)}")
            raise RepositoryException(f"Failed to look up location email: {str(e)}")

        if row is None or not row[0]:
            return LocationEmailResult(self.default_email, True)
        return LocationEmailResult(row[0], False)

    def upsert(self, location_name: str, distribution_email: str) -> LocationEmail:
        """Create or repoint a mapping. Does not commit."""
        existing = self.find_one_by(location_name=location_name)
        if existing is None:
            return self.create(location_name=location_name, distribution_email=distribution_email)
        try:
            existing.distribution_email = distribution_email
            self.db.flush()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryException(f"Failed to update location email: {str(e)}")
        return existing
