"""Routing table from office/location name to the mailbox that receives contact requests."""

from datetime import datetime, timezone

import ulid
from sqlalchemy import Column, DateTime, String

from ..database import Base


class LocationEmail(Base):
    __tablename__ = "location_emails"

    id = Column(String(36), primary_key=True, default=lambda: str(ulid.ULID()))
    location_name = Column(String(100), nullable=False, unique=True)
    distribution_email = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self):
        return f"<LocationEmail {self.location_name} -> {self.distribution_email}>"
