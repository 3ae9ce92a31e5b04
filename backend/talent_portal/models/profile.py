"""
Profile model.

Profiles are written by the roster synchronization job and are read-only from
the search API. Removal is a soft delete via ``is_active``. On PostGIS
databases the table also carries a ``geo_location geography(Point, 4326)``
column; it is not mapped here to avoid a geoalchemy2 dependency and is only
read through ``SpatialRepository``.
"""

from datetime import datetime, timezone

import ulid
from sqlalchemy import JSON, Boolean, Column, DateTime, Index, String, Text

from ..database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True, default=lambda: str(ulid.ULID()))
    first_name = Column(String(100), nullable=False)
    last_initial = Column(String(1), nullable=False)
    city = Column(String(100), nullable=False, index=True)
    state = Column(String(2), nullable=False, index=True)
    zip_code = Column(String(10), nullable=False, index=True)
    professional_summary = Column(Text, nullable=False, default="")
    office = Column(String(100), nullable=False, index=True)
    profession_type = Column(String(100), nullable=False, index=True)
    skills = Column(JSON, nullable=True)
    source_file = Column(String(255), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    __table_args__ = (Index("idx_profiles_name", "first_name", "last_initial"),)

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_initial}."

    def __repr__(self):
        return (
            f"<Profile {self.id} {self.first_name} {self.last_initial}. "
            f"{self.city}, {self.state}>"
        )
