"""Pydantic schemas for profiles and filter metadata."""

from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict

from ._strict_base import StrictModel


class ProfileResponse(StrictModel):
    model_config = ConfigDict(extra="forbid", from_attributes=True)

    id: str
    first_name: str
    last_initial: str
    city: str
    state: str
    zip_code: str
    professional_summary: str
    office: str
    profession_type: str
    skills: Optional[List[str]] = None
    source_file: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PaginatedProfilesResponse(StrictModel):
    profiles: List[ProfileResponse]
    total: int
    page: int
    limit: int
    total_pages: int


class StateInfo(StrictModel):
    code: str
    name: str


class OfficeInfo(StrictModel):
    name: str
    city: str
    state: str
