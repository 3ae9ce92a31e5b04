"""Search request value objects."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE, MAX_PAGE_SIZE


class SortField(str, Enum):
    NAME = "name"
    LOCATION = "location"
    PROFESSION = "profession"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


def _clean_list(values: Optional[List[str]]) -> List[str]:
    cleaned: List[str] = []
    for value in values or []:
        item = (value or "").strip()
        if item:
            cleaned.append(item)
    return cleaned


def split_csv(raw: Optional[str]) -> List[str]:
    """Split a comma-separated query-string value, dropping blanks."""
    if not raw:
        return []
    return _clean_list(raw.split(","))


class SearchQuery(BaseModel):
    """
    One search request. Built once per request and never mutated.

    ``radius`` only takes effect when it is > 0; otherwise the plain
    city/state/postal filters apply.
    """

    model_config = ConfigDict(frozen=True)

    keywords: List[str] = Field(default_factory=list)
    query: Optional[str] = Field(None, description="Legacy single keyword")
    profession_types: List[str] = Field(default_factory=list)
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    zip_codes: List[str] = Field(default_factory=list)
    radius: Optional[float] = None
    office: Optional[str] = None
    page: int = Field(1, ge=1, le=MAX_PAGE)
    limit: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    sort_by: SortField = SortField.NAME
    sort_direction: SortDirection = SortDirection.ASC

    @field_validator("keywords", "profession_types", "zip_codes", mode="before")
    @classmethod
    def _strip_list(cls, value: Optional[List[str]]) -> List[str]:
        return _clean_list(value)

    @field_validator("query", "city", "zip_code", "office", mode="before")
    @classmethod
    def _strip_text(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @field_validator("zip_code", "zip_codes")
    @classmethod
    def _printable_zip(cls, value):
        codes = value if isinstance(value, list) else [value]
        for code in codes:
            if code is not None and not code.isprintable():
                raise ValueError("postal codes must not contain control characters")
        return value

    @field_validator("state", mode="before")
    @classmethod
    def _normalize_state(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        text = str(value).strip().upper()
        return text or None

    @property
    def effective_keywords(self) -> List[str]:
        if self.keywords:
            return list(self.keywords)
        return [self.query] if self.query else []

    @property
    def has_radius(self) -> bool:
        return self.radius is not None and self.radius > 0

    @property
    def center_zip_codes(self) -> List[str]:
        """Single zip plus zip list, de-duplicated in request order."""
        seen: dict[str, None] = {}
        for code in ([self.zip_code] if self.zip_code else []) + list(self.zip_codes):
            seen.setdefault(code, None)
        return list(seen)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit
