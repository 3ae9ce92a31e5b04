# backend/talent_portal/routes/v1/profiles.py
"""
Profile routes - API v1

Versioned profile endpoints under /api/v1/profiles.
All business logic delegated to ProfileSearchService.

Endpoints:
    GET /                → Filter, sort and paginate profiles
    GET /{profile_id}    → Single active profile
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from ...core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE, MAX_PAGE_SIZE
from ...schemas.profile import PaginatedProfilesResponse, ProfileResponse
from ...schemas.search import SearchQuery, SortDirection, SortField, split_csv
from ...services.dependencies import get_profile_search_service
from ...services.profile_search_service import ProfileSearchService

logger = logging.getLogger(__name__)

# V1 router - no prefix here, will be added when mounting in main.py
router = APIRouter(tags=["profiles-v1"])


def build_search_query(
    keywords: Optional[str] = Query(None, description="Comma-separated keywords (any may match)"),
    zip_codes: Optional[str] = Query(
        None, alias="zipCodes", description="Comma-separated postal codes"
    ),
    professions: Optional[str] = Query(None, description="Comma-separated profession types"),
    query: Optional[str] = Query(None, description="Legacy single keyword"),
    city: Optional[str] = Query(None),
    state: Optional[str] = Query(None, description="Two-letter state code"),
    zip_code: Optional[str] = Query(None, alias="zip"),
    radius: Optional[float] = Query(None, description="Radius in miles; <= 0 disables"),
    office: Optional[str] = Query(None),
    sort_by: SortField = Query(SortField.NAME, alias="sortBy"),
    sort_direction: SortDirection = Query(SortDirection.ASC, alias="sortDirection"),
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
) -> SearchQuery:
    return SearchQuery(
        keywords=split_csv(keywords),
        query=query,
        profession_types=split_csv(professions),
        city=city,
        state=state,
        zip_code=zip_code,
        zip_codes=split_csv(zip_codes),
        radius=radius,
        office=office,
        page=page,
        limit=limit,
        sort_by=sort_by,
        sort_direction=sort_direction,
    )


@router.get("", response_model=PaginatedProfilesResponse)
async def search_profiles(
    search_query: SearchQuery = Depends(build_search_query),
    service: ProfileSearchService = Depends(get_profile_search_service),
) -> PaginatedProfilesResponse:
    """
    Search profiles.

    Keyword, profession, location and office filters combine with AND. With a
    positive ``radius`` and a center (``zip``/``zipCodes`` or ``city``), the
    location filters are replaced by a distance match.
    """
    return await service.search_profiles(search_query)


@router.get("/{profile_id}", response_model=ProfileResponse)
def get_profile(
    profile_id: str,
    service: ProfileSearchService = Depends(get_profile_search_service),
) -> ProfileResponse:
    return service.get_profile(profile_id)
