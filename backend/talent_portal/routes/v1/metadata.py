# backend/talent_portal/routes/v1/metadata.py
"""
Filter metadata routes - API v1

Values that populate the search form's dropdowns, drawn from active profiles.
"""

from typing import List

from fastapi import APIRouter, Depends

from ...schemas.profile import OfficeInfo, StateInfo
from ...services.dependencies import get_profile_search_service
from ...services.profile_search_service import ProfileSearchService

router = APIRouter(tags=["metadata-v1"])


@router.get("/profession-types", response_model=List[str])
def list_profession_types(
    service: ProfileSearchService = Depends(get_profile_search_service),
) -> List[str]:
    return service.get_profession_types()


@router.get("/states", response_model=List[StateInfo])
def list_states(
    service: ProfileSearchService = Depends(get_profile_search_service),
) -> List[StateInfo]:
    return service.get_states()


@router.get("/offices", response_model=List[OfficeInfo])
def list_offices(
    service: ProfileSearchService = Depends(get_profile_search_service),
) -> List[OfficeInfo]:
    return service.get_offices()
