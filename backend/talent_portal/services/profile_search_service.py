# backend/talent_portal/services/profile_search_service.py
"""
Profile search and filter-metadata service.

Builds a SearchPlan from the request, then runs one count and one page fetch
with the same predicate list.
"""

import asyncio
import math
from typing import List

from sqlalchemy.orm import Session

from ..core.constants import US_STATE_NAMES
from ..core.exceptions import NotFoundException
from ..repositories.profile_repository import ProfileRepository
from ..repositories.spatial_repository import SpatialRepository
from ..schemas.profile import OfficeInfo, PaginatedProfilesResponse, ProfileResponse, StateInfo
from ..schemas.search import SearchQuery
from .base import BaseService
from .geocoding import Geocoder
from .search.query_builder import SearchQueryBuilder
from .search.radius_resolver import RadiusResolver
from .search.zip_radius_client import ZipRadiusClient


class ProfileSearchService(BaseService):
    def __init__(
        self,
        db: Session,
        geocoder: Geocoder | None = None,
        zip_radius_client: ZipRadiusClient | None = None,
        radius_resolver: RadiusResolver | None = None,
    ):
        super().__init__(db)
        self.profile_repository = ProfileRepository(db)
        self.radius_resolver = radius_resolver or RadiusResolver(
            self.profile_repository,
            SpatialRepository(db),
            geocoder=geocoder,
            zip_radius_client=zip_radius_client,
        )
        self.query_builder = SearchQueryBuilder(self.radius_resolver)

    @BaseService.measure_operation("search_profiles")
    async def search_profiles(self, query: SearchQuery) -> PaginatedProfilesResponse:
        plan = await self.query_builder.build(query)
        if plan.empty:
            self.log_operation("search_profiles", total=0, radius_strategy=plan.radius_strategy)
            return PaginatedProfilesResponse(
                profiles=[], total=0, page=query.page, limit=query.limit, total_pages=0
            )

        total = await asyncio.to_thread(self.profile_repository.count_matching, plan.predicates)
        rows = await asyncio.to_thread(
            self.profile_repository.search,
            plan.predicates,
            sort_column=plan.sort_column,
            descending=plan.descending,
            offset=plan.offset,
            limit=plan.limit,
        )
        self.log_operation(
            "search_profiles",
            total=total,
            page=query.page,
            radius_strategy=plan.radius_strategy,
        )
        return PaginatedProfilesResponse(
            profiles=[ProfileResponse.model_validate(row) for row in rows],
            total=total,
            page=query.page,
            limit=query.limit,
            total_pages=math.ceil(total / query.limit) if total else 0,
        )

    @BaseService.measure_operation("get_profile")
    def get_profile(self, profile_id: str) -> ProfileResponse:
        profile = self.profile_repository.get_active_by_id(profile_id)
        if profile is None:
            raise NotFoundException(f"Profile {profile_id} not found", code="PROFILE_NOT_FOUND")
        return ProfileResponse.model_validate(profile)

    @BaseService.measure_operation("get_profession_types")
    def get_profession_types(self) -> List[str]:
        return self.profile_repository.distinct_profession_types()

    @BaseService.measure_operation("get_states")
    def get_states(self) -> List[StateInfo]:
        return [
            StateInfo(code=code, name=US_STATE_NAMES.get(code.upper(), code))
            for code in self.profile_repository.distinct_states()
        ]

    @BaseService.measure_operation("get_offices")
    def get_offices(self) -> List[OfficeInfo]:
        return [
            OfficeInfo(name=name, city=city, state=state)
            for name, city, state in self.profile_repository.distinct_offices()
        ]
