"""Translate a SearchQuery into a SearchPlan (predicates, ordering, page window)."""

from dataclasses import dataclass
import logging
from typing import List, Optional, Tuple

from ...core.constants import SORT_COLUMNS
from ...schemas.search import SearchQuery, SortDirection
from .predicates import (
    ActivePredicate,
    CityContainsPredicate,
    OfficeEqualsPredicate,
    Predicate,
    StateEqualsPredicate,
    ZipEqualsPredicate,
    ZipInPredicate,
    keyword_predicate,
    profession_predicate,
)
from .radius_resolver import RadiusRequest, RadiusResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchPlan:
    predicates: Tuple[Predicate, ...]
    sort_column: str
    descending: bool
    offset: int
    limit: int
    empty: bool = False
    radius_strategy: Optional[str] = None


class SearchQueryBuilder:
    def __init__(self, radius_resolver: Optional[RadiusResolver] = None) -> None:
        self.radius_resolver = radius_resolver

    @staticmethod
    def base_predicates(query: SearchQuery) -> List[Predicate]:
        """Filters that apply with or without a radius: active, keyword, profession, office."""
        predicates: List[Predicate] = [ActivePredicate()]

        keywords = keyword_predicate(query.effective_keywords)
        if keywords is not None:
            predicates.append(keywords)

        professions = profession_predicate(query.profession_types)
        if professions is not None:
            predicates.append(professions)

        if query.office:
            predicates.append(OfficeEqualsPredicate(query.office))
        return predicates

    @staticmethod
    def location_predicates(query: SearchQuery) -> List[Predicate]:
        predicates: List[Predicate] = []
        if query.zip_codes:
            predicates.append(ZipInPredicate(tuple(query.zip_codes)))
        elif query.zip_code:
            predicates.append(ZipEqualsPredicate(query.zip_code))
        if query.city:
            predicates.append(CityContainsPredicate(query.city))
        if query.state:
            predicates.append(StateEqualsPredicate(query.state))
        return predicates

    @staticmethod
    def uses_radius(query: SearchQuery) -> bool:
        """A positive radius with a center (postal code or city) to measure from."""
        return query.has_radius and bool(query.center_zip_codes or query.city)

    async def build(self, query: SearchQuery) -> SearchPlan:
        predicates = self.base_predicates(query)
        sort_column = SORT_COLUMNS.get(query.sort_by.value, "first_name")
        descending = query.sort_direction == SortDirection.DESC

        def plan(extra: List[Predicate], empty: bool = False, strategy: Optional[str] = None):
            return SearchPlan(
                predicates=tuple(predicates + extra),
                sort_column=sort_column,
                descending=descending,
                offset=query.offset,
                limit=query.limit,
                empty=empty,
                radius_strategy=strategy,
            )

        if not self.uses_radius(query):
            return plan(self.location_predicates(query))

        if self.radius_resolver is None:
            raise RuntimeError("Radius search requested without a radius resolver")

        resolution = await self.radius_resolver.resolve(
            RadiusRequest(
                radius_miles=float(query.radius or 0),
                center_zip_codes=tuple(query.center_zip_codes),
                city=None if query.center_zip_codes else query.city,
                state=query.state,
                prefilter=tuple(predicates),
            )
        )
        if resolution.is_empty or resolution.predicate is None:
            return plan([], empty=True, strategy=resolution.strategy)
        return plan([resolution.predicate], strategy=resolution.strategy)
