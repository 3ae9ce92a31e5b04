"""
Radius (distance) resolution for profile search.

A radius search is resolved by an ordered chain of strategies. Each returns
a RadiusResolution that is either ``matched`` (with the predicate that
restricts the search), ``empty`` (nothing can match; skip the main query) or
``unavailable`` (this strategy cannot answer; try the next one).

Center postal codes run spatial -> bulk postal-code -> per-record geocode.
A city center runs the city strategy only. When every strategy is
unavailable the search narrows to a single state, or to nothing.

Repository queries run in a worker thread via ``asyncio.to_thread`` so the
event loop stays free for concurrent geocoding.
"""

from abc import ABC, abstractmethod
import asyncio
from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ...core.config import settings
from ...core.constants import METERS_PER_MILE
from ...monitoring.prometheus_metrics import prometheus_metrics
from ...repositories.profile_repository import ProfileRepository
from ...repositories.spatial_repository import SpatialRepository
from ..geocoding import Geocoder, ZipLocation
from .distance import within_radius
from .predicates import (
    CityContainsPredicate,
    IdInPredicate,
    Predicate,
    StateEqualsPredicate,
    ZipInPredicate,
)
from .zip_radius_client import ZipRadiusClient

logger = logging.getLogger(__name__)


class RadiusOutcome(str, Enum):
    MATCHED = "matched"
    EMPTY = "empty"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class RadiusResolution:
    outcome: RadiusOutcome
    strategy: str
    predicate: Optional[Predicate] = None

    @classmethod
    def matched(cls, strategy: str, predicate: Predicate) -> "RadiusResolution":
        return cls(RadiusOutcome.MATCHED, strategy, predicate)

    @classmethod
    def empty(cls, strategy: str) -> "RadiusResolution":
        return cls(RadiusOutcome.EMPTY, strategy)

    @classmethod
    def unavailable(cls, strategy: str) -> "RadiusResolution":
        return cls(RadiusOutcome.UNAVAILABLE, strategy)

    @property
    def is_empty(self) -> bool:
        return self.outcome is RadiusOutcome.EMPTY


@dataclass(frozen=True)
class RadiusRequest:
    """
    Inputs to one radius resolution.

    ``prefilter`` holds the non-location predicates (active, keyword,
    profession, office) used to narrow per-record candidates.
    """

    radius_miles: float
    center_zip_codes: Tuple[str, ...] = ()
    city: Optional[str] = None
    state: Optional[str] = None
    prefilter: Tuple[Predicate, ...] = field(default_factory=tuple)


class RequestGeocoder:
    """
    Request-scoped geocoding memo with bounded concurrency.

    Each distinct postal code is looked up at most once per request.
    Nothing is kept across requests.
    """

    def __init__(self, geocoder: Geocoder, max_concurrency: int) -> None:
        self._geocoder = geocoder
        self._semaphore = asyncio.Semaphore(max_concurrency)
        self._zips: Dict[str, Optional[ZipLocation]] = {}

    async def zip(self, zip_code: str) -> Optional[ZipLocation]:
        if zip_code in self._zips:
            return self._zips[zip_code]
        async with self._semaphore:
            location = await self._geocoder.geocode_zip(zip_code)
        self._zips[zip_code] = location
        return location

    async def zips(self, zip_codes: Iterable[str]) -> Dict[str, Optional[ZipLocation]]:
        ordered = list(dict.fromkeys(code for code in zip_codes if code))
        pending = [code for code in ordered if code not in self._zips]
        if pending:
            await asyncio.gather(*(self.zip(code) for code in pending))
        return {code: self._zips.get(code) for code in ordered}

    async def centers(self, zip_codes: Iterable[str]) -> List[ZipLocation]:
        located = await self.zips(zip_codes)
        return [loc for loc in located.values() if loc is not None]

    async def city(self, city: str, state: Optional[str]) -> Optional[ZipLocation]:
        async with self._semaphore:
            return await self._geocoder.geocode_city(city, state)


async def filter_by_distance(
    candidates: Sequence[Tuple[str, str]],
    centers: Sequence[ZipLocation],
    radius_miles: float,
    geo: RequestGeocoder,
) -> List[str]:
    """Ids of candidates within ``radius_miles`` of any center; ungeocodable ones drop out."""
    located = await geo.zips(zip_code for _, zip_code in candidates)
    kept: List[str] = []
    for profile_id, zip_code in candidates:
        location = located.get(zip_code)
        if location is None:
            continue
        if any(
            within_radius(
                c.latitude, c.longitude, location.latitude, location.longitude, radius_miles
            )
            for c in centers
        ):
            kept.append(profile_id)
    return kept


class RadiusStrategy(ABC):
    name: str = "base"

    @abstractmethod
    async def resolve(self, request: RadiusRequest, geo: RequestGeocoder) -> RadiusResolution:
        pass


class SpatialIndexStrategy(RadiusStrategy):
    """PostGIS ``ST_DWithin`` over the populated geography column."""

    name = "spatial"

    def __init__(self, spatial_repository: SpatialRepository, enabled: bool = True) -> None:
        self.spatial_repository = spatial_repository
        self.enabled = enabled

    async def resolve(self, request: RadiusRequest, geo: RequestGeocoder) -> RadiusResolution:
        if not self.enabled or not request.center_zip_codes:
            return RadiusResolution.unavailable(self.name)
        if not await asyncio.to_thread(self.spatial_repository.has_geo_locations):
            return RadiusResolution.unavailable(self.name)

        centers = await geo.centers(request.center_zip_codes)
        if not centers:
            return RadiusResolution.unavailable(self.name)

        ids = await asyncio.to_thread(
            self.spatial_repository.ids_within,
            [(c.latitude, c.longitude) for c in centers],
            request.radius_miles * METERS_PER_MILE,
        )
        if not ids:
            return RadiusResolution.empty(self.name)
        return RadiusResolution.matched(self.name, IdInPredicate(tuple(ids)))


class BulkZipRadiusStrategy(RadiusStrategy):
    """Ask the radius service for every postal code near each center."""

    name = "zip_radius"

    def __init__(self, client: ZipRadiusClient) -> None:
        self.client = client

    async def resolve(self, request: RadiusRequest, geo: RequestGeocoder) -> RadiusResolution:
        if not self.client.configured or not request.center_zip_codes:
            return RadiusResolution.unavailable(self.name)

        batches = await asyncio.gather(
            *(
                self.client.zip_codes_within(zip_code, request.radius_miles)
                for zip_code in request.center_zip_codes
            )
        )
        union = list(dict.fromkeys(code for batch in batches for code in batch))
        if not union:
            return RadiusResolution.unavailable(self.name)
        return RadiusResolution.matched(self.name, ZipInPredicate(tuple(union)))


class PerRecordGeocodeStrategy(RadiusStrategy):
    """Geocode every pre-filtered candidate and keep the ones inside the radius."""

    name = "per_record"

    def __init__(self, profile_repository: ProfileRepository) -> None:
        self.profile_repository = profile_repository

    async def resolve(self, request: RadiusRequest, geo: RequestGeocoder) -> RadiusResolution:
        candidates = await asyncio.to_thread(
            self.profile_repository.find_candidates, request.prefilter
        )
        if not candidates:
            return RadiusResolution.empty(self.name)

        centers = await geo.centers(request.center_zip_codes)
        if not centers:
            return RadiusResolution.unavailable(self.name)

        ids = await filter_by_distance(candidates, centers, request.radius_miles, geo)
        logger.info("Per-record radius kept %d of %d candidates", len(ids), len(candidates))
        if not ids:
            return RadiusResolution.empty(self.name)
        return RadiusResolution.matched(self.name, IdInPredicate(tuple(ids)))


class CityRadiusStrategy(RadiusStrategy):
    name = "city"

    def __init__(self, profile_repository: ProfileRepository) -> None:
        self.profile_repository = profile_repository

    async def resolve(self, request: RadiusRequest, geo: RequestGeocoder) -> RadiusResolution:
        if not request.city:
            return RadiusResolution.unavailable(self.name)

        narrowing: Predicate
        if request.state:
            narrowing = StateEqualsPredicate(request.state)
        else:
            narrowing = CityContainsPredicate(request.city)
        candidates = await asyncio.to_thread(
            self.profile_repository.find_candidates, request.prefilter + (narrowing,)
        )
        if not candidates:
            return RadiusResolution.empty(self.name)

        center = await geo.city(request.city, request.state)
        if center is None:
            logger.info(
                "City %s not geocoded; keeping %d pre-filtered profiles",
                request.city,
                len(candidates),
            )
            return RadiusResolution.matched(
                self.name, IdInPredicate(tuple(pid for pid, _ in candidates))
            )

        ids = await filter_by_distance(candidates, [center], request.radius_miles, geo)
        if not ids:
            return RadiusResolution.empty(self.name)
        return RadiusResolution.matched(self.name, IdInPredicate(tuple(ids)))


class RadiusResolver:
    """Runs the strategy chain for one request and applies state-only degradation."""

    def __init__(
        self,
        profile_repository: ProfileRepository,
        spatial_repository: SpatialRepository,
        geocoder: Optional[Geocoder] = None,
        zip_radius_client: Optional[ZipRadiusClient] = None,
        spatial_enabled: Optional[bool] = None,
        max_concurrency: Optional[int] = None,
    ) -> None:
        self.geocoder = geocoder or Geocoder()
        self.max_concurrency = max_concurrency or settings.geocode_max_concurrency
        enabled = settings.spatial_search_enabled if spatial_enabled is None else spatial_enabled
        self.zip_strategies: List[RadiusStrategy] = [
            SpatialIndexStrategy(spatial_repository, enabled=enabled),
            BulkZipRadiusStrategy(zip_radius_client or ZipRadiusClient()),
            PerRecordGeocodeStrategy(profile_repository),
        ]
        self.city_strategies: List[RadiusStrategy] = [CityRadiusStrategy(profile_repository)]

    async def resolve(self, request: RadiusRequest) -> RadiusResolution:
        geo = RequestGeocoder(self.geocoder, self.max_concurrency)
        if request.center_zip_codes:
            strategies = self.zip_strategies
        elif request.city:
            strategies = self.city_strategies
        else:
            strategies = []

        for strategy in strategies:
            try:
                resolution = await strategy.resolve(request, geo)
            except Exception as exc:
                logger.error("Radius strategy %s failed: %s", strategy.name, exc, exc_info=True)
                resolution = RadiusResolution.unavailable(strategy.name)

            prometheus_metrics.record_radius_resolution(strategy.name, resolution.outcome.value)
            logger.info("Radius strategy %s -> %s", strategy.name, resolution.outcome.value)
            if resolution.outcome is not RadiusOutcome.UNAVAILABLE:
                return resolution

        resolution = await self._degrade_to_state(request, geo)
        prometheus_metrics.record_radius_resolution(resolution.strategy, resolution.outcome.value)
        return resolution

    async def _degrade_to_state(
        self, request: RadiusRequest, geo: RequestGeocoder
    ) -> RadiusResolution:
        state = request.state
        if not state and request.center_zip_codes:
            try:
                location = await geo.zip(request.center_zip_codes[0])
            except Exception as exc:
                logger.warning("State lookup for %s failed: %s", request.center_zip_codes[0], exc)
                location = None
            state = location.state if location else None

        if state:
            logger.warning("Radius search unavailable; narrowing to state %s", state.upper())
            return RadiusResolution.matched("state_fallback", StateEqualsPredicate(state.upper()))

        logger.warning("Radius search unavailable and no state derivable; returning no results")
        return RadiusResolution.empty("state_fallback")
