"""
Offline stand-ins for geocoding, the radius service and the repositories.

The coordinate tables are hand-picked around Akron, OH so distances are easy
to reason about in radius tests.
"""

import threading
from typing import Dict, List, Optional, Sequence, Tuple

import httpx

from talent_portal.services.geocoding import GeocodingProvider, ZipLocation

# (latitude, longitude, state) for postal codes used across the suite.
# 00501 and ABC12 are deliberately absent and outside the prefix table.
ZIP_COORDINATES: Dict[str, Tuple[float, float, str]] = {
    "44289": (41.00, -81.50, "OH"),  # search center
    "44312": (41.02, -81.44, "OH"),  # ~3.5 mi
    "44221": (41.14, -81.48, "OH"),  # ~10 mi
    "44101": (41.50, -81.69, "OH"),  # ~36 mi
    "43215": (39.96, -83.00, "OH"),  # ~105 mi
    "45202": (39.10, -84.51, "OH"),  # ~200 mi
    "10001": (40.75, -73.99, "NY"),
}

CITY_COORDINATES: Dict[Tuple[str, str], Tuple[float, float]] = {
    ("akron", "OH"): (41.08, -81.52),
    ("cleveland", "OH"): (41.50, -81.69),
}


class FakeGeocodingProvider(GeocodingProvider):
    """In-memory provider; records every call so tests can assert on lookups."""

    def __init__(
        self,
        zips: Optional[Dict[str, Tuple[float, float, str]]] = None,
        cities: Optional[Dict[Tuple[str, str], Tuple[float, float]]] = None,
        fail: bool = False,
    ) -> None:
        self.zips = ZIP_COORDINATES if zips is None else zips
        self.cities = CITY_COORDINATES if cities is None else cities
        self.fail = fail
        self.zip_calls: List[str] = []
        self.city_calls: List[Tuple[str, Optional[str]]] = []

    async def lookup_zip(self, zip_code: str) -> Optional[ZipLocation]:
        self.zip_calls.append(zip_code)
        if self.fail:
            raise httpx.ConnectError("geocoder offline")
        entry = self.zips.get(zip_code)
        if entry is None:
            return None
        latitude, longitude, state = entry
        return ZipLocation(label=zip_code, latitude=latitude, longitude=longitude, state=state)

    async def lookup_city(self, city: str, state: Optional[str] = None) -> Optional[ZipLocation]:
        self.city_calls.append((city, state))
        if self.fail:
            raise httpx.ConnectError("geocoder offline")
        for (name, st), (latitude, longitude) in self.cities.items():
            if name == city.lower() and (state is None or st == state):
                return ZipLocation(
                    label=f"{city}, {st}", latitude=latitude, longitude=longitude, state=st
                )
        return None


class FakeProfileRepository:
    """Stands in for ProfileRepository.find_candidates in resolver tests."""

    def __init__(self, candidates: Sequence[Tuple[str, str]] = ()) -> None:
        self.candidates = list(candidates)
        self.prefilters: List[tuple] = []
        self.threads: List[int] = []

    def find_candidates(self, predicates) -> List[Tuple[str, str]]:
        self.prefilters.append(tuple(predicates))
        self.threads.append(threading.get_ident())
        return list(self.candidates)


class FakeSpatialRepository:
    def __init__(self, populated: bool = False, ids: Sequence[str] = (), error=None) -> None:
        self.populated = populated
        self.ids = list(ids)
        self.error = error
        self.calls: List[Tuple[list, float]] = []
        self.threads: List[int] = []

    def has_geo_locations(self) -> bool:
        self.threads.append(threading.get_ident())
        return self.populated

    def ids_within(self, centers, radius_meters: float) -> List[str]:
        self.calls.append((list(centers), radius_meters))
        self.threads.append(threading.get_ident())
        if self.error is not None:
            raise self.error
        return list(self.ids)


class FakeZipRadiusClient:
    def __init__(self, codes: Optional[Dict[str, List[str]]] = None, error=None) -> None:
        self.codes = codes or {}
        self.error = error
        self.calls: List[Tuple[str, float]] = []

    @property
    def configured(self) -> bool:
        return True

    async def zip_codes_within(self, zip_code: str, radius_miles: float) -> List[str]:
        self.calls.append((zip_code, radius_miles))
        if self.error is not None:
            raise self.error
        return list(self.codes.get(zip_code, []))
