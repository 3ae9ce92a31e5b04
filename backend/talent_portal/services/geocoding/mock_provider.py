"""Mock geocoding provider for local development and unit tests (no network calls)."""

from typing import Dict, Optional, Tuple

from .approximate import approximate_zip_location
from .base import GeocodingProvider, ZipLocation

# (city, state) -> (lat, lng)
_KNOWN_CITIES: Dict[Tuple[str, str], Tuple[float, float]] = {
    ("AKRON", "OH"): (41.0814, -81.5190),
    ("CLEVELAND", "OH"): (41.4993, -81.6944),
    ("COLUMBUS", "OH"): (39.9612, -82.9988),
    ("CUYAHOGA FALLS", "OH"): (41.1339, -81.4846),
    ("NEW YORK", "NY"): (40.7128, -74.0060),
    ("CHICAGO", "IL"): (41.8781, -87.6298),
}


class MockGeocodingProvider(GeocodingProvider):
    async def lookup_zip(self, zip_code: str) -> Optional[ZipLocation]:
        # Deterministic: the regional prefix coordinate, labelled as a mock answer
        approx = approximate_zip_location(zip_code)
        if approx is None:
            return None
        return approx.model_copy(update={"source": "mock"})

    async def lookup_city(self, city: str, state: Optional[str] = None) -> Optional[ZipLocation]:
        name = (city or "").strip().upper()
        wanted = (state or "").strip().upper()
        for (known_city, known_state), (lat, lng) in _KNOWN_CITIES.items():
            if known_city != name:
                continue
            if wanted and wanted != known_state:
                continue
            return ZipLocation(
                label=city, latitude=lat, longitude=lng, state=known_state, source="mock"
            )
        return None
