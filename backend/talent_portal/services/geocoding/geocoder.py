"""
Geocoder facade used by the radius search.

Postal codes go to the configured provider first and fall back to the static
prefix table. City lookups have no offline fallback. Provider failures are
logged and never propagate to callers.
"""

import logging
from typing import Optional

import httpx

from ...monitoring.prometheus_metrics import prometheus_metrics
from .approximate import approximate_zip_location
from .base import GeocodingProvider, ZipLocation
from .factory import create_geocoding_provider

logger = logging.getLogger(__name__)


class Geocoder:
    def __init__(self, provider: Optional[GeocodingProvider] = None) -> None:
        self.provider = provider or create_geocoding_provider()

    async def geocode_zip(self, zip_code: str) -> Optional[ZipLocation]:
        code = (zip_code or "").strip()
        if not code:
            return None

        location: Optional[ZipLocation] = None
        try:
            location = await self.provider.lookup_zip(code)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Postal-code lookup failed for %s: %s", code, exc)

        if location is not None:
            prometheus_metrics.record_geocode("zip", location.source)
            return location

        fallback = approximate_zip_location(code)
        if fallback is None:
            prometheus_metrics.record_geocode("zip", "miss")
            return None
        logger.warning("Using approximate prefix coordinate for %s", code)
        prometheus_metrics.record_geocode("zip", fallback.source)
        return fallback

    async def geocode_city(self, city: str, state: Optional[str] = None) -> Optional[ZipLocation]:
        name = (city or "").strip()
        if not name:
            return None
        wanted = (state or "").strip().upper() or None

        location: Optional[ZipLocation] = None
        try:
            location = await self.provider.lookup_city(name, wanted)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("City lookup failed for %s, %s: %s", name, wanted, exc)

        # A coordinate from another state is worse than none
        if location is not None and wanted and location.state and location.state.upper() != wanted:
            logger.warning(
                "Discarding city match for %s in %s (wanted %s)", name, location.state, wanted
            )
            location = None

        prometheus_metrics.record_geocode("city", location.source if location else "miss")
        return location
