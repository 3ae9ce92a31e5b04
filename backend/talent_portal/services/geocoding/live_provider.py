"""Public-data geocoding provider: Zippopotam.us for postal codes, Nominatim for cities."""

import logging
from typing import Any, Dict, List, Optional

import httpx

from ...core.config import settings
from ...core.constants import US_STATE_CODES
from .base import GeocodingProvider, ZipLocation

logger = logging.getLogger(__name__)


def _state_code_candidates(address: Dict[str, Any]) -> List[str]:
    """Every spelling of the result's state we can turn into a 2-letter code."""
    codes: List[str] = []
    iso = str(address.get("ISO3166-2-lvl4") or "")
    if iso.upper().startswith("US-"):
        codes.append(iso[3:].upper())
    raw_state = str(address.get("state") or "").strip()
    if raw_state:
        mapped = US_STATE_CODES.get(raw_state.upper())
        if mapped:
            codes.append(mapped)
        codes.append(raw_state.upper())
    return codes


class LiveGeocodingProvider(GeocodingProvider):
    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self.zip_base_url = settings.zip_lookup_base_url.rstrip("/")
        self.city_search_url = settings.city_search_base_url
        self.user_agent = settings.geocoding_user_agent
        self.timeout = settings.geocode_timeout_seconds
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def lookup_zip(self, zip_code: str) -> Optional[ZipLocation]:
        async with self._client() as client:
            resp = await client.get(f"{self.zip_base_url}/{zip_code}")
            if resp.status_code != 200:
                return None
            return self._parse_zip(zip_code, resp)

    async def lookup_city(self, city: str, state: Optional[str] = None) -> Optional[ZipLocation]:
        wanted = (state or "").strip().upper() or None
        query = f"{city}, {wanted}, USA" if wanted else f"{city}, USA"
        params = {
            "q": query,
            "format": "json",
            "countrycodes": "us",
            "limit": 5,
            "addressdetails": 1,
            "featuretype": "settlement",
        }
        async with self._client() as client:
            resp = await client.get(
                self.city_search_url, params=params, headers={"User-Agent": self.user_agent}
            )
            if resp.status_code != 200:
                return None
            try:
                results = resp.json()
            except ValueError:
                return None

        if not isinstance(results, list):
            return None

        for result in results:
            address = result.get("address") or {}
            codes = _state_code_candidates(address)
            if wanted and wanted not in codes:
                continue
            try:
                lat = float(result["lat"])
                lng = float(result["lon"])
            except (KeyError, TypeError, ValueError):
                continue
            return ZipLocation(
                label=city,
                latitude=lat,
                longitude=lng,
                state=wanted or (codes[0] if codes else None),
                source="provider",
            )

        if wanted:
            logger.info("No city match for %s in state %s", city, wanted)
        return None

    @staticmethod
    def _parse_zip(zip_code: str, resp: httpx.Response) -> Optional[ZipLocation]:
        try:
            place = resp.json()["places"][0]
            return ZipLocation(
                label=zip_code,
                latitude=float(place["latitude"]),
                longitude=float(place["longitude"]),
                state=(place.get("state abbreviation") or None),
                source="provider",
            )
        except (KeyError, IndexError, TypeError, ValueError):
            logger.warning("Unparsable postal-code payload for %s", zip_code)
            return None
