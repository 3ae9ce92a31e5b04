"""Factory for geocoding providers."""

from typing import Optional

from ...core.config import settings
from .base import GeocodingProvider
from .live_provider import LiveGeocodingProvider
from .mock_provider import MockGeocodingProvider


def create_geocoding_provider(provider_override: Optional[str] = None) -> GeocodingProvider:
    name = (provider_override or settings.geocoding_provider or "live").lower()
    provider: GeocodingProvider
    if name == "mock":
        provider = MockGeocodingProvider()
    else:
        provider = LiveGeocodingProvider()
    return provider
