"""Provider-agnostic geocoding interfaces."""

from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel


class ZipLocation(BaseModel):
    """A request-scoped coordinate estimate for a postal code or city."""

    label: str
    latitude: float
    longitude: float
    state: Optional[str] = None
    source: str = "provider"


class GeocodingProvider(ABC):
    @abstractmethod
    async def lookup_zip(self, zip_code: str) -> Optional[ZipLocation]:
        pass

    @abstractmethod
    async def lookup_city(self, city: str, state: Optional[str] = None) -> Optional[ZipLocation]:
        pass
