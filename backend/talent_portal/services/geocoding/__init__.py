from .base import GeocodingProvider, ZipLocation
from .geocoder import Geocoder

__all__ = ["Geocoder", "GeocodingProvider", "ZipLocation"]
