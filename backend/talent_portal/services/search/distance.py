"""Great-circle distance helpers (miles)."""

import math
from typing import NamedTuple

from ...core.constants import EARTH_RADIUS_MILES, MILES_PER_DEGREE_LATITUDE


class BoundingBox(NamedTuple):
    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float

    def contains(self, lat: float, lng: float) -> bool:
        return self.min_lat <= lat <= self.max_lat and self.min_lng <= lng <= self.max_lng


def calculate_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Haversine distance between two points, in miles."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # Clamp for float drift on antipodal points
    a = min(1.0, max(0.0, a))
    return 2 * EARTH_RADIUS_MILES * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def bounding_box(lat: float, lng: float, radius_miles: float) -> BoundingBox:
    """
    Rectangle that encloses the circle of ``radius_miles`` around (lat, lng).

    Uses 1 degree latitude ~ 69 mi and 1 degree longitude ~ 69 * cos(lat) mi.
    Good enough as a pre-check; callers confirm with calculate_distance.
    """
    lat_delta = radius_miles / MILES_PER_DEGREE_LATITUDE
    cos_lat = math.cos(math.radians(lat))
    if cos_lat < 1e-6:
        lng_delta = 180.0
    else:
        lng_delta = min(180.0, radius_miles / (MILES_PER_DEGREE_LATITUDE * cos_lat))
    return BoundingBox(
        min_lat=lat - lat_delta,
        max_lat=lat + lat_delta,
        min_lng=lng - lng_delta,
        max_lng=lng + lng_delta,
    )


def within_radius(lat1: float, lng1: float, lat2: float, lng2: float, radius_miles: float) -> bool:
    if not bounding_box(lat1, lng1, radius_miles).contains(lat2, lng2):
        return False
    return calculate_distance(lat1, lng1, lat2, lng2) <= radius_miles
