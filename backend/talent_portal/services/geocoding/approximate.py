"""
Static postal-code prefix table used when the live lookup is unreachable.

Each row covers an inclusive range of three-digit prefixes and maps it to a
representative regional coordinate. Rows are evaluated in order and the
first matching range wins, so overlapping rows further down never apply.
"""

from typing import Optional, Tuple

from .base import ZipLocation

# (min_prefix, max_prefix, latitude, longitude)
ZIP_PREFIX_RANGES: Tuple[Tuple[int, int, float, float], ...] = (
    (10, 27, 42.0, -71.0),
    (28, 29, 41.8, -71.4),
    (30, 38, 43.0, -71.5),
    (39, 49, 44.5, -69.0),
    (50, 59, 44.0, -72.7),
    (60, 69, 41.6, -72.7),
    (100, 149, 40.7, -74.0),
    (150, 196, 39.9, -75.2),
    (197, 199, 39.3, -76.6),
    (200, 205, 38.9, -77.0),
    (220, 246, 37.5, -77.5),
    (247, 268, 35.8, -78.6),
    (270, 289, 33.7, -84.4),
    (290, 299, 33.5, -86.8),
    (300, 329, 30.3, -81.7),
    (330, 349, 33.5, -86.8),
    (350, 369, 32.3, -86.3),
    (370, 397, 35.5, -86.6),
    (398, 399, 38.2, -85.7),
    (400, 427, 38.2, -85.7),
    (430, 432, 39.96, -82.99),  # Columbus, OH
    (433, 436, 39.76, -84.19),  # Dayton, OH
    (437, 438, 41.08, -81.52),  # Akron, OH
    (440, 449, 41.5, -81.7),  # Cleveland, OH
    (450, 458, 39.76, -86.16),
    (460, 479, 41.9, -87.6),
    (480, 499, 42.3, -83.0),
    (500, 528, 41.6, -93.6),
    (530, 549, 43.1, -89.4),
    (550, 567, 44.9, -93.3),
    (570, 577, 46.8, -100.8),
    (580, 588, 46.8, -100.8),
    (590, 599, 46.6, -112.0),
    (600, 629, 41.3, -96.0),
    (630, 658, 38.6, -90.2),
    (660, 679, 39.1, -94.6),
    (680, 699, 41.3, -96.0),
    (700, 729, 29.8, -95.4),
    (730, 749, 35.5, -97.5),
    (750, 799, 31.8, -99.9),
    (800, 816, 39.7, -104.9),
    (820, 831, 42.9, -106.3),
    (832, 838, 43.5, -112.0),
    (840, 847, 40.8, -111.9),
    (850, 865, 33.4, -112.1),
    (870, 884, 35.1, -106.6),
    (885, 898, 36.1, -115.2),
    (889, 891, 36.1, -115.2),
    (900, 961, 34.0, -118.2),
    (970, 979, 45.5, -122.7),
    (980, 994, 47.6, -122.3),
    (995, 999, 61.2, -149.9),
)


def approximate_zip_location(zip_code: str) -> Optional[ZipLocation]:
    """Return the regional coordinate for ``zip_code``'s prefix, or None."""
    code = (zip_code or "").strip()
    if len(code) < 3 or not code[:3].isdigit():
        return None

    prefix = int(code[:3])
    for low, high, lat, lng in ZIP_PREFIX_RANGES:
        if low <= prefix <= high:
            return ZipLocation(label=code, latitude=lat, longitude=lng, source="approximate")
    return None
