from .base_repository import BaseRepository
from .location_email_repository import LocationEmailRepository, LocationEmailResult
from .profile_repository import ProfileRepository
from .spatial_repository import SpatialRepository

__all__ = [
    "BaseRepository",
    "LocationEmailRepository",
    "LocationEmailResult",
    "ProfileRepository",
    "SpatialRepository",
]
