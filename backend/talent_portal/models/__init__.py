"""
Database models for the Talent Portal.

- Profile: an associate on the searchable roster
- LocationEmail: office/location to distribution mailbox routing
"""

from .location_email import LocationEmail
from .profile import Profile

__all__ = ["LocationEmail", "Profile"]
