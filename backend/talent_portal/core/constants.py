"""Application-wide constants for the Talent Portal API."""

from __future__ import annotations

BRAND_NAME = "InterTalent Portal"
API_TITLE = f"{BRAND_NAME} API"
API_DESCRIPTION = "Search, filter and request associates from the InterTalent roster."
API_VERSION = "1.0.0"

# Geodesy
EARTH_RADIUS_MILES = 3959.0
METERS_PER_MILE = 1609.344
MILES_PER_DEGREE_LATITUDE = 69.0

# Query limits
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 1000
MAX_PAGE = 100_000

# Contact routing
DEFAULT_CONTACT_EMAIL = "info@intersolutions.com"

# Sort key -> profiles column
SORT_COLUMNS = {
    "name": "first_name",
    "location": "city",
    "profession": "profession_type",
}

US_STATE_NAMES = {
    "AL": "Alabama",
    "AK": "Alaska",
    "AZ": "Arizona",
    "AR": "Arkansas",
    "CA": "California",
    "CO": "Colorado",
    "CT": "Connecticut",
    "DE": "Delaware",
    "DC": "District of Columbia",
    "FL": "Florida",
    "GA": "Georgia",
    "HI": "Hawaii",
    "ID": "Idaho",
    "IL": "Illinois",
    "IN": "Indiana",
    "IA": "Iowa",
    "KS": "Kansas",
    "KY": "Kentucky",
    "LA": "Louisiana",
    "ME": "Maine",
    "MD": "Maryland",
    "MA": "Massachusetts",
    "MI": "Michigan",
    "MN": "Minnesota",
    "MS": "Mississippi",
    "MO": "Missouri",
    "MT": "Montana",
    "NE": "Nebraska",
    "NV": "Nevada",
    "NH": "New Hampshire",
    "NJ": "New Jersey",
    "NM": "New Mexico",
    "NY": "New York",
    "NC": "North Carolina",
    "ND": "North Dakota",
    "OH": "Ohio",
    "OK": "Oklahoma",
    "OR": "Oregon",
    "PA": "Pennsylvania",
    "PR": "Puerto Rico",
    "RI": "Rhode Island",
    "SC": "South Carolina",
    "SD": "South Dakota",
    "TN": "Tennessee",
    "TX": "Texas",
    "UT": "Utah",
    "VT": "Vermont",
    "VA": "Virginia",
    "WA": "Washington",
    "WV": "West Virginia",
    "WI": "Wisconsin",
    "WY": "Wyoming",
}

US_STATE_CODES = {name.upper(): code for code, name in US_STATE_NAMES.items()}
