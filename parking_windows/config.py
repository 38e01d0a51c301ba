"""Configuration constants for the free parking window finder."""
from __future__ import annotations

# OpenCurb search endpoint returning curb regulations as geojson features
OPEN_CURB_URL: str = "http://www.opencurb.nyc/search.php"

# NYC 311 calendar endpoint listing alternate side parking suspensions
NYC_CALENDAR_URL: str = "https://api.nyc.gov/public/api/GetCalendar"

# Environment variable holding the NYC API subscription key
SUBSCRIPTION_KEY_ENV: str = "Ocp_Apim_Subscription_Key"

# Timeout (seconds) for HTTP requests to either endpoint
HTTP_TIMEOUT: int = 30

# Search radius around the requested coordinate, in meters
DEFAULT_RADIUS_METERS: int = 200

VEHICLE_TYPE: str = "PASSENGER"
ACTION_TYPE: str = "PARK"

# Number of windows included in the rendered message
DEFAULT_TOP_N: int = 3

# Only windows starting in [start, end) hours of the day are ranked
BUSINESS_HOURS: tuple[int, int] = (9, 18)

# How far ahead the suspension calendar is read
CALENDAR_LOOKAHEAD_DAYS: int = 90

# Phrase marking a regulation as a free parking allowance
FREE_PARKING_MARKER: str = "Free Parking"

ALTERNATE_SIDE_TYPE: str = "Alternate Side Parking"
SUSPENDED_STATUS: str = "SUSPENDED"
METERS_SUSPENDED_PHRASE: str = "meters are suspended"

DEFAULT_PLACE: str = "you"

FAILURE_MESSAGE: str = "Sorry, we weren't able to find parking regulations near you. Please try again!"
