"""
Nominatim Client Constants

This module contains default endpoints, request defaults and error codes
used across the Nominatim client library.
"""

from typing import Final

VERSION: Final[str] = "1.0.0"

# Endpoints of the public OpenStreetMap instance
DEFAULT_SEARCH_URI: Final[str] = "https://nominatim.openstreetmap.org/search"
DEFAULT_REVERSE_URI: Final[str] = "https://nominatim.openstreetmap.org/reverse"
DEFAULT_USER_AGENT: Final[str] = f"nominatim-client/{VERSION}"
DEFAULT_TIMEOUT: Final[int] = 10

# Request defaults
RESPONSE_FORMAT: Final[str] = "jsonv2"
DEFAULT_LANGUAGE: Final[str] = "en"
DEFAULT_LIMIT: Final[int] = 10
MIN_ZOOM: Final[int] = 0  # country
MAX_ZOOM: Final[int] = 18  # house/building
DEFAULT_ZOOM: Final[int] = MAX_ZOOM

# Error codes
ERROR_CODE_MALFORMED_URL: Final[str] = "NOMINATIM_CLIENT:MALFORMED_URL"
ERROR_CODE_GENERAL_REQUEST_ERROR: Final[str] = "NOMINATIM_CLIENT:GENERAL_REQUEST_ERROR"

# Status used for failures that never got a usable HTTP response
INTERNAL_ERROR_STATUS: Final[int] = 500
