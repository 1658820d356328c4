"""
URL building for Nominatim requests.

Provides query value encoding used by the request models and the function
that glues a base endpoint and a parameter map into an absolute URL.
"""

import logging
from typing import Dict, Optional
from urllib.parse import quote_plus

import httpx

from .exceptions import NominatimConfigurationError

logger = logging.getLogger(__name__)

ParameterMap = Dict[str, str]
"""Ordered mapping of query parameter name to (possibly encoded) value"""


def encodeQueryValue(value: Optional[str], urlEncode: bool) -> str:
    """Encode single query value with form-urlencoded rules if requested.

    Args:
        value: Raw value, may be None or empty
        urlEncode: Whether to percent-encode the value (space becomes "+")

    Returns:
        Encoded value, or empty string for empty input
    """
    if not value:
        return ""
    if urlEncode:
        return quote_plus(value, encoding="utf-8")
    return value


def buildUrl(baseUri: str, params: ParameterMap) -> str:
    """Build absolute URL from base endpoint and parameters, dood!

    Parameters are appended as-is (they must be encoded already). If the base
    endpoint already carries a query string, parameters are appended with "&".

    Args:
        baseUri: Base endpoint, e.g. "https://nominatim.openstreetmap.org/search"
        params: Parameter map

    Returns:
        The URL string

    Raises:
        NominatimConfigurationError: If the result is not a valid absolute http(s) URL
            without fragment

    Example:
        >>> buildUrl("https://example.org/search", {"a": "1", "b": "2"})
        'https://example.org/search?a=1&b=2'
        >>> buildUrl("https://example.org/search?x=1", {"a": "1"})
        'https://example.org/search?x=1&a=1'
    """
    hasQuery = "?" in baseUri
    parts = [baseUri]
    for key, value in params.items():
        parts.append("&" if hasQuery else "?")
        hasQuery = True
        parts.append(f"{key}={value}")
    url = "".join(parts)

    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise NominatimConfigurationError(f"Malformed URL {url!r}: {e}") from e

    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise NominatimConfigurationError(f"Malformed URL {url!r}: absolute http(s) URL expected")
    # Parameters after "#" are never sent to the server
    if "#" in baseUri or parsed.fragment:
        raise NominatimConfigurationError(f"Malformed URL {url!r}: fragment is not allowed")

    return url
