"""
Nominatim API Client Library

This module provides blocking and async Python clients for the Nominatim
geocoding service (nominatim.openstreetmap.org or a self-hosted instance)
with typed requests and responses.

Example usage:
    from lib.nominatim import (
        AsyncNominatimClient,
        NominatimClient,
        NominatimProperties,
        ReverseSearchRequest,
        SearchRequest,
    )

    client = NominatimClient(NominatimProperties(userAgent="my-app/1.0 (me@example.org)"))

    # Forward geocoding
    results = client.geocode(SearchRequest(query="Unter den Linden 1, Berlin"))

    # Reverse geocoding
    place = client.reverseGeocode(ReverseSearchRequest(lat=52.5170365, lon=13.3888599))

    # Async variant
    async for result in AsyncNominatimClient().geocode(SearchRequest(query="Angarsk")):
        ...
"""

from .async_client import AsyncNominatimClient
from .base_client import BaseNominatimClient
from .client import NominatimClient
from .config import NominatimProperties, loadConfig
from .exceptions import NominatimConfigurationError, NominatimError, NominatimRequestError
from .models import (
    Address,
    BaseRequest,
    BaseReverseSearchRequest,
    BaseSearchRequest,
    OsmIdReverseSearchRequest,
    OsmType,
    ReverseSearchRequest,
    SearchRequest,
    SearchResult,
    StructuredSearchRequest,
)
from .url import ParameterMap, buildUrl

__all__ = [
    "AsyncNominatimClient",
    "BaseNominatimClient",
    "NominatimClient",
    "NominatimProperties",
    "loadConfig",
    "NominatimError",
    "NominatimConfigurationError",
    "NominatimRequestError",
    "Address",
    "SearchResult",
    "BaseRequest",
    "BaseSearchRequest",
    "BaseReverseSearchRequest",
    "SearchRequest",
    "StructuredSearchRequest",
    "ReverseSearchRequest",
    "OsmIdReverseSearchRequest",
    "OsmType",
    "ParameterMap",
    "buildUrl",
]
