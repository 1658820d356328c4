"""
Nominatim Blocking Client

This module provides NominatimClient, which performs the HTTP call on the
caller's thread using httpx.Client.
"""

import logging
from typing import List, Optional

import httpx

from .base_client import BaseNominatimClient
from .models import BaseReverseSearchRequest, BaseSearchRequest, SearchResult

logger = logging.getLogger(__name__)


class NominatimClient(BaseNominatimClient):
    """Blocking client for the Nominatim API, dood!

    Creates a new HTTP session for each request, so the session is always
    released, whatever the outcome.

    Example:
        >>> from lib.nominatim import NominatimClient, ReverseSearchRequest, SearchRequest
        >>>
        >>> client = NominatimClient()
        >>> results = client.geocode(SearchRequest(query="Unter den Linden 1, Berlin"))
        >>> if results and results[0].hasLatLon():
        ...     place = client.reverseGeocode(
        ...         ReverseSearchRequest(lat=results[0].latitude, lon=results[0].longitude)
        ...     )
        ...     print(place.address.findCity())
    """

    def geocode(self, request: BaseSearchRequest) -> List[SearchResult]:
        """Search for places (forward geocoding).

        Args:
            request: SearchRequest or StructuredSearchRequest

        Returns:
            List of results, empty if nothing was found

        Raises:
            NominatimConfigurationError: If the search URI is malformed
            NominatimRequestError: On HTTP error status, connection or decode failure
        """
        url = self.buildSearchUrl(request)
        response = self._get(url)
        return self._parseSearchResults(response)

    def reverseGeocode(self, request: BaseReverseSearchRequest) -> Optional[SearchResult]:
        """Find the place at a location (reverse geocoding).

        Args:
            request: ReverseSearchRequest or OsmIdReverseSearchRequest

        Returns:
            The result or None if nothing was found

        Raises:
            NominatimConfigurationError: If the reverse URI is malformed
            NominatimRequestError: On HTTP error status, connection or decode failure
        """
        url = self.buildReverseSearchUrl(request)
        response = self._get(url)
        return self._parseReverseResult(response)

    def _get(self, url: str) -> httpx.Response:
        logger.debug(f"Making request to {url}")
        try:
            with httpx.Client(timeout=self.properties.requestTimeout, follow_redirects=True) as session:
                response = session.get(url, headers=self._getHeaders())
        except httpx.RequestError as e:
            raise self._connectionError(url, e) from e

        self._checkResponse(url, response)
        logger.debug(f"API request successful: {response.status_code}")
        return response
