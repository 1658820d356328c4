"""
Nominatim Async Client

This module provides AsyncNominatimClient, which performs the HTTP call with
httpx.AsyncClient. Search results are delivered as an async iterator, reverse
search as a single awaitable value.
"""

import logging
from typing import AsyncIterator, Optional

import httpx

from .base_client import BaseNominatimClient
from .models import BaseReverseSearchRequest, BaseSearchRequest, SearchResult

logger = logging.getLogger(__name__)


class AsyncNominatimClient(BaseNominatimClient):
    """Async client for the Nominatim API, dood!

    Creates a new HTTP session for each request to support proper concurrent
    operations. Every logical request makes exactly one HTTP call and is
    never retried. Cancellation is left to asyncio: cancelling the task (or
    closing the iterator) closes the session.

    Example:
        >>> from lib.nominatim import AsyncNominatimClient, ReverseSearchRequest, SearchRequest
        >>>
        >>> client = AsyncNominatimClient()
        >>> async for result in client.geocode(SearchRequest(query="Angarsk, Russia")):
        ...     print(result.display_name, result.lat, result.lon)
        >>>
        >>> place = await client.reverseGeocode(ReverseSearchRequest(lat=52.5443, lon=103.8882))
    """

    async def geocode(self, request: BaseSearchRequest) -> AsyncIterator[SearchResult]:
        """Search for places (forward geocoding).

        Lazy: the HTTP call is made when iteration starts. Errors are raised
        from the iteration.

        Args:
            request: SearchRequest or StructuredSearchRequest

        Yields:
            Search results, none if nothing was found

        Raises:
            NominatimConfigurationError: If the search URI is malformed
            NominatimRequestError: On HTTP error status, connection or decode failure
        """
        url = self.buildSearchUrl(request)
        response = await self._get(url)
        for result in self._parseSearchResults(response):
            yield result

    async def reverseGeocode(self, request: BaseReverseSearchRequest) -> Optional[SearchResult]:
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
        response = await self._get(url)
        return self._parseReverseResult(response)

    async def _get(self, url: str) -> httpx.Response:
        logger.debug(f"Making request to {url}")
        try:
            async with httpx.AsyncClient(timeout=self.properties.requestTimeout, follow_redirects=True) as session:
                response = await session.get(url, headers=self._getHeaders())
        except httpx.RequestError as e:
            raise self._connectionError(url, e) from e

        self._checkResponse(url, response)
        logger.debug(f"API request successful: {response.status_code}")
        return response
