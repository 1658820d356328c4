"""
Shared logic of the blocking and the async Nominatim clients.

Both clients build URLs and decode responses the same way; they only differ
in how the HTTP GET is performed.
"""

import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from .config import NominatimProperties
from .constants import INTERNAL_ERROR_STATUS
from .exceptions import NominatimRequestError
from .models import BaseRequest, BaseReverseSearchRequest, BaseSearchRequest, SearchResult
from .url import buildUrl

logger = logging.getLogger(__name__)


class BaseNominatimClient:
    """Base for Nominatim clients, dood!

    Holds only immutable configuration, so one instance may be shared between
    threads and tasks.
    """

    def __init__(self, properties: Optional[NominatimProperties] = None):
        """Initialize client.

        Args:
            properties: Endpoints, user agent and timeout (default: public
                OpenStreetMap instance)
        """
        self.properties = properties if properties is not None else NominatimProperties()

    def buildSearchUrl(self, request: BaseSearchRequest) -> str:
        """Build search URL for request.

        Raises:
            NominatimConfigurationError: If the search URI is malformed
        """
        return self._buildUrl(self.properties.searchUri, request)

    def buildReverseSearchUrl(self, request: BaseReverseSearchRequest) -> str:
        """Build reverse search URL for request.

        Raises:
            NominatimConfigurationError: If the reverse URI is malformed
        """
        return self._buildUrl(self.properties.reverseUri, request)

    def _buildUrl(self, baseUri: str, request: BaseRequest) -> str:
        return buildUrl(baseUri, request.buildParameters(urlEncode=True))

    def _getHeaders(self) -> Dict[str, str]:
        return {
            "User-Agent": self.properties.userAgent,
            "Accept": "application/json",
        }

    def _checkResponse(self, url: str, response: httpx.Response) -> None:
        """Raise NominatimRequestError for status >= 300.

        Redirects are followed by the HTTP session, so a 3xx here is one
        without a usable Location. The body must already be read
        (non-streaming response).
        """
        if response.status_code < 300:
            return

        try:
            body = response.text
        except Exception as e:
            raise NominatimRequestError(
                "Reading error body failed.",
                statusCode=response.status_code,
            ) from e

        logger.warning(f"Request to {url} failed with status {response.status_code}: {body}")
        raise NominatimRequestError(
            f"Nominatim returned HTTP {response.status_code}",
            statusCode=response.status_code,
            body=body,
        )

    def _decodeJson(self, response: httpx.Response) -> Any:
        """Decode response body, None for an empty body."""
        if not response.content or not response.content.strip():
            return None
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Failed to parse JSON response: {e}")
            raise NominatimRequestError(
                "Reading response body failed.",
                statusCode=INTERNAL_ERROR_STATUS,
                body=response.text,
            ) from e

    def _parseSearchResults(self, response: httpx.Response) -> List[SearchResult]:
        """Decode /search response into list of results, empty list for no body."""
        data = self._decodeJson(response)
        if data is None:
            return []
        if not isinstance(data, list):
            raise NominatimRequestError(
                f"Unexpected search response: array expected, got {type(data).__name__}",
                statusCode=INTERNAL_ERROR_STATUS,
                body=response.text,
            )
        return [self._parseResult(item, response) for item in data]

    def _parseReverseResult(self, response: httpx.Response) -> Optional[SearchResult]:
        """Decode /reverse response, None if nothing was found."""
        data = self._decodeJson(response)
        if data is None:
            return None
        # The service answers HTTP 200 with {"error": "Unable to geocode"} if nothing is found
        if isinstance(data, dict) and "error" in data and "place_id" not in data:
            logger.debug(f"Reverse search found nothing: {data['error']}")
            return None
        return self._parseResult(data, response)

    def _parseResult(self, data: Any, response: httpx.Response) -> SearchResult:
        if not isinstance(data, dict):
            raise NominatimRequestError(
                f"Unexpected result: object expected, got {type(data).__name__}",
                statusCode=INTERNAL_ERROR_STATUS,
                body=response.text,
            )
        return SearchResult.from_dict(data)

    def _connectionError(self, url: str, e: Exception) -> NominatimRequestError:
        logger.error(f"Connecting to {url} failed: {type(e).__name__}#{e}")
        return NominatimRequestError(f"Connecting to {url} failed.", statusCode=INTERNAL_ERROR_STATUS)
