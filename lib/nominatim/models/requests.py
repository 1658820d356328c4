"""
Nominatim request models.

Each request knows how to render itself into a flat parameter map. Options
shared by all requests are rendered by BaseRequest.buildParameters(), the
concrete request types add their own parameters via _buildRequestParameters().

Example:
    >>> request = SearchRequest(query="Unter den Linden 1, Berlin", countryCodes=["de"])
    >>> params = request.buildParameters(urlEncode=True)
    >>> params["q"]
    'Unter+den+Linden+1%2C+Berlin'
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import StrEnum
from typing import List, Optional, Sequence

from ..constants import (
    DEFAULT_LANGUAGE,
    DEFAULT_LIMIT,
    DEFAULT_ZOOM,
    MAX_ZOOM,
    MIN_ZOOM,
    RESPONSE_FORMAT,
)
from ..url import ParameterMap, encodeQueryValue


def _flag(value: Optional[bool]) -> str:
    return "1" if value else "0"


def normalizeLimit(limit: Optional[int]) -> int:
    """Return limit, or DEFAULT_LIMIT for None and values below 1."""
    if limit is None or limit < 1:
        return DEFAULT_LIMIT
    return limit


def normalizeZoom(zoom: Optional[int]) -> int:
    """Return zoom if it is within [MIN_ZOOM, MAX_ZOOM], DEFAULT_ZOOM otherwise."""
    if zoom is None or zoom < MIN_ZOOM or zoom > MAX_ZOOM:
        return DEFAULT_ZOOM
    return zoom


class OsmType(StrEnum):
    """OpenStreetMap object type as used by the osm_type parameter"""

    NODE = "N"
    WAY = "W"
    RELATION = "R"

    @classmethod
    def fromValue(cls, value: Optional[str]) -> Optional["OsmType"]:
        """Find OSM type by value ("n", "W", ...) or name ("way"), case insensitive.

        Returns:
            Matching OsmType or None
        """
        if not value:
            return None
        value = value.strip().upper()
        for osmType in cls:
            if value == osmType.value or value == osmType.name:
                return osmType
        return None


@dataclass
class BaseRequest(ABC):
    """Options shared by search and reverse search requests, dood!

    Attributes:
        acceptLanguage: Preferred language order for results, either an RFC 2616
            accept-language string or a comma separated list of language codes.
            DEFAULT_LANGUAGE is used when empty.
        addressDetails: Include a breakdown of the address into elements
        email: Contact address; include it when making large numbers of requests
        polygon: Output geometry of results in GeoJSON format
        extraTags: Include additional information (wikipedia link, opening hours, ...)
        nameDetails: Include alternative names (language variants, brand, ...)
    """

    acceptLanguage: Optional[str] = DEFAULT_LANGUAGE
    addressDetails: bool = True
    email: Optional[str] = None
    polygon: bool = True
    extraTags: bool = True
    nameDetails: bool = True

    def buildParameters(self, urlEncode: bool = True) -> ParameterMap:
        """Render the request into its query parameter map.

        Never fails: unset or out of range values are replaced with defaults.

        Args:
            urlEncode: Whether free text values should be percent-encoded

        Returns:
            Ordered parameter name to value mapping
        """
        params: ParameterMap = {
            "format": RESPONSE_FORMAT,
            "accept-language": encodeQueryValue(self.acceptLanguage or DEFAULT_LANGUAGE, urlEncode),
            "addressdetails": _flag(self.addressDetails),
        }
        if self.email:
            params["email"] = encodeQueryValue(self.email, urlEncode)
        params["polygon_geojson"] = _flag(self.polygon)
        params["extratags"] = _flag(self.extraTags)
        params["namedetails"] = _flag(self.nameDetails)
        params.update(self._buildRequestParameters(urlEncode))
        return params

    @abstractmethod
    def _buildRequestParameters(self, urlEncode: bool) -> ParameterMap:
        """Render parameters specific to the request type."""
        raise NotImplementedError


@dataclass
class BaseSearchRequest(BaseRequest):
    """Options shared by free-text and structured search requests.

    Attributes:
        countryCodes: ISO 3166-1alpha2 codes to limit results to, e.g. ["gb", "de"]
        viewBox: Preferred area as [x1, y1, x2, y2]; any two corners spanning a box
        bounded: Restrict results to items within viewBox
        excludePlaceIds: place_ids to skip, used to broaden a previous search
        limit: Maximum number of results, values below 1 fall back to DEFAULT_LIMIT
        dedupe: Let the service drop duplicates of the same real-world object
        debug: Request developer debug output (HTML) instead of JSON
    """

    countryCodes: List[str] = field(default_factory=list)
    viewBox: Optional[Sequence[float]] = None
    bounded: bool = False
    excludePlaceIds: List[str] = field(default_factory=list)
    limit: Optional[int] = DEFAULT_LIMIT
    dedupe: bool = True
    debug: bool = False

    def __post_init__(self) -> None:
        self.limit = normalizeLimit(self.limit)

    def _buildRequestParameters(self, urlEncode: bool) -> ParameterMap:
        params: ParameterMap = {}
        countryCodes = list(dict.fromkeys(code.strip() for code in self.countryCodes or [] if code and code.strip()))
        if countryCodes:
            params["countrycodes"] = ",".join(encodeQueryValue(code, urlEncode) for code in countryCodes)
        if self.viewBox is not None and len(self.viewBox) == 4:
            params["viewbox"] = ",".join(str(coord) for coord in self.viewBox)
        params["bounded"] = _flag(self.bounded)
        excludePlaceIds = [str(placeId) for placeId in self.excludePlaceIds or [] if placeId]
        if excludePlaceIds:
            params["exclude_place_ids"] = encodeQueryValue(",".join(excludePlaceIds), urlEncode)
        params["limit"] = str(normalizeLimit(self.limit))
        params["dedupe"] = _flag(self.dedupe)
        params["debug"] = _flag(self.debug)
        params.update(self._buildSearchParameters(urlEncode))
        return params

    @abstractmethod
    def _buildSearchParameters(self, urlEncode: bool) -> ParameterMap:
        """Render the query part of the search."""
        raise NotImplementedError


@dataclass
class SearchRequest(BaseSearchRequest):
    """Free-text search, e.g. "Unter den Linden 1, Berlin"."""

    query: Optional[str] = None

    def _buildSearchParameters(self, urlEncode: bool) -> ParameterMap:
        return {"q": encodeQueryValue(self.query, urlEncode)}


@dataclass
class StructuredSearchRequest(BaseSearchRequest):
    """Search by address parts. Only non-empty parts are sent."""

    street: Optional[str] = None  # "<housenumber> <streetname>"
    city: Optional[str] = None
    county: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    postalCode: Optional[str] = None

    def _buildSearchParameters(self, urlEncode: bool) -> ParameterMap:
        params: ParameterMap = {}
        for name, value in (
            ("street", self.street),
            ("city", self.city),
            ("county", self.county),
            ("state", self.state),
            ("country", self.country),
            ("postalcode", self.postalCode),
        ):
            if value:
                params[name] = encodeQueryValue(value, urlEncode)
        return params


@dataclass
class BaseReverseSearchRequest(BaseRequest):
    """Options shared by reverse search requests.

    Attributes:
        zoom: Level of detail, MIN_ZOOM (country) .. MAX_ZOOM (house/building).
            Values outside the range fall back to DEFAULT_ZOOM.
    """

    zoom: Optional[int] = DEFAULT_ZOOM

    def __post_init__(self) -> None:
        self.zoom = normalizeZoom(self.zoom)

    def _buildRequestParameters(self, urlEncode: bool) -> ParameterMap:
        params: ParameterMap = {"zoom": str(normalizeZoom(self.zoom))}
        params.update(self._buildReverseSearchParameters(urlEncode))
        return params

    @abstractmethod
    def _buildReverseSearchParameters(self, urlEncode: bool) -> ParameterMap:
        """Render the location part of the reverse search."""
        raise NotImplementedError


@dataclass
class ReverseSearchRequest(BaseReverseSearchRequest):
    """Reverse search by coordinates."""

    lat: Optional[float] = None
    lon: Optional[float] = None

    def _buildReverseSearchParameters(self, urlEncode: bool) -> ParameterMap:
        return {
            "lat": str(self.lat) if self.lat is not None else "0",
            "lon": str(self.lon) if self.lon is not None else "0",
        }


@dataclass
class OsmIdReverseSearchRequest(BaseReverseSearchRequest):
    """Reverse search by OSM object reference, e.g. OsmType.WAY + "50637691"."""

    osmType: Optional[OsmType] = None
    osmId: Optional[str] = None

    def _buildReverseSearchParameters(self, urlEncode: bool) -> ParameterMap:
        params: ParameterMap = {}
        osmType = OsmType.fromValue(str(self.osmType)) if self.osmType is not None else None
        if osmType is not None:
            params["osm_type"] = osmType.value
        if self.osmId:
            params["osm_id"] = str(self.osmId)
        return params
