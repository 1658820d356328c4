"""
Models for the Nominatim client: requests and response objects.
"""

from .address import Address
from .base import BaseNominatimModel
from .requests import (
    BaseRequest,
    BaseReverseSearchRequest,
    BaseSearchRequest,
    OsmIdReverseSearchRequest,
    OsmType,
    ReverseSearchRequest,
    SearchRequest,
    StructuredSearchRequest,
    normalizeLimit,
    normalizeZoom,
)
from .result import GeoJsonGeometry, SearchResult

__all__ = [
    "Address",
    "BaseNominatimModel",
    "BaseRequest",
    "BaseReverseSearchRequest",
    "BaseSearchRequest",
    "GeoJsonGeometry",
    "OsmIdReverseSearchRequest",
    "OsmType",
    "ReverseSearchRequest",
    "SearchRequest",
    "SearchResult",
    "StructuredSearchRequest",
    "normalizeLimit",
    "normalizeZoom",
]
