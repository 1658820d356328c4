"""
Search result model for Nominatim responses.

Both /search (array) and /reverse (single object) return objects of the same
shape in the jsonv2 format, so one model covers both endpoints.
"""

import sys
from typing import Any, Dict, List, Optional

from .address import Address
from .base import BaseNominatimModel

if sys.version_info >= (3, 14):
    from typing import TypedDict
else:
    from typing_extensions import TypedDict


class GeoJsonGeometry(TypedDict, total=False, closed=False):
    """Geometry returned with polygon_geojson=1, dood!"""

    type: str  # "Point", "LineString", "Polygon", "MultiPolygon"
    coordinates: List[Any]  # Nested [lon, lat] arrays


def _toFloat(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class SearchResult(BaseNominatimModel):
    """
    Single place found by search or reverse search, dood!

    Coordinates are strings in the service response and are kept as such;
    use `latitude` / `longitude` for float values.
    """

    __slots__ = (
        "place_id",
        "licence",
        "osm_type",
        "osm_id",
        "lat",
        "lon",
        "category",
        "type",
        "place_rank",
        "importance",
        "addresstype",
        "name",
        "display_name",
        "address",
        "boundingbox",
        "extratags",
        "namedetails",
        "geojson",
    )

    def __init__(
        self,
        *,
        place_id: Optional[int] = None,
        licence: Optional[str] = None,
        osm_type: Optional[str] = None,
        osm_id: Optional[int] = None,
        lat: Optional[str] = None,
        lon: Optional[str] = None,
        category: Optional[str] = None,
        type: Optional[str] = None,
        place_rank: Optional[int] = None,
        importance: Optional[float] = None,
        addresstype: Optional[str] = None,
        name: Optional[str] = None,
        display_name: Optional[str] = None,
        address: Optional[Address] = None,
        boundingbox: Optional[List[str]] = None,
        extratags: Optional[Dict[str, str]] = None,
        namedetails: Optional[Dict[str, str]] = None,
        geojson: Optional[GeoJsonGeometry] = None,
        api_kwargs: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(api_kwargs=api_kwargs)
        self.place_id: Optional[int] = place_id
        self.licence: Optional[str] = licence
        self.osm_type: Optional[str] = osm_type  # "node", "way" or "relation"
        self.osm_id: Optional[int] = osm_id
        self.lat: Optional[str] = lat
        self.lon: Optional[str] = lon
        self.category: Optional[str] = category
        self.type: Optional[str] = type
        self.place_rank: Optional[int] = place_rank
        self.importance: Optional[float] = importance
        self.addresstype: Optional[str] = addresstype
        self.name: Optional[str] = name
        self.display_name: Optional[str] = display_name
        self.address: Optional[Address] = address
        # [min_lat, max_lat, min_lon, max_lon]
        self.boundingbox: Optional[List[str]] = boundingbox
        self.extratags: Optional[Dict[str, str]] = extratags
        self.namedetails: Optional[Dict[str, str]] = namedetails
        self.geojson: Optional[GeoJsonGeometry] = geojson

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchResult":
        """Create SearchResult instance from response dictionary.

        Args:
            data: Single result object from the response

        Returns:
            SearchResult: New SearchResult instance
        """
        address = data.get("address")
        return cls(
            place_id=data.get("place_id"),
            licence=data.get("licence"),
            osm_type=data.get("osm_type"),
            osm_id=data.get("osm_id"),
            lat=data.get("lat"),
            lon=data.get("lon"),
            category=data.get("category"),
            type=data.get("type"),
            place_rank=data.get("place_rank"),
            importance=data.get("importance"),
            addresstype=data.get("addresstype"),
            name=data.get("name"),
            display_name=data.get("display_name"),
            address=Address.from_dict(address) if isinstance(address, dict) else None,
            boundingbox=data.get("boundingbox"),
            extratags=data.get("extratags"),
            namedetails=data.get("namedetails"),
            geojson=data.get("geojson"),
            api_kwargs=cls._getExtraKwargs(data),
        )

    @property
    def latitude(self) -> Optional[float]:
        return _toFloat(self.lat)

    @property
    def longitude(self) -> Optional[float]:
        return _toFloat(self.lon)

    def hasLatLon(self) -> bool:
        """Check whether the result carries usable coordinates."""
        return self.latitude is not None and self.longitude is not None
