"""
Address model for Nominatim responses.
"""

from typing import Any, Dict, Optional

from .base import BaseNominatimModel

# Address fields which may hold the name of the settlement, most specific last
CITY_FIELDS = ("city", "town", "village", "municipality", "hamlet", "city_district", "suburb")


class Address(BaseNominatimModel):
    """
    Structured address breakdown of a place, dood!

    Field names follow the service. All fields are optional, as different places
    have different address structures. Fields not listed here (e.g.
    "ISO3166-2-lvl4") are kept in `api_kwargs`.
    """

    __slots__ = (
        "house_number",
        "road",
        "neighbourhood",
        "suburb",
        "city_district",
        "city",
        "town",
        "village",
        "municipality",
        "hamlet",
        "county",
        "state",
        "postcode",
        "country",
        "country_code",
        "continent",
        "building",
        "public_building",
        "tram_stop",
    )

    def __init__(
        self,
        *,
        house_number: Optional[str] = None,
        road: Optional[str] = None,
        neighbourhood: Optional[str] = None,
        suburb: Optional[str] = None,
        city_district: Optional[str] = None,
        city: Optional[str] = None,
        town: Optional[str] = None,
        village: Optional[str] = None,
        municipality: Optional[str] = None,
        hamlet: Optional[str] = None,
        county: Optional[str] = None,
        state: Optional[str] = None,
        postcode: Optional[str] = None,
        country: Optional[str] = None,
        country_code: Optional[str] = None,
        continent: Optional[str] = None,
        building: Optional[str] = None,
        public_building: Optional[str] = None,
        tram_stop: Optional[str] = None,
        api_kwargs: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(api_kwargs=api_kwargs)
        self.house_number: Optional[str] = house_number
        self.road: Optional[str] = road  # "Unter den Linden"
        self.neighbourhood: Optional[str] = neighbourhood
        self.suburb: Optional[str] = suburb
        self.city_district: Optional[str] = city_district
        self.city: Optional[str] = city
        self.town: Optional[str] = town
        self.village: Optional[str] = village
        self.municipality: Optional[str] = municipality
        self.hamlet: Optional[str] = hamlet
        self.county: Optional[str] = county
        self.state: Optional[str] = state
        self.postcode: Optional[str] = postcode
        self.country: Optional[str] = country
        self.country_code: Optional[str] = country_code  # ISO code, lowercase ("de")
        self.continent: Optional[str] = continent
        self.building: Optional[str] = building
        self.public_building: Optional[str] = public_building
        self.tram_stop: Optional[str] = tram_stop

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Address":
        """Create Address instance from response dictionary.

        Args:
            data: The "address" object of a search result

        Returns:
            Address: New Address instance
        """
        return cls(
            **{key: data.get(key) for key in cls._getClassAttrsNames()},
            api_kwargs=cls._getExtraKwargs(data),
        )

    def findCity(self) -> Optional[str]:
        """Find the city-like name of the address.

        Small settlements are reported by the service as town, village,
        hamlet etc. instead of city.

        Returns:
            First non-empty value of CITY_FIELDS or None
        """
        for field in CITY_FIELDS:
            value = getattr(self, field)
            if value:
                return value
        return None

    @property
    def formattedAddress(self) -> Optional[str]:
        """Single line address, e.g. "Unter den Linden 1, 10117 Berlin, Deutschland"."""
        street = " ".join(part for part in (self.road, self.house_number) if part)
        place = " ".join(part for part in (self.postcode, self.findCity()) if part)
        parts = [part for part in (street, place, self.country) if part]
        if not parts:
            return None
        return ", ".join(parts)
