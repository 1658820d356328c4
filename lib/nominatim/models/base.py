"""
Base model class for Nominatim response objects.

Provides BaseNominatimModel which keeps every JSON field the model does not
know about in `api_kwargs`, so responses survive a decode/encode round-trip
even when the service adds new fields.
"""

import logging
from typing import Any, Dict, Iterator, Optional, Self

logger = logging.getLogger(__name__)

EXTRA_DEBUG = False


class BaseNominatimModel:
    """
    Base Class for all Nominatim response models
    """

    __slots__ = ("api_kwargs",)

    api_kwargs: Dict[str, Any]
    """Raw response fields not modelled explicitly, plus known fields that were null"""

    def __init__(self, *, api_kwargs: Optional[Dict[str, Any]] = None):
        if api_kwargs is None:
            api_kwargs = {}
        self.api_kwargs = api_kwargs

    @classmethod
    def _getClassAttrsNames(cls) -> Iterator[str]:
        """Get attribute names from __slots__ hierarchy, excluding api_kwargs."""
        return (s for c in cls.__mro__[:-1] for s in c.__slots__ if s != "api_kwargs")

    @classmethod
    def _getExtraKwargs(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """Extract fields not defined in class __slots__.

        Known fields which are explicitly null in the response are kept as
        well, so to_dict() can emit them again.

        Args:
            data: Dictionary of all response data

        Returns:
            Dictionary of fields that are not defined class attributes or are null
        """
        knownArgs = set(cls._getClassAttrsNames())
        ret = {k: v for k, v in data.items() if k not in knownArgs or v is None}
        if EXTRA_DEBUG and ret:
            logger.debug(f"{cls.__name__}: extra fields {sorted(ret.keys())}")
        return ret

    def to_dict(self) -> Dict[str, Any]:
        """Convert model back to its JSON representation, dood!

        Unset (None) fields are omitted unless they were null in the decoded
        response. Nested models are converted recursively and unknown fields
        from `api_kwargs` are re-emitted.

        Returns:
            Dictionary ready for json.dumps()
        """
        data: Dict[str, Any] = {}
        for key in self._getClassAttrsNames():
            value = getattr(self, key, None)
            if value is None:
                continue
            if isinstance(value, BaseNominatimModel):
                value = value.to_dict()
            data[key] = value

        for key, value in self.api_kwargs.items():
            data.setdefault(key, value)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Self:
        """Create model instance from response dictionary.

        Args:
            data: Dictionary containing response data.

        Returns:
            New instance created from the provided data.
        """
        return cls(api_kwargs=data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        asDict = {k: getattr(self, k, None) for k in self._getClassAttrsNames()}
        contents = ", ".join(f"{k}={asDict[k]!r}" for k in sorted(asDict.keys()) if asDict[k] is not None)
        return f"{self.__class__.__name__}({contents})"

    def __str__(self) -> str:
        return self.__repr__()
