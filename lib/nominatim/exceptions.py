"""
Nominatim Client Exceptions

This module contains the exception classes raised by the Nominatim clients.
Nothing is retried: every error is propagated to the caller as one of these.
"""

import logging
from typing import Optional

from .constants import ERROR_CODE_GENERAL_REQUEST_ERROR, ERROR_CODE_MALFORMED_URL, INTERNAL_ERROR_STATUS

logger = logging.getLogger(__name__)


class NominatimError(Exception):
    """Base exception class for all Nominatim client errors, dood!

    Attributes:
        message: Human-readable error message
        code: Client error code (see constants.ERROR_CODE_*)
    """

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        logger.debug(f"NominatimError: {message} (code: {code})")

    def __str__(self) -> str:
        if self.code:
            return f"{self.message} (code: {self.code})"
        return self.message


class NominatimConfigurationError(NominatimError):
    """Raised when the configured endpoint does not produce a valid URL.

    This is a client-side error: it is raised before any network call is made.

    Attributes:
        statusCode: Always INTERNAL_ERROR_STATUS (500), as for other failures
            without an HTTP response
    """

    def __init__(self, message: str, code: Optional[str] = ERROR_CODE_MALFORMED_URL) -> None:
        super().__init__(message, code)
        self.statusCode = INTERNAL_ERROR_STATUS


class NominatimRequestError(NominatimError):
    """Raised when a request to the Nominatim service fails.

    Covers HTTP error responses (status >= 400), connection failures
    (DNS, timeout, I/O) and responses that can not be decoded.

    Attributes:
        statusCode: HTTP status code of the response, or 500 if no usable
            response was received
        body: Raw response body text (for HTTP error responses)
    """

    def __init__(
        self,
        message: str,
        statusCode: int,
        body: Optional[str] = None,
        code: Optional[str] = ERROR_CODE_GENERAL_REQUEST_ERROR,
    ) -> None:
        super().__init__(message, code)
        self.statusCode = statusCode
        self.body = body

    def __str__(self) -> str:
        return f"{super().__str__()} [status: {self.statusCode}]"
