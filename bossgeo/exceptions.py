"""
BOSS Geo Client Exceptions

This module contains the exception classes raised (or delivered to callbacks)
by the BOSS Geo client. Every failure mode derives from BossGeoError.
"""

import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)

MALFORMED_RESPONSE_MESSAGE = "Did not receive JSON in response."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"
MISSING_CREDENTIALS_MESSAGE = (
    "You must set the appropriate parameters to authenticate against BOSS Geo. Check your client and try again."
)


class BossGeoError(Exception):
    """Base exception class for all BOSS Geo errors, dood!

    Attributes:
        message: Human-readable error message
        code: Provider response code (if available)
        response: Raw response data (if available)
    """

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        response: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.response = response
        logger.debug(f"{type(self).__name__}: {message} (code: {code})")

    def __str__(self) -> str:
        return self.message


class ConfigurationError(BossGeoError):
    """Raised when credentials or configuration are missing or invalid.

    Always raised before any network activity takes place.
    """

    def __init__(self, message: str = MISSING_CREDENTIALS_MESSAGE) -> None:
        super().__init__(message)


class TransportError(BossGeoError):
    """Raised when the HTTP request itself fails (network error, timeout).

    The message is the transport's own message; the underlying httpx
    exception is kept in ``original`` and chained as ``__cause__``.
    """

    def __init__(self, message: str, original: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.original = original


class MalformedResponseError(BossGeoError):
    """Raised when the body is not JSON or lacks the ``bossresponse`` envelope."""

    def __init__(self, message: str = MALFORMED_RESPONSE_MESSAGE, response: Optional[Any] = None) -> None:
        super().__init__(message, response=response)


class ProviderError(BossGeoError):
    """Raised when the provider reports a non-200 response code."""

    def __init__(self, message: str, code: Optional[int] = None, response: Optional[Any] = None) -> None:
        super().__init__(message, code, response)


class UnknownProviderError(ProviderError):
    """Raised for provider response codes missing from the endpoint's error table."""

    def __init__(
        self, message: str = UNKNOWN_ERROR_MESSAGE, code: Optional[int] = None, response: Optional[Any] = None
    ) -> None:
        super().__init__(message, code, response)
