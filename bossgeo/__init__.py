"""
BOSS Geo API Client Library

This module provides a Python async client library for the Yahoo! BOSS Geo
API (PlaceFinder geocoding and PlaceSpotter place extraction) with OAuth 1.0a
request signing and typed errors.

Example usage:
    from bossgeo import BossGeoClient, BossGeoError

    client = BossGeoClient(consumerKey="your_key", consumerSecret="your_secret")

    # Geocoding
    try:
        found = await client.placefinder({"location": "701 First Ave, Sunnyvale, CA"})
    except BossGeoError as e:
        print(f"Geocoding failed: {e}")

    # Place extraction, reporting through a (error, result) callback
    await client.placespotter(
        {"documentContent": "Dinner in Paris", "documentType": "text/plain"},
        lambda error, result: print(error or result),
    )
"""

from .client import BossGeoClient
from .constants import PLACEFINDER_ERRORS, PLACESPOTTER_ERRORS
from .exceptions import (
    BossGeoError,
    ConfigurationError,
    MalformedResponseError,
    ProviderError,
    TransportError,
    UnknownProviderError,
)
from .models import (
    ErrorTable,
    PlaceFinderResponse,
    PlaceFinderResult,
    PlaceSpotterDocument,
    PlaceSpotterResponse,
    ResultCallback,
    SignedRequest,
)
from .oauth import encodeQueryString, generateNonce, signRequest
from .response import parseBossResponse

__all__ = [
    "BossGeoClient",
    "BossGeoError",
    "ConfigurationError",
    "TransportError",
    "MalformedResponseError",
    "ProviderError",
    "UnknownProviderError",
    "ErrorTable",
    "SignedRequest",
    "PlaceFinderResult",
    "PlaceFinderResponse",
    "PlaceSpotterDocument",
    "PlaceSpotterResponse",
    "ResultCallback",
    "PLACEFINDER_ERRORS",
    "PLACESPOTTER_ERRORS",
    "encodeQueryString",
    "generateNonce",
    "signRequest",
    "parseBossResponse",
]
