"""
BOSS Geo Data Models

This module defines the value types used by the BOSS Geo client: the signed
request, the per-endpoint error tables and TypedDict shapes for the
PlaceFinder and PlaceSpotter responses.
"""

import sys
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Union

if sys.version_info >= (3, 14):
    from typing import TypedDict
else:
    from typing_extensions import TypedDict

# Digit placeholder used in wildcard error codes like "10NN"
WILDCARD_DIGIT = "N"


@dataclass(frozen=True)
class SignedRequest:
    """OAuth 1.0a signed request, valid for exactly one call, dood!"""

    method: str
    baseUrl: str
    queryString: str
    baseString: str
    signature: str
    url: str


@dataclass(frozen=True)
class ErrorTable:
    """Read-only mapping of provider response codes to error descriptions.

    Exact integer codes are checked first, then wildcard patterns where
    ``N`` matches any single digit (e.g. ``"10NN"`` covers 1000-1099).
    """

    codes: Mapping[int, str]
    patterns: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "codes", MappingProxyType(dict(self.codes)))
        object.__setattr__(self, "patterns", MappingProxyType(dict(self.patterns)))

    def lookup(self, code: Optional[int]) -> Optional[str]:
        """Get error description for given code, or None if it is unknown."""
        if code is None:
            return None
        if code in self.codes:
            return self.codes[code]

        codeStr = str(code)
        for pattern, message in self.patterns.items():
            if len(pattern) != len(codeStr):
                continue
            if all(p == WILDCARD_DIGIT or p == c for p, c in zip(pattern, codeStr)):
                return message
        return None


class PlaceFinderResult(TypedDict, total=False, closed=False):
    """Single PlaceFinder result.

    All fields are optional, the provider omits whatever it does not know.
    """

    quality: str  # Result quality (0-99)
    latitude: str
    longitude: str
    offsetlat: str
    offsetlon: str
    radius: str  # Accuracy radius in meters
    name: str
    line1: str  # Street address
    line2: str  # City, state, postal
    line3: str
    line4: str  # Country
    house: str
    street: str
    xstreet: str
    unittype: str
    unit: str
    postal: str
    neighborhood: str
    city: str
    county: str
    state: str
    country: str
    countrycode: str
    statecode: str
    countycode: str
    uzip: str
    hash: str
    woeid: str  # Where On Earth ID
    woetype: str
    timezone: str
    airport: str


class PlaceFinderResponse(TypedDict, total=False, closed=False):
    """Value of the ``placefinder`` field of a successful response."""

    count: str
    start: str
    results: List[PlaceFinderResult]


class PlaceSpotterDocument(TypedDict, total=False, closed=False):
    """Document section of a PlaceSpotter response."""

    administrativeScope: Dict[str, Any]
    geographicScope: Dict[str, Any]
    extents: Dict[str, Any]
    placeDetails: Any  # Object for a single place, list for several
    referenceList: Any


class PlaceSpotterResponse(TypedDict, total=False, closed=False):
    """Value of the ``placespotter`` field of a successful response."""

    document: PlaceSpotterDocument
    processingTime: str
    version: str


ResultCallback = Callable[[Optional[Exception], Optional[Any]], Union[None, Awaitable[None]]]
