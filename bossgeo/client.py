"""
BOSS Geo API Async Client

This module provides the main BossGeoClient class for interacting with
the Yahoo! BOSS Geo API (PlaceFinder and PlaceSpotter).
"""

import inspect
import logging
import re
from typing import Any, Dict, Mapping, Optional

import httpx

from .constants import (
    DEFAULT_REQUEST_TIMEOUT,
    PLACEFINDER_ERRORS,
    PLACEFINDER_ROOT,
    PLACEFINDER_URL,
    PLACESPOTTER_ERRORS,
    PLACESPOTTER_ROOT,
    PLACESPOTTER_URL,
)
from .exceptions import BossGeoError, TransportError
from .models import ErrorTable, PlaceFinderResponse, PlaceSpotterResponse, ResultCallback, SignedRequest
from .oauth import signRequest
from .response import parseBossResponse

logger = logging.getLogger(__name__)

_JSON_FLAG_RE = re.compile("j", re.IGNORECASE)


def forceJsonFlags(flags: Any) -> str:
    """Return PlaceFinder flags with ``J`` (JSON output) forced, other flags kept."""
    if flags is None:
        return "J"
    return _JSON_FLAG_RE.sub("", str(flags)) + "J"


async def _deliver(callback: ResultCallback, error: Optional[Exception], result: Optional[Any]) -> None:
    outcome = callback(error, result)
    if inspect.isawaitable(outcome):
        await outcome


class BossGeoClient:
    """Async client for BOSS Geo API with OAuth 1.0a signing, dood!

    Creates new HTTP session for each request, so concurrent calls on the
    same client are safe. Credentials are only validated when a request is
    made.

    Example:
        >>> client = BossGeoClient(consumerKey="key", consumerSecret="secret")
        >>> found = await client.placefinder({"location": "701 First Ave, Sunnyvale"})
        >>> spotted = await client.placespotter({"documentContent": "Hello from Paris"})
        >>>
        >>> # Node-style completion callback instead of exceptions
        >>> def onDone(error, result):
        ...     print(error or result)
        >>> await client.placefinder({"location": "Paris"}, onDone)
    """

    __slots__ = ("consumerKey", "consumerSecret", "requestTimeout")

    def __init__(
        self,
        consumerKey: str,
        consumerSecret: str,
        *,
        requestTimeout: Optional[float] = DEFAULT_REQUEST_TIMEOUT,
    ):
        """Initialize BOSS Geo client.

        Args:
            consumerKey: OAuth consumer key
            consumerSecret: OAuth consumer secret
            requestTimeout: HTTP request timeout in seconds, None to disable (default: 10)
        """
        self.consumerKey = consumerKey
        self.consumerSecret = consumerSecret
        self.requestTimeout = requestTimeout

    @classmethod
    def fromConfig(cls, config: Mapping[str, Any]) -> "BossGeoClient":
        """Create client from ``[boss-geo]`` configuration section."""
        return cls(
            consumerKey=config.get("consumer-key", ""),
            consumerSecret=config.get("consumer-secret", ""),
            requestTimeout=config.get("request-timeout", DEFAULT_REQUEST_TIMEOUT),
        )

    async def placefinder(
        self,
        params: Optional[Mapping[str, Any]] = None,
        callback: Optional[ResultCallback] = None,
    ) -> Optional[PlaceFinderResponse]:
        """Geocode address or place with PlaceFinder.

        The ``flags`` parameter always gets ``J`` so the provider answers in
        JSON; any other flags given by caller are preserved.

        Args:
            params: PlaceFinder query parameters, see
                http://developer.yahoo.com/boss/geo/docs/location-parameters.html
            callback: Optional ``(error, result)`` completion callback

        Returns:
            Value of ``placefinder`` field (None on error when callback is given)

        Raises:
            BossGeoError: On any failure, unless callback is given
        """
        requestParams: Dict[str, Any] = dict(params or {})
        requestParams["flags"] = forceJsonFlags(requestParams.get("flags"))

        return await self._query(PLACEFINDER_URL, requestParams, PLACEFINDER_ROOT, PLACEFINDER_ERRORS, callback)

    async def placespotter(
        self,
        params: Optional[Mapping[str, Any]] = None,
        callback: Optional[ResultCallback] = None,
    ) -> Optional[PlaceSpotterResponse]:
        """Extract places from text with PlaceSpotter.

        Forces ``outputType=json`` and drops JSONP ``callback`` parameter.

        Args:
            params: PlaceSpotter query parameters, see
                http://developer.yahoo.com/boss/geo/docs/placespotter_webservice.html
            callback: Optional ``(error, result)`` completion callback

        Returns:
            Value of ``placespotter`` field (None on error when callback is given)

        Raises:
            BossGeoError: On any failure, unless callback is given
        """
        requestParams: Dict[str, Any] = dict(params or {})
        requestParams["outputType"] = "json"
        requestParams.pop("callback", None)

        return await self._query(PLACESPOTTER_URL, requestParams, PLACESPOTTER_ROOT, PLACESPOTTER_ERRORS, callback)

    async def _query(
        self,
        baseUrl: str,
        params: Dict[str, Any],
        rootPropertyName: str,
        errorTable: ErrorTable,
        callback: Optional[ResultCallback],
    ) -> Optional[Any]:
        """Sign, send and normalize single request, reporting result exactly once."""
        try:
            signed = signRequest("GET", baseUrl, params, self.consumerKey, self.consumerSecret)
            body = await self._makeRequest(signed)
            result = parseBossResponse(body, rootPropertyName, errorTable)
        except BossGeoError as e:
            if callback is None:
                raise
            await _deliver(callback, e, None)
            return None

        if callback is not None:
            await _deliver(callback, None, result)
        return result

    async def _makeRequest(self, signed: SignedRequest) -> str:
        """Make signed HTTP request to BOSS Geo API.

        Any HTTP status is accepted: the provider reports its errors inside
        the JSON envelope.

        Returns:
            Response body text

        Raises:
            TransportError: On network error or timeout
        """
        logger.debug(f"Making {signed.method} request to {signed.baseUrl} with query: {signed.queryString}")

        try:
            # Create new session for each request
            async with httpx.AsyncClient(timeout=self.requestTimeout) as session:
                response = await session.get(signed.url)
        except httpx.HTTPError as e:
            raise TransportError(str(e) or type(e).__name__, original=e) from e

        logger.debug(f"Got HTTP {response.status_code} from {signed.baseUrl}")
        return response.text
