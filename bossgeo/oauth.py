"""
OAuth 1.0a request signing for BOSS Geo

Only the two-legged flavour is supported: requests are signed with the
consumer key/secret, there is no token and no token secret.
"""

import base64
import hashlib
import hmac
import logging
import secrets
import time
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union
from urllib.parse import quote

from .constants import (
    BASE62_ALPHABET,
    MAX_NONCE_LENGTH,
    OAUTH_NONCE_LENGTH,
    OAUTH_SIGNATURE_METHOD,
    OAUTH_VERSION,
    RESPONSE_FORMAT,
)
from .exceptions import ConfigurationError
from .models import SignedRequest

logger = logging.getLogger(__name__)

RequestParams = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


def _toParamStr(value: Any) -> str:
    # Booleans and None are spelled as on the wire: true, false, null
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def percentEncode(value: Any) -> str:
    """Percent-encode value per RFC 3986 (only ``A-Za-z0-9-._~`` stay as is)."""
    return quote(_toParamStr(value), safe="")


def _iterParams(params: RequestParams) -> Iterable[Tuple[str, Any]]:
    if isinstance(params, Mapping):
        return params.items()
    return params


def encodeQueryString(params: RequestParams) -> str:
    """Build canonical query string, dood!

    Keys and values are percent-encoded, the first occurrence of an encoded
    key wins and pairs are sorted by encoded key.

    Args:
        params: Mapping or iterable of (key, value) pairs; booleans and None become
            ``true``/``false``/``null``, other values are coerced to str

    Returns:
        Query string like ``a=1&b=2``, empty string for empty params
    """
    encoded: Dict[str, str] = {}
    for key, value in _iterParams(params):
        encodedKey = percentEncode(key)
        if encodedKey in encoded:
            continue
        encoded[encodedKey] = percentEncode(value)

    return "&".join(f"{key}={encoded[key]}" for key in sorted(encoded))


def toBase62(num: int) -> str:
    """Render non-negative integer in base 62."""
    if num == 0:
        return BASE62_ALPHABET[0]

    digits: List[str] = []
    while num > 0:
        num, rem = divmod(num, len(BASE62_ALPHABET))
        digits.append(BASE62_ALPHABET[rem])
    return "".join(reversed(digits))


def generateNonce(length: int = OAUTH_NONCE_LENGTH) -> str:
    """Generate cryptographically random base-62 string of exactly given length.

    A value is drawn uniformly from [0, 62**length) by rejection sampling
    over random bytes, so there is no modulo bias.

    Raises:
        ValueError: If length is less than 1 or greater than MAX_NONCE_LENGTH
    """
    if length < 1:
        raise ValueError(f"Length must be positive: {length}")
    if length > MAX_NONCE_LENGTH:
        raise ValueError(f"Length too large: {length}")

    maxNum = len(BASE62_ALPHABET) ** length
    numBytes = ((maxNum - 1).bit_length() + 7) // 8

    while True:
        num = int.from_bytes(secrets.token_bytes(numBytes), "little")
        if num < maxNum:
            break

    return toBase62(num).rjust(length, BASE62_ALPHABET[0])


def _isNonEmptyStr(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0


def signRequest(
    method: str,
    baseUrl: str,
    params: RequestParams,
    consumerKey: str,
    consumerSecret: str,
    *,
    nonce: Optional[str] = None,
    timestamp: Optional[Union[int, str]] = None,
) -> SignedRequest:
    """Sign request with OAuth 1.0a HMAC-SHA1 using consumer credentials only.

    OAuth parameters (and ``format=json``) take precedence over caller
    parameters with the same name.

    Args:
        method: HTTP method, uppercased for the base string
        baseUrl: Endpoint URL without query string
        params: Request parameters
        consumerKey: OAuth consumer key
        consumerSecret: OAuth consumer secret
        nonce: Fixed nonce (default: fresh 32-character nonce)
        timestamp: Fixed Unix timestamp in seconds (default: now)

    Returns:
        SignedRequest holding the final URL and signing intermediates

    Raises:
        ConfigurationError: If consumer key or secret is missing or empty
    """
    if not _isNonEmptyStr(consumerKey) or not _isNonEmptyStr(consumerSecret):
        raise ConfigurationError()

    if nonce is None:
        nonce = generateNonce(OAUTH_NONCE_LENGTH)
    if timestamp is None:
        timestamp = int(time.time())

    oauthParams: Dict[str, Any] = {
        "oauth_version": OAUTH_VERSION,
        "oauth_consumer_key": consumerKey,
        "oauth_nonce": nonce,
        "oauth_signature_method": OAUTH_SIGNATURE_METHOD,
        "oauth_timestamp": str(timestamp),
        "format": RESPONSE_FORMAT,
    }
    # First occurrence wins in encoder, so OAuth params go first
    allParams = list(oauthParams.items()) + list(_iterParams(params))

    queryString = encodeQueryString(allParams)
    method = method.upper()
    baseString = f"{method}&{percentEncode(baseUrl)}&{percentEncode(queryString)}"
    logger.debug(f"Signature base string: {baseString}")
    signingKey = f"{percentEncode(consumerSecret)}&"

    digest = hmac.new(signingKey.encode("utf-8"), baseString.encode("utf-8"), hashlib.sha1).digest()
    signature = base64.b64encode(digest).decode("ascii")

    return SignedRequest(
        method=method,
        baseUrl=baseUrl,
        queryString=queryString,
        baseString=baseString,
        signature=signature,
        url=f"{baseUrl}?{queryString}&oauth_signature={percentEncode(signature)}",
    )
