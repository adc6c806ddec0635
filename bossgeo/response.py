"""
BOSS response envelope handling

Turns the raw JSON body returned by BOSS Geo into either the requested
result payload or a typed BossGeoError.
"""

import json
import logging
import math
import re
from typing import Any, Optional

from .constants import BOSS_ENVELOPE, BOSS_RESPONSE_CODE, BOSS_SUCCESS_CODE
from .exceptions import MalformedResponseError, ProviderError, UnknownProviderError
from .models import ErrorTable

logger = logging.getLogger(__name__)

_CODE_PREFIX_RE = re.compile(r"\s*([+-]?\d+)")


def _rejectConstant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def parseResponseCode(rawCode: Any) -> Optional[int]:
    """Parse ``responsecode`` value: ints as is, strings by leading integer."""
    if isinstance(rawCode, bool):
        return None
    if isinstance(rawCode, int):
        return rawCode
    if isinstance(rawCode, float):
        return int(rawCode) if math.isfinite(rawCode) else None
    if isinstance(rawCode, str):
        match = _CODE_PREFIX_RE.match(rawCode)
        if match:
            try:
                return int(match.group(1))
            except ValueError:
                # Exceeds int string conversion limit
                return None
    return None


def parseBossResponse(body: Any, rootPropertyName: str, errorTable: ErrorTable) -> Any:
    """Normalize BOSS response body, dood!

    Args:
        body: Raw response body (JSON text)
        rootPropertyName: Name of result field inside ``bossresponse``
        errorTable: Endpoint's error table for non-200 codes

    Returns:
        Value of the root property (None if the provider omitted it)

    Raises:
        MalformedResponseError: If body is not JSON or has no ``bossresponse`` object
        ProviderError: If response code is not 200 and is known to the error table
        UnknownProviderError: If response code is not 200 and is unknown
    """
    try:
        payload = json.loads(body, parse_constant=_rejectConstant)
    except (TypeError, ValueError, RecursionError) as e:
        raise MalformedResponseError(response=body) from e

    envelope = payload.get(BOSS_ENVELOPE) if isinstance(payload, dict) else None
    if not isinstance(envelope, dict):
        raise MalformedResponseError(response=body)

    rawCode = envelope.get(BOSS_RESPONSE_CODE)
    code = parseResponseCode(rawCode)
    if not rawCode or code != BOSS_SUCCESS_CODE:
        logger.debug(f"BOSS returned response code {rawCode!r}")
        message = errorTable.lookup(code)
        if message is None:
            raise UnknownProviderError(code=code, response=envelope)
        raise ProviderError(message, code=code, response=envelope)

    return envelope.get(rootPropertyName)
