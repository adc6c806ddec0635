"""
BOSS Geo API Constants

Endpoint URLs, OAuth parameters and the per-endpoint error tables.
"""

from .models import ErrorTable

PLACEFINDER_URL = "http://yboss.yahooapis.com/geo/placefinder"
PLACESPOTTER_URL = "http://yboss.yahooapis.com/geo/placespotter"

PLACEFINDER_ROOT = "placefinder"
PLACESPOTTER_ROOT = "placespotter"

BOSS_ENVELOPE = "bossresponse"
BOSS_RESPONSE_CODE = "responsecode"
BOSS_SUCCESS_CODE = 200

OAUTH_VERSION = "1.0"
OAUTH_SIGNATURE_METHOD = "HMAC-SHA1"
OAUTH_NONCE_LENGTH = 32
RESPONSE_FORMAT = "json"

BASE62_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
# Largest length whose range 62**length still fits in a double
MAX_NONCE_LENGTH = 171

DEFAULT_REQUEST_TIMEOUT = 10

# See http://developer.yahoo.com/boss/geo/docs/pf-errorcodes.html
PLACEFINDER_ERRORS = ErrorTable(
    codes={
        1: "Feature not supported",
        100: "No input parameters",
        102: "Address data not recognized as valid UTF-8",
        103: "Insufficient address data",
        104: "Unknown language",
        105: "No country detected",
        106: "Country not supported",
        107: "Unput Parameter Too Long",  # (sic)
        108: "No Airport Found",
        109: "No DMA Code Found",
        110: "Error Geocoding IP Address",
        2001: "Error With Neighborhoods",
        2002: "Error With WOE",
        2003: "Error With Results Sizes",
    },
    patterns={
        "10NN": "Internal problem detected",
    },
)

# See http://developer.yahoo.com/boss/geo/docs/response-errors.html
PLACESPOTTER_ERRORS = ErrorTable(
    codes={
        400: "Bad Request: The appid parameter was invalid or not specified.",
        404: "Not Found: The URI has no match in the display map.",
        413: (
            "Request Entity Too Large: There is currently a 50,000 byte limit for documents processed by "
            "PlaceSpotter. Documents above this length are rejected."
        ),
        415: "Unsupported Media Type: Document specified does not have a supported document type.",
        999: (
            "Unable to process request at this time: Your application is probably sending too many requests, "
            "too quickly. This can happen if you are batching requests."
        ),
    },
)
