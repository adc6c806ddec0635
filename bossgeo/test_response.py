"""
Unit tests for BOSS response normalization and error tables
"""

import json

import pytest

from .constants import PLACEFINDER_ERRORS, PLACESPOTTER_ERRORS
from .exceptions import BossGeoError, MalformedResponseError, ProviderError, UnknownProviderError
from .models import ErrorTable
from .response import parseBossResponse, parseResponseCode


def test_success_returns_root_property():
    """Test code 200 yields the named result field, dood!"""
    body = '{"bossresponse":{"responsecode":"200","placefinder":{"foo":"bar"}}}'

    assert parseBossResponse(body, "placefinder", PLACEFINDER_ERRORS) == {"foo": "bar"}


def test_success_with_integer_code():
    """Test numeric response code is accepted too."""
    body = json.dumps({"bossresponse": {"responsecode": 200, "placespotter": {"document": {}}}})

    assert parseBossResponse(body, "placespotter", PLACESPOTTER_ERRORS) == {"document": {}}


def test_success_without_root_property():
    """Test missing result field yields None without validation."""
    body = '{"bossresponse":{"responsecode":"200"}}'

    assert parseBossResponse(body, "placefinder", PLACEFINDER_ERRORS) is None


def test_known_error_code():
    """Test known code is mapped to its description, dood!"""
    body = '{"bossresponse":{"responsecode":"103"}}'

    with pytest.raises(ProviderError) as excInfo:
        parseBossResponse(body, "placefinder", PLACEFINDER_ERRORS)

    assert str(excInfo.value) == "Insufficient address data"
    assert excInfo.value.code == 103
    assert not isinstance(excInfo.value, UnknownProviderError)


def test_unknown_error_code():
    """Test unrecognized code yields generic unknown error."""
    body = '{"bossresponse":{"responsecode":"9999"}}'

    with pytest.raises(UnknownProviderError) as excInfo:
        parseBossResponse(body, "placefinder", PLACEFINDER_ERRORS)

    assert str(excInfo.value) == "An unknown error occurred"
    assert excInfo.value.code == 9999


def test_missing_response_code():
    """Test missing response code is an unknown error, dood!"""
    with pytest.raises(UnknownProviderError):
        parseBossResponse('{"bossresponse":{"placefinder":{}}}', "placefinder", PLACEFINDER_ERRORS)


def test_placespotter_table_is_used():
    """Test endpoint table decides the message."""
    body = '{"bossresponse":{"responsecode":"413"}}'

    with pytest.raises(ProviderError, match="50,000 byte limit"):
        parseBossResponse(body, "placespotter", PLACESPOTTER_ERRORS)

    # 413 means nothing to PlaceFinder
    with pytest.raises(UnknownProviderError):
        parseBossResponse(body, "placefinder", PLACEFINDER_ERRORS)


@pytest.mark.parametrize(
    "body",
    [
        "<html>Service Unavailable</html>",
        "",
        "null",
        "[1, 2]",
        '"bossresponse"',
        '{"other": {}}',
        '{"bossresponse": "200"}',
        None,
    ],
)
def test_malformed_response(body):
    """Test non-JSON or envelope-less bodies, dood!"""
    with pytest.raises(MalformedResponseError) as excInfo:
        parseBossResponse(body, "placefinder", PLACEFINDER_ERRORS)

    assert str(excInfo.value) == "Did not receive JSON in response."
    assert excInfo.value.response == body
    assert isinstance(excInfo.value, BossGeoError)


def test_internal_problem_wildcard():
    """Test 10NN internal problem codes are matched by pattern, dood!"""
    for code in ("1000", "1042", "1099"):
        with pytest.raises(ProviderError, match="Internal problem detected"):
            parseBossResponse(f'{{"bossresponse":{{"responsecode":"{code}"}}}}', "placefinder", PLACEFINDER_ERRORS)

    assert PLACEFINDER_ERRORS.lookup(1100) is None
    assert PLACEFINDER_ERRORS.lookup(100) == "No input parameters"


def test_error_table_is_read_only():
    """Test error tables cannot be modified."""
    with pytest.raises(TypeError):
        PLACEFINDER_ERRORS.codes[103] = "changed"  # type: ignore[index]

    table = ErrorTable(codes={1: "one"})
    assert table.lookup(1) == "one"
    assert table.lookup(None) is None
    assert table.lookup(2) is None


@pytest.mark.parametrize(
    "rawCode,expected",
    [
        ("200", 200),
        (" 103 ", 103),
        ("200abc", 200),
        (200, 200),
        (200.0, 200),
        ("abc", None),
        (None, None),
        (True, None),
        (float("inf"), None),
        (float("-inf"), None),
        (float("nan"), None),
        ("9" * 5000, None),
        ({}, None),
    ],
)
def test_parse_response_code(rawCode, expected):
    """Test integer-prefix parsing of response codes."""
    assert parseResponseCode(rawCode) == expected


@pytest.mark.parametrize(
    "body",
    [
        '{"bossresponse":{"responsecode":Infinity}}',
        '{"bossresponse":{"responsecode":-Infinity}}',
        '{"bossresponse":{"responsecode":NaN}}',
        '{"bossresponse":{"responsecode":"200","placefinder":{"radius":NaN}}}',
    ],
)
def test_non_standard_json_constants_are_malformed(body):
    """Test NaN and Infinity tokens are rejected like any non-JSON body, dood!"""
    with pytest.raises(MalformedResponseError, match="Did not receive JSON in response."):
        parseBossResponse(body, "placefinder", PLACEFINDER_ERRORS)


def test_deeply_nested_body_is_malformed():
    """Test nesting beyond parser recursion limit is a malformed response."""
    body = "[" * 100000 + "]" * 100000

    with pytest.raises(MalformedResponseError):
        parseBossResponse(body, "placefinder", PLACEFINDER_ERRORS)


@pytest.mark.parametrize("rawCode", ["1e999", "-1e999", '"' + "9" * 5000 + '"'])
def test_unrepresentable_response_code_is_unknown(rawCode):
    """Test overflowing response codes give unknown error instead of crashing, dood!"""
    body = f'{{"bossresponse":{{"responsecode":{rawCode}}}}}'

    with pytest.raises(UnknownProviderError) as excInfo:
        parseBossResponse(body, "placefinder", PLACEFINDER_ERRORS)

    assert excInfo.value.code is None
