from __future__ import annotations

import json

import httpx

from phonecheck.services.validator_client import ValidatorClient

BASE_URL = "http://validator.test"


def _client(handler) -> ValidatorClient:
    return ValidatorClient(BASE_URL, timeout=1.0, transport=httpx.MockTransport(handler))


def test_validate_posts_numbers_and_parses_batch():
    seen: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            200,
            json={
                "numbers": [
                    {
                        "number": "+14155552671",
                        "country_code": "+1",
                        "type": "FIXED_LINE_OR_MOBILE",
                        "is_possible": True,
                        "is_valid": True,
                    },
                    {"number": "invalid123", "error": "(0) Missing or invalid default region."},
                ],
                "valid_count": 1,
            },
        )

    result = _client(handler).validate(["+14155552671", "invalid123"])

    assert seen["url"] == f"{BASE_URL}/validate"
    assert seen["body"] == {"numbers": ["+14155552671", "invalid123"]}
    assert result is not None
    assert result.valid_count == 1
    assert result.numbers[0].is_valid is True
    assert result.numbers[0].error is None
    assert result.numbers[1].error == "(0) Missing or invalid default region."


def test_validate_keeps_batch_when_one_item_lacks_fields():
    response = httpx.Response(
        200,
        json={
            "numbers": [
                {"number": "+27821234567", "country_code": "+27"},
                {
                    "number": "+14155552671",
                    "country_code": "+1",
                    "type": "FIXED_LINE_OR_MOBILE",
                    "is_possible": True,
                    "is_valid": True,
                },
            ],
            "valid_count": 1,
        },
    )

    result = _client(lambda request: response).validate(["+27821234567", "+14155552671"])

    assert result is not None
    assert [item.number for item in result.numbers] == ["+27821234567", "+14155552671"]
    assert result.numbers[0].type is None
    assert result.numbers[0].is_valid is False


def test_validate_trailing_slash_in_base_url():
    client = ValidatorClient(f"{BASE_URL}/")

    assert client.validate_url == f"{BASE_URL}/validate"


def test_validate_transport_error_returns_none():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    assert _client(handler).validate(["+27821234567"]) is None


def test_validate_http_error_returns_none():
    assert _client(lambda request: httpx.Response(500, text="boom")).validate([]) is None


def test_validate_non_json_returns_none():
    assert _client(lambda request: httpx.Response(200, text="<html>")).validate([]) is None


def test_validate_unexpected_shape_returns_none():
    response = httpx.Response(200, json={"numbers": "nope", "valid_count": -1})

    assert _client(lambda request: response).validate([]) is None
