"""Tests for response parsing."""
import pytest
from weather_parser import check_api_error, parse
from weather_provider import ApiError, ParseError, WeatherProviderError


def test_parse_skips_header():
    """Test that text before the first brace is ignored."""
    assert parse(b'HEADER\n{"a":1}') == {"a": 1}


def test_parse_accepts_text():
    assert parse('{"a": [1, 2, {"b": null}]}') == {"a": [1, 2, {"b": None}]}


def test_parse_full_response(sample_raw, sample_snapshot):
    """Test a response with an HTTP header block."""
    snapshot = parse(sample_raw)

    assert snapshot == sample_snapshot
    days = snapshot["forecast"]["txt_forecast"]["forecastday"]
    assert [day["title"] for day in days] == ["Sunday", "Sunday Night"]


def test_parse_keeps_epoch_string():
    """Test that large epoch strings stay exact strings."""
    snapshot = parse(b'{"current_observation": {"local_epoch": "99999999999999999999"}}')

    assert snapshot["current_observation"]["local_epoch"] == "99999999999999999999"


def test_parse_no_brace():
    """Test that a payload without a JSON object fails."""
    with pytest.raises(ParseError):
        parse(b"HTTP/1.1 502 Bad Gateway\r\n\r\nupstream down")


def test_parse_empty():
    with pytest.raises(ParseError):
        parse(b"")


def test_parse_invalid_json():
    """Test that broken JSON after the brace fails."""
    with pytest.raises(ParseError) as exc_info:
        parse(b'HEADER\n{"a": 1,')

    assert "Failed to parse response" in str(exc_info.value)


def test_parse_error_is_provider_error():
    """Test that callers catching WeatherProviderError see parse errors."""
    with pytest.raises(WeatherProviderError):
        parse(b"no json here")


def test_check_api_error_passes_good_response(sample_snapshot):
    check_api_error(sample_snapshot)
    check_api_error({"a": 1})


def test_check_api_error_raises():
    """Test in-band API errors such as an unknown key."""
    snapshot = {
        "response": {
            "error": {"type": "keynotfound", "description": "this key does not exist"}
        }
    }

    with pytest.raises(ApiError) as exc_info:
        check_api_error(snapshot)

    assert "keynotfound" in str(exc_info.value)
    assert "this key does not exist" in str(exc_info.value)


def test_parse_invalid_utf8():
    """Test that bytes which are not UTF-8 are rejected, not replaced."""
    with pytest.raises(ParseError):
        parse(b'HEADER\n{"weather": "\xff\xfe"}')


def test_parse_utf8_text_kept():
    snapshot = parse('HEADER\n{"city": "Zürich"}'.encode("utf-8"))

    assert snapshot == {"city": "Zürich"}
