"""Shared fixtures: a Weather Underground style snapshot."""
import json
import pytest


@pytest.fixture
def sample_snapshot():
    """Snapshot with current conditions and two forecast days."""
    return {
        "response": {"version": "0.1", "features": {"conditions": 1, "forecast": 1}},
        "current_observation": {
            "display_location": {"city": "Springfield", "state": "IL"},
            "weather": "Cloudy",
            "temp_f": 55,
            "relative_humidity": "80%",
            "precip_1hr_in": "0.02",
            "wind_string": "Calm",
            "local_epoch": "1000000000",
        },
        "forecast": {
            "txt_forecast": {
                "forecastday": [
                    {"period": 0, "title": "Sunday", "fcttext": "Cloudy. High 58F."},
                    {"period": 1, "title": "Sunday Night", "fcttext": "Showers. Low 44F."},
                ]
            }
        },
    }


@pytest.fixture
def sample_raw(sample_snapshot):
    """Raw response bytes with header text before the JSON body."""
    header = "HTTP/1.1 200 OK\r\nContent-Type: application/json\r\n\r\n"
    return (header + json.dumps(sample_snapshot)).encode("utf-8")
