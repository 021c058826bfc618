"""Shared pytest fixtures for Bright Sky tests."""

from __future__ import annotations

import base64
import struct
import zlib
from typing import Any, Dict, Generator

import pytest

from brightsky.config import reset_settings


@pytest.fixture
def clean_env(monkeypatch) -> None:
    """Remove all BRIGHTSKY_* env vars for isolated testing."""
    for var in ("BRIGHTSKY_BASE_URL", "BRIGHTSKY_TIMEOUT_SECONDS", "BRIGHTSKY_USER_AGENT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings singleton between tests to ensure isolation."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def source_payload() -> Dict[str, Any]:
    return {
        "id": 6007,
        "dwd_station_id": "00433",
        "wmo_station_id": "10384",
        "station_name": "Berlin-Tempelhof",
        "observation_type": "synop",
        "first_record": "2023-08-06T12:30:00+00:00",
        "last_record": "2023-08-07T12:00:00+00:00",
        "lat": 52.4676,
        "lon": 13.4037,
        "height": 48.0,
        "distance": 6168.0,
    }


@pytest.fixture
def current_weather_payload(source_payload: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "weather": {
            "timestamp": "2023-08-07T12:00:00+00:00",
            "source_id": 6007,
            "cloud_cover": 50.0,
            "condition": "dry",
            "dew_point": 12.3,
            "icon": "clear-day",
            "pressure_msl": 1015.2,
            "relative_humidity": 55,
            "temperature": 22.5,
            "visibility": 50000,
            "fallback_source_ids": {"cloud_cover": 7004},
            "precipitation_10": 0.0,
            "wind_speed_10": 11.2,
            "wind_direction_10": 250,
            "wind_gust_speed_60": None,
        },
        "sources": [source_payload],
    }


@pytest.fixture
def weather_payload(source_payload: Dict[str, Any]) -> Dict[str, Any]:
    forecast_source = dict(source_payload, id=24, observation_type="forecast", distance=None)
    return {
        "weather": [
            {
                "timestamp": "2025-01-15T00:00:00+01:00",
                "source_id": 6007,
                "temperature": 1.5,
                "condition": "snow",
                "icon": "cloudy",
                "precipitation": 0.3,
                "relative_humidity": 91,
            },
            {
                "timestamp": "2025-01-15T01:00:00+01:00",
                "source_id": 24,
                "temperature": 1.1,
                "condition": "sunny-ish",
                "icon": "aurora",
                "precipitation_probability": 40,
            },
        ],
        "sources": [source_payload, forecast_source],
    }


@pytest.fixture
def alerts_payload() -> Dict[str, Any]:
    return {
        "alerts": [
            {
                "id": 296179,
                "alert_id": "2.49.0.0.276.0.DWD.PVW.1691344680000.2",
                "status": "actual",
                "effective": "2023-08-06T17:58:00+00:00",
                "onset": "2023-08-06T18:00:00+00:00",
                "expires": None,
                "category": "met",
                "response_type": "prepare",
                "urgency": "immediate",
                "severity": "minor",
                "certainty": "likely",
                "event_code": 51,
                "event_en": "wind gusts",
                "event_de": "WINDBÖEN",
                "headline_en": "Official WARNING of WIND GUSTS",
                "headline_de": "Amtliche WARNUNG vor WINDBÖEN",
                "description_en": "There is a risk of wind gusts.",
                "description_de": "Es treten Windböen auf.",
                "instruction_en": None,
                "instruction_de": None,
            }
        ],
        "location": {
            "warn_cell_id": 803159016,
            "name": "Stadt Göttingen",
            "name_short": "Göttingen",
            "district": "Göttingen",
            "state": "Niedersachsen",
            "state_short": "NI",
        },
    }


def _encode_uint16(values, compress: bool) -> str:
    raw = struct.pack(f"<{len(values)}H", *values)
    if compress:
        raw = zlib.compress(raw)
    return base64.b64encode(raw).decode("ascii")


@pytest.fixture
def encode_precipitation():
    """Base64-encode little-endian uint16 values, optionally zlib-compressed."""
    return _encode_uint16


@pytest.fixture
def radar_payload() -> Dict[str, Any]:
    return {
        "radar": [
            {
                "timestamp": "2023-08-07T10:45:00+00:00",
                "source": "RADOLAN::RV::2023-08-07T10:45:00+00:00",
                "precipitation_5": _encode_uint16([0, 1, 2, 3, 4, 45], compress=True),
            },
            {
                "timestamp": "2023-08-07T10:50:00+00:00",
                "source": "RADOLAN::RV::2023-08-07T10:50:00+00:00",
                "precipitation_5": [[10, 20, 30], [40, 50, 60]],
            },
        ],
        "geometry": {
            "type": "Polygon",
            "coordinates": [[7.5, 51.9], [7.7, 51.9], [7.7, 52.1], [7.5, 52.1]],
        },
        "bbox": [100, 200, 102, 203],
        "latlon_position": {"x": 201.4, "y": 101.2},
    }
