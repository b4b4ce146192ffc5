"""
Shared pytest fixtures for the Eventcast tests.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from utils.models import WeatherCategory, WeatherObservation  # noqa: E402


@pytest.fixture
def make_obs():
    """Factory for observations with mild, dry defaults."""
    def _make(**overrides):
        values = {
            "temperature": 20.0,
            "humidity": 50.0,
            "wind_speed": 2.0,
            "precipitation": 0.0,
            "weather_category": WeatherCategory.CLOUDS,
        }
        values.update(overrides)
        return WeatherObservation(**values)
    return _make


@pytest.fixture
def forecast_payload():
    """Open-Meteo daily response for 2025-06-14 (code 95, thunderstorm)."""
    return {
        "latitude": 24.71,
        "longitude": 46.68,
        "daily": {
            "time": ["2025-06-14"],
            "weathercode": [95],
            "temperature_2m_max": [41.6],
            "temperature_2m_min": [29.1],
            "precipitation_sum": [3.4],
            "windspeed_10m_max": [8.3],
            "uv_index_max": [10.45],
        },
    }


@pytest.fixture
def nasa_payload():
    """NASA POWER daily point response for 2025-06-14."""
    return {
        "properties": {
            "parameter": {
                "T2M": {"20250614": 35.2},
                "PRECTOT": {"20250614": 0.0},
                "WS2M": {"20250614": 4.2},
                "RH2M": {"20250614": 18.5},
                "ALLSKY_SFC_SW_DWN": {"20250614": -999.0},
            }
        }
    }


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("EVENTCAST_LANGUAGE", raising=False)
    monkeypatch.delenv("EVENTCAST_LOG_LEVEL", raising=False)
