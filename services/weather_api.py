"""Open-Meteo daily forecast helpers.

No API key required. Wind speed is requested in m/s so the values line up
with the event thresholds and the descriptive wind scale.
"""
import logging

import requests
from config import settings
from utils.helpers import ForecastUnavailableError

logger = logging.getLogger(__name__)

DAILY_FIELDS = (
    "weathercode",
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_sum",
    "windspeed_10m_max",
    "uv_index_max",
)


class WeatherServiceError(RuntimeError):
    """Forecast request failed (network, HTTP status or unreadable body)."""


def _params(lat: float, lon: float, date: str) -> dict:
    return {
        "latitude": lat,
        "longitude": lon,
        "daily": ",".join(DAILY_FIELDS),
        "timezone": "auto",
        "windspeed_unit": "ms",
        "start_date": date,
        "end_date": date,
    }


def get_daily_forecast(lat: float, lon: float, date: str) -> dict:
    """Fetch the single-day forecast for date (YYYY-MM-DD).

    Raises:
        WeatherServiceError: network failure, non-200 response or bad JSON.
        ForecastUnavailableError: response does not cover the requested date.
    """
    try:
        resp = requests.get(
            settings.OPEN_METEO_FORECAST_URL,
            params=_params(lat, lon, date),
            timeout=settings.HTTP_TIMEOUT_SECONDS,
        )
        resp.raise_for_status()
        data = resp.json()
    except requests.RequestException as e:
        logger.warning("Forecast request failed for %.4f,%.4f on %s: %s", lat, lon, date, e)
        raise WeatherServiceError(f"Forecast request failed: {e}") from e
    except ValueError as e:
        raise WeatherServiceError("Forecast response was not valid JSON") from e

    times = (data.get("daily") or {}).get("time") or []
    if not times or times[0] != date:
        raise ForecastUnavailableError("Forecast not available for the selected date")
    return data
