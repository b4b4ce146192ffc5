# utils/helpers.py
"""Normalise provider responses into a WeatherObservation."""
from typing import Optional

from utils.models import WeatherCategory, WeatherObservation

# Open-Meteo (WMO) weather interpretation codes
WMO_DESCRIPTIONS = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    56: "Light freezing drizzle",
    57: "Dense freezing drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Heavy freezing rain",
    71: "Slight snow fall",
    73: "Moderate snow fall",
    75: "Heavy snow fall",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}

# WMO code -> OpenWeather-style condition id, the code space the hazard rules use
PROVIDER_CONDITION_IDS = {
    0: 800, 1: 801, 2: 802, 3: 804,
    45: 741, 48: 741,
    51: 300, 53: 301, 55: 302, 56: 311, 57: 312,
    61: 500, 63: 501, 65: 502, 66: 511, 67: 511,
    71: 600, 73: 601, 75: 602, 77: 611,
    80: 520, 81: 521, 82: 522,
    85: 620, 86: 622,
    95: 211, 96: 201, 99: 202,
}

NASA_FILL_VALUE = -999.0


class ForecastUnavailableError(RuntimeError):
    """The provider answered but has no data for the requested date."""


def weather_condition(code: Optional[int]) -> WeatherCategory:
    """Map a WMO weather code to a coarse category."""
    if code is None:
        return WeatherCategory.CLOUDS
    if 0 <= code <= 3:
        return WeatherCategory.CLEAR
    if 45 <= code <= 48:
        return WeatherCategory.FOG
    if 51 <= code <= 67:
        return WeatherCategory.RAIN
    if 71 <= code <= 77:
        return WeatherCategory.SNOW
    if 80 <= code <= 82:
        return WeatherCategory.RAIN
    if 85 <= code <= 86:
        return WeatherCategory.SNOW
    if 95 <= code <= 99:
        return WeatherCategory.THUNDERSTORM
    return WeatherCategory.CLOUDS


def weather_qualifiers(code: Optional[int]) -> tuple:
    """Lowercase words of the code's description ("heavy", "hail", ...)."""
    desc = WMO_DESCRIPTIONS.get(code, "") if code is not None else ""
    return tuple(word.lower() for word in desc.split())


def provider_condition_id(code: Optional[int]) -> Optional[int]:
    if code is None:
        return None
    return PROVIDER_CONDITION_IDS.get(code)


def _first(daily: dict, key: str):
    values = daily.get(key) or []
    return values[0] if values else None


def _nasa_value(nasa: Optional[dict], key: str) -> Optional[float]:
    if not nasa:
        return None
    val = nasa.get(key)
    if val is None:
        return None
    try:
        val = float(val)
    except (TypeError, ValueError):
        return None
    if val == NASA_FILL_VALUE:
        return None
    return val


def build_observation(forecast: dict, target_date: str, nasa: Optional[dict] = None) -> WeatherObservation:
    """Build the observation for target_date (YYYY-MM-DD).

    forecast: Open-Meteo response with a `daily` block for a single day.
    nasa: optional NASA POWER values (T2M, PRECTOT, WS2M, RH2M, ALLSKY_SFC_SW_DWN);
    humidity, wind and precipitation prefer them when present and non-zero.
    Raises ForecastUnavailableError when the date is missing from the response.
    """
    daily = (forecast or {}).get("daily") or {}
    if _first(daily, "time") != target_date:
        raise ForecastUnavailableError("Forecast not available for the selected date")

    temp_max = _first(daily, "temperature_2m_max")
    temp_min = _first(daily, "temperature_2m_min")
    if temp_max is None:
        temp_max = _nasa_value(nasa, "T2M")
    if temp_max is None:
        raise ForecastUnavailableError("Forecast has no temperature for the selected date")

    om_precip = _first(daily, "precipitation_sum") or 0
    om_wind = _first(daily, "windspeed_10m_max") or 0
    code = _first(daily, "weathercode")
    code = int(code) if code is not None else None

    humidity = _nasa_value(nasa, "RH2M") or 50.0
    wind = _nasa_value(nasa, "WS2M") or float(om_wind)
    precipitation = _nasa_value(nasa, "PRECTOT") or (float(om_precip) if om_precip > 0 else 0.0)

    return WeatherObservation(
        temperature=float(temp_max),
        humidity=humidity,
        wind_speed=wind,
        precipitation=precipitation,
        uv_index=float(_first(daily, "uv_index_max") or 0),
        weather_category=weather_condition(code),
        qualifiers=weather_qualifiers(code),
        weather_code=provider_condition_id(code),
        temperature_max=float(temp_max),
        temperature_min=float(temp_min) if temp_min is not None else None,
        solar_radiation=_nasa_value(nasa, "ALLSKY_SFC_SW_DWN"),
        date=target_date,
    )
