import pytest

from utils.helpers import (
    ForecastUnavailableError,
    build_observation,
    provider_condition_id,
    weather_condition,
    weather_qualifiers,
)
from utils.models import WeatherCategory


@pytest.mark.parametrize("code, category", [
    (None, WeatherCategory.CLOUDS),
    (0, WeatherCategory.CLEAR),
    (3, WeatherCategory.CLEAR),
    (45, WeatherCategory.FOG),
    (53, WeatherCategory.RAIN),
    (65, WeatherCategory.RAIN),
    (75, WeatherCategory.SNOW),
    (81, WeatherCategory.RAIN),
    (86, WeatherCategory.SNOW),
    (99, WeatherCategory.THUNDERSTORM),
    (42, WeatherCategory.CLOUDS),
])
def test_weather_condition(code, category):
    assert weather_condition(code) is category


def test_qualifiers_and_provider_ids():
    assert weather_qualifiers(99) == ("thunderstorm", "with", "heavy", "hail")
    assert weather_qualifiers(None) == ()
    assert provider_condition_id(95) == 211
    assert provider_condition_id(65) == 502
    assert provider_condition_id(None) is None
    assert provider_condition_id(42) is None


def test_build_observation_open_meteo_only(forecast_payload):
    obs = build_observation(forecast_payload, "2025-06-14")
    assert obs.temperature == 41.6
    assert obs.temperature_min == 29.1
    assert obs.humidity == 50.0
    assert obs.wind_speed == 8.3
    assert obs.precipitation == 3.4
    assert obs.uv_index == 10.45
    assert obs.weather_category is WeatherCategory.THUNDERSTORM
    assert obs.weather_code == 211
    assert obs.solar_radiation is None
    assert obs.date == "2025-06-14"


def test_build_observation_prefers_nasa_values(forecast_payload):
    nasa = {"RH2M": 18.5, "WS2M": 4.2, "PRECTOT": 0.0, "ALLSKY_SFC_SW_DWN": 7.81}
    obs = build_observation(forecast_payload, "2025-06-14", nasa)
    assert obs.humidity == 18.5
    assert obs.wind_speed == 4.2
    # zero from NASA falls back to the forecast sum
    assert obs.precipitation == 3.4
    assert obs.solar_radiation == 7.81


def test_nasa_fill_values_are_ignored(forecast_payload):
    obs = build_observation(forecast_payload, "2025-06-14", {"RH2M": -999, "WS2M": "bad"})
    assert obs.humidity == 50.0
    assert obs.wind_speed == 8.3


def test_negative_precipitation_is_clamped(forecast_payload):
    forecast_payload["daily"]["precipitation_sum"] = [-0.1]
    assert build_observation(forecast_payload, "2025-06-14").precipitation == 0.0


def test_missing_date_raises(forecast_payload):
    with pytest.raises(ForecastUnavailableError):
        build_observation(forecast_payload, "2025-06-15")
    with pytest.raises(ForecastUnavailableError):
        build_observation({}, "2025-06-14")


def test_missing_temperature_uses_nasa_or_raises(forecast_payload):
    forecast_payload["daily"]["temperature_2m_max"] = [None]
    assert build_observation(forecast_payload, "2025-06-14", {"T2M": 35.2}).temperature == 35.2
    with pytest.raises(ForecastUnavailableError):
        build_observation(forecast_payload, "2025-06-14")
