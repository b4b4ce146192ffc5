"""Glue between the forecast providers and the classification engine.

get_observation() resolves one WeatherObservation for a location and day;
build_report() runs the detector, classifier and suitability evaluator on it.
"""
from __future__ import annotations

import logging
from typing import Any, Dict

from services.nasa_api import fetch_nasa_power_daily
from services.weather_api import get_daily_forecast
from utils.conditions import classify
from utils.hazards import detect_hazards, most_severe
from utils.helpers import build_observation
from utils.models import WeatherObservation
from utils.scoring import evaluate_suitability

logger = logging.getLogger(__name__)


def get_observation(lat: float, lon: float, date: str, use_nasa: bool = True) -> WeatherObservation:
    """Fetch the day forecast and merge NASA POWER values when available.

    Errors from the forecast request propagate (WeatherServiceError,
    ForecastUnavailableError); a missing NASA supplement does not.
    """
    forecast = get_daily_forecast(lat, lon, date)
    nasa = fetch_nasa_power_daily(lat, lon, date) if use_nasa else None
    if use_nasa and nasa is None:
        logger.info("Using Open-Meteo values only for %.4f,%.4f on %s", lat, lon, date)
    return build_observation(forecast, date, nasa)


def build_report(obs: WeatherObservation) -> Dict[str, Any]:
    hazards = detect_hazards(obs)
    return {
        "observation": obs,
        "condition": classify(obs),
        "hazards": hazards,
        "alert": most_severe(hazards),
        "suitability": evaluate_suitability(obs),
    }
