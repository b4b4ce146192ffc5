"""Dangerous weather detection used to raise the safety alert."""
from __future__ import annotations

import math
from functools import reduce
from typing import List, Optional

from utils.models import HazardFinding, HazardKind, Severity, WeatherObservation

THUNDERSTORM_CODES = range(200, 233)
RAIN_CODES = range(500, 532)
EXTREME_HEAT_C = 40
HEAVY_RAIN_MM = 30
STRONG_WIND_MS = 10


def js_round(value: float) -> int:
    """Round half up, matching the browser's Math.round."""
    return math.floor(value + 0.5)


def detect_hazards(obs: WeatherObservation) -> List[HazardFinding]:
    """Return every hazard the observation triggers, in rule order.

    Rules are independent: thunderstorm, extreme heat, heavy rain, strong wind.
    An empty list means nothing dangerous was found.
    """
    findings: List[HazardFinding] = []
    code = obs.weather_code

    if code is not None and code in THUNDERSTORM_CODES:
        findings.append(HazardFinding(
            kind=HazardKind.THUNDERSTORM,
            message="Thunderstorm detected in your area.",
            severity=Severity.HIGH,
        ))

    max_temp = obs.max_temperature
    if max_temp > EXTREME_HEAT_C:
        findings.append(HazardFinding(
            kind=HazardKind.EXTREME_HEAT,
            message=f"Extreme heat warning: Temperatures reaching up to {js_round(max_temp)}°C.",
            severity=Severity.HIGH,
        ))

    if (code is not None and code in RAIN_CODES) or obs.precipitation > HEAVY_RAIN_MM:
        findings.append(HazardFinding(
            kind=HazardKind.HEAVY_RAIN,
            message="Heavy rain expected in your area.",
            severity=Severity.MEDIUM,
        ))

    if obs.wind_speed > STRONG_WIND_MS:
        findings.append(HazardFinding(
            kind=HazardKind.STRONG_WIND,
            message=f"Strong winds detected ({js_round(obs.wind_speed)} m/s).",
            severity=Severity.MEDIUM,
        ))

    return findings


def _keep_more_severe(prev: HazardFinding, current: HazardFinding) -> HazardFinding:
    if prev.severity is Severity.HIGH or current.severity is Severity.MEDIUM:
        return prev
    return current


def most_severe(findings: List[HazardFinding]) -> Optional[HazardFinding]:
    """First high-severity finding, else the first finding; None when empty."""
    if not findings:
        return None
    return reduce(_keep_more_severe, findings)
