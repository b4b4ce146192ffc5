"""Descriptive scales for wind, UV and rain plus display number formatting."""
from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Optional

# Beaufort-like scale (m/s). A speed equal to a boundary belongs to the next band.
WIND_BOUNDARIES = (0.5, 1.5, 3.3, 5.5, 7.9, 10.7, 13.8, 17.1, 20.7, 24.4, 28.4, 32.6)
WIND_LABELS = (
    "Calm",
    "Light air",
    "Light breeze",
    "Gentle breeze",
    "Moderate breeze",
    "Fresh breeze",
    "Strong breeze",
    "Moderate gale",
    "Fresh gale",
    "Strong gale",
    "Storm",
    "Violent storm",
    "Hurricane",
)

# UV bands are upper-inclusive (2 is still Low).
UV_BOUNDARIES = (2, 5, 7, 10)
UV_LABELS = ("Low", "Moderate", "High", "Very High", "Extreme")

# Rain (mm). An amount equal to a boundary belongs to the next band.
RAIN_BOUNDARIES = (0.1, 2.5, 7.6, 50)
RAIN_LABELS = ("No rain", "Light rain", "Moderate rain", "Heavy rain", "Violent rain")


def wind_description(speed: float) -> str:
    return WIND_LABELS[bisect_right(WIND_BOUNDARIES, speed)]


def uv_description(uv_index: Optional[float]) -> str:
    if uv_index is None:
        return "N/A"
    return UV_LABELS[bisect_left(UV_BOUNDARIES, uv_index)]


def rain_description(amount: Optional[float]) -> str:
    if amount is None:
        return "No rain"
    return RAIN_LABELS[bisect_right(RAIN_BOUNDARIES, amount)]


def format_number(value: float) -> str:
    """Render a number the way a browser prints it: 10 not 10.0, 12.5 as is."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_value(value, suffix: str = "", fallback: str = "N/A") -> str:
    """Integers bare, other floats to one decimal, missing values as fallback."""
    if value is None:
        return fallback
    if isinstance(value, bool):
        return f"{value}{suffix}"
    if isinstance(value, int):
        return f"{value}{suffix}"
    if isinstance(value, float):
        if value.is_integer():
            return f"{int(value)}{suffix}"
        return f"{value:.1f}{suffix}"
    return f"{value}{suffix}"
