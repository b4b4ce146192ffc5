import pytest

from utils.scales import (
    WIND_BOUNDARIES,
    WIND_LABELS,
    format_number,
    format_value,
    rain_description,
    uv_description,
    wind_description,
)


@pytest.mark.parametrize("speed, label", [
    (0, "Calm"),
    (0.4, "Calm"),
    (0.5, "Light air"),
    (4.2, "Gentle breeze"),
    (10.7, "Strong breeze"),
    (32.6, "Hurricane"),
    (60, "Hurricane"),
])
def test_wind_description(speed, label):
    assert wind_description(speed) == label


def test_wind_scale_is_monotonic():
    speeds = [i / 10 for i in range(0, 400)]
    indices = [WIND_LABELS.index(wind_description(s)) for s in speeds]
    assert indices == sorted(indices)
    assert len(WIND_LABELS) == len(WIND_BOUNDARIES) + 1


@pytest.mark.parametrize("uv, label", [
    (None, "N/A"),
    (0, "Low"),
    (2, "Low"),
    (2.1, "Moderate"),
    (5, "Moderate"),
    (7, "High"),
    (10, "Very High"),
    (10.5, "Extreme"),
])
def test_uv_description(uv, label):
    assert uv_description(uv) == label


@pytest.mark.parametrize("amount, label", [
    (None, "No rain"),
    (0, "No rain"),
    (0.1, "Light rain"),
    (2.5, "Moderate rain"),
    (7.6, "Heavy rain"),
    (50, "Violent rain"),
])
def test_rain_description(amount, label):
    assert rain_description(amount) == label


def test_format_number():
    assert format_number(10.0) == "10"
    assert format_number(12.5) == "12.5"
    assert format_number(-3) == "-3"


def test_format_value():
    assert format_value(None) == "N/A"
    assert format_value(None, fallback="-") == "-"
    assert format_value(7) == "7"
    assert format_value(55.0, "%") == "55%"
    assert format_value(3.14159, " m/s") == "3.1 m/s"
