"""Condition classification: one observation in, one labelled bucket out.

The decision tree is an ordered list of (predicate, bucket) rules checked top
to bottom; the first match wins. Observations that match no weather-specific
rule fall through to a temperature table where each bucket starts at its
boundary (lower-inclusive), searched with bisect.
"""
from __future__ import annotations

from bisect import bisect_right
from dataclasses import replace
from typing import Callable, List, Optional, Tuple

from utils.models import ConditionResult, WeatherCategory, WeatherObservation


def _bucket(emoji: str, label: str, icon: str, recommendation: str) -> ConditionResult:
    return ConditionResult(label=label, icon=icon, recommendation=recommendation, emoji=emoji)


# --- Weather-specific buckets ---
SEVERE_THUNDERSTORM = _bucket(
    "⚡🌧️", "Severe Thunderstorm", "⚡🌧️",
    "SEVERE THUNDERSTORM WARNING. Take shelter immediately. Avoid using electrical equipment and stay away from windows.",
)
THUNDER_AND_LIGHTNING = _bucket(
    "⚡⛈️", "Thunder & Lightning", "⚡",
    "Thunder and lightning in the area. When thunder roars, go indoors! Wait 30 minutes after the last thunder before going outside.",
)
THUNDERSTORM = _bucket(
    "⛈️", "Thunderstorm", "⛈️",
    "Thunderstorms expected. Stay indoors if possible and avoid open areas, tall objects, and water.",
)
MISTY_DRIZZLE = _bucket(
    "🌧️", "Misty Drizzle", "🌫️💧",
    "Misty conditions with light drizzle. Reduced visibility likely. Use headlights when driving.",
)
WINDY_DRIZZLE = _bucket(
    "🌬️💨", "Windy Drizzle", "💨💧",
    "Windy with light rain. A windproof jacket and umbrella are recommended.",
)
DRIZZLE_LIGHT_RAIN = _bucket(
    "🌧️", "Light Rain", "🌦️",
    "Light rain or drizzle expected. A light jacket or umbrella is recommended.",
)
FREEZING_DRIZZLE = _bucket(
    "❄️💧", "Freezing Drizzle", "💧❄️",
    "FREEZING DRIZZLE WARNING. Extremely slippery conditions. Black ice likely on roads and walkways.",
)
FREEZING_RAIN = _bucket(
    "🌨️", "Freezing Rain", "🌨️",
    "FREEZING RAIN WARNING. Icy conditions developing. Avoid travel if possible. Watch for black ice.",
)
ICE_STORM = _bucket(
    "🧊❄️", "Ice Storm", "🧊",
    "ICE STORM WARNING. Dangerous travel conditions. Icy buildup on trees and power lines likely. Stay indoors.",
)
TORRENTIAL_RAIN = _bucket(
    "🌊⛈️", "Torrential Rain", "🌊",
    "TORRENTIAL RAIN WARNING. Flash flooding possible. Avoid low-lying areas and never drive through floodwaters.",
)
DOWNPOUR = _bucket(
    "🌧️💦", "Downpour", "💦",
    "HEAVY DOWNPOUR. Localized flooding possible. Avoid walking or driving through flood waters.",
)
HEAVY_RAIN = _bucket(
    "🌧️", "Heavy Rain", "☔",
    "Heavy rainfall expected. Poor drainage flooding possible. Consider postponing outdoor activities.",
)
MODERATE_RAIN = _bucket(
    "🌧️", "Moderate Rain", "🌧️",
    "Steady rainfall. Waterproof outerwear and footwear recommended. Reduced visibility when driving.",
)
LIGHT_RAIN = _bucket(
    "🌦️", "Light Rain", "🌦️",
    "Light rain expected. A compact umbrella or water-resistant jacket is recommended.",
)
EXTREME_COLD_AND_SNOW = _bucket(
    "❄️❄️", "Extreme Cold & Snow", "🥶❄️",
    "Dangerously cold with heavy snow. Avoid outdoor exposure. Risk of frostbite and hypothermia.",
)
HEAVY_SNOW = _bucket(
    "❄️", "Heavy Snow", "❄️🥶",
    "Heavy snowfall and very cold. Only essential travel recommended. Dress in multiple warm layers.",
)
SNOWY = _bucket(
    "🌨️", "Snowy", "❄️",
    "Snow expected. Wear insulated, waterproof clothing and be cautious of slippery surfaces.",
)
WET_SNOW = _bucket(
    "🌨️", "Wet Snow", "🌨️",
    "Wet snow expected. Roads may be slippery. Wear waterproof footwear.",
)
_LOW_VISIBILITY = (
    "Reduced visibility. Use low-beam headlights and maintain safe following distances when driving."
)
FOGGY = _bucket("🌫️", "Foggy", "🌫️", _LOW_VISIBILITY)
MISTY = _bucket("🌫️", "Misty", "🌫️", _LOW_VISIBILITY)

# --- Temperature table (°C), coldest first so bisect can index it ---
TEMPERATURE_BOUNDARIES = (-10, 0, 4, 8, 12, 15, 18, 20, 22, 24, 26, 28, 30, 33, 35, 37, 40)
TEMPERATURE_BUCKETS = (
    _bucket("☠️❄️", "Extreme Cold Warning", "☠️❄️",
            "EXTREME COLD WARNING. Life-threatening conditions. Stay indoors. Frostbite can occur in minutes."),
    _bucket("🥶❄️", "Dangerously Cold", "🥶",
            "Dangerously cold. Frostbite can occur in minutes. Avoid being outside if possible."),
    _bucket("🥶", "Freezing", "🧊",
            "Freezing temperatures. Risk of frostbite. Dress appropriately and limit exposure."),
    _bucket("❄️", "Very Cold", "🧤",
            "Very cold. Dress in multiple warm layers and limit time outdoors."),
    _bucket("❄️", "Cold", "🧣",
            "Cold. Wear a heavy coat, hat, and gloves when going outside."),
    _bucket("🌬️", "Chilly", "🧥",
            "Chilly weather. A warm jacket is recommended."),
    _bucket("🌥️", "Cool", "🌥️",
            "Cool conditions. Wear layers that you can adjust as needed."),
    _bucket("⛅", "Slightly Cool", "⛅",
            "Slightly cool. A light jacket or sweater is recommended."),
    _bucket("🌥️", "Mild", "🌥️",
            "Mild conditions. A light jacket might be needed in the evening."),
    _bucket("🌤️", "Mild & Pleasant", "🌤️",
            "Mild and pleasant weather. Enjoy outdoor activities."),
    _bucket("😊", "Comfortable", "😊",
            "Very comfortable conditions. Ideal for all outdoor activities."),
    _bucket("🌤️", "Pleasantly Warm", "🌤️",
            "Pleasantly warm. Great weather for being outdoors. Stay hydrated."),
    _bucket("😎", "Warm & Sunny", "😎☀️",
            "Warm and sunny. Perfect for outdoor activities. Use sunscreen and stay hydrated."),
    _bucket("☀️", "Hot", "☀️",
            "Hot weather. Stay hydrated, use sun protection, and take breaks in the shade."),
    _bucket("☀️", "Very Hot", "☀️",
            "Very hot conditions. Stay hydrated, wear light clothing, and seek shade during peak hours."),
    _bucket("🥵", "Extreme Heat", "☀️☀️",
            "Dangerously hot. Stay in air-conditioned spaces, drink plenty of water, and avoid direct sun exposure between 10 AM - 4 PM."),
    _bucket("🥵", "Scorching Heat", "☀️☀️",
            "Extremely hot. Stay hydrated, avoid strenuous activities, and never leave children or pets in vehicles."),
    _bucket("☠️", "Extreme Heat Warning", "☠️☀️",
            "DANGEROUS HEAT. Stay in air-conditioned spaces. Heat stroke likely with prolonged exposure. Avoid outdoor activities."),
)

Rule = Tuple[Callable[[WeatherObservation], bool], ConditionResult]


def _is(category: WeatherCategory) -> Callable[[WeatherObservation], bool]:
    return lambda obs: obs.weather_category == category


_thunderstorm = _is(WeatherCategory.THUNDERSTORM)
_drizzle = _is(WeatherCategory.DRIZZLE)
_rain = _is(WeatherCategory.RAIN)
_snow = _is(WeatherCategory.SNOW)

CONDITION_RULES: List[Rule] = [
    (lambda o: _thunderstorm(o) and (o.has_qualifier("heavy") or o.precipitation > 20), SEVERE_THUNDERSTORM),
    (lambda o: _thunderstorm(o) and (o.has_qualifier("lightning") or o.wind_speed > 30), THUNDER_AND_LIGHTNING),
    (_thunderstorm, THUNDERSTORM),
    (lambda o: _drizzle(o) and o.humidity > 85, MISTY_DRIZZLE),
    (lambda o: _drizzle(o) and o.wind_speed > 15, WINDY_DRIZZLE),
    (_drizzle, DRIZZLE_LIGHT_RAIN),
    (lambda o: _rain(o) and -2 < o.temperature <= 0.5, FREEZING_DRIZZLE),
    (lambda o: _rain(o) and 0.5 < o.temperature <= 3, FREEZING_RAIN),
    (lambda o: _rain(o) and o.temperature <= -2, ICE_STORM),
    (lambda o: _rain(o) and o.precipitation > 30, TORRENTIAL_RAIN),
    (lambda o: _rain(o) and o.precipitation > 20, DOWNPOUR),
    (lambda o: _rain(o) and o.precipitation > 10, HEAVY_RAIN),
    (lambda o: _rain(o) and o.precipitation > 5, MODERATE_RAIN),
    (_rain, LIGHT_RAIN),
    (lambda o: _snow(o) and o.temperature < -10, EXTREME_COLD_AND_SNOW),
    (lambda o: _snow(o) and o.temperature < -5, HEAVY_SNOW),
    (lambda o: _snow(o) and o.temperature < 0, SNOWY),
    (_snow, WET_SNOW),
    (_is(WeatherCategory.FOG), FOGGY),
    (_is(WeatherCategory.MIST), MISTY),
]


def temperature_bucket(temperature: float) -> ConditionResult:
    return TEMPERATURE_BUCKETS[bisect_right(TEMPERATURE_BOUNDARIES, temperature)]


def temperature_note(obs: WeatherObservation) -> Optional[str]:
    """Feels-like, wind chill and humidity remarks appended to the temperature."""
    temp = obs.temperature
    feels_like = obs.feels_like_temperature
    note = ""
    if abs(temp - feels_like) > 2:
        note += f" (Feels like {feels_like:.1f}°C)"
    if temp < 10 and obs.wind_speed > 5:
        note += " (Wind chill makes it feel colder)"
    if temp > 27 and obs.humidity > 60:
        note += " (High humidity makes it feel hotter)"
    return note or None


def classify(obs: WeatherObservation) -> ConditionResult:
    """Map an observation to exactly one condition bucket."""
    bucket = next(
        (result for predicate, result in CONDITION_RULES if predicate(obs)),
        None,
    )
    if bucket is None:
        bucket = temperature_bucket(obs.temperature)
    return replace(bucket, temperature_note=temperature_note(obs))


def marker_color(label: Optional[str]) -> str:
    """Map marker colour for a condition label."""
    if not label:
        return "blue"
    if "Hot" in label:
        return "red"
    if "Rain" in label:
        return "blue"
    if "Windy" in label:
        return "orange"
    if "Cold" in label:
        return "lightblue"
    return "green"
