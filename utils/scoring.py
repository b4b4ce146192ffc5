"""
Event suitability for Eventcast.
"""
from typing import Dict, Sequence

from utils.models import EventTypeProfile, SuitabilityResult, WeatherObservation
from utils.scales import format_number

# Ordered; the UI renders cards in this order
EVENT_TYPES = (
    EventTypeProfile(
        key="picnic",
        name="Picnic",
        ideal_temp=(18, 28),
        max_wind=15,
        max_precipitation=1,
        description="Perfect for outdoor dining and relaxation.",
    ),
    EventTypeProfile(
        key="sports",
        name="Sports",
        ideal_temp=(15, 25),
        max_wind=10,
        max_precipitation=0,
        description="Ideal for physical activities and games.",
    ),
    EventTypeProfile(
        key="festival",
        name="Festival",
        ideal_temp=(10, 30),
        max_wind=20,
        max_precipitation=5,
        description="Great for outdoor gatherings and celebrations.",
    ),
    EventTypeProfile(
        key="wedding",
        name="Wedding",
        ideal_temp=(15, 28),
        max_wind=10,
        max_precipitation=0,
        description="Perfect for your special day.",
    ),
)


def evaluate_event(obs: WeatherObservation, profile: EventTypeProfile) -> SuitabilityResult:
    """
    Check one event profile against the observation.
    Reasons are listed temperature, wind, rain and only for failed checks.
    """
    temp = obs.temperature
    wind = obs.wind_speed
    rain = obs.precipitation
    low, high = profile.ideal_temp

    reasons = []
    if temp < low:
        reasons.append(f"Too cold ({format_number(temp)}°C < {format_number(low)}°C)")
    elif temp > high:
        reasons.append(f"Too hot ({format_number(temp)}°C > {format_number(high)}°C)")

    if wind > profile.max_wind:
        reasons.append(f"Too windy ({wind:.1f} m/s > {format_number(profile.max_wind)} m/s)")

    if rain > profile.max_precipitation:
        reasons.append(f"Too much rain ({format_number(rain)}mm > {format_number(profile.max_precipitation)}mm)")

    return SuitabilityResult(suitable=not reasons, reasons=tuple(reasons))


def evaluate_suitability(
    obs: WeatherObservation,
    profiles: Sequence[EventTypeProfile] = EVENT_TYPES,
) -> Dict[str, SuitabilityResult]:
    """Suitability verdict for every profile, keyed by profile key."""
    return {profile.key: evaluate_event(obs, profile) for profile in profiles}
