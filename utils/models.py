"""Plain data types shared by the classification engine and its callers."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class WeatherCategory(str, Enum):
    CLEAR = "Clear"
    CLOUDS = "Clouds"
    FOG = "Fog"
    MIST = "Mist"
    RAIN = "Rain"
    DRIZZLE = "Drizzle"
    SNOW = "Snow"
    THUNDERSTORM = "Thunderstorm"


class HazardKind(str, Enum):
    THUNDERSTORM = "thunderstorm"
    EXTREME_HEAT = "extreme_heat"
    HEAVY_RAIN = "heavy_rain"
    STRONG_WIND = "strong_wind"


class Severity(str, Enum):
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class WeatherObservation:
    """One resolved set of weather measurements for a location and day.

    `temperature` is the representative day value (°C). Optional fields fall
    back through the properties below rather than being filled in by callers.
    """
    temperature: float
    feels_like: Optional[float] = None
    humidity: float = 50.0
    wind_speed: float = 0.0
    precipitation: float = 0.0
    uv_index: Optional[float] = None
    weather_category: WeatherCategory = WeatherCategory.CLOUDS
    qualifiers: Tuple[str, ...] = ()
    weather_code: Optional[int] = None
    temperature_max: Optional[float] = None
    temperature_min: Optional[float] = None
    solar_radiation: Optional[float] = None
    date: Optional[str] = None

    @property
    def feels_like_temperature(self) -> float:
        return self.temperature if self.feels_like is None else self.feels_like

    @property
    def max_temperature(self) -> float:
        return self.temperature if self.temperature_max is None else self.temperature_max

    def has_qualifier(self, word: str) -> bool:
        word = word.lower()
        return any(word in q.lower() for q in self.qualifiers)


@dataclass(frozen=True)
class HazardFinding:
    kind: HazardKind
    message: str
    severity: Severity


@dataclass(frozen=True)
class ConditionResult:
    label: str
    icon: str
    recommendation: str
    temperature_note: Optional[str] = None
    emoji: str = ""

    @property
    def display_label(self) -> str:
        return f"{self.emoji} {self.label}" if self.emoji else self.label


@dataclass(frozen=True)
class EventTypeProfile:
    key: str
    name: str
    ideal_temp: Tuple[float, float]
    max_wind: float
    max_precipitation: float
    description: str = ""


@dataclass(frozen=True)
class SuitabilityResult:
    suitable: bool
    reasons: Tuple[str, ...] = field(default_factory=tuple)
