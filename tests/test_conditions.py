import pytest

from utils.conditions import (
    CONDITION_RULES,
    DOWNPOUR,
    EXTREME_COLD_AND_SNOW,
    FOGGY,
    FREEZING_DRIZZLE,
    FREEZING_RAIN,
    HEAVY_RAIN,
    HEAVY_SNOW,
    ICE_STORM,
    LIGHT_RAIN,
    MISTY,
    MISTY_DRIZZLE,
    MODERATE_RAIN,
    SEVERE_THUNDERSTORM,
    SNOWY,
    TEMPERATURE_BUCKETS,
    THUNDER_AND_LIGHTNING,
    THUNDERSTORM,
    TORRENTIAL_RAIN,
    WET_SNOW,
    WINDY_DRIZZLE,
    DRIZZLE_LIGHT_RAIN,
    classify,
    marker_color,
    temperature_bucket,
    temperature_note,
)
from utils.models import WeatherCategory


def test_every_temperature_gets_a_label(make_obs):
    labels = {bucket.label for bucket in TEMPERATURE_BUCKETS}
    t = -50.0
    while t <= 50.0:
        result = classify(make_obs(temperature=t))
        assert result.label in labels
        t += 0.5


def test_temperature_table_boundaries_are_lower_inclusive():
    assert temperature_bucket(40).label == "Extreme Heat Warning"
    assert temperature_bucket(39.9).label == "Scorching Heat"
    assert temperature_bucket(-10).label == "Dangerously Cold"
    assert temperature_bucket(-10.1).label == "Extreme Cold Warning"
    assert temperature_bucket(23).label == "Mild & Pleasant"
    assert temperature_bucket(24).label == "Comfortable"


def test_temperature_table_is_ordered_coldest_first():
    assert len(TEMPERATURE_BUCKETS) == 18
    assert TEMPERATURE_BUCKETS[0].label == "Extreme Cold Warning"
    assert TEMPERATURE_BUCKETS[-1].label == "Extreme Heat Warning"


@pytest.mark.parametrize("overrides, expected", [
    ({"weather_category": WeatherCategory.THUNDERSTORM, "qualifiers": ("heavy",)}, SEVERE_THUNDERSTORM),
    ({"weather_category": WeatherCategory.THUNDERSTORM, "precipitation": 25}, SEVERE_THUNDERSTORM),
    ({"weather_category": WeatherCategory.THUNDERSTORM, "qualifiers": ("lightning",)}, THUNDER_AND_LIGHTNING),
    ({"weather_category": WeatherCategory.THUNDERSTORM, "wind_speed": 31}, THUNDER_AND_LIGHTNING),
    ({"weather_category": WeatherCategory.THUNDERSTORM}, THUNDERSTORM),
    ({"weather_category": WeatherCategory.DRIZZLE, "humidity": 90}, MISTY_DRIZZLE),
    ({"weather_category": WeatherCategory.DRIZZLE, "wind_speed": 16}, WINDY_DRIZZLE),
    ({"weather_category": WeatherCategory.DRIZZLE}, DRIZZLE_LIGHT_RAIN),
    ({"weather_category": WeatherCategory.RAIN, "temperature": 0.0}, FREEZING_DRIZZLE),
    ({"weather_category": WeatherCategory.RAIN, "temperature": 2.0}, FREEZING_RAIN),
    ({"weather_category": WeatherCategory.RAIN, "temperature": -5.0}, ICE_STORM),
    ({"weather_category": WeatherCategory.RAIN, "precipitation": 35}, TORRENTIAL_RAIN),
    ({"weather_category": WeatherCategory.RAIN, "precipitation": 25}, DOWNPOUR),
    ({"weather_category": WeatherCategory.RAIN, "precipitation": 15}, HEAVY_RAIN),
    ({"weather_category": WeatherCategory.RAIN, "precipitation": 7}, MODERATE_RAIN),
    ({"weather_category": WeatherCategory.RAIN, "precipitation": 1}, LIGHT_RAIN),
    ({"weather_category": WeatherCategory.SNOW, "temperature": -15.0}, EXTREME_COLD_AND_SNOW),
    ({"weather_category": WeatherCategory.SNOW, "temperature": -7.0}, HEAVY_SNOW),
    ({"weather_category": WeatherCategory.SNOW, "temperature": -1.0}, SNOWY),
    ({"weather_category": WeatherCategory.SNOW, "temperature": 1.0}, WET_SNOW),
    ({"weather_category": WeatherCategory.FOG}, FOGGY),
    ({"weather_category": WeatherCategory.MIST}, MISTY),
])
def test_weather_rules(make_obs, overrides, expected):
    result = classify(make_obs(**overrides))
    assert result.label == expected.label
    assert result.icon == expected.icon
    assert result.recommendation == expected.recommendation


def test_heavy_qualifier_matches_inside_description_words(make_obs):
    obs = make_obs(weather_category=WeatherCategory.THUNDERSTORM, qualifiers=("Thunderstorm", "Heavy", "Hail"))
    assert classify(obs).label == "Severe Thunderstorm"


def test_first_matching_rule_wins(make_obs):
    # Freezing check comes before the precipitation amounts
    obs = make_obs(weather_category=WeatherCategory.RAIN, temperature=0.0, precipitation=40)
    assert classify(obs).label == "Freezing Drizzle"


def test_clear_and_clouds_use_temperature_table(make_obs):
    assert classify(make_obs(weather_category=WeatherCategory.CLEAR, temperature=31)).label == "Hot"
    assert classify(make_obs(weather_category=WeatherCategory.CLOUDS, temperature=5)).label == "Very Cold"


def test_rules_are_checked_in_a_fixed_order():
    assert CONDITION_RULES[0][1] is SEVERE_THUNDERSTORM
    assert CONDITION_RULES[-1][1] is MISTY


def test_notes(make_obs):
    assert temperature_note(make_obs()) is None
    assert temperature_note(make_obs(temperature=5, wind_speed=6)) == " (Wind chill makes it feel colder)"
    assert temperature_note(make_obs(temperature=30, humidity=70)) == " (High humidity makes it feel hotter)"
    assert temperature_note(make_obs(temperature=30, feels_like=25)) == " (Feels like 25.0°C)"
    assert temperature_note(make_obs(temperature=30, feels_like=28.5)) is None


def test_notes_concatenate(make_obs):
    note = temperature_note(make_obs(temperature=2, feels_like=-3, wind_speed=8))
    assert note == " (Feels like -3.0°C) (Wind chill makes it feel colder)"


def test_classify_attaches_note_without_touching_bucket(make_obs):
    result = classify(make_obs(temperature=30, humidity=70))
    assert result.temperature_note == " (High humidity makes it feel hotter)"
    assert temperature_bucket(30).temperature_note is None


def test_classify_is_deterministic(make_obs):
    obs = make_obs(weather_category=WeatherCategory.RAIN, precipitation=12, temperature=18)
    assert classify(obs) == classify(obs)


def test_display_label_prefixes_emoji():
    assert HEAVY_RAIN.display_label == "🌧️ Heavy Rain"


@pytest.mark.parametrize("label, color", [
    (None, "blue"),
    ("", "blue"),
    ("Very Hot", "red"),
    ("Light Rain", "blue"),
    ("Windy Drizzle", "orange"),
    ("Extreme Cold Warning", "lightblue"),
    ("Comfortable", "green"),
])
def test_marker_color(label, color):
    assert marker_color(label) == color
