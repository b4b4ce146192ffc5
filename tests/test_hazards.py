from utils.hazards import detect_hazards, js_round, most_severe
from utils.models import HazardFinding, HazardKind, Severity


def _finding(kind, severity):
    return HazardFinding(kind=kind, message=kind.value, severity=severity)


def test_all_rules_fire_in_order(make_obs):
    obs = make_obs(temperature=42, weather_code=210, precipitation=35, wind_speed=12)
    findings = detect_hazards(obs)
    assert [f.kind for f in findings] == [
        HazardKind.THUNDERSTORM,
        HazardKind.EXTREME_HEAT,
        HazardKind.HEAVY_RAIN,
        HazardKind.STRONG_WIND,
    ]
    assert [f.severity for f in findings] == [Severity.HIGH, Severity.HIGH, Severity.MEDIUM, Severity.MEDIUM]
    assert findings[0].message == "Thunderstorm detected in your area."
    assert findings[1].message == "Extreme heat warning: Temperatures reaching up to 42°C."
    assert findings[2].message == "Heavy rain expected in your area."
    assert findings[3].message == "Strong winds detected (12 m/s)."


def test_calm_day_has_no_hazards(make_obs):
    assert detect_hazards(make_obs(weather_code=800)) == []


def test_thresholds_are_strict(make_obs):
    obs = make_obs(temperature=40, precipitation=30, wind_speed=10)
    assert detect_hazards(obs) == []


def test_heat_uses_daily_max_and_rounds(make_obs):
    findings = detect_hazards(make_obs(temperature=35, temperature_max=40.5))
    assert len(findings) == 1
    assert findings[0].message == "Extreme heat warning: Temperatures reaching up to 41°C."


def test_rain_code_alone_triggers_heavy_rain(make_obs):
    findings = detect_hazards(make_obs(weather_code=501, precipitation=2))
    assert [f.kind for f in findings] == [HazardKind.HEAVY_RAIN]


def test_code_range_edges(make_obs):
    assert detect_hazards(make_obs(weather_code=232))[0].kind is HazardKind.THUNDERSTORM
    assert detect_hazards(make_obs(weather_code=233)) == []
    assert detect_hazards(make_obs(weather_code=531))[0].kind is HazardKind.HEAVY_RAIN
    assert detect_hazards(make_obs(weather_code=532)) == []


def test_most_severe_prefers_first_high():
    rain = _finding(HazardKind.HEAVY_RAIN, Severity.MEDIUM)
    heat = _finding(HazardKind.EXTREME_HEAT, Severity.HIGH)
    wind = _finding(HazardKind.STRONG_WIND, Severity.MEDIUM)
    storm = _finding(HazardKind.THUNDERSTORM, Severity.HIGH)
    assert most_severe([rain, heat, wind]) is heat
    assert most_severe([storm, heat]) is storm
    assert most_severe([rain, wind]) is rain


def test_most_severe_of_nothing():
    assert most_severe([]) is None


def test_js_round_is_half_up():
    assert js_round(2.5) == 3
    assert js_round(-2.5) == -2
    assert js_round(0.49) == 0
    assert js_round(11.5) == 12
