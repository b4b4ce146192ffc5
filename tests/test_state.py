from services.geocoding import Location
from ui.state import FORECAST_PAGE, SAFETY_PAGE, WORLD_CENTER, AppState
from utils.models import HazardFinding, HazardKind, Severity


def test_defaults():
    store = {}
    state = AppState(store)
    assert state.language == "en"
    assert state.page == FORECAST_PAGE
    assert state.map_center == WORLD_CENTER
    assert state.map_center is not WORLD_CENTER
    assert state.map_pin is None
    assert state.pending_alert is None
    assert "last_result" in store


def test_default_language_from_environment(monkeypatch):
    monkeypatch.setenv("EVENTCAST_LANGUAGE", "AR")
    assert AppState({}).language == "ar"
    monkeypatch.setenv("EVENTCAST_LANGUAGE", "fr")
    assert AppState({}).language == "en"


def test_existing_values_survive_reruns():
    store = {"language": "ar", "location_text": "Jeddah"}
    state = AppState(store)
    assert state.language == "ar"
    assert state.location_text == "Jeddah"


def test_language_setter_rejects_unknown():
    state = AppState({})
    state.language = "ar"
    assert state.language == "ar"
    state.language = "de"
    assert state.language == "en"


def test_pin_and_map_panel():
    state = AppState({})
    state.set_pin(21.5, 39.2)
    assert state.map_pin == [21.5, 39.2]
    assert state.map_center == [21.5, 39.2]
    state.clear_pin()
    assert state.map_pin is None
    state.toggle_map_panel()
    assert state.show_map_panel
    state.toggle_map_panel()
    assert not state.show_map_panel


def test_record_result_arms_alert():
    state = AppState({})
    alert = HazardFinding(HazardKind.STRONG_WIND, "Strong winds detected (12 m/s).", Severity.MEDIUM)
    loc = Location(name="Riyadh", lat=24.7, lon=46.7)
    state.record_result(loc, {"alert": alert})
    assert state.pending_alert is alert
    assert state.last_location is loc
    state.dismiss_alert()
    assert state.pending_alert is None
    assert state.last_result == {"alert": alert}
    state.clear_result()
    assert state.last_result is None


def test_open_safety():
    state = AppState({})
    state.record_result(None, {"alert": HazardFinding(HazardKind.THUNDERSTORM, "x", Severity.HIGH)})
    state.open_safety("thunderstorm")
    assert state.page == SAFETY_PAGE
    assert state.safety_issue == "thunderstorm"
    assert state.pending_alert is None
    state.go_to(FORECAST_PAGE)
    assert state.page == FORECAST_PAGE


def test_safety_pin_fallbacks():
    state = AppState({})
    assert state.safety_pin == [24.7136, 46.6753]
    state.record_result(Location(name="Jeddah", lat=21.5, lon=39.2), {})
    assert state.safety_pin == [21.5, 39.2]
    state.set_safety_pin(21.6, 39.1)
    assert state.safety_pin == [21.6, 39.1]
