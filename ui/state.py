"""Session state owned by one controller object.

Streamlit re-runs the script on every interaction; everything that must
survive a rerun lives in the mapping handed to AppState (st.session_state in
the app, a plain dict in tests). Views receive the AppState explicitly.
"""
from __future__ import annotations

from typing import Any, MutableMapping, Optional

from config import settings

FORECAST_PAGE = "forecast"
SAFETY_PAGE = "safety"
WORLD_CENTER = [20, 0]

_DEFAULTS = {
    "language": None,
    "page": FORECAST_PAGE,
    "map_center": WORLD_CENTER,
    "map_pin": None,
    "show_map_panel": False,
    "location_text": "",
    "last_location": None,
    "last_result": None,
    "pending_alert": None,
    "safety_issue": None,
    "safety_pin": None,
}


class AppState:
    def __init__(self, store: MutableMapping[str, Any]):
        self._store = store
        for key, default in _DEFAULTS.items():
            if key not in store:
                store[key] = list(default) if isinstance(default, list) else default
        if store["language"] is None:
            store["language"] = settings.get_default_language()

    # --- language / navigation ---
    @property
    def language(self) -> str:
        return self._store["language"]

    @language.setter
    def language(self, lang: str) -> None:
        self._store["language"] = lang if lang in settings.SUPPORTED_LANGUAGES else "en"

    @property
    def page(self) -> str:
        return self._store["page"]

    def go_to(self, page: str) -> None:
        self._store["page"] = page

    # --- location picker ---
    @property
    def map_center(self) -> list:
        return self._store["map_center"]

    @property
    def map_pin(self) -> Optional[list]:
        return self._store["map_pin"]

    def set_pin(self, lat: float, lon: float) -> None:
        self._store["map_pin"] = [lat, lon]
        self._store["map_center"] = [lat, lon]

    def clear_pin(self) -> None:
        self._store["map_pin"] = None

    @property
    def show_map_panel(self) -> bool:
        return bool(self._store["show_map_panel"])

    def toggle_map_panel(self) -> None:
        self._store["show_map_panel"] = not self._store["show_map_panel"]

    @property
    def location_text(self) -> str:
        return self._store["location_text"]

    @location_text.setter
    def location_text(self, text: str) -> None:
        self._store["location_text"] = text or ""

    # --- forecast results ---
    @property
    def last_location(self):
        return self._store["last_location"]

    @property
    def last_result(self) -> Optional[dict]:
        return self._store["last_result"]

    def record_result(self, location, result: dict) -> None:
        """Store a finished evaluation and arm the safety alert if hazards were found."""
        self._store["last_location"] = location
        self._store["last_result"] = result
        self._store["pending_alert"] = result.get("alert")

    def clear_result(self) -> None:
        self._store["last_result"] = None
        self._store["pending_alert"] = None

    # --- safety alert / safety page ---
    @property
    def pending_alert(self):
        return self._store["pending_alert"]

    def dismiss_alert(self) -> None:
        self._store["pending_alert"] = None

    def open_safety(self, issue: Optional[str] = None) -> None:
        """Jump to the safety page with an issue preselected."""
        self._store["safety_issue"] = issue
        self._store["pending_alert"] = None
        self._store["page"] = SAFETY_PAGE

    @property
    def safety_issue(self) -> Optional[str]:
        return self._store["safety_issue"]

    @safety_issue.setter
    def safety_issue(self, issue: Optional[str]) -> None:
        self._store["safety_issue"] = issue

    @property
    def safety_pin(self) -> list:
        """Safety map location: explicit pin, else last forecast location, else default."""
        if self._store["safety_pin"]:
            return self._store["safety_pin"]
        loc = self._store["last_location"]
        if loc is not None:
            return [loc.lat, loc.lon]
        return list(settings.SAFETY_DEFAULT_COORDS)

    def set_safety_pin(self, lat: float, lon: float) -> None:
        self._store["safety_pin"] = [lat, lon]
