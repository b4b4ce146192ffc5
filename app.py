"""
Main Streamlit app for Eventcast: weather advisories for outdoor events.
"""
# --- Imports ---
import logging

import streamlit as st

from config.logging_config import setup_logging
from services.advisory import build_report, get_observation
from services.geocoding import GeocodingError, Location, get_coordinates, parse_coordinates
from services.weather_api import WeatherServiceError
from ui.map_panel import render_location_picker, render_result_map
from ui.safety_page import render_safety_page
from ui.sections import (
    inject_styles,
    render_condition_card,
    render_details,
    render_header,
    render_inputs,
    render_safety_alert,
    render_suitability_cards,
)
from ui.state import FORECAST_PAGE, SAFETY_PAGE, AppState
from utils.helpers import ForecastUnavailableError
from utils.i18n import t

# --- Set Page Config ---
st.set_page_config(
    page_title="Eventcast",
    page_icon="🌦️",
    layout="wide"
)

setup_logging()
log = logging.getLogger(__name__)

state = AppState(st.session_state)


def resolve_location(text: str):
    """Map pin wins, then typed "lat, lon", then a place-name search."""
    if state.map_pin:
        lat, lon = state.map_pin
        return Location(name=text.strip() or f"{lat:.4f}, {lon:.4f}", lat=lat, lon=lon)
    coords = parse_coordinates(text)
    if coords:
        return Location(name=text.strip(), lat=coords[0], lon=coords[1])
    return get_coordinates(text)


def render_sidebar() -> None:
    lang = state.language
    with st.sidebar:
        choice = st.radio(
            t("language", lang),
            ["en", "ar"],
            index=0 if lang == "en" else 1,
            format_func=lambda k: t("english" if k == "en" else "arabic", lang),
            horizontal=True,
        )
        if choice != lang:
            state.language = choice
            st.rerun()
        st.markdown("---")
        if st.button(f"🌦️ {t('nav_forecast', lang)}", key="nav_forecast_btn"):
            state.go_to(FORECAST_PAGE)
            st.rerun()
        if st.button(f"🛡️ {t('nav_safety', lang)}", key="nav_safety_btn"):
            state.open_safety(state.safety_issue)
            st.rerun()


def render_forecast_page() -> None:
    lang = state.language
    render_header(lang)
    render_location_picker(state, lang)
    location_text, date, submitted = render_inputs(state, lang)

    if submitted:
        state.location_text = location_text
        if not location_text.strip() and not state.map_pin:
            st.error(t("location_error", lang))
            return
        date_str = date.isoformat()
        try:
            with st.spinner("Fetching forecast..."):
                location = resolve_location(location_text)
                if location is None:
                    state.clear_result()
                    st.error(t("location_not_found", lang))
                    return
                obs = get_observation(location.lat, location.lon, date_str)
        except GeocodingError:
            log.exception("Geocoding failed for %r", location_text)
            state.clear_result()
            st.error(t("location_not_found", lang))
            return
        except (WeatherServiceError, ForecastUnavailableError):
            log.exception("Forecast failed for %r on %s", location_text, date_str)
            state.clear_result()
            st.error(t("fetch_error", lang))
            return
        report = build_report(obs)
        log.info(
            "%s on %s: %s, %d hazard(s)",
            location.title, date_str, report["condition"].label, len(report["hazards"]),
        )
        state.record_result(location, report)

    report = state.last_result
    location = state.last_location
    if not report or location is None:
        return

    render_safety_alert(state, lang)
    obs = report["observation"]
    condition = report["condition"]
    render_condition_card(obs, condition, location.title)
    render_details(obs, condition, lang)
    render_suitability_cards(report["suitability"], lang)
    render_result_map(location.lat, location.lon, condition.label, location.title)


# --- Main Logic ---
inject_styles(state.language)
render_sidebar()
if state.page == SAFETY_PAGE:
    render_safety_page(state)
else:
    render_forecast_page()
