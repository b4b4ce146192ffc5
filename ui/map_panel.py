"""Interactive folium maps: location picker, result map and safety map."""
from __future__ import annotations

import html
import logging

import folium
import streamlit as st
from streamlit_folium import st_folium

from config import settings
from services.geocoding import GeocodingError, reverse_geocode, short_name
from ui.state import WORLD_CENTER, AppState
from utils.conditions import marker_color
from utils.i18n import t

logger = logging.getLogger(__name__)


def _base_map(center: list, zoom: int) -> folium.Map:
    m = folium.Map(location=center, zoom_start=zoom, control_scale=True, tiles=None)
    folium.TileLayer(
        tiles=settings.OSM_TILES_URL,
        attr=settings.OSM_ATTRIBUTION,
        name="OpenStreetMap",
        max_zoom=19,
    ).add_to(m)
    return m


def _dot_icon(color: str, size: int = 24) -> folium.DivIcon:
    half = size // 2
    return folium.DivIcon(
        class_name="custom-div-icon",
        html=(
            f"<div style='background-color:{color}; width:{size}px; height:{size}px; "
            f"border-radius:50%; border:2px solid white; transform:translate(-{half}px, -{half}px);'></div>"
        ),
        icon_size=(size, size),
        icon_anchor=(half, half),
    )


@st.cache_data(show_spinner=False, ttl=3600)
def _cached_place_name(lat: float, lon: float, lang: str) -> str | None:
    try:
        place = reverse_geocode(lat, lon, language=lang)
    except GeocodingError as e:
        logger.warning("Reverse geocoding failed: %s", e)
        return None
    return place.name if place else None


def render_location_picker(state: AppState, lang: str) -> None:
    """Map toggle + click-to-pin; 'use selected' fills the location box."""
    label = t("hide_map", lang) if state.show_map_panel else t("pick_on_map", lang)
    if st.button(f"🌍 {label}", key="toggle_map_panel_btn"):
        state.toggle_map_panel()
        st.rerun()
    if not state.show_map_panel:
        return

    center = state.map_center
    m = _base_map(center, zoom=2 if center == WORLD_CENTER else 8)
    if state.map_pin:
        folium.Marker(location=state.map_pin, popup=t("selected_coords", lang)).add_to(m)
    map_data = st_folium(m, width=1100, height=450, returned_objects=["last_clicked"], key="location_picker_map")

    if map_data and map_data.get("last_clicked"):
        coords = map_data["last_clicked"]
        if state.map_pin != [coords["lat"], coords["lng"]]:
            state.set_pin(coords["lat"], coords["lng"])
            st.rerun()

    if not state.map_pin:
        return
    lat, lon = state.map_pin
    cols = st.columns([2, 1, 1])
    with cols[0]:
        st.caption(f"{t('selected_coords', lang)}: {lat:.6f}, {lon:.6f}")
    with cols[1]:
        if st.button(f"📌 {t('use_selected', lang)}", key="use_pin_btn"):
            name = _cached_place_name(round(lat, 4), round(lon, 4), "en")
            state.location_text = short_name(name, fallback=f"{lat:.6f}, {lon:.6f}")
            state.toggle_map_panel()
            st.rerun()
    with cols[2]:
        if st.button("✖", key="clear_pin_btn", help="Clear the pin and search by name"):
            state.clear_pin()
            st.rerun()


def render_result_map(lat: float, lon: float, condition_label: str, location_name: str) -> None:
    """Map centred on the forecast location, marker coloured by condition."""
    m = _base_map([lat, lon], zoom=12)
    folium.Marker(
        location=[lat, lon],
        icon=_dot_icon(marker_color(condition_label)),
        popup=folium.Popup(
            f"<b>{html.escape(condition_label or 'Weather')}</b><br>Location: {html.escape(location_name)}",
            show=True,
        ),
    ).add_to(m)
    st_folium(m, width=1100, height=400, returned_objects=[], key="result_map")


def render_safety_map(state: AppState, lang: str) -> str | None:
    """Safety map with a movable pin; returns the resolved place name."""
    lat, lon = state.safety_pin
    m = _base_map([lat, lon], zoom=13)
    folium.Marker(location=[lat, lon], icon=_dot_icon("#0d6efd", size=30)).add_to(m)
    st.caption(t("map_hint", lang))
    map_data = st_folium(m, width=1100, height=400, returned_objects=["last_clicked"], key="safety_map")
    if map_data and map_data.get("last_clicked"):
        coords = map_data["last_clicked"]
        if [coords["lat"], coords["lng"]] != [lat, lon]:
            state.set_safety_pin(coords["lat"], coords["lng"])
            st.rerun()

    name = _cached_place_name(round(lat, 4), round(lon, 4), lang)
    st.markdown(
        f"<div class='modern-card' style='padding:1em;'><b>📍 {t('your_location', lang)}:</b> "
        f"{html.escape(name) if name else f'{lat:.4f}, {lon:.4f}'}</div>",
        unsafe_allow_html=True,
    )
    return name
