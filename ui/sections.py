"""
UI section rendering helpers for Eventcast.
"""
import datetime
import html

import pandas as pd
import streamlit as st

from ui.state import AppState
from utils.i18n import t, text_direction
from utils.models import ConditionResult, WeatherObservation
from utils.scales import format_value, rain_description, uv_description, wind_description
from utils.scoring import EVENT_TYPES


def inject_styles(lang: str) -> None:
    """Card styles plus text direction for the active language."""
    direction = text_direction(lang)
    st.markdown(f"""
    <style>
    .block-container {{ direction: {direction}; max-width: 1200px; padding-top: 2.5rem; }}
    .modern-card {{
        background: #fff;
        border-radius: 18px;
        padding: 2em 2em 1.5em 2em;
        margin-bottom: 2em;
        box-shadow: 0 4px 16px #0002;
    }}
    .condition-icon {{ font-size: 4rem; text-align: center; }}
    .condition-label {{ font-size: 1.8rem; font-weight: 700; text-align: center; }}
    .condition-temp {{ font-size: 2.7rem; font-weight: bold; color: #4f8cff; text-align: center; }}
    .condition-note {{ font-size: 0.95rem; color: #64748b; text-align: center; }}
    .recommendation {{ font-size: 1.15rem; color: #333; text-align: center; margin-top: 0.7em; }}
    .section-title {{ font-size: 1.5rem; font-weight: 700; color: #4f8cff; margin-bottom: 0.5em; }}
    .event-card {{ border-radius: 14px; padding: 1em 1.2em; margin-bottom: 1em; border: 2px solid; }}
    .event-card.ok {{ border-color: #16a34a; }}
    .event-card.bad {{ border-color: #dc2626; }}
    .event-badge {{ float: right; color: #fff; font-size: 0.75rem; font-weight: 600; padding: 3px 10px; border-radius: 10px; }}
    .event-badge.ok {{ background: #16a34a; }}
    .event-badge.bad {{ background: #dc2626; }}
    </style>
    """, unsafe_allow_html=True)


def render_header(lang: str) -> None:
    """Render the app header and subtitle."""
    st.markdown(f"""
    <div style='text-align:center; margin-bottom:2em;'>
        <span style='font-size:2.7rem;'>🌦️</span>
        <span style='font-size:2.3rem; font-weight:700; color:#4f8cff;'>{t('app_title', lang)}</span>
        <br>
        <span style='font-size:1.15rem; color:#444;'>{t('app_subtitle', lang)}<br>Powered by <b>Open-Meteo</b> &amp; <b>NASA POWER</b>.</span>
    </div>
    """, unsafe_allow_html=True)
    st.markdown("---")


def render_inputs(state: AppState, lang: str) -> tuple[str, datetime.date, bool]:
    """Render location/date inputs; returns (location text, date, submitted)."""
    today = datetime.date.today()
    with st.form("weather_form"):
        cols = st.columns([2, 1])
        with cols[0]:
            location = st.text_input(
                t("location_label", lang),
                value=state.location_text,
                placeholder=t("location_placeholder", lang),
            )
        with cols[1]:
            date = st.date_input(t("date_label", lang), value=today, min_value=today)
        submitted = st.form_submit_button(t("check_weather", lang))
    return location, date, submitted


def render_condition_card(obs: WeatherObservation, condition: ConditionResult, location_title: str) -> None:
    """Big icon, label, rounded temperature and the recommendation."""
    note = f"<div class='condition-note'>{html.escape(condition.temperature_note)}</div>" if condition.temperature_note else ""
    st.markdown(f"""
    <div class='modern-card'>
        <div class='section-title'>📍 {html.escape(location_title)}</div>
        <div class='condition-icon'>{condition.icon}</div>
        <div class='condition-label'>{html.escape(condition.display_label)}</div>
        <div class='condition-temp'>{obs.temperature:.1f}°C</div>
        {note}
        <div class='recommendation'>{html.escape(condition.recommendation)}</div>
    </div>
    """, unsafe_allow_html=True)


def weather_details_frame(obs: WeatherObservation, condition: ConditionResult) -> pd.DataFrame:
    """Detail rows for the results table, precipitation inserted after wind."""
    feels_like = obs.feels_like_temperature
    rows = [
        ("🌡️", "Temperature", f"{obs.temperature:.1f}°C (Feels like {feels_like:.1f}°C)"),
        ("💧", "Humidity", format_value(obs.humidity, "%")),
        ("💨", "Wind", f"{format_value(obs.wind_speed, ' m/s')} ({wind_description(obs.wind_speed)})"),
        ("🌧️", "Precipitation", f"{format_value(obs.precipitation)} mm ({rain_description(obs.precipitation)})"),
        ("🌤️", "UV Index",
         f"{format_value(obs.uv_index)} ({uv_description(obs.uv_index)})" if obs.uv_index is not None else "N/A"),
        ("☀️", "Solar Radiation",
         f"{obs.solar_radiation:.2f} kWh/m²/day" if obs.solar_radiation is not None else "N/A"),
        ("📅", "Date", _long_date(obs.date)),
        ("💡", "Recommendation", condition.recommendation or "No specific recommendations available."),
    ]
    return pd.DataFrame(
        [{"": icon, "Metric": label, "Value": value} for icon, label, value in rows]
    )


def _long_date(date: str | None) -> str:
    if not date:
        return "N/A"
    try:
        return datetime.datetime.strptime(date, "%Y-%m-%d").strftime("%A, %B %d, %Y")
    except ValueError:
        return date


def render_details(obs: WeatherObservation, condition: ConditionResult, lang: str) -> None:
    st.markdown(f"<div class='section-title'>{t('weather_details', lang)}</div>", unsafe_allow_html=True)
    st.dataframe(weather_details_frame(obs, condition), width='stretch', hide_index=True)


def render_suitability_cards(suitability: dict, lang: str) -> None:
    """One card per event type, two per row."""
    st.markdown(f"<div class='section-title'>{t('event_suitability', lang)}</div>", unsafe_allow_html=True)
    cols = st.columns(2)
    for i, profile in enumerate(EVENT_TYPES):
        info = suitability.get(profile.key)
        if info is None:
            continue
        cls = "ok" if info.suitable else "bad"
        badge = t("suitable", lang) if info.suitable else t("not_suitable", lang)
        reasons = ""
        if info.reasons:
            joined = html.escape("; ".join(info.reasons))
            reasons = f"<p style='color:#64748b; font-size:0.85rem; margin:0;'><b>{t('considerations', lang)}:</b> {joined}</p>"
        with cols[i % 2]:
            st.markdown(f"""
            <div class='event-card {cls}'>
                <span class='event-badge {cls}'>{badge}</span>
                <h5>{t(profile.key, lang)}</h5>
                <p>{html.escape(profile.description)}</p>
                {reasons}
            </div>
            """, unsafe_allow_html=True)


def render_safety_alert(state: AppState, lang: str) -> None:
    """Show the pending hazard alert with a shortcut to the safety page."""
    alert = state.pending_alert
    if alert is None:
        return
    st.warning(f"**⚠️ {t('safety_alert_title', lang)}**\n\n{alert.message}\n\n{t('safety_alert_body', lang)}")
    cols = st.columns([1, 1, 3])
    with cols[0]:
        if st.button(f"🛡️ {t('view_safety', lang)}", key="open_safety_btn"):
            state.open_safety(alert.kind.value)
            st.rerun()
    with cols[1]:
        if st.button(t("dismiss", lang), key="dismiss_alert_btn"):
            state.dismiss_alert()
            st.rerun()
