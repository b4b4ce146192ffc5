"""Safety assistance view: guidance, emergency numbers, location and help form."""
import html

import streamlit as st

from ui.map_panel import render_safety_map
from ui.state import AppState
from utils.i18n import t
from utils.safety import (
    ASSISTANCE_LABELS,
    EMERGENCY_CONTACTS,
    ISSUE_LABELS,
    OTHER_ISSUE,
    HelpRequestError,
    alert_style,
    build_help_request,
    guidance_for,
    issue_detected_message,
    nearby_place_type,
    nearby_places,
    submit_help_request,
)

_ALERT_RENDERERS = {
    "danger": st.error,
    "warning": st.warning,
    "info": st.info,
}


def render_guidance(issue: str | None, lang: str) -> None:
    guide = guidance_for(issue, lang)
    items = "".join(
        f"<div style='background:#f8fbff; border-inline-start:4px solid #0d6efd; padding:0.6em 0.9em; "
        f"margin-bottom:0.5em; border-radius:4px;'>✅ {html.escape(rec)}</div>"
        for rec in guide["recommendations"]
    )
    st.markdown(
        f"<div class='modern-card'><h4><span style='font-size:1.6rem;'>{guide['icon']}</span> "
        f"{html.escape(guide['title'])}</h4>{items}</div>",
        unsafe_allow_html=True,
    )


def render_emergency_contacts(lang: str) -> None:
    st.markdown(f"**📞 {t('emergency_numbers', lang)}**")
    cols = st.columns(2)
    for i, contact in enumerate(EMERGENCY_CONTACTS):
        with cols[i % 2]:
            st.link_button(
                f"{contact['icon']} {contact[lang if lang in contact else 'en']}  {contact['number']}",
                f"tel:{contact['number']}",
            )


def render_nearby_places(issue: str | None, lang: str) -> None:
    heading = nearby_place_type(issue, lang)
    if heading is None:
        return
    st.markdown(f"**📍 {heading}**")
    for place in nearby_places(issue, lang):
        st.markdown(f"- **{place['name']}** · {place['distance']}")


def render_safety_page(state: AppState) -> None:
    lang = state.language
    st.markdown(f"<div class='section-title'>🛡️ {t('safety_title', lang)}</div>", unsafe_allow_html=True)

    issue_labels = ISSUE_LABELS.get(lang, ISSUE_LABELS["en"])
    issue_keys = list(issue_labels)
    preselected = state.safety_issue if state.safety_issue in issue_keys else None
    issue = st.selectbox(
        t("weather_issue", lang),
        issue_keys,
        index=issue_keys.index(preselected) if preselected else None,
        format_func=lambda k: issue_labels[k],
    )
    state.safety_issue = issue

    if issue and issue != OTHER_ISSUE:
        show = _ALERT_RENDERERS.get(alert_style(issue), st.warning)
        show(issue_detected_message(issue_labels[issue], lang))

    left, right = st.columns([1.2, 1])
    with left:
        render_guidance(issue if issue != OTHER_ISSUE else None, lang)
        render_nearby_places(issue, lang)
    with right:
        render_emergency_contacts(lang)

    place_name = render_safety_map(state, lang)
    _render_help_form(state, issue, place_name, lang)


def _render_help_form(state: AppState, issue: str | None, place_name: str | None, lang: str) -> None:
    assistance_labels = ASSISTANCE_LABELS.get(lang, ASSISTANCE_LABELS["en"])
    with st.form("help_request_form", clear_on_submit=True):
        other_issue = ""
        if issue == OTHER_ISSUE:
            other_issue = st.text_input(t("other_issue", lang))
        assistance = st.selectbox(
            t("assistance_type", lang),
            list(assistance_labels),
            format_func=lambda k: assistance_labels[k],
        )
        details = st.text_area(t("description", lang))
        cols = st.columns(2)
        with cols[0]:
            user_name = st.text_input(t("your_name", lang))
        with cols[1]:
            phone = st.text_input(t("phone", lang))
        urgent = st.checkbox(t("urgent", lang))
        submitted = st.form_submit_button(t("submit_request", lang))

    if not submitted:
        return
    lat, lon = state.safety_pin
    try:
        request = build_help_request(
            issue=issue or "",
            location={"lat": lat, "lng": lon, "name": place_name},
            assistance_type=assistance,
            other_issue=other_issue,
            details=details,
            urgent=urgent,
            user_name=user_name,
            phone=phone,
            lang=lang,
        )
    except HelpRequestError as e:
        st.error(str(e))
        return
    with st.spinner("…"):
        submit_help_request(request)
    st.success(t("request_sent", lang))
