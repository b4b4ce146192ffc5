"""Central configuration & dynamic settings loaders.

Values that may differ per deployment are NOT hardcoded. They are resolved in this order:
1. Streamlit secrets (st.secrets[...]) when Streamlit is running.
2. Environment variables.
3. Fallback: None or a documented default (callers decide how to handle it).

Keep `.streamlit/secrets.toml` git-ignored.
"""

from __future__ import annotations

import os
from typing import Optional

try:  # Streamlit may not be present during some tooling runs
	import streamlit as st  # type: ignore
except Exception:  # pragma: no cover - optional dependency environment
	st = None  # type: ignore


def get_setting(name: str, default: Optional[str] = None) -> Optional[str]:
	"""Resolve a deployment setting: st.secrets first, then the environment.

	Blank values count as unset. Never raises; `default` is returned instead.
	"""
	if st is not None:
		try:
			if name in st.secrets:  # type: ignore[attr-defined]
				secret = st.secrets.get(name)  # type: ignore[attr-defined]
				if isinstance(secret, str) and secret.strip():
					return secret.strip()
		except Exception:
			# secrets.toml missing outside `streamlit run`
			pass
	env_value = (os.getenv(name) or "").strip()
	return env_value or default


def get_log_level() -> str:
	return get_setting("EVENTCAST_LOG_LEVEL", "INFO").upper()


def get_default_language() -> str:
	lang = get_setting("EVENTCAST_LANGUAGE", "en").lower()
	return lang if lang in SUPPORTED_LANGUAGES else "en"


SUPPORTED_LANGUAGES = ("en", "ar")

# Non-secret static endpoints
OPEN_METEO_FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
OPEN_METEO_GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
NASA_POWER_DAILY_URL = "https://power.larc.nasa.gov/api/temporal/daily/point"
OSM_TILES_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
OSM_ATTRIBUTION = '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'

HTTP_TIMEOUT_SECONDS = 10

# Geocoding / Nominatim settings
# Keep retries modest to respect the Nominatim usage policy.
GEOCODE_TIMEOUT_SECONDS = 5
GEOCODE_MAX_RETRIES = 3
GEOCODE_BACKOFF_BASE = 0.5  # seconds, exponential backoff multiplier
GEOCODE_USER_AGENT = "eventcast_app/1.0 (contact: replace_with_email)"

# Safety map falls back to Riyadh when no location is known
SAFETY_DEFAULT_COORDS = (24.7136, 46.6753)
