"""NASA POWER API integration helpers.

Daily point data used to refine the Open-Meteo forecast (humidity, 2 m wind,
precipitation, solar radiation). This source is optional: any failure is
logged and reported as None so the forecast still renders.
"""

import logging
from datetime import datetime

import requests

from config import settings

logger = logging.getLogger(__name__)

DAILY_PARAMETERS = ("T2M", "PRECTOT", "WS2M", "RH2M", "ALLSKY_SFC_SW_DWN")
FILL_VALUE = -999.0


def _compact_date(date: str) -> str:
	"""YYYY-MM-DD -> YYYYMMDD (already compact input passes through)."""
	if len(date) == 8 and date.isdigit():
		return date
	return datetime.strptime(date, "%Y-%m-%d").strftime("%Y%m%d")


def fetch_nasa_power_daily(lat: float, lon: float, date: str) -> dict | None:
	"""
	Fetch NASA POWER daily values for the given lat/lon and date.
	Returns a dict of the parameters that carry real values (fill values dropped),
	or None if the request fails or no parameter has data.
	"""
	params = {
		"parameters": ",".join(DAILY_PARAMETERS),
		"community": "RE",
		"longitude": lon,
		"latitude": lat,
		"start": _compact_date(date),
		"end": _compact_date(date),
		"format": "JSON"
	}
	try:
		response = requests.get(settings.NASA_POWER_DAILY_URL, params=params, timeout=settings.HTTP_TIMEOUT_SECONDS)
		response.raise_for_status()
		data = response.json()
		param = data["properties"]["parameter"]
	except (requests.RequestException, ValueError, KeyError, TypeError) as e:
		logger.warning("NASA POWER unavailable for %.4f,%.4f on %s: %s", lat, lon, date, e)
		return None

	values = {}
	for name in DAILY_PARAMETERS:
		series = param.get(name) or {}
		if not series:
			continue
		val = list(series.values())[0]
		if val is None or val == FILL_VALUE:
			continue
		values[name] = val
	return values or None
