"""Place-name and map-click geocoding.

Forward lookups use the Open-Meteo geocoding API; reverse lookups use geopy's
Nominatim client with retry + backoff. Both are memoized per process.
"""

import logging
import time
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional

import requests
from geopy.geocoders import Nominatim

from config import settings

logger = logging.getLogger(__name__)

ARABIC_SEPARATOR = "، "


class GeocodingError(RuntimeError):
	"""Geocoding provider kept failing after all retries."""


@dataclass(frozen=True)
class Location:
	name: str
	lat: float
	lon: float
	country: str = ""
	address: dict = field(default_factory=dict, compare=False, hash=False)

	@property
	def title(self) -> str:
		return f"{self.name}, {self.country}" if self.country else self.name


@lru_cache(maxsize=256)
def _search(name: str) -> Optional[Location]:
	params = {"name": name, "count": 1, "language": "en", "format": "json"}
	try:
		r = requests.get(settings.OPEN_METEO_GEOCODING_URL, params=params, timeout=settings.HTTP_TIMEOUT_SECONDS)
		r.raise_for_status()
		js = r.json()
	except (requests.RequestException, ValueError) as e:
		raise GeocodingError(f"Geocoding failed for '{name}': {e}") from e
	results = js.get("results") or []
	if not results:
		return None
	first = results[0]
	return Location(
		name=first.get("name", name),
		lat=first["latitude"],
		lon=first["longitude"],
		country=first.get("country", ""),
	)


def get_coordinates(name: str) -> Optional[Location]:
	"""Return the best match for a place name, or None when nothing matches.

	Raises:
		GeocodingError: the provider could not be reached.
	"""
	clean = (name or "").strip()
	if not clean:
		return None
	return _search(clean)


def parse_coordinates(text: str) -> Optional[tuple[float, float]]:
	"""Parse "lat, lon" typed into the location box; None if it is not a pair."""
	parts = [p.strip() for p in (text or "").split(",")]
	if len(parts) != 2:
		return None
	try:
		lat, lon = float(parts[0]), float(parts[1])
	except ValueError:
		return None
	if not (-90 <= lat <= 90 and -180 <= lon <= 180):
		return None
	return lat, lon


def format_address_name(address: dict, separator: str = ", ") -> Optional[str]:
	"""Join the address hierarchy from street level up to country."""
	address = address or {}
	parts = [
		address.get("road"),
		address.get("quarter") or address.get("suburb"),
		address.get("city") or address.get("town") or address.get("village"),
		address.get("county"),
		address.get("state"),
		address.get("country"),
	]
	parts = [p for p in parts if p]
	return separator.join(parts) if parts else None


def _reverse_with_retries(geolocator, lat: float, lon: float, language: str):
	retries = settings.GEOCODE_MAX_RETRIES
	base_delay = settings.GEOCODE_BACKOFF_BASE
	for attempt in range(1, retries + 1):
		try:
			return geolocator.reverse(
				(lat, lon),
				language=language,
				addressdetails=True,
				timeout=settings.GEOCODE_TIMEOUT_SECONDS,
			)
		except Exception as e:  # Broad catch due to varied geopy exceptions
			if attempt == retries:
				raise GeocodingError(
					f"Reverse geocoding failed for {lat:.4f},{lon:.4f} after {retries} attempts: {e}"
				) from e
			sleep_for = base_delay * (2 ** (attempt - 1)) + (0.05 * attempt)
			logger.debug("Reverse geocode attempt %d failed (%s); retrying in %.2fs", attempt, e, sleep_for)
			time.sleep(sleep_for)
	return None


@lru_cache(maxsize=512)
def _reverse_cached(lat: float, lon: float, language: str) -> Optional[Location]:
	geolocator = Nominatim(user_agent=settings.GEOCODE_USER_AGENT)
	place = _reverse_with_retries(geolocator, lat, lon, language)
	if not place:
		return None
	raw = getattr(place, "raw", None) or {}
	address = raw.get("address") or {}
	separator = ARABIC_SEPARATOR if language == "ar" else ", "
	name = format_address_name(address, separator) or place.address
	return Location(
		name=name,
		lat=lat,
		lon=lon,
		country=address.get("country", ""),
		address=address,
	)


def reverse_geocode(lat: float, lon: float, language: str = "en") -> Optional[Location]:
	"""Location name for a map click; cached on coordinates rounded to 4 decimals."""
	return _reverse_cached(round(lat, 4), round(lon, 4), language)


def short_name(name: Optional[str], fallback: str = "Selected Location") -> str:
	"""First component of a display name, as shown in the location box."""
	if not name:
		return fallback
	return name.split(",")[0].split(ARABIC_SEPARATOR)[0].strip() or fallback
