from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests

from countries_api.errors import GeolocationDenied, GeolocationTimeout, GeolocationUnavailable
from utils.logging_setup import get_logger

logger = get_logger(__name__)

GEOCODE_URL = "https://api.bigdatacloud.net/data/reverse-geocode-client"


@dataclass(frozen=True)
class GeoResult:
    latitude: float
    longitude: float
    country_code: Optional[str]
    country_name: Optional[str]


class ReverseGeocoder:
    """Turns coordinates into a country code and/or name. No API key needed."""

    def __init__(self, timeout: float = 10.0, session: Optional[requests.Session] = None, url: str = GEOCODE_URL):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.url = url

    def lookup(self, latitude: float, longitude: float) -> GeoResult:
        if not (-90 <= latitude <= 90 and -180 <= longitude <= 180):
            raise ValueError(f"Coordinates out of range: {latitude}, {longitude}")
        params = {"latitude": latitude, "longitude": longitude, "localityLanguage": "en"}
        logger.debug("Reverse geocoding %s, %s", latitude, longitude)
        try:
            resp = self.session.get(self.url, params=params, timeout=self.timeout)
        except requests.Timeout as e:
            raise GeolocationTimeout() from e
        except requests.RequestException as e:
            logger.warning("Reverse geocode request failed: %s", e)
            raise GeolocationUnavailable() from e
        if resp.status_code in (401, 403):
            raise GeolocationDenied()
        if not resp.ok:
            logger.warning("Reverse geocode rejected with HTTP %s", resp.status_code)
            raise GeolocationUnavailable()
        try:
            data = resp.json()
        except ValueError as e:
            raise GeolocationUnavailable() from e

        if not isinstance(data, dict):
            raise GeolocationUnavailable()
        code = (data.get("countryCode") or "").strip() or None
        name = (data.get("countryName") or "").strip() or None
        if not code and not name:
            raise GeolocationUnavailable("Could not determine country from location")
        logger.info("Location resolved to code=%s name=%s", code, name)
        return GeoResult(latitude, longitude, code, name)
