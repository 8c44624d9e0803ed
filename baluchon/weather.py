"""Fetch current conditions and condition icons from OpenWeatherMap."""

import logging

from baluchon.errors import InvalidURLError, NoDataError
from baluchon.http_client import RequestsTransport, Transport, build_url
from baluchon.models import WeatherSnapshot, decode_json

logger = logging.getLogger(__name__)

OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
ICON_URL_TEMPLATE = "https://openweathermap.org/img/wn/{code}@2x.png"


class WeatherClient:
    """Current weather by city name, in metric units unless told otherwise."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = OPENWEATHER_URL,
        icon_url_template: str = ICON_URL_TEMPLATE,
        transport: Transport | None = None,
        units: str = "metric",
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.icon_url_template = icon_url_template
        self.transport = transport if transport is not None else RequestsTransport()
        self.units = units

    def fetch(self, city: str) -> WeatherSnapshot:
        """
        Current conditions for `city` (e.g. "Paris", "New York").

        Raises InvalidURLError, TransportError (including a 404 for an
        unknown city), NoDataError or DecodingError.
        """
        url = build_url(self.base_url, {"q": city, "appid": self.api_key, "units": self.units})
        body = self.transport.get(url)
        if not body:
            raise NoDataError("No data received")
        snapshot = WeatherSnapshot.from_payload(decode_json(body))
        logger.debug("Weather for %s: %s", city, snapshot.description)
        return snapshot

    def fetch_icon(self, code: str) -> bytes:
        """Raw PNG bytes for an icon code such as "01d". No decoding, caching or retry."""
        if not code:
            raise InvalidURLError("Empty icon code")
        url = build_url(self.icon_url_template.format(code=code), {})
        body = self.transport.get(url)
        if not body:
            raise NoDataError("No data received")
        return body
