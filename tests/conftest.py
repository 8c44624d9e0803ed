"""Shared fixtures: a fake transport standing in for the network, and sample provider payloads."""

import json
from datetime import date

import pytest

from baluchon.config import Settings


class FakeTransport:
    """Returns canned data (or raises a canned error) and records every URL requested."""

    def __init__(self, data=None, error=None):
        self.data = data
        self.error = error
        self.urls = []

    def get(self, url):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.data


class RoutingTransport:
    """Answers by URL substring; an Exception value is raised instead of returned."""

    def __init__(self, routes):
        self.routes = routes
        self.urls = []

    def get(self, url):
        self.urls.append(url)
        for needle, answer in self.routes.items():
            if needle in url:
                if isinstance(answer, Exception):
                    raise answer
                return answer
        raise AssertionError(f"Unexpected request: {url}")


# --- Sample API response data ---

RATE_PAYLOAD = {"rates": {"USD": 1.2}, "base": "EUR", "date": "2024-04-07"}

WEATHER_PAYLOAD = {
    "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
    "main": {
        "temp": 22.0,
        "feels_like": 21.0,
        "temp_min": 20.0,
        "temp_max": 23.0,
        "pressure": 1012,
        "humidity": 60,
    },
    "name": "Paris",
}

TRANSLATION_PAYLOAD = {"data": {"translations": [{"translatedText": "Good morning"}]}}

TODAY = date(2024, 4, 7)


def as_body(payload):
    return json.dumps(payload).encode()


def weather_body(name="Paris", **main):
    payload = json.loads(json.dumps(WEATHER_PAYLOAD))
    payload["name"] = name
    payload["main"].update(main)
    return as_body(payload)


@pytest.fixture()
def transport():
    return FakeTransport()


@pytest.fixture()
def settings():
    return Settings(
        fixer_api_key="fixer-key",
        openweather_api_key="owm-key",
        google_translate_api_key="google-key",
    )
