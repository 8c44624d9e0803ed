"""User preferences (home/destination cities, languages and currency) over a string key-value store."""

from pathlib import Path
from typing import MutableMapping

from requests_cache.backends.sqlite import SQLiteDict

HOME_CITY = "home_city"
DESTINATION_CITY = "destination_city"
HOME_LANGUAGE = "home_language"
DESTINATION_LANGUAGE = "destination_language"
DESTINATION_CURRENCY = "destination_currency"

DEFAULTS = {
    HOME_CITY: "Paris",
    DESTINATION_CITY: "New York",
    HOME_LANGUAGE: "fr",
    DESTINATION_LANGUAGE: "en",
    DESTINATION_CURRENCY: "USD",
}


def open_store(path: str | Path, table: str) -> MutableMapping[str, str]:
    """Persistent str -> str table in a SQLite file (created on first use)."""
    return SQLiteDict(str(path), table_name=table, serializer=None)


class Preferences:
    def __init__(self, store: MutableMapping[str, str] | None = None):
        self.store = store if store is not None else {}

    def get(self, key: str) -> str:
        if key not in DEFAULTS:
            raise KeyError(f"Unknown preference: {key}")
        return self.store.get(key) or DEFAULTS[key]

    def set(self, key: str, value: str) -> str:
        """Store a normalised value and return it. Blank cities fall back to the default."""
        if key not in DEFAULTS:
            raise KeyError(f"Unknown preference: {key}")
        value = (value or "").strip()
        if key in (HOME_CITY, DESTINATION_CITY):
            value = value or DEFAULTS[key]
        elif not value:
            raise ValueError(f"Empty value for {key}")
        elif key == DESTINATION_CURRENCY:
            value = value.upper()
        else:
            value = value.lower()
        self.store[key] = value
        return value

    @property
    def home_city(self) -> str:
        return self.get(HOME_CITY)

    @property
    def destination_city(self) -> str:
        return self.get(DESTINATION_CITY)

    @property
    def home_language(self) -> str:
        return self.get(HOME_LANGUAGE)

    @property
    def destination_language(self) -> str:
        return self.get(DESTINATION_LANGUAGE)

    @property
    def destination_currency(self) -> str:
        return self.get(DESTINATION_CURRENCY)
