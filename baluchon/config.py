"""Settings read from the environment (.env is loaded by the entry point)."""

import math
import os
from dataclasses import dataclass

from baluchon.exchange import FIXER_URL
from baluchon.http_client import DEFAULT_TIMEOUT
from baluchon.translation import GOOGLE_TRANSLATE_URL
from baluchon.weather import OPENWEATHER_URL


def _env_number(environ, name, default, cast):
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass
class Settings:
    fixer_api_key: str = ""
    openweather_api_key: str = ""
    google_translate_api_key: str = ""
    fixer_url: str = FIXER_URL
    openweather_url: str = OPENWEATHER_URL
    google_translate_url: str = GOOGLE_TRANSLATE_URL
    http_timeout: float = DEFAULT_TIMEOUT
    http_retries: int = 0
    state_path: str = ""  # empty: keep preferences and the cached rate in memory
    base_currency: str = "EUR"

    def __post_init__(self):
        # urllib3 refuses a zero or negative timeout at request time.
        if not (math.isfinite(self.http_timeout) and self.http_timeout > 0):
            raise ValueError(f"BALUCHON_HTTP_TIMEOUT must be a positive number of seconds, got {self.http_timeout}")
        if self.http_retries < 0:
            raise ValueError(f"BALUCHON_HTTP_RETRIES must be zero or more, got {self.http_retries}")

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            fixer_api_key=env.get("FIXER_API_KEY", ""),
            openweather_api_key=env.get("OPENWEATHER_API_KEY", ""),
            google_translate_api_key=env.get("GOOGLE_TRANSLATE_API_KEY", ""),
            fixer_url=env.get("FIXER_URL") or FIXER_URL,
            openweather_url=env.get("OPENWEATHER_URL") or OPENWEATHER_URL,
            google_translate_url=env.get("GOOGLE_TRANSLATE_URL") or GOOGLE_TRANSLATE_URL,
            http_timeout=_env_number(env, "BALUCHON_HTTP_TIMEOUT", DEFAULT_TIMEOUT, float),
            http_retries=_env_number(env, "BALUCHON_HTTP_RETRIES", 0, int),
            state_path=env.get("BALUCHON_STATE_PATH", ""),
            base_currency=(env.get("BALUCHON_BASE_CURRENCY") or "EUR").upper(),
        )

    def missing_keys(self) -> list[str]:
        """Names of the API key variables that are not set."""
        keys = {
            "FIXER_API_KEY": self.fixer_api_key,
            "OPENWEATHER_API_KEY": self.openweather_api_key,
            "GOOGLE_TRANSLATE_API_KEY": self.google_translate_api_key,
        }
        return [name for name, value in keys.items() if not value]
