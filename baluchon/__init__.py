from baluchon.baluchon import Baluchon
from baluchon.config import Settings
from baluchon.errors import (
    DecodingError,
    EncodingError,
    FetchError,
    InvalidURLError,
    NoDataError,
    RateNotFoundError,
    TransportError,
)
from baluchon.exchange import ExchangeRateClient, SameDayRateCache
from baluchon.models import ExchangeRate, TranslationResult, WeatherSnapshot
from baluchon.preferences import Preferences
from baluchon.translation import Translator
from baluchon.weather import WeatherClient

__all__ = [
    "Baluchon",
    "DecodingError",
    "EncodingError",
    "ExchangeRate",
    "ExchangeRateClient",
    "FetchError",
    "InvalidURLError",
    "NoDataError",
    "Preferences",
    "RateNotFoundError",
    "SameDayRateCache",
    "Settings",
    "TranslationResult",
    "Translator",
    "TransportError",
    "WeatherClient",
    "WeatherSnapshot",
]
