"""
Domain values returned by the endpoint clients, and the decoders that build
them from provider JSON. Provider payloads are validated with pydantic models;
any shape mismatch surfaces as a DecodingError.
"""

import json
from dataclasses import asdict, dataclass
from datetime import date
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from baluchon.errors import DecodingError, RateNotFoundError

DATE_FORMAT = "%Y-%m-%d"

# Strictly positive and finite: json.loads turns Infinity and 1e400 into inf.
Rate = Annotated[float, Field(gt=0, allow_inf_nan=False)]


def decode_json(body: bytes) -> dict:
    """Parse a response body into a JSON object."""
    try:
        payload = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DecodingError(f"Malformed JSON: {e}") from e
    if not isinstance(payload, dict):
        raise DecodingError(f"Expected a JSON object, got {type(payload).__name__}")
    return payload


# --- Provider payloads ---


class _Payload(BaseModel):
    model_config = ConfigDict(strict=True)


class FixerPayload(_Payload):
    """Fixer.io `latest`: {"rates": {TO: n}, "base": ..., "date": ...}."""

    rates: dict[str, Rate]


class WeatherMain(_Payload):
    temperature: float = Field(alias="temp")
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: int
    humidity: int


class WeatherCondition(_Payload):
    condition_id: int = Field(alias="id")
    condition_main: str = Field(alias="main")
    description: str
    icon_code: str = Field(alias="icon")


class WeatherPayload(_Payload):
    """OpenWeatherMap `weather`; only the first condition is used."""

    name: str
    main: WeatherMain
    weather: list[WeatherCondition] = Field(min_length=1)


class Translation(_Payload):
    translated_text: str = Field(alias="translatedText")


class TranslationData(_Payload):
    translations: list[Translation] = Field(min_length=1)


class TranslatePayload(_Payload):
    """Google Translate v2: {"data": {"translations": [{"translatedText": ...}]}}."""

    data: TranslationData


class StoredRate(_Payload):
    base_currency: str
    target_currency: str
    rate: Rate
    on: date = Field(alias="date", strict=False)


def _validate(model: type[BaseModel], data, message: str):
    """Validate `data` against `model`; a ValidationError becomes a DecodingError naming the bad fields."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        fields = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'payload'}: {error['msg']}" for error in e.errors()
        )
        raise DecodingError(f"{message} ({fields})") from e


# --- Domain values ---


@dataclass(frozen=True)
class ExchangeRate:
    """One base -> target rate, dated by the day it was fetched."""

    base_currency: str
    target_currency: str
    rate: float
    date: date

    @classmethod
    def from_payload(cls, payload: dict, base_currency: str, target_currency: str, on: date) -> "ExchangeRate":
        """The result echoes the requested pair, not the provider's `base`."""
        rates = payload.get("rates")
        if isinstance(rates, dict) and target_currency not in rates:
            raise RateNotFoundError(f"No rate for {target_currency} in response")
        fixer = _validate(FixerPayload, payload, "Unexpected exchange rate response")
        return cls(base_currency, target_currency, fixer.rates[target_currency], on)

    def convert(self, amount: float) -> float:
        return amount * self.rate

    def to_dict(self) -> dict:
        data = asdict(self)
        data["date"] = self.date.strftime(DATE_FORMAT)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ExchangeRate":
        """Inverse of to_dict(). Raises DecodingError for anything it cannot read back."""
        stored = _validate(StoredRate, data, "Unreadable exchange rate record")
        return cls(stored.base_currency, stored.target_currency, stored.rate, stored.on)


@dataclass(frozen=True)
class WeatherSnapshot:
    """Current conditions for a named location (OpenWeatherMap `weather`)."""

    location_name: str
    temperature: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: int
    humidity: int
    condition_id: int
    condition_main: str
    description: str
    icon_code: str

    @classmethod
    def from_payload(cls, payload: dict) -> "WeatherSnapshot":
        weather = _validate(WeatherPayload, payload, "Unexpected weather response")
        return cls(
            location_name=weather.name,
            **weather.main.model_dump(),
            **weather.weather[0].model_dump(),
        )


@dataclass(frozen=True)
class TranslationResult:
    original_text: str
    translated_text: str
    source_language: str
    target_language: str

    @classmethod
    def from_payload(
        cls, payload: dict, original_text: str, source_language: str, target_language: str
    ) -> "TranslationResult":
        translated = _validate(TranslatePayload, payload, "Translation not found in response")
        return cls(original_text, translated.data.translations[0].translated_text, source_language, target_language)
