"""Baluchon: exchange rate, weather and translation for a home/destination pair. Composes the three clients."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime
from pathlib import Path
from typing import Callable, MutableMapping

from baluchon.config import Settings
from baluchon.errors import FetchError
from baluchon.exchange import ExchangeRateClient, SameDayRateCache
from baluchon.http_client import RequestsTransport, Transport, build_session
from baluchon.models import ExchangeRate, TranslationResult, WeatherSnapshot
from baluchon.preferences import Preferences, open_store
from baluchon.translation import Translator
from baluchon.weather import WeatherClient

logger = logging.getLogger(__name__)

PREFERENCES_TABLE = "preferences"
RATE_TABLE = "exchange_rate"


class Baluchon:
    """The app's three screens without the screens. Settings come from the environment."""

    def __init__(
        self,
        settings: Settings,
        *,
        preferences: Preferences | None = None,
        transport: Transport | None = None,
        rate_store: MutableMapping[str, str] | None = None,
    ):
        """
        Args:
            settings: API keys, endpoints and HTTP options.
            preferences: Optional. Defaults to a store at settings.state_path, or in memory.
            transport: Optional. Shared by all three clients; a RequestsTransport by default.
            rate_store: Optional. Where the same-day cache keeps its slot.
        """
        self.settings = settings
        if transport is None:
            session = build_session(retries=settings.http_retries)
            transport = RequestsTransport(session, timeout=settings.http_timeout)
        state_path = Path(settings.state_path) if settings.state_path else None
        if preferences is None:
            preferences = Preferences(open_store(state_path, PREFERENCES_TABLE) if state_path else None)
        if rate_store is None and state_path:
            rate_store = open_store(state_path, RATE_TABLE)
        self.preferences = preferences

        self.rates = SameDayRateCache(
            ExchangeRateClient(settings.fixer_api_key, base_url=settings.fixer_url, transport=transport),
            store=rate_store,
        )
        self.weather_client = WeatherClient(
            settings.openweather_api_key, base_url=settings.openweather_url, transport=transport
        )
        self.translator = Translator(
            settings.google_translate_api_key, base_url=settings.google_translate_url, transport=transport
        )

    def exchange(self, amount: float | None = None) -> tuple[ExchangeRate, float | None]:
        """Rate from the base currency to the destination currency, and `amount` converted at that rate."""
        rate = self.rates.fetch_if_needed(self.settings.base_currency, self.preferences.destination_currency)
        return rate, (rate.convert(amount) if amount is not None else None)

    def weather(
        self, on_result: Callable[[str, WeatherSnapshot | FetchError], None] | None = None
    ) -> dict[str, WeatherSnapshot | FetchError]:
        """
        Weather for home and destination, fetched concurrently. Each entry holds
        the snapshot or the error that ended that fetch; one failing does not
        affect the other.

        Args:
            on_result: Optional. Called with (side, result) as each fetch
                completes, so the faster city is reported first.
        """
        cities = {
            "home": self.preferences.home_city,
            "destination": self.preferences.destination_city,
        }
        results = {}
        with ThreadPoolExecutor(max_workers=len(cities)) as executor:
            futures = {executor.submit(self.weather_client.fetch, city): side for side, city in cities.items()}
            for future in as_completed(futures):
                side = futures[future]
                try:
                    result = future.result()
                except FetchError as e:
                    logger.warning("Weather for %s unavailable: %s", cities[side], e)
                    result = e
                results[side] = result
                if on_result is not None:
                    on_result(side, result)
        return {side: results[side] for side in cities}

    def icon(self, code: str) -> bytes | None:
        """Icon bytes, or None if the download failed (best effort)."""
        try:
            return self.weather_client.fetch_icon(code)
        except FetchError as e:
            logger.warning("Icon %s unavailable: %s", code, e)
            return None

    def translate(self, text: str) -> TranslationResult:
        """Translate from the home language to the destination language."""
        if not text or not text.strip():
            raise ValueError("Nothing to translate.")
        return self.translator.translate(
            text, self.preferences.home_language, self.preferences.destination_language
        )

    def print_exchange(self, rate: ExchangeRate, converted: float | None = None) -> None:
        print(f"💱 1 {rate.base_currency} = {rate.rate} {rate.target_currency}")
        print(f"   Last update: {rate.date.isoformat()}")
        if converted is not None:
            print(f"   {converted:.2f} {rate.target_currency}")

    def print_weather(self) -> dict[str, WeatherSnapshot | FetchError]:
        """Fetch both cities and print each one as soon as it arrives."""
        print("\n" + "=" * 45)
        print(f"🧳 BALUCHON WEATHER: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
        print("-" * 45)
        results = self.weather(on_result=self.print_city)
        print("=" * 45 + "\n")
        return results

    def print_city(self, side: str, result: WeatherSnapshot | FetchError) -> None:
        if isinstance(result, FetchError):
            print(f"⚠️ {side.capitalize()}: weather unavailable ({result})")
            return
        print(f"📍 {side.capitalize()}: {result.location_name}")
        print(f"• {result.temperature}°C, {result.description.capitalize()}")
        print(f"• Min: {result.temp_min}°C  Max: {result.temp_max}°C")
        icon = self.icon(result.icon_code)
        if icon is None:
            print(f"• Icon {result.icon_code}: unavailable")
        else:
            print(f"• Icon {result.icon_code}: {len(icon)} bytes")

    def print_translation(self, result: TranslationResult) -> None:
        print(f"🗣️ [{result.source_language}] {result.original_text}")
        print(f"   [{result.target_language}] {result.translated_text}")
