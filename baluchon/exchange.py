"""Fixer.io exchange rates, with a same-day cache of the last rate fetched."""

import json
import logging
import threading
from datetime import date
from typing import Callable, MutableMapping

from baluchon.errors import DecodingError, NoDataError
from baluchon.http_client import RequestsTransport, Transport, build_url
from baluchon.models import DATE_FORMAT, ExchangeRate, decode_json

logger = logging.getLogger(__name__)

FIXER_URL = "http://data.fixer.io/api/latest"
LAST_RATE_KEY = "last_exchange_rate"


class ExchangeRateClient:
    """One Fixer.io `latest` request per fetch()."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = FIXER_URL,
        transport: Transport | None = None,
        today: Callable[[], date] = date.today,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.transport = transport if transport is not None else RequestsTransport()
        self.today = today

    def fetch(self, from_currency: str, to_currency: str) -> ExchangeRate:
        """
        Rate from_currency -> to_currency, dated today.

        Raises InvalidURLError, TransportError, NoDataError or DecodingError
        (RateNotFoundError when to_currency is absent from the response).
        """
        url = build_url(
            self.base_url,
            {"access_key": self.api_key, "base": from_currency, "symbols": to_currency},
        )
        body = self.transport.get(url)
        if not body:
            raise NoDataError("No data received")
        payload = decode_json(body)
        return ExchangeRate.from_payload(payload, from_currency, to_currency, self.today())


class SameDayRateCache:
    """
    Remembers the single most recent rate. A rate is fresh while its date
    reads the same as today (YYYY-MM-DD) and its pair matches the request,
    so it expires at local midnight. Any successful network fetch replaces
    the slot, whatever pair it held.

    The slot lives in memory, or in `store` (any str -> str mapping, e.g. a
    requests_cache SQLiteDict) under LAST_RATE_KEY so it survives restarts.
    """

    def __init__(
        self,
        client: ExchangeRateClient,
        *,
        store: MutableMapping[str, str] | None = None,
        today: Callable[[], date] | None = None,
    ):
        self.client = client
        self.store = store if store is not None else {}
        self.today = today if today is not None else client.today
        self._lock = threading.Lock()

    @property
    def cached(self) -> ExchangeRate | None:
        with self._lock:
            return self._load()

    def clear(self) -> None:
        with self._lock:
            self.store.pop(LAST_RATE_KEY, None)

    def is_fresh(self, rate: ExchangeRate | None, from_currency: str, to_currency: str) -> bool:
        if rate is None:
            return False
        return (
            rate.date.strftime(DATE_FORMAT) == self.today().strftime(DATE_FORMAT)
            and rate.base_currency == from_currency
            and rate.target_currency == to_currency
        )

    def fetch_if_needed(self, from_currency: str, to_currency: str) -> ExchangeRate:
        """Cached rate if fresh, otherwise a network fetch that replaces the slot. Errors leave the slot as it was."""
        cached = self.cached
        if self.is_fresh(cached, from_currency, to_currency):
            logger.debug("Using cached rate %s -> %s", from_currency, to_currency)
            return cached

        rate = self.client.fetch(from_currency, to_currency)
        # Tag with the cache's day, not the provider's.
        rate = ExchangeRate(rate.base_currency, rate.target_currency, rate.rate, self.today())
        with self._lock:
            self.store[LAST_RATE_KEY] = json.dumps(rate.to_dict())
        return rate

    def _load(self) -> ExchangeRate | None:
        raw = self.store.get(LAST_RATE_KEY)
        if raw is None:
            return None
        try:
            return ExchangeRate.from_dict(json.loads(raw))
        except (TypeError, ValueError, DecodingError) as e:
            logger.warning("Ignoring unreadable cached rate: %s", e)
            return None
