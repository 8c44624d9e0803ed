"""Shared HTTP client: requests session, URL building, and the Transport used by every endpoint client."""

import logging
from typing import Mapping, Protocol
from urllib.parse import urlencode

import requests
from retry_requests import retry

from baluchon.errors import InvalidURLError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class Transport(Protocol):
    """Performs one GET. Returns the body (possibly empty) or raises TransportError."""

    def get(self, url: str) -> bytes | None: ...


def build_session(retries: int = 0, backoff_factor: float = 0.2) -> requests.Session:
    """
    Session mounted with a retry adapter. No retries by default: a caller
    wanting another attempt issues a new fetch.
    """
    return retry(requests.Session(), retries=retries, backoff_factor=backoff_factor)


class RequestsTransport:
    """Transport backed by a requests session. Non-2xx responses are transport errors."""

    def __init__(self, session: requests.Session | None = None, *, timeout: float = DEFAULT_TIMEOUT):
        self.session = session if session is not None else build_session()
        self.timeout = timeout

    def get(self, url: str) -> bytes | None:
        logger.debug("GET %s", _redact(url))
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(str(e)) from e
        return response.content


def build_url(base_url: str, params: Mapping[str, str], *, raw_query: str | None = None) -> str:
    """
    Append query parameters to base_url. raw_query is an already-encoded
    fragment (e.g. "q=Bonjour%20toi") appended as-is.

    Raises InvalidURLError if the result is not a usable http(s) URL.
    """
    query = urlencode(params)
    if raw_query:
        query = f"{query}&{raw_query}" if query else raw_query
    url = f"{base_url}{'&' if '?' in base_url else '?'}{query}" if query else base_url
    prepared = requests.PreparedRequest()
    try:
        prepared.prepare_url(url, None)
    except (requests.exceptions.InvalidURL, requests.exceptions.MissingSchema) as e:
        raise InvalidURLError(str(e)) from e
    if not prepared.url.startswith(("http://", "https://")):
        raise InvalidURLError(f"Unsupported URL scheme: {url!r}")
    return prepared.url


def _redact(url: str) -> str:
    """Hide API keys from log lines."""
    for name in ("access_key=", "appid=", "key="):
        start = url.find(name)
        if start != -1:
            start += len(name)
            end = url.find("&", start)
            url = url[:start] + "***" + (url[end:] if end != -1 else "")
    return url
