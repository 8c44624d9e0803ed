"""Translate text through the Google Translate v2 REST endpoint."""

from typing import Callable
from urllib.parse import quote

from baluchon.errors import EncodingError, NoDataError
from baluchon.http_client import RequestsTransport, Transport, build_url
from baluchon.models import TranslationResult, decode_json

GOOGLE_TRANSLATE_URL = "https://translation.googleapis.com/language/translate/v2"


def percent_encode(text: str) -> str:
    """Percent-encode UTF-8 text for a query string. Fails on text that is not valid Unicode (lone surrogates)."""
    return quote(text, safe="", encoding="utf-8", errors="strict")


class Translator:
    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = GOOGLE_TRANSLATE_URL,
        transport: Transport | None = None,
        encode: Callable[[str], str | None] = percent_encode,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.transport = transport if transport is not None else RequestsTransport()
        self.encode = encode

    def translate(self, text: str, source_language: str, target_language: str) -> TranslationResult:
        """
        Translate `text` from source_language to target_language (e.g. "fr" -> "en").

        Raises EncodingError before any request is built if the text cannot be
        encoded; otherwise InvalidURLError, TransportError, NoDataError or DecodingError.
        """
        try:
            encoded = self.encode(text)
        except (UnicodeError, ValueError, TypeError) as e:
            raise EncodingError(f"Failed to encode text: {e}") from e
        if encoded is None:
            raise EncodingError("Failed to encode text")

        url = build_url(
            self.base_url,
            {"key": self.api_key, "source": source_language, "target": target_language},
            raw_query=f"q={encoded}",
        )
        body = self.transport.get(url)
        if not body:
            raise NoDataError("No data received")
        return TranslationResult.from_payload(decode_json(body), text, source_language, target_language)
