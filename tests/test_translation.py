"""Tests for Translator (Google Translate v2)."""

from unittest.mock import MagicMock
from urllib.parse import parse_qs, urlsplit

import pytest

from baluchon.errors import DecodingError, EncodingError, NoDataError, TransportError
from baluchon.translation import Translator, percent_encode
from tests.conftest import TRANSLATION_PAYLOAD, FakeTransport, as_body


def make_translator(transport, **kwargs):
    return Translator("google-key", transport=transport, **kwargs)


class TestTranslate:
    """Tests for translate()."""

    def test_success(self, transport):
        transport.data = as_body(TRANSLATION_PAYLOAD)
        result = make_translator(transport).translate("Bonjour", "fr", "en")

        assert result.translated_text == "Good morning"
        assert result.original_text == "Bonjour"
        assert result.source_language == "fr"
        assert result.target_language == "en"

    def test_request_url(self, transport):
        """Text is percent-encoded once; key, source and target are in the query."""
        transport.data = as_body(TRANSLATION_PAYLOAD)
        make_translator(transport).translate("Ça va bien ? Oui & non", "fr", "en")

        url = urlsplit(transport.urls[0])
        assert url.netloc == "translation.googleapis.com"
        assert url.path == "/language/translate/v2"
        assert "q=%C3%87a%20va%20bien%20%3F%20Oui%20%26%20non" in url.query
        assert parse_qs(url.query) == {
            "key": ["google-key"],
            "source": ["fr"],
            "target": ["en"],
            "q": ["Ça va bien ? Oui & non"],
        }

    def test_transport_error(self):
        transport = FakeTransport(error=TransportError("offline"))

        with pytest.raises(TransportError):
            make_translator(transport).translate("Bonjour", "fr", "en")

    def test_no_data(self, transport):
        with pytest.raises(NoDataError):
            make_translator(transport).translate("Bonjour", "fr", "en")

    def test_empty_translations(self, transport):
        transport.data = as_body({"data": {"translations": []}})

        with pytest.raises(DecodingError, match="Translation not found"):
            make_translator(transport).translate("Bonjour", "fr", "en")

    def test_google_error_payload(self, transport):
        transport.data = as_body({"error": {"code": 400, "message": "API key not valid."}})

        with pytest.raises(DecodingError):
            make_translator(transport).translate("Bonjour", "fr", "en")


class TestEncoding:
    """Encoding failures stop before any URL is built or request made."""

    def test_encoder_returning_none(self, transport, monkeypatch):
        build_url = MagicMock()
        monkeypatch.setattr("baluchon.translation.build_url", build_url)
        translator = make_translator(transport, encode=lambda text: None)

        with pytest.raises(EncodingError):
            translator.translate("Bonjour", "fr", "en")
        assert transport.urls == []
        build_url.assert_not_called()

    def test_encoder_raising(self, transport, monkeypatch):
        build_url = MagicMock()
        monkeypatch.setattr("baluchon.translation.build_url", build_url)

        def broken(text):
            raise ValueError("cannot encode")

        with pytest.raises(EncodingError, match="cannot encode"):
            make_translator(transport, encode=broken).translate("Bonjour", "fr", "en")
        build_url.assert_not_called()
        assert transport.urls == []

    def test_default_encoder_rejects_lone_surrogate(self, transport):
        with pytest.raises(EncodingError):
            make_translator(transport).translate("abc\ud800", "fr", "en")
        assert transport.urls == []

    def test_percent_encode(self):
        assert percent_encode("a b/c?") == "a%20b%2Fc%3F"
