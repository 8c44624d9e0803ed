"""Errors raised by the endpoint clients. Every failure of a fetch is a FetchError."""


class FetchError(Exception):
    """A single fetch attempt failed. Never retried internally."""


class EncodingError(FetchError):
    """Input text could not be percent-encoded."""


class InvalidURLError(FetchError):
    """The request URL could not be built."""


class TransportError(FetchError):
    """The transport reported a failure (network, timeout, non-2xx status)."""


class NoDataError(FetchError):
    """The transport succeeded but returned no body."""


class DecodingError(FetchError):
    """The body is not the expected JSON shape, or lacks a required field."""


class RateNotFoundError(DecodingError):
    """The requested target currency is missing from the provider's rates."""
