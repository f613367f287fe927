from __future__ import annotations


class TranslatorError(Exception):
    """Base error for translation failures."""


class MissingCredentialError(TranslatorError):
    """No API key was supplied; raised before any network call."""


class TransportError(TranslatorError):
    """The completion endpoint did not answer with a success status."""

    def __init__(
        self,
        message: str = "API request failed",
        *,
        http_status: int | None = None,
        service_message: str | None = None,
    ):
        super().__init__(service_message or message)
        self.http_status = http_status
        self.service_message = service_message


class MalformedEnvelopeError(TranslatorError):
    """Transport succeeded but the completion text is missing from the envelope."""


class FormatError(TranslatorError):
    """Model output did not follow the requested JSON contract."""
