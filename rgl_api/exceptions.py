"""Error taxonomy for RGL API calls.

"Resource not found" is deliberately absent: endpoints report it as a zero
record or an empty list, never as an exception.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rgl_api.envelope import ErrorEnvelope


class RGLError(Exception):
    """Base exception for RGL API failures."""

    def __init__(self, message: str, endpoint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.endpoint = endpoint

    def __str__(self) -> str:
        if self.endpoint:
            return f"{self.endpoint}: {self.message}"
        return self.message


class ValidationError(RGLError):
    """Raised for bad input caught before any network call."""

    pass


class LimiterCancelledError(RGLError):
    """Raised when a rate limiter wait is cancelled or cannot meet its deadline."""

    pass


class RateLimitedError(RGLError):
    """Raised when the API responds with HTTP 429. Never retried automatically."""

    pass


class DecodeError(RGLError):
    """Raised when a response body does not match the expected shape."""

    pass


class TransportError(RGLError):
    """Raised on network failure or a status code with no defined meaning."""

    def __init__(
        self, message: str, endpoint: str | None = None, status_code: int | None = None
    ) -> None:
        super().__init__(message, endpoint)
        self.status_code = status_code


class RemoteEnvelopeError(RGLError):
    """Raised for a structured error body returned by a POST endpoint."""

    def __init__(
        self,
        message: str,
        endpoint: str | None = None,
        envelope: ErrorEnvelope | None = None,
    ) -> None:
        super().__init__(message, endpoint)
        self.envelope = envelope

    @property
    def code(self) -> str | None:
        """Machine-readable code of the first envelope message, if any."""
        if self.envelope is None or not self.envelope.message:
            return None
        return self.envelope.message[0].code

    @property
    def status_code(self) -> int | None:
        if self.envelope is None:
            return None
        return self.envelope.status_code


class InternalEncodingError(RemoteEnvelopeError):
    """The API rejected the request body's types (``invalid_type``)."""

    pass


class QueryTooShortError(RemoteEnvelopeError):
    """The API rejected a search query as too short (``too_small``)."""

    pass


class MalformedIdentifierError(RemoteEnvelopeError):
    """The API rejected an identifier in a bulk request (``invalid_string``)."""

    pass
