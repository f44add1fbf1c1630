"""Interpretation of the error bodies returned by RGL's POST endpoints.

Search and bulk lookup answer bad requests with a JSON envelope such as::

    {"statusCode": 400, "error": "Bad Request",
     "message": [{"code": "too_small", "message": "String must contain at least 2 character(s)"}]}

The first message's ``code`` selects the exception raised to the caller.
"""

from __future__ import annotations

import requests
import structlog
from pydantic import Field

from rgl_api.decoding import decode
from rgl_api.exceptions import (
    InternalEncodingError,
    MalformedIdentifierError,
    QueryTooShortError,
    RemoteEnvelopeError,
)
from rgl_api.models.base import RGLModel

logger = structlog.get_logger(__name__)


class EnvelopeMessage(RGLModel):
    """A single coded validation message."""

    code: str
    message: str = ""


class ErrorEnvelope(RGLModel):
    """Structured error body."""

    status_code: int = Field(alias="statusCode")
    error: str = ""
    message: list[EnvelopeMessage] = Field(default_factory=list)


ERROR_CODES: dict[str, type[RemoteEnvelopeError]] = {
    "invalid_type": InternalEncodingError,
    "too_small": QueryTooShortError,
    "invalid_string": MalformedIdentifierError,
}


def error_from_envelope(
    envelope: ErrorEnvelope, endpoint: str | None = None
) -> RemoteEnvelopeError:
    """Build the exception matching the envelope's first message code."""
    if not envelope.message:
        return RemoteEnvelopeError(
            f"{envelope.status_code} {envelope.error}".strip(),
            endpoint=endpoint,
            envelope=envelope,
        )

    first = envelope.message[0]
    error_class = ERROR_CODES.get(first.code, RemoteEnvelopeError)
    return error_class(
        f"{envelope.status_code} {first.code}: {first.message}",
        endpoint=endpoint,
        envelope=envelope,
    )


def interpret(response: requests.Response, endpoint: str | None = None) -> RemoteEnvelopeError:
    """
    Interpret a non-success POST response.

    Args:
        response: The response; its body is read but not closed.
        endpoint: Endpoint name attached to the error.

    Returns:
        The exception for the caller to raise.

    Raises:
        DecodeError: If the body is not an error envelope.
    """
    envelope = decode(response, ErrorEnvelope, endpoint)
    error = error_from_envelope(envelope, endpoint)
    logger.warning(
        "RGL API rejected request",
        endpoint=endpoint,
        status_code=envelope.status_code,
        code=error.code,
        error_class=type(error).__name__,
    )
    return error
