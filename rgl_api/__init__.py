"""Rate-limited client for the RGL public API."""

from rgl_api.client import RGLClient
from rgl_api.exceptions import (
    DecodeError,
    InternalEncodingError,
    LimiterCancelledError,
    MalformedIdentifierError,
    QueryTooShortError,
    RateLimitedError,
    RemoteEnvelopeError,
    RGLError,
    TransportError,
    ValidationError,
)
from rgl_api.utils.rate_limit import RateLimiter

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "InternalEncodingError",
    "LimiterCancelledError",
    "MalformedIdentifierError",
    "QueryTooShortError",
    "RGLClient",
    "RGLError",
    "RateLimitedError",
    "RateLimiter",
    "RemoteEnvelopeError",
    "TransportError",
    "ValidationError",
]
