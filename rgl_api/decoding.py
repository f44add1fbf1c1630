"""Decoding of RGL response bodies into typed records."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar, get_origin

import pydantic
import requests

from rgl_api.exceptions import DecodeError, TransportError

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> pydantic.TypeAdapter:
    return pydantic.TypeAdapter(shape)


def decode_bytes(body: bytes, shape: type[T] | Any, endpoint: str | None = None) -> T:
    """
    Validate a JSON document against ``shape``.

    Args:
        body: Raw JSON bytes.
        shape: A model class or a ``list[Model]`` type.
        endpoint: Endpoint name attached to any error.

    Returns:
        The decoded value.

    Raises:
        DecodeError: If the body is not valid JSON or does not match shape.
    """
    try:
        return _adapter(shape).validate_json(body)
    except pydantic.ValidationError as e:
        raise DecodeError(
            f"response did not match {_shape_name(shape)}: {e.error_count()} error(s)",
            endpoint=endpoint,
        ) from e


def decode(response: requests.Response, shape: type[T] | Any, endpoint: str | None = None) -> T:
    """
    Read a response body and decode it. The caller still owns the response.

    Raises:
        TransportError: If the connection fails while the body is read.
        DecodeError: If the body does not match shape.
    """
    try:
        body = response.content
    except requests.RequestException as e:
        raise TransportError(f"could not read response body: {e}", endpoint=endpoint) from e
    return decode_bytes(body, shape, endpoint)


def zero_value(shape: type[T] | Any) -> T:
    """Value returned instead of decoding when the resource does not exist."""
    if get_origin(shape) is list:
        return []  # type: ignore[return-value]
    return shape()


def _shape_name(shape: Any) -> str:
    if get_origin(shape) is not None:
        return repr(shape)
    return getattr(shape, "__name__", repr(shape))
