"""HTTP transport for the RGL API.

Requests go through a ``requests.Session`` and every response is classified by
status code into an ``Outcome``. The body is streamed and left open; the
caller owns the returned ``TransportResult`` and closes it with ``with``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

import requests
import structlog

from rgl_api.exceptions import TransportError

logger = structlog.get_logger(__name__)


class Outcome(Enum):
    """Classification of an HTTP response."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    ERROR = "error"


def classify(status_code: int) -> Outcome:
    """Map an HTTP status code onto an Outcome."""
    if status_code == 404:
        return Outcome.NOT_FOUND
    if status_code == 429:
        return Outcome.RATE_LIMITED
    if 200 <= status_code < 300:
        return Outcome.SUCCESS
    return Outcome.ERROR


@dataclass
class TransportResult:
    """A classified response whose body has not been consumed yet."""

    outcome: Outcome
    response: requests.Response
    method: str
    url: str

    @property
    def status_code(self) -> int:
        return self.response.status_code

    def close(self) -> None:
        self.response.close()

    def __enter__(self) -> TransportResult:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class RGLTransport:
    """Issues GET and POST requests and classifies the responses."""

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = 30.0,
        user_agent: str = "rgl-api-python",
    ):
        """
        Initialize transport.

        Args:
            session: HTTP session to use. If None, creates one.
            timeout: Request timeout in seconds.
            user_agent: User-Agent header, used when the session has none.
        """
        headers = {"Accept": "application/json", "User-Agent": user_agent}
        if session is None:
            self.session = requests.Session()
            self.session.headers.update(headers)
        else:
            # Headers the caller already set on their session win.
            self.session = session
            for name, value in headers.items():
                self.session.headers.setdefault(name, value)
        self.timeout = timeout
        self.logger = logger.bind(component="rgl_transport")

    def get(self, url: str, params: dict[str, Any] | None = None) -> TransportResult:
        return self._request("GET", url, params=params)

    def post(
        self, url: str, json_body: Any, params: dict[str, Any] | None = None
    ) -> TransportResult:
        return self._request("POST", url, params=params, json=json_body)

    def _request(self, method: str, url: str, **kwargs: Any) -> TransportResult:
        self.logger.debug(
            "Making RGL API request", method=method, url=url, params=kwargs.get("params")
        )

        try:
            response = self.session.request(
                method, url, timeout=self.timeout, stream=True, **kwargs
            )
        except requests.RequestException as e:
            self.logger.error(
                "RGL API request failed",
                method=method,
                url=url,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise TransportError(f"{method} {url} failed: {e}") from e

        outcome = classify(response.status_code)
        self.logger.debug(
            "RGL API response",
            method=method,
            url=url,
            status_code=response.status_code,
            outcome=outcome.value,
        )
        return TransportResult(outcome=outcome, response=response, method=method, url=url)

    def close(self) -> None:
        self.session.close()
