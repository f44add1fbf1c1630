"""RGL API client.

One method per endpoint of the public RGL API (https://api.rgl.gg/v0/). Each
call validates its input, waits on the rate limiter, performs exactly one HTTP
request and returns a typed record. A resource that does not exist is not an
error: single-record endpoints return the zero record (e.g. ``Player()``) and
list endpoints return an empty list.

Usage:
    with RGLClient.with_default_rate_limit() as rgl:
        player = rgl.get_player("76561198098770013")
        hits = rgl.search_teams("froyo", take=25, skip=0)
"""

from __future__ import annotations

import threading
from typing import Any
from urllib.parse import quote

import requests
import structlog

from rgl_api.decoding import decode, zero_value
from rgl_api.envelope import interpret
from rgl_api.exceptions import (
    LimiterCancelledError,
    RateLimitedError,
    RGLError,
    TransportError,
    ValidationError,
)
from rgl_api.models import (
    BulkBan,
    Match,
    Player,
    PlayerTeamHistory,
    SearchResults,
    Season,
    Team,
)
from rgl_api.transport import Outcome, RGLTransport, TransportResult
from rgl_api.utils.config import get_settings
from rgl_api.utils.rate_limit import RateLimiter

logger = structlog.get_logger(__name__)

# Every SteamID64 in the public universe starts with these digits.
STEAM_ID_PREFIX = "76561"
MIN_QUERY_LENGTH = 2


class RGLClient:
    """
    Client for the RGL public API.

    The rate limiter is the only state shared between calls, so one client
    can be used from several threads. Without a limiter, requests are not
    throttled and the caller must respect RGL's limit (2 requests/second).

    Every endpoint method also accepts keyword-only ``cancel`` (a
    ``threading.Event``) and ``wait_timeout`` (seconds); both only bound the
    rate limiter wait and raise ``LimiterCancelledError`` before any request
    is sent.
    """

    def __init__(
        self,
        rate_limiter: RateLimiter | None = None,
        transport: RGLTransport | None = None,
        session: requests.Session | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        """
        Initialize RGL client.

        Args:
            rate_limiter: Limiter gating every request. If None, unthrottled.
            transport: HTTP transport. If None, creates one from settings.
            session: Session for the default transport.
            base_url: API root. If None, uses settings.
            timeout: Request timeout in seconds. If None, uses settings.
        """
        settings = get_settings()
        self.rate_limiter = rate_limiter
        base_url = base_url or settings.api_base_url
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.transport = transport or RGLTransport(
            session=session,
            timeout=timeout if timeout is not None else settings.request_timeout,
            user_agent=settings.user_agent,
        )
        self.logger = logger.bind(component="rgl_client")

    @classmethod
    def with_default_rate_limit(cls, **kwargs: Any) -> RGLClient:
        """Create a client limited to RGL's published rate (2 requests/second)."""
        settings = get_settings()
        limiter = RateLimiter(
            rate=settings.rate_limit, per=settings.rate_period, burst=settings.rate_burst
        )
        return cls(rate_limiter=limiter, **kwargs)

    @classmethod
    def unthrottled(cls, **kwargs: Any) -> RGLClient:
        """Create a client that leaves throttling to the caller."""
        return cls(rate_limiter=None, **kwargs)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> RGLClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Request pipeline
    # ------------------------------------------------------------------

    def _throttle(
        self, endpoint: str, cancel: threading.Event | None, wait_timeout: float | None
    ) -> None:
        if self.rate_limiter is None:
            return
        try:
            self.rate_limiter.acquire(timeout=wait_timeout, cancel=cancel)
        except LimiterCancelledError as e:
            self.logger.info(
                "Request abandoned before sending", endpoint=endpoint, reason=e.message
            )
            raise LimiterCancelledError(e.message, endpoint=endpoint) from e

    def _failure(self, endpoint: str, result: TransportResult) -> RGLError:
        if result.outcome is Outcome.RATE_LIMITED:
            self.logger.warning("RGL API rate limit hit (HTTP 429)", endpoint=endpoint)
            return RateLimitedError("rate limit exceeded (HTTP 429)", endpoint=endpoint)
        self.logger.error(
            "RGL API returned unexpected status",
            endpoint=endpoint,
            method=result.method,
            url=result.url,
            status_code=result.status_code,
        )
        return TransportError(
            f"unexpected HTTP status {result.status_code} from {result.method} {result.url}",
            endpoint=endpoint,
            status_code=result.status_code,
        )

    def _send(self, endpoint: str, send: Any, *args: Any, **kwargs: Any) -> TransportResult:
        try:
            return send(*args, **kwargs)
        except TransportError as e:
            raise TransportError(e.message, endpoint=endpoint, status_code=e.status_code) from e

    def _get(
        self,
        endpoint: str,
        path: str,
        shape: Any,
        *,
        params: dict[str, Any] | None = None,
        not_found_is_empty: bool = True,
        cancel: threading.Event | None = None,
        wait_timeout: float | None = None,
    ) -> Any:
        self._throttle(endpoint, cancel, wait_timeout)
        with self._send(
            endpoint, self.transport.get, self.base_url + path, params=params
        ) as result:
            if result.outcome is Outcome.SUCCESS:
                return decode(result.response, shape, endpoint)
            if result.outcome is Outcome.NOT_FOUND and not_found_is_empty:
                self.logger.debug("Resource not found", endpoint=endpoint, path=path)
                return zero_value(shape)
            raise self._failure(endpoint, result)

    def _post(
        self,
        endpoint: str,
        path: str,
        body: Any,
        shape: Any,
        *,
        params: dict[str, Any] | None = None,
        cancel: threading.Event | None = None,
        wait_timeout: float | None = None,
    ) -> Any:
        self._throttle(endpoint, cancel, wait_timeout)
        with self._send(
            endpoint, self.transport.post, self.base_url + path, body, params=params
        ) as result:
            if result.outcome is Outcome.SUCCESS:
                return decode(result.response, shape, endpoint)
            if result.outcome is Outcome.NOT_FOUND:
                self.logger.debug("Resource not found", endpoint=endpoint, path=path)
                return zero_value(shape)
            if result.outcome is Outcome.RATE_LIMITED:
                raise self._failure(endpoint, result)
            raise interpret(result.response, endpoint)

    # ------------------------------------------------------------------
    # Profiles
    # ------------------------------------------------------------------

    def get_player(
        self,
        steam_id: str,
        *,
        cancel: threading.Event | None = None,
        wait_timeout: float | None = None,
    ) -> Player:
        """
        Get a player profile.

        Args:
            steam_id: SteamID64, e.g. "76561198098770013".

        Returns:
            The player, or ``Player()`` if RGL has no such profile.

        Raises:
            ValidationError: If steam_id is not a SteamID64. No request is made.
        """
        if not steam_id.startswith(STEAM_ID_PREFIX):
            raise ValidationError(
                f"steam ID must start with {STEAM_ID_PREFIX}, got {steam_id!r}",
                endpoint="get_player",
            )
        return self._get(
            "get_player",
            f"profile/{quote(steam_id, safe='')}",
            Player,
            cancel=cancel,
            wait_timeout=wait_timeout,
        )

    def get_player_team_history(
        self,
        steam_id: str,
        *,
        cancel: threading.Event | None = None,
        wait_timeout: float | None = None,
    ) -> list[PlayerTeamHistory]:
        """
        Get every team a player has been on.

        Returns:
            Stints in API order; an empty list for an unknown player.
        """
        return self._get(
            "get_player_team_history",
            f"profile/{quote(steam_id, safe='')}/teams",
            list[PlayerTeamHistory],
            cancel=cancel,
            wait_timeout=wait_timeout,
        )

    def bulk_players(
        self,
        steam_ids: list[str],
        *,
        cancel: threading.Event | None = None,
        wait_timeout: float | None = None,
    ) -> list[Player]:
        """
        Look up many players in one request.

        IDs that are unknown to RGL, or not valid SteamID64s at all, are
        silently left out of the result rather than reported.

        Raises:
            RemoteEnvelopeError: If RGL rejects the request body.
        """
        return self._post(
            "bulk_players",
            "profile/getmany",
            list(steam_ids),
            list[Player],
            cancel=cancel,
            wait_timeout=wait_timeout,
        )

    # ------------------------------------------------------------------
    # Teams, seasons, matches
    # ------------------------------------------------------------------

    def get_team(
        self,
        team_id: int,
        *,
        cancel: threading.Event | None = None,
        wait_timeout: float | None = None,
    ) -> Team:
        """Get a team; ``Team()`` if it does not exist."""
        return self._get(
            "get_team", f"teams/{team_id}", Team, cancel=cancel, wait_timeout=wait_timeout
        )

    def get_season(
        self,
        season_id: int,
        *,
        cancel: threading.Event | None = None,
        wait_timeout: float | None = None,
    ) -> Season:
        """Get a season; ``Season()`` if it does not exist."""
        return self._get(
            "get_season", f"seasons/{season_id}", Season, cancel=cancel, wait_timeout=wait_timeout
        )

    def get_match(
        self,
        match_id: int,
        *,
        cancel: threading.Event | None = None,
        wait_timeout: float | None = None,
    ) -> Match:
        """Get a match; ``Match()`` if it does not exist."""
        return self._get(
            "get_match", f"matches/{match_id}", Match, cancel=cancel, wait_timeout=wait_timeout
        )

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search_players(
        self,
        query: str,
        take: int = 10,
        skip: int = 0,
        *,
        cancel: threading.Event | None = None,
        wait_timeout: float | None = None,
    ) -> SearchResults:
        """
        Search players by alias.

        Args:
            query: Alias fragment, at least two characters.
            take: Page size.
            skip: Number of hits to skip.

        Returns:
            Matching SteamID64s. No match yields an empty ``results`` list.

        Raises:
            ValidationError: If query is shorter than two characters.
            RemoteEnvelopeError: If RGL rejects the request body.
        """
        if len(query) < MIN_QUERY_LENGTH:
            raise ValidationError(
                f"Length of alias must be at least {MIN_QUERY_LENGTH}", endpoint="search_players"
            )
        return self._post(
            "search_players",
            "search/players",
            {"nameContains": query},
            SearchResults,
            params={"take": take, "skip": skip},
            cancel=cancel,
            wait_timeout=wait_timeout,
        )

    def search_teams(
        self,
        query: str,
        take: int = 10,
        skip: int = 0,
        *,
        cancel: threading.Event | None = None,
        wait_timeout: float | None = None,
    ) -> SearchResults:
        """Search teams by name. Same contract as ``search_players``; results are team IDs."""
        if len(query) < MIN_QUERY_LENGTH:
            raise ValidationError(
                f"Length of team name must be at least {MIN_QUERY_LENGTH}",
                endpoint="search_teams",
            )
        return self._post(
            "search_teams",
            "search/teams",
            {"nameContains": query},
            SearchResults,
            params={"take": take, "skip": skip},
            cancel=cancel,
            wait_timeout=wait_timeout,
        )

    # ------------------------------------------------------------------
    # Bans
    # ------------------------------------------------------------------

    def get_bans(
        self,
        take: int = 10,
        skip: int = 0,
        *,
        cancel: threading.Event | None = None,
        wait_timeout: float | None = None,
    ) -> list[BulkBan]:
        """
        Get one page of the bans feed, newest first.

        A page past the end of the feed is an empty list.
        """
        return self._get(
            "get_bans",
            "bans/paged",
            list[BulkBan],
            params={"take": take, "skip": skip},
            not_found_is_empty=False,
            cancel=cancel,
            wait_timeout=wait_timeout,
        )
