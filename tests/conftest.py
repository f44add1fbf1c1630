"""Pytest configuration and fixtures.

Payloads are trimmed copies of real RGL API responses.
"""

import json
from unittest.mock import MagicMock, Mock

import pytest


def _make_response(status_code=200, payload=None, body=None):
    """Build a fake ``requests.Response`` carrying a JSON (or raw) body."""
    response = Mock()
    response.status_code = status_code
    if body is None:
        body = json.dumps(payload).encode() if payload is not None else b""
    response.content = body
    response.close = Mock()
    return response


@pytest.fixture
def fake_session():
    """Session double whose ``request`` returns a 200 with an empty object by default."""
    session = MagicMock()
    session.headers = {}
    session.request.return_value = _make_response(200, {})
    return session


@pytest.fixture
def client(fake_session):
    """Unthrottled client bound to the fake session."""
    from rgl_api.client import RGLClient

    return RGLClient.unthrottled(session=fake_session, base_url="https://api.rgl.gg/v0/")


@pytest.fixture
def sample_settings():
    """Sample settings for testing."""
    from rgl_api.utils.config import Settings

    return Settings(log_level="DEBUG", log_format="console")


@pytest.fixture
def player_payload():
    return {
        "steamId": "76561198098770013",
        "avatar": "https://steamcdn-a.akamaihd.net/steamcommunity/public/images/avatars/81/8148c37b434814fb7a4bc175a608c1353b4d0a11_full.jpg",
        "name": "Captain Zidgel",
        "updatedAt": "2023-02-12T21:48:27.196Z",
        "status": {"isVerified": False, "isBanned": False, "isOnProbation": False},
        "banInformation": None,
        "currentTeams": {"sixes": None, "highlander": None, "prolander": None},
    }


@pytest.fixture
def banned_player_payload():
    return {
        "steamId": "76561198011940487",
        "avatar": "",
        "name": "banned",
        "updatedAt": "2022-01-01T00:00:00.000Z",
        "status": {"isVerified": False, "isBanned": True, "isOnProbation": False},
        "banInformation": {
            "endsAt": "9999-08-24T06:20:00.000Z",
            "reason": "(10/9/2021) - Failure to Submit Demos: 1st Offense",
        },
        "currentTeams": {"sixes": None, "highlander": None, "prolander": None},
    }


@pytest.fixture
def verified_player_payload():
    return {
        "steamId": "76561197970669109",
        "avatar": "https://steamcdn-a.akamaihd.net/steamcommunity/public/images/avatars/8d/8dbbf447da3ccdb8982b9c6b9257d75fb940f9a1_full.jpg",
        "name": "b4nny",
        "updatedAt": "2022-12-06T07:44:15.356Z",
        "status": {"isVerified": True, "isBanned": False, "isOnProbation": False},
        "banInformation": None,
        "currentTeams": {
            "sixes": {
                "id": 11088,
                "tag": "FROYO",
                "name": "froyotech",
                "status": "Ready",
                "seasonId": 133,
                "divisionId": 809,
                "divisionName": "Invite",
            },
            "highlander": None,
            "prolander": None,
        },
    }


@pytest.fixture
def team_payload():
    return {
        "teamId": 5979,
        "linkedTeams": [],
        "seasonId": 67,
        "divisionId": 78,
        "divisionName": "Intermediate",
        "teamLeader": "76561198116072296",
        "createdAt": "2020-01-06T00:37:16.236Z",
        "updatedAt": "2021-05-26T01:36:52.823Z",
        "tag": "nut.",
        "name": "nut.city",
        "finalRank": 10,
        "players": [
            {
                "name": "wolsne",
                "steamId": "76561197960315263",
                "isLeader": False,
                "joinedAt": "2020-01-07T11:52:14.170Z",
            },
            {
                "name": "dave2",
                "steamId": "76561198012709756",
                "isLeader": False,
                "joinedAt": "2020-01-06T00:59:28.900Z",
            },
            {
                "name": "Captain Zidgel",
                "steamId": "76561198098770013",
                "isLeader": True,
                "joinedAt": "2020-01-07T11:52:14.640Z",
            },
            {
                "name": "tsar",
                "steamId": "76561198116072296",
                "isLeader": True,
                "joinedAt": "2020-01-06T00:37:16.266Z",
            },
        ],
    }


@pytest.fixture
def season_payload():
    return {
        "name": "P7 Season 9",
        "formatName": None,
        "regionName": None,
        "maps": ["koth_product_rcx", "pl_vigil_rc8", "koth_synthetic_rc6a"],
        "participatingTeams": [8317, 8249, 8250, 8251],
        "matchesPlayedDuringSeason": [13004, 13005, 13008],
    }


@pytest.fixture
def match_payload():
    return {
        "matchId": 5256,
        "seasonName": "Sixes S2",
        "divName": "Intermediate",
        "seasonId": 67,
        "matchDate": "2020-01-15T03:30:00.000Z",
        "matchName": "Week 1A",
        "winner": 5979,
        "teams": [
            {
                "teamName": "nut.city",
                "teamTag": "nut.",
                "teamId": 5979,
                "isHome": False,
                "points": "2.75",
            },
            {
                "teamName": "Sunny",
                "teamTag": "s.",
                "teamId": 5819,
                "isHome": False,
                "points": "0.25",
            },
        ],
        "maps": [{"mapName": "cp_snakewater_final1", "homeScore": 1, "awayScore": 5}],
    }


@pytest.fixture
def team_search_payload():
    return {
        "results": ["42", "83", "1142", "2460", "2512"],
        "count": 5,
        "totalHitCount": 27,
    }


@pytest.fixture
def history_payload():
    return [
        {
            "formatId": 3,
            "formatName": "Sixes",
            "regionId": 40,
            "regionName": "NA Sixes",
            "seasonId": 67,
            "seasonName": "Sixes S2",
            "startedAt": "2020-01-07T11:52:14.640Z",
            "divisionId": 363,
            "divisionName": "Intermediate",
            "leftAt": "2020-04-03T00:00:00.000Z",
            "teamName": "nut.city",
            "teamTag": "nut.",
            "teamId": 5979,
            "stats": {
                "wins": 9,
                "winsWithout": 2,
                "loses": 7,
                "losesWithout": 4,
                "gamesPlayed": 16,
                "gamesWithout": 6,
            },
        }
    ]


@pytest.fixture
def bans_payload():
    return [
        {
            "steamId": "76561198011940487",
            "alias": "banned",
            "expiresAt": "9999-08-24T06:20:00.000Z",
            "createdAt": "2021-10-09T00:00:00.000Z",
            "reason": "Failure to Submit Demos: 1st Offense",
        },
        {
            "steamId": "76561198000000001",
            "alias": "cheater",
            "expiresAt": "2024-01-01T00:00:00.000Z",
            "createdAt": "2023-01-01T00:00:00.000Z",
            "reason": "Cheating",
        },
    ]


@pytest.fixture
def envelope_payload():
    """Return a builder for POST error envelopes."""

    def _create(
        code="too_small",
        status_code=400,
        message="String must contain at least 2 character(s)",
    ):
        return {
            "statusCode": status_code,
            "error": "Bad Request",
            "message": [{"code": code, "message": message}],
        }

    return _create


@pytest.fixture
def make_response():
    """Return the fake response builder."""
    return _make_response
