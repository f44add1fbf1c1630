"""Pydantic models for RGL API responses."""

from rgl_api.models.ban import BulkBan
from rgl_api.models.base import RGLModel
from rgl_api.models.history import PlayerTeamHistory, TeamHistoryStats
from rgl_api.models.match import Match, MatchMap, MatchTeam
from rgl_api.models.player import Ban, CurrentTeam, CurrentTeams, Player, PlayerStatus
from rgl_api.models.search import SearchResults
from rgl_api.models.season import Season
from rgl_api.models.team import Team, TeamPlayer

__all__ = [
    "Ban",
    "BulkBan",
    "CurrentTeam",
    "CurrentTeams",
    "Match",
    "MatchMap",
    "MatchTeam",
    "Player",
    "PlayerStatus",
    "PlayerTeamHistory",
    "RGLModel",
    "SearchResults",
    "Season",
    "Team",
    "TeamHistoryStats",
    "TeamPlayer",
]
