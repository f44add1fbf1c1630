"""Player models."""

from datetime import datetime

from pydantic import Field

from rgl_api.models.base import RGLModel
from rgl_api.utils.timestamps import parse_timestamp


class PlayerStatus(RGLModel):
    """Account standing flags."""

    is_verified: bool = Field(default=False, alias="isVerified")
    is_banned: bool = Field(default=False, alias="isBanned")
    is_on_probation: bool = Field(default=False, alias="isOnProbation")


class Ban(RGLModel):
    """Active ban on a player profile."""

    ends_at: str = Field(default="", alias="endsAt", description="ISO timestamp the ban lifts")
    reason: str = Field(default="", description="Ban reason (may contain HTML)")

    @property
    def ends(self) -> datetime | None:
        """``ends_at`` as an aware UTC datetime."""
        return parse_timestamp(self.ends_at)


class CurrentTeam(RGLModel):
    """At-a-glance reference to the team a player is on in one format."""

    id: int = Field(default=0, description="Team ID")
    tag: str = ""
    name: str = ""
    status: str = ""
    season_id: int = Field(default=0, alias="seasonId")
    division_id: int = Field(default=0, alias="divisionId")
    division_name: str = Field(default="", alias="divisionName")


class CurrentTeams(RGLModel):
    """Current team per game format; None when the player has no team there."""

    sixes: CurrentTeam | None = None
    highlander: CurrentTeam | None = None
    prolander: CurrentTeam | None = None


class Player(RGLModel):
    """Player profile found by Steam ID."""

    steam_id: str = Field(default="", alias="steamId", description="SteamID64")
    avatar: str = Field(default="", description="Avatar URL")
    name: str = Field(default="", description="Display name")
    updated_at: str = Field(default="", alias="updatedAt", description="Last profile update")
    status: PlayerStatus = Field(default_factory=PlayerStatus)
    ban: Ban | None = Field(default=None, alias="banInformation")
    current_teams: CurrentTeams = Field(default_factory=CurrentTeams, alias="currentTeams")
