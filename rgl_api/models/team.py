"""Team models."""

from pydantic import Field

from rgl_api.models.base import IntList, NullableList, RGLModel


class TeamPlayer(RGLModel):
    """Roster entry on a team."""

    name: str = ""
    steam_id: str = Field(default="", alias="steamId")
    is_leader: bool = Field(default=False, alias="isLeader")
    joined_at: str = Field(default="", alias="joinedAt")


class Team(RGLModel):
    """Team found by ID. ``players`` keeps the API's roster order."""

    team_id: int = Field(default=0, alias="teamId", description="RGL team ID")
    linked_teams: IntList = Field(default_factory=list, alias="linkedTeams")
    season_id: int = Field(default=0, alias="seasonId")
    division_id: int = Field(default=0, alias="divisionId")
    division_name: str = Field(default="", alias="divisionName")
    team_leader: str = Field(default="", alias="teamLeader", description="Leader's SteamID64")
    created_at: str = Field(default="", alias="createdAt")
    updated_at: str = Field(default="", alias="updatedAt")
    tag: str = ""
    name: str = ""
    final_rank: int | None = Field(default=None, alias="finalRank")
    players: NullableList[TeamPlayer] = Field(default_factory=list)
