"""Player team history models."""

from pydantic import Field

from rgl_api.models.base import EmptyableStr, RGLModel


class TeamHistoryStats(RGLModel):
    """Team record with and without the player in the lineup."""

    wins: int = 0
    wins_without: int = Field(default=0, alias="winsWithout")
    loses: int = 0
    loses_without: int = Field(default=0, alias="losesWithout")
    games_played: int = Field(default=0, alias="gamesPlayed")
    games_without: int = Field(default=0, alias="gamesWithout")


class PlayerTeamHistory(RGLModel):
    """One stint of a player on a team."""

    format_id: int = Field(default=0, alias="formatId")
    format_name: str = Field(default="", alias="formatName")
    region_id: int = Field(default=0, alias="regionId")
    region_name: str = Field(default="", alias="regionName")
    season_id: int = Field(default=0, alias="seasonId")
    season_name: str = Field(default="", alias="seasonName")
    division_id: int = Field(default=0, alias="divisionId")
    division_name: str = Field(default="", alias="divisionName")
    started_at: str = Field(default="", alias="startedAt")
    left_at: EmptyableStr = Field(default="", alias="leftAt", description="Empty while on team")
    team_name: str = Field(default="", alias="teamName")
    team_tag: str = Field(default="", alias="teamTag")
    team_id: int = Field(default=0, alias="teamId")
    stats: TeamHistoryStats = Field(default_factory=TeamHistoryStats)

    @property
    def is_current(self) -> bool:
        """True while the player is still on the team."""
        return self.left_at == ""
