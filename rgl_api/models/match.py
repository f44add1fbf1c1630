"""Match models."""

from pydantic import Field

from rgl_api.models.base import NullableList, RGLModel


class MatchTeam(RGLModel):
    """One side of a match."""

    team_name: str = Field(default="", alias="teamName")
    team_tag: str = Field(default="", alias="teamTag")
    team_id: int = Field(default=0, alias="teamId")
    is_home: bool = Field(default=False, alias="isHome")
    points: str = Field(default="", description="Match points as sent, e.g. '2.75'")


class MatchMap(RGLModel):
    """Score for one map played in a match."""

    map_name: str = Field(default="", alias="mapName")
    home_score: int = Field(default=0, alias="homeScore")
    away_score: int = Field(default=0, alias="awayScore")


class Match(RGLModel):
    """Match found by ID."""

    match_id: int = Field(default=0, alias="matchId")
    season_name: str = Field(default="", alias="seasonName")
    division_name: str = Field(default="", alias="divName")
    season_id: int = Field(default=0, alias="seasonId")
    match_date: str = Field(default="", alias="matchDate")
    match_name: str = Field(default="", alias="matchName")
    winner: int | None = Field(default=None, description="Winning team ID, if decided")
    teams: NullableList[MatchTeam] = Field(default_factory=list)
    maps: NullableList[MatchMap] = Field(default_factory=list)
