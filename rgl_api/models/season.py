"""Season models."""

from pydantic import Field

from rgl_api.models.base import IntList, RGLModel, StrList


class Season(RGLModel):
    """Season found by ID."""

    name: str = Field(default="", description="Season name (e.g., 'P7 Season 9')")
    format_name: str | None = Field(default=None, alias="formatName")
    region_name: str | None = Field(default=None, alias="regionName")
    maps: StrList = Field(default_factory=list)
    participating_teams: IntList = Field(default_factory=list, alias="participatingTeams")
    matches: IntList = Field(default_factory=list, alias="matchesPlayedDuringSeason")
