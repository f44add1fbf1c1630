"""Search result models."""

from pydantic import Field

from rgl_api.models.base import RGLModel, StrList


class SearchResults(RGLModel):
    """One page of player or team search hits.

    ``results`` holds identifiers as strings (SteamID64s for players, team IDs
    for teams) and is an empty list, never None, when nothing matched.
    """

    results: StrList = Field(default_factory=list)
    count: int = Field(default=0, description="Hits on this page")
    total_hit_count: int = Field(default=0, alias="totalHitCount", description="Hits on all pages")
