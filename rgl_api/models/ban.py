"""Ban feed models."""

from pydantic import Field

from rgl_api.models.base import RGLModel


class BulkBan(RGLModel):
    """Entry in the paginated bans feed."""

    steam_id: str = Field(default="", alias="steamId")
    alias: str = Field(default="", description="Player alias at time of ban")
    expires_at: str = Field(default="", alias="expiresAt")
    created_at: str = Field(default="", alias="createdAt")
    reason: str = ""
