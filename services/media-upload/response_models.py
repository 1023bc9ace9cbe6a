"""Response models for the media-upload API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class VideoResponse(BaseModel):
    """A video record as returned to clients."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    user_id: UUID = Field(alias="userID")
    title: str
    description: str
    thumbnail_url: str | None = Field(default=None, alias="thumbnailURL")
    video_url: str | None = Field(default=None, alias="videoURL")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")
