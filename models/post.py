from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"
    UNKNOWN = "unknown"


class Location(BaseModel):
    lat: float = 0.0
    lon: float = 0.0


class Post(BaseModel):
    """
    A geo-tagged post as stored in the search index. The media fields keep the
    index field names (url, type, face) as aliases.
    """
    model_config = ConfigDict(populate_by_name=True)

    user: str = ""
    message: str = ""
    location: Location = Location()
    media_url: str = Field("", alias="url")
    media_type: MediaType = Field(MediaType.UNKNOWN, alias="type")
    face_score: float = Field(0.0, alias="face")

    @field_validator("media_type", mode="before")
    @classmethod
    def coerce_media_type(cls, value):
        # older documents may carry an empty or unexpected type
        if isinstance(value, MediaType):
            return value
        try:
            return MediaType(value)
        except ValueError:
            return MediaType.UNKNOWN

    def to_document(self) -> dict:
        """Serialize the post with the index field names"""
        return self.model_dump(by_alias=True, mode="json")
