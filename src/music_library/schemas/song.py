"""Pydantic schemas for song API endpoints."""

from datetime import datetime

from pydantic import Field, field_validator

from music_library.schemas.common import CamelModel


class SongBase(CamelModel):
    """Fields shared by new and stored songs."""

    title: str = Field(min_length=1, description="Song title")
    album_id: int = Field(description="ID of the album the song belongs to")
    duration: int = Field(ge=0, description="Duration in seconds")
    track_number: int | None = Field(default=None, ge=1, description="Position on the album")


class SongCreate(SongBase):
    """Schema for creating a new song."""

    pass


class SongUpdate(CamelModel):
    """Schema for updating a song.

    Omitted fields are kept; null clears an optional field.
    """

    title: str | None = Field(default=None, min_length=1, description="Song title")
    album_id: int | None = Field(default=None, description="ID of the album the song belongs to")
    duration: int | None = Field(default=None, ge=0, description="Duration in seconds")
    track_number: int | None = Field(default=None, ge=1, description="Position on the album")

    @field_validator("title", "album_id", "duration")
    @classmethod
    def reject_null(cls, v: str | int | None) -> str | int:
        """Reject null for fields every song must have."""
        if v is None:
            msg = "Field cannot be null"
            raise ValueError(msg)
        return v


class Song(SongBase):
    """A song stored in the catalog."""

    id: int = Field(description="Catalog song ID")
    created_at: datetime = Field(description="When the song was added")
    audio_url: str | None = Field(default=None, description="URL of the uploaded audio file")


class SongListResponse(CamelModel):
    """Response for the song list endpoint."""

    songs: list[Song] = Field(default_factory=list, description="Matching songs")


class AudioUploadResponse(CamelModel):
    """Response for the audio upload endpoint."""

    message: str = Field(description="Confirmation message")
    audio_url: str = Field(description="URL the audio file is served from")
