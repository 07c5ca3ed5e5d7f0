"""Pydantic schemas for album API endpoints."""

from datetime import datetime

from pydantic import Field, field_validator

from music_library.schemas.common import CamelModel


class AlbumBase(CamelModel):
    """Fields shared by new and stored albums."""

    title: str = Field(min_length=1, description="Album title")
    artist_id: int = Field(description="ID of the artist who released the album")
    release_year: int = Field(ge=1000, le=9999, description="Year of release")
    genre: str | None = Field(default=None, description="Album genre")


class AlbumCreate(AlbumBase):
    """Schema for creating a new album.

    The artist ID is stored as given; it is not checked against the catalog.
    """

    pass


class AlbumUpdate(CamelModel):
    """Schema for updating an album.

    Omitted fields are kept; null clears an optional field.
    """

    title: str | None = Field(default=None, min_length=1, description="Album title")
    artist_id: int | None = Field(
        default=None, description="ID of the artist who released the album"
    )
    release_year: int | None = Field(default=None, ge=1000, le=9999, description="Year of release")
    genre: str | None = Field(default=None, description="Album genre")

    @field_validator("title", "artist_id", "release_year")
    @classmethod
    def reject_null(cls, v: str | int | None) -> str | int:
        """Reject null for fields every album must have."""
        if v is None:
            msg = "Field cannot be null"
            raise ValueError(msg)
        return v


class Album(AlbumBase):
    """An album stored in the catalog."""

    id: int = Field(description="Catalog album ID")
    created_at: datetime = Field(description="When the album was added")


class AlbumListResponse(CamelModel):
    """Response for the album list endpoint."""

    albums: list[Album] = Field(default_factory=list, description="Matching albums")
