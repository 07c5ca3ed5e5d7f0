"""Pydantic schemas for artist API endpoints."""

from datetime import datetime

from pydantic import Field, field_validator

from music_library.schemas.common import CamelModel


class ArtistBase(CamelModel):
    """Fields shared by new and stored artists."""

    name: str = Field(min_length=1, description="Artist or band name")
    genre: str = Field(min_length=1, description="Primary musical genre")
    country: str | None = Field(default=None, description="Country of origin")
    biography: str | None = Field(default=None, description="Short biography")


class ArtistCreate(ArtistBase):
    """Schema for creating a new artist."""

    pass


class ArtistUpdate(CamelModel):
    """Schema for updating an artist.

    Omitted fields are kept; null clears an optional field.
    """

    name: str | None = Field(default=None, min_length=1, description="Artist or band name")
    genre: str | None = Field(default=None, min_length=1, description="Primary musical genre")
    country: str | None = Field(default=None, description="Country of origin")
    biography: str | None = Field(default=None, description="Short biography")

    @field_validator("name", "genre")
    @classmethod
    def reject_null(cls, v: str | None) -> str:
        """Reject null for fields every artist must have."""
        if v is None:
            msg = "Field cannot be null"
            raise ValueError(msg)
        return v


class Artist(ArtistBase):
    """An artist stored in the catalog."""

    id: int = Field(description="Catalog artist ID")
    created_at: datetime = Field(description="When the artist was added")


class ArtistListResponse(CamelModel):
    """Response for the artist list endpoint."""

    artists: list[Artist] = Field(default_factory=list, description="Matching artists")
