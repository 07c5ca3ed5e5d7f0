"""Pydantic schemas for request/response validation."""

from music_library.schemas.album import (
    Album,
    AlbumCreate,
    AlbumListResponse,
    AlbumUpdate,
)
from music_library.schemas.artist import (
    Artist,
    ArtistCreate,
    ArtistListResponse,
    ArtistUpdate,
)
from music_library.schemas.common import CamelModel, ErrorResponse, MessageResponse
from music_library.schemas.song import (
    AudioUploadResponse,
    Song,
    SongCreate,
    SongListResponse,
    SongUpdate,
)

__all__ = [
    # Shared schemas
    "CamelModel",
    "ErrorResponse",
    "MessageResponse",
    # Artist schemas
    "Artist",
    "ArtistCreate",
    "ArtistUpdate",
    "ArtistListResponse",
    # Album schemas
    "Album",
    "AlbumCreate",
    "AlbumUpdate",
    "AlbumListResponse",
    # Song schemas
    "Song",
    "SongCreate",
    "SongUpdate",
    "SongListResponse",
    "AudioUploadResponse",
]
