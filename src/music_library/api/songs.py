"""Song API endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends, Query

from music_library.catalog import Catalog, get_catalog
from music_library.config import Settings, get_settings
from music_library.schemas.common import ErrorResponse, MessageResponse
from music_library.schemas.song import (
    AudioUploadResponse,
    Song,
    SongCreate,
    SongListResponse,
    SongUpdate,
)

router = APIRouter(prefix="/songs", tags=["Songs"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Song not found"}}


def audio_url_for(song_id: int, settings: Settings) -> str:
    """Build the URL an uploaded audio file for a song would be served from."""
    return f"{settings.audio_base_url}/{song_id}.mp3"


@router.get("", response_model=SongListResponse)
async def list_songs(
    album_id: int | None = Query(None, alias="albumId", description="Filter by album ID"),
    catalog: Catalog = Depends(get_catalog),
) -> SongListResponse:
    """List songs, optionally filtered by album."""
    if album_id is None:
        songs = catalog.songs.select()
    else:
        songs = catalog.songs.select(lambda song: song.album_id == album_id)
    return SongListResponse(songs=songs)


@router.post("", response_model=Song, status_code=201)
async def create_song(
    song_data: SongCreate,
    catalog: Catalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
) -> Song:
    """Add a new song to the library.

    The song gets a placeholder audio URL until audio is uploaded.
    """
    song_id = catalog.songs.allocate_id()
    song = Song(
        id=song_id,
        created_at=datetime.now(UTC),
        audio_url=audio_url_for(song_id, settings),
        **song_data.model_dump(),
    )
    return catalog.songs.add(song)


@router.put("/{song_id}", response_model=Song, responses=NOT_FOUND)
async def update_song(
    song_id: int,
    song_data: SongUpdate,
    catalog: Catalog = Depends(get_catalog),
) -> Song:
    """Update a song. Fields left out of the request keep their values.

    Raises:
        NotFoundError 404: If the song does not exist
    """
    changes = song_data.model_dump(exclude_unset=True)
    return catalog.songs.update(song_id, changes)


@router.delete("/{song_id}", response_model=MessageResponse, responses=NOT_FOUND)
async def delete_song(
    song_id: int,
    catalog: Catalog = Depends(get_catalog),
) -> MessageResponse:
    """Remove a song from the library.

    Raises:
        NotFoundError 404: If the song does not exist
    """
    catalog.songs.remove(song_id)
    return MessageResponse(message="Song deleted successfully")


@router.post("/{song_id}/audio", response_model=AudioUploadResponse, responses=NOT_FOUND)
async def upload_song_audio(
    song_id: int,
    catalog: Catalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
) -> AudioUploadResponse:
    """Attach an audio file to a song.

    The uploaded payload is never read or stored; the song's audio URL is
    pointed at where the file would be served from.

    Raises:
        NotFoundError 404: If the song does not exist
    """
    audio_url = audio_url_for(song_id, settings)
    catalog.songs.update(song_id, {"audio_url": audio_url})
    return AudioUploadResponse(message="Audio file uploaded successfully", audio_url=audio_url)
