"""Artist API endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends, Query

from music_library.catalog import Catalog, get_catalog
from music_library.schemas.artist import Artist, ArtistCreate, ArtistListResponse, ArtistUpdate
from music_library.schemas.common import ErrorResponse, MessageResponse

router = APIRouter(prefix="/artists", tags=["Artists"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Artist not found"}}


@router.get("", response_model=ArtistListResponse)
async def list_artists(
    genre: str | None = Query(None, description="Filter artists by genre (case-insensitive)"),
    catalog: Catalog = Depends(get_catalog),
) -> ArtistListResponse:
    """List artists, optionally filtered by genre."""
    if genre:
        wanted = genre.lower()
        artists = catalog.artists.select(lambda artist: artist.genre.lower() == wanted)
    else:
        artists = catalog.artists.select()
    return ArtistListResponse(artists=artists)


@router.post("", response_model=Artist, status_code=201)
async def create_artist(
    artist_data: ArtistCreate,
    catalog: Catalog = Depends(get_catalog),
) -> Artist:
    """Add a new artist to the library."""
    artist = Artist(
        id=catalog.artists.allocate_id(),
        created_at=datetime.now(UTC),
        **artist_data.model_dump(),
    )
    return catalog.artists.add(artist)


@router.put("/{artist_id}", response_model=Artist, responses=NOT_FOUND)
async def update_artist(
    artist_id: int,
    artist_data: ArtistUpdate,
    catalog: Catalog = Depends(get_catalog),
) -> Artist:
    """Update an artist. Fields left out of the request keep their values.

    Raises:
        NotFoundError 404: If the artist does not exist
    """
    changes = artist_data.model_dump(exclude_unset=True)
    return catalog.artists.update(artist_id, changes)


@router.delete("/{artist_id}", response_model=MessageResponse, responses=NOT_FOUND)
async def delete_artist(
    artist_id: int,
    catalog: Catalog = Depends(get_catalog),
) -> MessageResponse:
    """Remove an artist. Their albums and songs are left in place.

    Raises:
        NotFoundError 404: If the artist does not exist
    """
    catalog.artists.remove(artist_id)
    return MessageResponse(message="Artist deleted successfully")
