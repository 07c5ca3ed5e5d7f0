"""Album API endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends, Query

from music_library.catalog import Catalog, get_catalog
from music_library.schemas.album import Album, AlbumCreate, AlbumListResponse, AlbumUpdate
from music_library.schemas.common import ErrorResponse, MessageResponse

router = APIRouter(prefix="/albums", tags=["Albums"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Album not found"}}


@router.get("", response_model=AlbumListResponse)
async def list_albums(
    artist_id: int | None = Query(None, alias="artistId", description="Filter by artist ID"),
    year: int | None = Query(None, description="Filter by release year"),
    catalog: Catalog = Depends(get_catalog),
) -> AlbumListResponse:
    """List albums, optionally filtered by artist and/or release year."""

    def matches(album: Album) -> bool:
        if artist_id is not None and album.artist_id != artist_id:
            return False
        return year is None or album.release_year == year

    return AlbumListResponse(albums=catalog.albums.select(matches))


@router.post("", response_model=Album, status_code=201)
async def create_album(
    album_data: AlbumCreate,
    catalog: Catalog = Depends(get_catalog),
) -> Album:
    """Add a new album to the library."""
    album = Album(
        id=catalog.albums.allocate_id(),
        created_at=datetime.now(UTC),
        **album_data.model_dump(),
    )
    return catalog.albums.add(album)


@router.put("/{album_id}", response_model=Album, responses=NOT_FOUND)
async def update_album(
    album_id: int,
    album_data: AlbumUpdate,
    catalog: Catalog = Depends(get_catalog),
) -> Album:
    """Update an album. Fields left out of the request keep their values.

    Raises:
        NotFoundError 404: If the album does not exist
    """
    changes = album_data.model_dump(exclude_unset=True)
    return catalog.albums.update(album_id, changes)


@router.delete("/{album_id}", response_model=MessageResponse, responses=NOT_FOUND)
async def delete_album(
    album_id: int,
    catalog: Catalog = Depends(get_catalog),
) -> MessageResponse:
    """Remove an album. Its songs are not removed.

    Raises:
        NotFoundError 404: If the album does not exist
    """
    catalog.albums.remove(album_id)
    return MessageResponse(message="Album deleted successfully")
