"""Main API router aggregation."""

from fastapi import APIRouter

from music_library.api.albums import router as albums_router
from music_library.api.artists import router as artists_router
from music_library.api.auth import router as auth_router
from music_library.api.methods import router as methods_router
from music_library.api.methods import untagged_router
from music_library.api.songs import router as songs_router

# Main API router
api_router = APIRouter(prefix="/api")

# Include all sub-routers
api_router.include_router(artists_router)
api_router.include_router(albums_router)
api_router.include_router(songs_router)
api_router.include_router(auth_router)
api_router.include_router(methods_router)
api_router.include_router(untagged_router)
