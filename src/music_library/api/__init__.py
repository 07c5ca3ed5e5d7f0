"""API routers."""

from music_library.api.router import api_router

__all__ = ["api_router"]
