"""OpenAPI document, API reference viewer and favicon."""

from typing import Any

from fastapi import APIRouter, Depends, Request, Response
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse

from music_library.config import Settings, get_settings
from music_library.openapi_document import build_openapi_document

router = APIRouter(include_in_schema=False)

FAVICON_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">'
    '<text y=".9em" font-size="90">{emoji}</text>'
    "</svg>"
)


def request_origin(request: Request) -> str:
    """Return the scheme://host[:port] the request was addressed to."""
    url = request.url
    return f"{url.scheme}://{url.netloc}"


@router.get("/openapi.json")
async def openapi_document(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    """Serve the hand-written OpenAPI document.

    Requests made against a localhost origin get the local development
    server listed first.
    """
    return build_openapi_document(
        origin=request_origin(request),
        local_server_url=settings.local_server_url,
        public_server_url=settings.public_server_url,
    )


@router.get("/reference", response_class=HTMLResponse)
async def api_reference(settings: Settings = Depends(get_settings)) -> HTMLResponse:
    """Interactive API reference bound to ``/openapi.json``."""
    return get_swagger_ui_html(
        openapi_url="/openapi.json",
        title=f"{settings.app_name} - Reference",
    )


@router.get("/favicon.ico")
async def favicon(settings: Settings = Depends(get_settings)) -> Response:
    """Serve the configured emoji as an SVG favicon."""
    return Response(
        content=FAVICON_SVG.format(emoji=settings.favicon_emoji),
        media_type="image/svg+xml",
    )
