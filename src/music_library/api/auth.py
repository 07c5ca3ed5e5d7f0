"""Authentication demo endpoints.

Each route only looks at whether a header is present (and, for HTTP
schemes, its prefix). No credential is ever verified.
"""

from fastapi import APIRouter, Header
from fastapi.responses import PlainTextResponse

router = APIRouter(prefix="/auth", tags=["Misc"], default_response_class=PlainTextResponse)

UNAUTHORIZED = {401: {"description": "Missing or malformed credentials header"}}


def _check_scheme(authorization: str | None, scheme: str, scold: str) -> PlainTextResponse | None:
    """Return a 401 response unless the Authorization header uses ``scheme``."""
    if authorization is None:
        return PlainTextResponse(
            f"{scold}, you didn't even sent a Authorization header!", status_code=401
        )
    if not authorization.startswith(scheme):
        return PlainTextResponse(
            f"{scold}, the Authorization header needs to be {scheme} auth!", status_code=401
        )
    return None


@router.get("/basic", responses=UNAUTHORIZED)
async def basic_auth(authorization: str | None = Header(None)) -> PlainTextResponse:
    """Route with Basic authentication."""
    rejection = _check_scheme(authorization, "Basic", "bad kitty")
    if rejection is not None:
        return rejection
    return PlainTextResponse("meow :)")


@router.get("/bearer", responses=UNAUTHORIZED)
async def bearer_auth(authorization: str | None = Header(None)) -> PlainTextResponse:
    """Route with Bearer authentication."""
    rejection = _check_scheme(authorization, "Bearer", "bad doggo")
    if rejection is not None:
        return rejection
    return PlainTextResponse("woof :)")


@router.get("/key", responses=UNAUTHORIZED)
async def api_key_auth(x_api_key: str | None = Header(None)) -> PlainTextResponse:
    """Route with API key authentication. Any key value is accepted."""
    if x_api_key is None:
        return PlainTextResponse(
            "bad mooer, you didn't even sent a X-API-Key header!", status_code=401
        )
    return PlainTextResponse("moo :)")


@router.get("/google")
async def google_auth() -> PlainTextResponse:
    """Route with Google OpenID Connect authentication. Always succeeds."""
    return PlainTextResponse("baa :)")
