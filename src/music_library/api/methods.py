"""HTTP method probe endpoints.

One route per verb, used to exercise API tooling. Each answers "OK".
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(prefix="/methods", tags=["Misc"], default_response_class=PlainTextResponse)

# Routes here carry no tag
untagged_router = APIRouter(default_response_class=PlainTextResponse)

PROBED_METHODS = ("GET", "HEAD", "OPTIONS", "TRACE", "PUT", "DELETE", "POST", "PATCH")


async def method_ok() -> PlainTextResponse:
    """Answer any probed method with a fixed body."""
    return PlainTextResponse("OK")


for _method in PROBED_METHODS:
    router.add_api_route(
        f"/{_method.lower()}",
        method_ok,
        methods=[_method],
        name=f"method_{_method.lower()}",
        summary=f"{_method} route",
    )


@untagged_router.get("/untagged-route")
async def untagged_route() -> PlainTextResponse:
    """A route without any tag."""
    return PlainTextResponse("woah how did u find me im untagged")
