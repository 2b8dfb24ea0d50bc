"""Place ratings route for local development.

Translates the request into an API Gateway HTTP API (v2) event so the
local server runs exactly the code path the Lambda runs.
"""

from fastapi import APIRouter, Request, Response

from services.place_lookup import place_lookup

router = APIRouter()


def _to_event(request: Request) -> dict:
    return {
        "version": "2.0",
        "rawPath": request.url.path,
        "rawQueryString": request.url.query,
        "headers": dict(request.headers),
        "requestContext": {
            "http": {
                "method": request.method,
                "path": request.url.path,
            },
        },
    }


@router.api_route("/place", methods=["GET", "OPTIONS"])
def place(request: Request) -> Response:
    """Cached Google Places summary, with CORS headers."""
    result = place_lookup.handle(_to_event(request))
    return Response(
        content=result["body"],
        status_code=result["statusCode"],
        headers=result["headers"],
    )
