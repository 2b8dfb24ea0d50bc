"""Google Places "place details" client.

Only the fields the ratings widget renders are requested, and the result is
reduced to exactly those fields before it is cached.
"""

import logging

import httpx

from errors import UpstreamError

logger = logging.getLogger(__name__)

PLACE_DETAILS_URL = "https://maps.googleapis.com/maps/api/place/details/json"

SUMMARY_FIELDS = ("name", "rating", "user_ratings_total", "url", "reviews")


def fetch_place_details(client: httpx.Client, place_id: str, api_key: str) -> dict:
    """Issue a single GET for the place and return the decoded JSON body.

    Google reports failures through the body's ``status`` field, so the HTTP
    status code is not checked here.
    """
    resp = client.get(
        PLACE_DETAILS_URL,
        params={
            "place_id": place_id,
            "fields": ",".join(SUMMARY_FIELDS),
            "key": api_key,
        },
    )
    return resp.json()


def summarize_place(payload: dict) -> dict:
    """Reduce a place details response to the cached summary.

    Raises UpstreamError when Google did not answer with status OK.
    """
    status = payload.get("status") if isinstance(payload, dict) else None
    if status != "OK":
        logger.error("Google Places error: %s", payload)
        raise UpstreamError(status)

    result = payload.get("result") or {}

    # Fields Google omits stay omitted; reviews is always a list.
    summary = {field: result[field] for field in SUMMARY_FIELDS if field in result}
    summary["reviews"] = result.get("reviews") or []
    return summary
