"""Cache-then-fetch pipeline behind the place ratings endpoint.

Invocation -> CORS preflight -> cache freshness check -> either the cached
summary, or secret lookup -> Google Places -> normalize -> cache -> respond.

Every failure is converted to an HTTP response here; nothing escapes to the
runtime. The cache is written only after a complete, successful fetch.
"""

import json
import logging
import time
from collections.abc import Callable

import httpx

from config import Settings, settings
from errors import INTERNAL_ERROR_BODY, MissingConfigurationError, PlacesError
from services.cache import PlaceCache, cache
from services.google_places import fetch_place_details, summarize_place
from services.secret_store import get_google_api_key

logger = logging.getLogger(__name__)

PREFLIGHT_METHOD = "OPTIONS"


def _request_method(event: dict | None) -> str | None:
    """HTTP method from an API Gateway event (HTTP API v2, then REST v1)."""
    if not isinstance(event, dict):
        return None
    http = (event.get("requestContext") or {}).get("http") or {}
    method = http.get("method") or event.get("httpMethod")
    return method.upper() if isinstance(method, str) else None


class PlaceLookupHandler:
    def __init__(
        self,
        settings: Settings,
        place_cache: PlaceCache,
        http_client: httpx.Client | None = None,
        secrets_client=None,
        clock: Callable[[], float] = time.time,
    ):
        self.settings = settings
        self.cache = place_cache
        self._http_client = http_client
        self._secrets_client = secrets_client
        self._clock = clock

    def _get_http_client(self) -> httpx.Client:
        """Return the HTTP client, creating it on first use.

        The client is kept for the life of the execution context so warm
        invocations reuse its connection pool.
        """
        if self._http_client is None:
            self._http_client = httpx.Client(timeout=None)
        return self._http_client

    def response(self, status_code: int, body) -> dict:
        return {
            "statusCode": status_code,
            "headers": {
                "Content-Type": "application/json",
                "Access-Control-Allow-Origin": self.settings.allowed_origin,
                "Access-Control-Allow-Headers": "Content-Type",
                "Access-Control-Allow-Methods": "GET,OPTIONS",
                "Cache-Control": f"public, max-age={self.settings.cache_max_age}",
            },
            "body": json.dumps(body, ensure_ascii=False, separators=(",", ":")),
        }

    def handle(self, event: dict) -> dict:
        if _request_method(event) == PREFLIGHT_METHOD:
            return self.response(200, {"ok": True})

        try:
            return self.response(200, self._lookup())
        except PlacesError as e:
            logger.warning("Place lookup failed with %d: %s", e.status_code, e)
            return self.response(e.status_code, e.to_body())
        except Exception:
            logger.exception("Place lookup failed")
            return self.response(500, INTERNAL_ERROR_BODY)

    def _lookup(self) -> dict:
        if not self.settings.place_id:
            raise MissingConfigurationError("GOOGLE_PLACE_ID")

        now = int(self._clock())
        cached = self.cache.get_fresh(now, self.settings.cache_max_age)
        if cached is not None:
            return cached

        api_key = get_google_api_key(self.settings.secret_name, client=self._secrets_client)
        payload = fetch_place_details(self._get_http_client(), self.settings.place_id, api_key)
        summary = summarize_place(payload)

        self.cache.store(now, summary)
        logger.info("Refreshed place %s (%d reviews)", self.settings.place_id, len(summary["reviews"]))
        return summary


place_lookup = PlaceLookupHandler(settings, cache)
