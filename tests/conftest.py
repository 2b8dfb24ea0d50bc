"""
Shared fixtures for the places API tests.
"""

import json
from unittest.mock import MagicMock

import httpx
import pytest

from config import Settings
from services.cache import PlaceCache
from services.place_lookup import PlaceLookupHandler

PLACE_ID = "ChIJ-test-place"
API_KEY = "test-google-api-key"  # pragma: allowlist secret


class FakeClock:
    """Settable clock returning whole seconds."""

    def __init__(self, now: int = 1_700_000_000):
        self.now = now

    def __call__(self) -> float:
        return float(self.now)


class FakePlacesAPI:
    """httpx transport that answers every request with a queued payload."""

    def __init__(self):
        self.payload = {"status": "OK", "result": {}}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(200, content=json.dumps(self.payload))


@pytest.fixture
def make_settings(monkeypatch):
    """Build Settings from a clean environment plus the given overrides."""

    def _make(**env) -> Settings:
        for var in ("GOOGLE_PLACE_ID", "PLACE_ID", "CACHE_MAX_AGE", "ALLOWED_ORIGIN", "SECRET_NAME"):
            monkeypatch.delenv(var, raising=False)
        for var, value in env.items():
            monkeypatch.setenv(var, value)
        return Settings()

    return _make


@pytest.fixture
def settings(make_settings) -> Settings:
    return make_settings(GOOGLE_PLACE_ID=PLACE_ID, CACHE_MAX_AGE="600", ALLOWED_ORIGIN="https://example.com")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def places_api() -> FakePlacesAPI:
    return FakePlacesAPI()


@pytest.fixture
def secrets_client() -> MagicMock:
    client = MagicMock()
    client.get_secret_value.return_value = {"SecretString": json.dumps({"GOOGLE_API_KEY": API_KEY})}
    return client


@pytest.fixture
def place_cache() -> PlaceCache:
    return PlaceCache()


@pytest.fixture
def handler(settings, place_cache, places_api, secrets_client, clock) -> PlaceLookupHandler:
    return PlaceLookupHandler(
        settings,
        place_cache,
        http_client=httpx.Client(transport=httpx.MockTransport(places_api)),
        secrets_client=secrets_client,
        clock=clock,
    )


def http_api_event(method: str = "GET") -> dict:
    """Minimal API Gateway HTTP API (v2) event."""
    return {"version": "2.0", "requestContext": {"http": {"method": method, "path": "/place"}}}
