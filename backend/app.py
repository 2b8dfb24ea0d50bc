"""FastAPI application for running the place handler locally.

    uvicorn app:app --reload

No CORS middleware: the handler sets its own CORS headers, as it does on
Lambda.
"""

import logging

from fastapi import FastAPI

from config import configure_logging, settings

configure_logging(settings)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="Places API", version="1.0.0")

    from routes.health import router as health_router
    from routes.places import router as places_router

    app.include_router(health_router)
    app.include_router(places_router)

    @app.on_event("startup")
    async def _validate_config() -> None:
        missing = settings.validate()
        if missing:
            logger.warning("Missing env vars (every request will fail): %s", ", ".join(missing))

    return app


app = create_app()
