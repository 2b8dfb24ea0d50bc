"""AWS Lambda entry point (handler: lambda_function.handler)."""

import logging

from config import configure_logging, settings
from services.place_lookup import place_lookup

configure_logging(settings)

logger = logging.getLogger(__name__)

missing = settings.validate()
if missing:
    logger.warning("Missing env vars (every request will fail): %s", ", ".join(missing))


def handler(event: dict, context) -> dict:
    """API Gateway proxy handler."""
    return place_lookup.handle(event)
