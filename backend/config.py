"""Centralized configuration — all env vars in one place."""

import logging
import os
import sys


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # AWS Secrets Manager
        self.aws_region: str = os.getenv("AWS_REGION", "sa-east-1")
        self.secret_name: str = os.getenv("SECRET_NAME", "google/places")

        # Google Places
        self.place_id: str | None = os.getenv("GOOGLE_PLACE_ID") or os.getenv("PLACE_ID")

        # Response caching and CORS
        self.cache_max_age: int = int(float(os.getenv("CACHE_MAX_AGE", "21600")))
        self.allowed_origin: str = os.getenv("ALLOWED_ORIGIN", "*")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return list of missing required env vars."""
        required = ["GOOGLE_PLACE_ID"]
        return [var for var in required if not getattr(self, _attr_for(var))]


settings = Settings()


def _attr_for(env_var: str) -> str:
    """Map env var name to Settings attribute name."""
    mapping = {
        "GOOGLE_PLACE_ID": "place_id",
    }
    return mapping.get(env_var, env_var.lower())


def configure_logging(settings: Settings) -> None:
    """Structured logging: JSON for production, human-readable for local."""
    if settings.is_production:
        logging.basicConfig(
            level=settings.log_level,
            format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
            stream=sys.stdout,
        )
    else:
        logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
