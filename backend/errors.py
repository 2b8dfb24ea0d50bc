"""Custom exceptions and the error bodies returned to callers."""

INTERNAL_ERROR_BODY = {"error": "Internal Server Error"}


class PlacesError(Exception):
    """Base exception with HTTP status code.

    The message is returned to the caller verbatim, so only raise these for
    failures whose description is safe to expose.
    """

    def __init__(self, message: str, status_code: int = 500, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details

    def to_body(self) -> dict:
        body = {"error": str(self)}
        if self.details is not None:
            body["details"] = self.details
        return body


class MissingConfigurationError(PlacesError):
    def __init__(self, env_var: str):
        super().__init__(f"{env_var} env is missing", status_code=500)


class UpstreamError(PlacesError):
    def __init__(self, upstream_status: str | None):
        super().__init__(
            "Upstream error from Google Places",
            status_code=502,
            details=upstream_status,
        )


class CredentialError(Exception):
    """The API key could not be read from the secret store.

    Not a PlacesError: callers only ever see the generic internal error.
    """
