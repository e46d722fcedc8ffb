"""Service error types.

Every error a handler raises derives from :class:`WeatherServiceError` and
carries the HTTP status the API layer answers with.
"""


class WeatherServiceError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500
    error_type = "internal_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConflictError(WeatherServiceError):
    """An entity with the same natural key already exists."""

    status_code = 409
    error_type = "conflict"


class NotFoundError(WeatherServiceError):
    """A referenced parent entity does not exist."""

    status_code = 404
    error_type = "not_found"


class ValidationError(WeatherServiceError):
    """Input passed the request schema but contradicts itself."""

    status_code = 422
    error_type = "validation_error"


class StoreError(WeatherServiceError):
    """The underlying store failed."""

    status_code = 503
    error_type = "store_error"
