class AppException(Exception):
    """Base application exception.

    `code` is a stable identifier for callers; `retryable` tells them whether
    the same call can succeed later without changing its arguments.
    """

    code: str = "app_error"
    retryable: bool = False


class NotFoundError(AppException):
    """Resource not found exception."""

    code = "not_found"


class ValidationError(AppException):
    """Validation error exception."""

    code = "validation_error"


class ProcessingError(AppException):
    """Processing error exception."""

    code = "processing_error"
