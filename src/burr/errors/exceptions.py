"""Structured exceptions for the GitHub client."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from burr.errors.models import ErrorDetail
    from burr.response import RateLimit
    from burr.transport import RawResponse


class BurrError(Exception):
    """Base exception for every error raised by burr."""

    pass


class InvalidArgumentError(BurrError, ValueError):
    """A required argument was missing or empty.

    Always raised before any network activity.
    """

    def __init__(self, message: str, argument: str | None = None):
        super().__init__(message)
        self.argument = argument


class AuthenticationRequiredError(BurrError):
    """The operation needs credentials and the connection has none."""

    pass


class CodecError(BurrError):
    """A payload could not be serialized or a body could not be decoded."""

    pass


class TransportFailureError(BurrError):
    """Connectivity, TLS or timeout failure reported by the transport.

    The transport's own exception is available as ``original`` and as
    ``__cause__``.
    """

    def __init__(self, message: str, original: BaseException | None = None):
        super().__init__(message)
        self.original = original


class RemoteRequestFailedError(BurrError):
    """The API answered with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "RawResponse | None" = None,
        error_detail: "ErrorDetail | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.error_detail = error_detail


class BadRequestError(RemoteRequestFailedError):
    """400 Bad Request."""

    pass


class AuthenticationRejectedError(RemoteRequestFailedError):
    """401/403: the API refused the supplied credentials."""

    pass


class UnauthorizedError(AuthenticationRejectedError):
    """401 Unauthorized."""

    pass


class ForbiddenError(AuthenticationRejectedError):
    """403 Forbidden."""

    pass


class NotFoundError(RemoteRequestFailedError):
    """404 Not Found."""

    pass


class ConflictError(RemoteRequestFailedError):
    """409 Conflict."""

    pass


class ValidationError(RemoteRequestFailedError):
    """422 Unprocessable Entity (validation errors)."""

    def __init__(self, message: str, validation_errors: list[dict] | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.validation_errors = validation_errors if validation_errors is not None else []


class RateLimitError(RemoteRequestFailedError):
    """429, or 403 with an exhausted primary rate limit."""

    def __init__(
        self,
        message: str,
        retry_after: int | None = None,
        rate_limit: "RateLimit | None" = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after
        self.rate_limit = rate_limit


class ServerError(RemoteRequestFailedError):
    """5xx server errors."""

    pass
