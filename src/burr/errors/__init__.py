"""Error taxonomy and status translation for the GitHub client.

``Cancelled`` is :class:`asyncio.CancelledError`: a caller cancelling an
in-flight request sees it unchanged, never wrapped in a :class:`BurrError`.
"""

from asyncio import CancelledError as Cancelled

from burr.errors.exceptions import (
    AuthenticationRejectedError,
    AuthenticationRequiredError,
    BadRequestError,
    BurrError,
    CodecError,
    ConflictError,
    ForbiddenError,
    InvalidArgumentError,
    NotFoundError,
    RateLimitError,
    RemoteRequestFailedError,
    ServerError,
    TransportFailureError,
    UnauthorizedError,
    ValidationError,
)
from burr.errors.handler import raise_for_status
from burr.errors.models import ErrorDetail

__all__ = [
    "AuthenticationRejectedError",
    "AuthenticationRequiredError",
    "BadRequestError",
    "BurrError",
    "Cancelled",
    "CodecError",
    "ConflictError",
    "ErrorDetail",
    "ForbiddenError",
    "InvalidArgumentError",
    "NotFoundError",
    "RateLimitError",
    "RemoteRequestFailedError",
    "ServerError",
    "TransportFailureError",
    "UnauthorizedError",
    "ValidationError",
    "raise_for_status",
]
