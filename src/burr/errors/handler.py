"""Translation of non-success API responses into exceptions."""

import logging

from burr.errors.exceptions import (
    BadRequestError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    RemoteRequestFailedError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)
from burr.errors.models import ErrorDetail
from burr.response import RateLimit
from burr.transport import RawResponse

logger = logging.getLogger(__name__)

EXCEPTION_MAP: dict[int, type[RemoteRequestFailedError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationError,
    429: RateLimitError,
}


def _is_rate_limited(response: RawResponse, rate_limit: RateLimit | None) -> bool:
    if response.status_code == 429:
        return True
    # GitHub reports an exhausted primary limit as 403 with remaining=0
    return response.status_code == 403 and rate_limit is not None and rate_limit.remaining == 0


def raise_for_status(response: RawResponse) -> None:
    """Raise the matching exception for a non-success response.

    Parses the GitHub error body if present, otherwise falls back to the
    status code and a truncated body.

    Args:
        response: Raw transport response

    Raises:
        RemoteRequestFailedError subclass based on status code
    """
    if response.is_success:
        return

    error_detail = ErrorDetail.from_response(response)
    status_code = response.status_code
    rate_limit = RateLimit.from_headers(response.headers)

    if _is_rate_limited(response, rate_limit):
        exc_class: type[RemoteRequestFailedError] = RateLimitError
    elif status_code in EXCEPTION_MAP:
        exc_class = EXCEPTION_MAP[status_code]
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = RemoteRequestFailedError

    if error_detail:
        message = error_detail.to_exception_message()
    else:
        response_text = response.text[:200]
        message = f"HTTP {status_code}: {response_text}" if response_text else f"HTTP {status_code}"

    logger.debug(f"Request failed with HTTP {status_code}: {exc_class.__name__}")

    if exc_class is RateLimitError:
        retry_after = None
        if "retry-after" in response.headers:
            try:
                retry_after = int(response.headers["retry-after"])
            except (ValueError, TypeError):
                retry_after = None
        raise RateLimitError(
            message=message,
            retry_after=retry_after,
            rate_limit=rate_limit,
            status_code=status_code,
            response=response,
            error_detail=error_detail,
        )

    if exc_class is ValidationError:
        validation_errors = error_detail.errors if error_detail else None
        raise ValidationError(
            message=message,
            validation_errors=validation_errors,
            status_code=status_code,
            response=response,
            error_detail=error_detail,
        )

    raise exc_class(
        message=message,
        status_code=status_code,
        response=response,
        error_detail=error_detail,
    )
