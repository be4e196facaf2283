"""Typed response envelope."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Generic, TypeVar

import httpx

T = TypeVar("T")


@dataclass(frozen=True)
class RateLimit:
    """Primary rate limit as reported by the ``X-RateLimit-*`` headers."""

    limit: int
    remaining: int
    reset: datetime | None = None
    resource: str | None = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "RateLimit | None":
        """Read the rate limit headers, or None if the API did not send them."""
        try:
            limit = int(headers["x-ratelimit-limit"])
            remaining = int(headers["x-ratelimit-remaining"])
        except (KeyError, ValueError, TypeError):
            return None

        reset = None
        if "x-ratelimit-reset" in headers:
            try:
                reset = datetime.fromtimestamp(int(headers["x-ratelimit-reset"]), tz=UTC)
            except (ValueError, TypeError, OverflowError):
                reset = None

        return cls(
            limit=limit,
            remaining=remaining,
            reset=reset,
            resource=headers.get("x-ratelimit-resource"),
        )


@dataclass
class Response(Generic[T]):
    """Status, headers and decoded body of one API call.

    ``body`` is None when the server sent no content (e.g. 204) or when no
    body type was requested.
    """

    status_code: int
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    body: T | None = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def rate_limit(self) -> RateLimit | None:
        return RateLimit.from_headers(self.headers)
