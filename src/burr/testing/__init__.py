"""Testing utilities for code built on burr.

Provides a transport double that records every request it is asked to send,
plus factories for canned raw responses.

Example:
    ```python
    from burr import Client
    from burr.testing import RecordingTransport, create_mock_response


    async def test_get_user():
        transport = RecordingTransport(create_mock_response(200, {"login": "octocat"}))
        client = Client(token="xyz", transport=transport)

        user = await client.users.get()

        assert user.login == "octocat"
        assert transport.requests[0].url.endswith("/user")
    ```
"""

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from burr.transport import RawResponse


@dataclass(frozen=True)
class RecordedRequest:
    """One request as handed to the transport."""

    method: str
    url: str
    headers: httpx.Headers
    body: bytes | None

    def json(self) -> Any:
        return json.loads(self.body) if self.body else None


Responder = RawResponse | BaseException | Callable[[RecordedRequest], RawResponse]


class RecordingTransport:
    """Transport double that records requests and replays canned responses.

    Args:
        *responses: Replies used in order. Each is a RawResponse, an exception
            to raise, or a callable receiving the RecordedRequest. The last one
            is reused once the others are consumed.
    """

    def __init__(self, *responses: Responder) -> None:
        self._responses = list(responses) or [create_mock_response(200)]
        self.requests: list[RecordedRequest] = []
        self.closed = False

    @property
    def call_count(self) -> int:
        return len(self.requests)

    async def execute(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes | None = None,
    ) -> RawResponse:
        request = RecordedRequest(method=method, url=url, headers=httpx.Headers(headers), body=body)
        self.requests.append(request)

        reply = self._responses.pop(0) if len(self._responses) > 1 else self._responses[0]
        if isinstance(reply, BaseException):
            raise reply
        if callable(reply):
            return reply(request)
        return reply

    async def aclose(self) -> None:
        self.closed = True


def create_mock_response(
    status_code: int = 200,
    body: Any = None,
    headers: Mapping[str, str] | None = None,
) -> RawResponse:
    """Build a RawResponse with a JSON body (or no body when body is None)."""
    all_headers = httpx.Headers(headers or {})
    content = b""
    if body is not None:
        content = json.dumps(body).encode("utf-8")
        all_headers.setdefault("content-type", "application/json; charset=utf-8")
    return RawResponse(status_code=status_code, headers=all_headers, content=content)


def create_error_response(
    status_code: int,
    message: str = "Error",
    errors: list[dict[str, Any]] | None = None,
    headers: Mapping[str, str] | None = None,
) -> RawResponse:
    """Build a RawResponse carrying a GitHub-style error body."""
    body: dict[str, Any] = {
        "message": message,
        "documentation_url": "https://docs.github.com/rest",
    }
    if errors is not None:
        body["errors"] = errors
    return create_mock_response(status_code, body, headers)


__all__ = [
    "RecordedRequest",
    "RecordingTransport",
    "create_error_response",
    "create_mock_response",
]
