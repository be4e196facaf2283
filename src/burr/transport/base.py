"""Transport protocol and raw response value."""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

import httpx


@dataclass(frozen=True)
class RawResponse:
    """Undecoded result of a single HTTP exchange.

    Attributes:
        status_code: HTTP status code.
        headers: Response headers (case-insensitive).
        content: Raw body bytes, empty when the server sent none.
    """

    status_code: int
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    content: bytes = b""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self) -> Any:
        return json.loads(self.content)


@runtime_checkable
class Transport(Protocol):
    """Performs the network I/O for a Connection.

    Implementations raise :class:`httpx.TransportError` subclasses for
    connectivity, TLS and timeout failures. Retrying, if any, happens in here.
    """

    async def execute(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes | None = None,
    ) -> RawResponse: ...

    async def aclose(self) -> None: ...
