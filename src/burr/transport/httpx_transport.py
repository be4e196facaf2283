"""Default transport backed by :class:`httpx.AsyncClient`."""

import logging
from collections.abc import Mapping

import httpx

from burr.transport.base import RawResponse

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class HttpxTransport:
    """Transport that sends requests through an ``httpx.AsyncClient``.

    Args:
        transport: Optional httpx transport to send through. Pass an
            ``httpx.MockTransport`` in tests.
        timeout: Request timeout in seconds (default: 30)

    Example:
        ```python
        transport = HttpxTransport(transport=httpx.MockTransport(handler))
        raw = await transport.execute("GET", "https://api.github.com/user", {})
        ```
    """

    def __init__(
        self,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(transport=transport, timeout=httpx.Timeout(timeout))

    async def __aenter__(self):
        await self._client.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return await self._client.__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def execute(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes | None = None,
    ) -> RawResponse:
        """Send one request and read the whole body.

        Raises:
            httpx.TransportError: On connectivity, TLS or timeout failures.
        """
        response = await self._client.request(method, url, headers=dict(headers), content=body)
        logger.debug(f"{method} {url} -> {response.status_code} ({len(response.content)} bytes)")
        return RawResponse(
            status_code=response.status_code,
            headers=response.headers,
            content=response.content,
        )
