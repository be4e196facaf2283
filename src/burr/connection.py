"""Authenticated request dispatch against the GitHub REST API.

The Connection is the one place that knows how a call turns into an HTTP
request: it joins the path onto the API root, serializes the payload, attaches
the ``Authorization`` header for its Credential, awaits the transport and turns
the reply into a :class:`~burr.response.Response` or a classified exception.

It does not decide whether an operation needs authentication; endpoints
declare that and check :attr:`Connection.credential` themselves.

Absolute URLs are accepted as paths, but the ``Authorization`` header is only
sent when the URL has the same scheme, host and port as the API root.

Example:
    ```python
    from burr.auth import resolve_credential
    from burr.connection import Connection
    from burr.models import User

    connection = Connection(resolve_credential(token="ghp_xxx"))
    response = await connection.get("/user", User)
    print(response.status_code, response.body.login)
    ```
"""

import logging
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar, runtime_checkable

import httpx

from burr._version import __version__
from burr.auth.credentials import ANONYMOUS, Credential
from burr.auth.resolver import DEFAULT_BASE_URL
from burr.codec import Codec, JsonCodec
from burr.errors.exceptions import InvalidArgumentError, TransportFailureError
from burr.errors.handler import raise_for_status
from burr.response import Response
from burr.transport import HttpxTransport, RawResponse, Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_ACCEPT = "application/vnd.github+json"
DEFAULT_API_VERSION = "2022-11-28"
DEFAULT_USER_AGENT = f"burr/{__version__}"

# Success statuses that never carry a body worth decoding
NO_CONTENT_STATUSES = frozenset([204, 205])


@dataclass(frozen=True)
class RequestIntent:
    """What a single call asks for, before it becomes an HTTP request."""

    method: str
    path: str
    payload: Any = None
    result_type: type | None = None
    decode_body: bool = True


@runtime_checkable
class ConnectionProtocol(Protocol):
    """The surface endpoints use; test doubles implement this."""

    @property
    def credential(self) -> Credential: ...

    async def get(self, path: str, result_type: type[T] | None = None) -> Response[T]: ...

    async def post(self, path: str, payload: Any, result_type: type[T] | None = None) -> Response[T]: ...

    async def put(self, path: str, payload: Any, result_type: type[T] | None = None) -> Response[T]: ...

    async def patch(self, path: str, payload: Any, result_type: type[T] | None = None) -> Response[T]: ...

    async def delete(self, path: str) -> Response[None]: ...


class Connection:
    """Issues authenticated requests and returns typed responses.

    The Credential is captured at construction and never changes. Instances
    hold no per-call state, so one Connection can serve many concurrent calls.

    Args:
        credential: How to authenticate every request (default: anonymous).
        base_url: API root; paths are appended to it.
        transport: Network collaborator. Defaults to an :class:`HttpxTransport`
            that this Connection owns and closes in :meth:`aclose`.
        codec: Body codec (default: :class:`JsonCodec`).
        user_agent: ``User-Agent`` header value. GitHub rejects requests
            without one.

    Raises:
        InvalidArgumentError: If credential or base_url is missing.
    """

    def __init__(
        self,
        credential: Credential = ANONYMOUS,
        *,
        base_url: str = DEFAULT_BASE_URL,
        transport: Transport | None = None,
        codec: Codec | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        if credential is None:
            raise InvalidArgumentError("credential must not be None", argument="credential")
        if not base_url:
            raise InvalidArgumentError("base_url must not be empty", argument="base_url")

        self._credential = credential
        self._base_url = base_url.rstrip("/")
        self._owns_transport = transport is None
        self._transport = transport if transport is not None else HttpxTransport()
        self._codec = codec if codec is not None else JsonCodec()
        self._user_agent = user_agent

    def __repr__(self) -> str:
        return f"Connection(base_url={self._base_url!r}, credential={self._credential!r})"

    @property
    def credential(self) -> Credential:
        return self._credential

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        """Close the transport if this Connection created it."""
        if self._owns_transport:
            await self._transport.aclose()

    async def get(self, path: str, result_type: type[T] | None = None) -> Response[T]:
        return await self._send(RequestIntent("GET", path, result_type=result_type))

    async def post(self, path: str, payload: Any, result_type: type[T] | None = None) -> Response[T]:
        return await self._send(RequestIntent("POST", path, payload, result_type))

    async def put(self, path: str, payload: Any, result_type: type[T] | None = None) -> Response[T]:
        return await self._send(RequestIntent("PUT", path, payload, result_type))

    async def patch(self, path: str, payload: Any, result_type: type[T] | None = None) -> Response[T]:
        return await self._send(RequestIntent("PATCH", path, payload, result_type))

    async def delete(self, path: str) -> Response[None]:
        return await self._send(RequestIntent("DELETE", path, decode_body=False))

    def _validate(self, intent: RequestIntent) -> None:
        if not intent.path:
            raise InvalidArgumentError("path must not be empty", argument="path")
        if intent.method in ("POST", "PUT", "PATCH") and intent.payload is None:
            raise InvalidArgumentError(f"{intent.method} payload must not be None", argument="payload")

    def _build_url(self, path: str) -> str:
        # Absolute URLs (e.g. from Link headers) are used as given
        if path.startswith(("http://", "https://")):
            return path
        return f"{self._base_url}/{path.lstrip('/')}"

    def _is_api_origin(self, url: str) -> bool:
        """Whether url shares scheme, host and port with the API root."""
        target = httpx.URL(url)
        base = httpx.URL(self._base_url)
        return (target.scheme, target.host, target.port) == (base.scheme, base.host, base.port)

    def _build_headers(self, has_body: bool, authenticate: bool = True) -> dict[str, str]:
        headers = {
            "Accept": DEFAULT_ACCEPT,
            "User-Agent": self._user_agent,
            "X-GitHub-Api-Version": DEFAULT_API_VERSION,
        }
        if has_body:
            headers["Content-Type"] = self._codec.content_type

        authorization = self._credential.authorization_header() if authenticate else None
        if authorization is not None:
            headers["Authorization"] = authorization
        return headers

    def _build_response(self, raw: RawResponse, intent: RequestIntent) -> Response[Any]:
        body = None
        if intent.decode_body and raw.content and raw.status_code not in NO_CONTENT_STATUSES:
            body = self._codec.deserialize(raw.content, intent.result_type)
        return Response(status_code=raw.status_code, headers=raw.headers, body=body)

    async def _send(self, intent: RequestIntent) -> Response[Any]:
        self._validate(intent)

        url = self._build_url(intent.path)
        authenticate = self._is_api_origin(url)
        if not authenticate and not self._credential.is_anonymous:
            logger.warning(f"Not sending credentials to {url}: outside {self._base_url}")

        body = self._codec.serialize(intent.payload) if intent.payload is not None else None
        headers = self._build_headers(has_body=body is not None, authenticate=authenticate)

        scheme = self._credential.scheme if authenticate else None
        logger.debug(f"{intent.method} {url} (auth: {scheme or 'none'})")

        try:
            raw = await self._transport.execute(intent.method, url, headers, body)
        except httpx.TransportError as e:
            logger.debug(f"{intent.method} {url} failed in transport: {e!r}")
            raise TransportFailureError(f"{intent.method} {url} failed: {e}", original=e) from e

        raise_for_status(raw)
        return self._build_response(raw, intent)
