"""Client facade: the composition root of burr."""

import logging

from burr.auth.credentials import Credential, resolve_credential
from burr.auth.resolver import DEFAULT_BASE_URL, CredentialResolver
from burr.connection import DEFAULT_USER_AGENT, Connection, ConnectionProtocol
from burr.endpoints.users import UsersEndpoint
from burr.errors.exceptions import InvalidArgumentError
from burr.transport import Transport

logger = logging.getLogger(__name__)


class Client:
    """GitHub API client.

    Resolves one Credential from the given login/password/token, builds a
    single Connection around it and exposes endpoints bound to that
    Connection. The Credential is fixed for the lifetime of the Client; to
    authenticate differently, create another Client.

    Args:
        login: Login for Basic authentication.
        password: Password for Basic authentication.
        token: OAuth or personal access token. Ignored when login and
            password are both set.
        credential: An already resolved Credential; replaces the three
            arguments above.
        base_url: API root (default ``https://api.github.com``).
        transport: Network collaborator for the Connection built here.
        connection: Use this Connection instead of building one. Endpoints
            check and send the connection's own credential, so login,
            password, token and credential must not be passed with it.
        user_agent: ``User-Agent`` header value.

    Raises:
        InvalidArgumentError: If a connection is combined with credential or
            transport arguments.

    Example:
        ```python
        async with Client(token="ghp_xxx") as client:
            me = await client.users.get()
        ```
    """

    def __init__(
        self,
        login: str | None = None,
        password: str | None = None,
        token: str | None = None,
        *,
        credential: Credential | None = None,
        base_url: str = DEFAULT_BASE_URL,
        transport: Transport | None = None,
        connection: ConnectionProtocol | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        if connection is not None:
            if any(v is not None for v in (login, password, token, credential, transport)):
                raise InvalidArgumentError(
                    "Pass either credentials/transport or a connection, not both", argument="connection"
                )
            self._owns_connection = False
        else:
            if credential is None:
                credential = resolve_credential(login=login, password=password, token=token)
            connection = Connection(credential, base_url=base_url, transport=transport, user_agent=user_agent)
            self._owns_connection = True

        self._connection = connection
        self.users = UsersEndpoint(connection)

    @classmethod
    def from_connection(cls, connection: ConnectionProtocol) -> "Client":
        """Build a Client around an existing Connection (or a test double).

        Raises:
            InvalidArgumentError: If connection is None.
        """
        if connection is None:
            raise InvalidArgumentError("connection must not be None", argument="connection")
        return cls(connection=connection)

    @classmethod
    def from_env(
        cls,
        *,
        resolver: CredentialResolver | None = None,
        transport: Transport | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> "Client":
        """Build a Client from ``GITHUB_*`` environment variables and ``.env``."""
        resolver = resolver if resolver is not None else CredentialResolver()
        credential = resolver.resolve_credential()
        base_url = resolver.resolve_base_url()
        logger.debug(f"Configured client for {base_url} from environment")
        return cls(credential=credential, base_url=base_url, transport=transport, user_agent=user_agent)

    @property
    def connection(self) -> ConnectionProtocol:
        return self._connection

    @property
    def credential(self) -> Credential:
        return self._connection.credential

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        """Close the Connection this Client built, if any."""
        if self._owns_connection:
            await self._connection.aclose()
