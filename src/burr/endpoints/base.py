"""Base class for resource endpoints."""

import logging

from burr.connection import ConnectionProtocol
from burr.errors.exceptions import AuthenticationRequiredError, InvalidArgumentError

logger = logging.getLogger(__name__)


class Endpoint:
    """Stateless proxy over a Connection.

    Subclasses map domain operations onto fixed paths and result types. An
    operation that needs credentials calls :meth:`_require_authentication`
    after validating its arguments and before touching the Connection.

    Args:
        connection: The Connection every call goes through.

    Raises:
        InvalidArgumentError: If connection is None.
    """

    def __init__(self, connection: ConnectionProtocol) -> None:
        if connection is None:
            raise InvalidArgumentError("connection must not be None", argument="connection")
        self._connection = connection

    @property
    def connection(self) -> ConnectionProtocol:
        return self._connection

    def _require_authentication(self, operation: str) -> None:
        if self._connection.credential.is_anonymous:
            logger.debug(f"Refusing {operation}: no credentials configured")
            raise AuthenticationRequiredError(
                f"{operation} requires authentication; configure a login and password or a token"
            )
