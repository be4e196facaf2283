"""Credential values and authentication scheme selection.

A Credential says how every request of a Connection is authenticated:

- :class:`Anonymous`: no ``Authorization`` header
- :class:`BasicCredential`: ``Basic base64(login:password)``
- :class:`TokenCredential`: ``Bearer <token>``

Credentials are frozen. To authenticate differently, build a new Connection
with a new Credential.

Example:
    ```python
    from burr.auth import resolve_credential

    credential = resolve_credential(token="ghp_xxx")
    credential.authorization_header()  # "Bearer ghp_xxx"
    ```
"""

import base64
import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


class Credential:
    """Base class of the three credential variants."""

    scheme: str | None = None

    @property
    def is_anonymous(self) -> bool:
        return self.scheme is None

    def authorization_header(self) -> str | None:
        """Return the ``Authorization`` header value, or None to omit it."""
        return None


@dataclass(frozen=True)
class Anonymous(Credential):
    """No authentication."""

    pass


@dataclass(frozen=True)
class BasicCredential(Credential):
    """HTTP Basic authentication with a login and password."""

    username: str
    password: str = field(repr=False)

    scheme = "Basic"

    def authorization_header(self) -> str:
        raw = f"{self.username}:{self.password}".encode()
        return f"Basic {base64.b64encode(raw).decode('ascii')}"


@dataclass(frozen=True)
class TokenCredential(Credential):
    """Bearer token (OAuth or personal access token)."""

    token: str = field(repr=False)

    scheme = "Bearer"

    def authorization_header(self) -> str:
        return f"Bearer {self.token}"


ANONYMOUS = Anonymous()


def resolve_credential(
    login: str | None = None,
    password: str | None = None,
    token: str | None = None,
) -> Credential:
    """Pick exactly one credential variant from a partial identity.

    Login and password together win over a token; a token alone gives a
    token credential; anything else is anonymous.

    Args:
        login: GitHub login for Basic authentication.
        password: Password (or token used as password) for Basic authentication.
        token: OAuth or personal access token.

    Returns:
        The resolved Credential.
    """
    if login and password:
        if token:
            logger.warning("Both login/password and token configured; using Basic authentication, token ignored")
        logger.debug(f"Resolved Basic credential for {login} (***)")
        return BasicCredential(username=login, password=password)

    if token:
        logger.debug("Resolved token credential (***)")
        return TokenCredential(token=token)

    if login or password:
        logger.debug("Incomplete login/password pair; falling back to anonymous access")
    return ANONYMOUS
