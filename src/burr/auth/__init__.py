"""Authentication for the GitHub client.

- Credential variants (anonymous, Basic, bearer token) and the rule picking one
- Resolution of credentials from the environment, ``.env`` and secret files

Example:
    ```python
    from burr.auth import CredentialResolver, resolve_credential

    credential = resolve_credential(login="octocat", password="secret")
    credential = CredentialResolver().resolve_credential()
    ```
"""

from burr.auth.credentials import (
    ANONYMOUS,
    Anonymous,
    BasicCredential,
    Credential,
    TokenCredential,
    resolve_credential,
)
from burr.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)
from burr.auth.resolver import DEFAULT_BASE_URL, CredentialResolver

__all__ = [
    "ANONYMOUS",
    "DEFAULT_BASE_URL",
    "Anonymous",
    "BasicCredential",
    "Credential",
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "TokenCredential",
    "resolve_credential",
]
