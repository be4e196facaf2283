"""Exceptions raised while resolving credentials from configuration.

Example:
    ```python
    from burr.auth.exceptions import CredentialNotFoundError

    if not token:
        raise CredentialNotFoundError("GitHub token not found", env_var_name="GITHUB_TOKEN")
    ```
"""

from burr.errors.exceptions import BurrError


class CredentialError(BurrError):
    """Base exception for configuration-time credential errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required setting cannot be resolved from any source.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when a secret file named in the configuration cannot be read."""

    pass
