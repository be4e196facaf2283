"""Environment-backed resolution of GitHub client settings.

Each setting is looked up in order (first match wins):

1. Explicitly provided value
2. Environment variable (including values loaded from ``.env``)
3. Secret file named by a ``*_FILE`` environment variable (tokens only)
4. Default value

Environment variables:
    GITHUB_LOGIN, GITHUB_PASSWORD: Basic authentication.
    GITHUB_TOKEN: Bearer token.
    GITHUB_TOKEN_FILE: Path to a file holding the token.
    GITHUB_API_URL: API root (default ``https://api.github.com``).

Example:
    ```python
    from burr.auth import CredentialResolver

    resolver = CredentialResolver()
    credential = resolver.resolve_credential()
    base_url = resolver.resolve_base_url()
    ```

Security Considerations:
    - Secret values are never logged, only their source (masked as ***)
    - Secret files have surrounding whitespace stripped
    - ``.env`` loading is guarded by a lock and happens once per resolver
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from burr.auth.credentials import Credential, resolve_credential
from burr.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)

LOGIN_ENV_VAR = "GITHUB_LOGIN"
PASSWORD_ENV_VAR = "GITHUB_PASSWORD"
TOKEN_ENV_VAR = "GITHUB_TOKEN"
TOKEN_FILE_ENV_VAR = "GITHUB_TOKEN_FILE"
BASE_URL_ENV_VAR = "GITHUB_API_URL"

DEFAULT_BASE_URL = "https://api.github.com"


class CredentialResolver:
    """Resolve client settings from arguments, the environment and files.

    Args:
        dotenv_path: Path to a .env file. If None, python-dotenv searches
            parent directories.
        load_dotenv: Whether to load a .env file at all (default True).
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path

        if load_dotenv:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return
            # Existing environment variables win over .env entries
            if load_dotenv(dotenv_path=self._dotenv_path, override=False):
                logger.debug("Loaded .env file for GitHub settings")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        secret: bool = True,
    ) -> str | None:
        """Resolve one setting.

        Args:
            value: Explicit value; when given, nothing else is consulted.
            env_var_name: Environment variable to read.
            default: Fallback when neither value nor variable is set.
            required: Raise instead of returning None when nothing is found.
            secret: Mask the value in log messages (default True).

        Returns:
            The resolved value, or None.

        Raises:
            CredentialNotFoundError: If required and nothing was found.
        """
        if value is not None:
            result, source = value, "explicit parameter"
        elif env_var_name and os.environ.get(env_var_name):
            result, source = os.environ[env_var_name], f"environment variable '{env_var_name}'"
        elif default is not None:
            result, source = default, "default value"
        else:
            result, source = None, None

        if result is not None:
            shown = "***" if secret else result
            logger.debug(f"Resolved setting from {source}: {shown}")
        elif required:
            message = "Required setting not found"
            if env_var_name:
                message += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(message, env_var_name=env_var_name)

        return result

    def read_secret_file(self, file_path: str | Path, *, required: bool = False) -> str | None:
        """Read a secret from a file.

        Supports ``~`` and ``$VAR`` expansion. Missing or unreadable files
        return None unless ``required`` is set.

        Raises:
            CredentialFileError: If required and the file cannot be read.
        """
        path = Path(os.path.expanduser(os.path.expandvars(str(file_path))))

        try:
            content = path.read_text().strip()
        except FileNotFoundError:
            if required:
                raise CredentialFileError(f"Credential file not found: {path}") from None
            logger.debug(f"Credential file not found: {path}")
            return None
        except OSError as e:
            if required:
                raise CredentialFileError(f"Error reading credential file {path}: {e}") from e
            logger.warning(f"Error reading credential file {path}: {e}")
            return None

        logger.debug(f"Resolved secret from file: {path} (***)")
        return content or None

    def resolve_token(self, token: str | None = None) -> str | None:
        """Resolve a token from the argument, ``GITHUB_TOKEN`` or ``GITHUB_TOKEN_FILE``."""
        result = self.resolve(value=token, env_var_name=TOKEN_ENV_VAR)
        if result is not None:
            return result

        token_file = self.resolve(env_var_name=TOKEN_FILE_ENV_VAR, secret=False)
        if token_file:
            return self.read_secret_file(token_file, required=True)
        return None

    def resolve_credential(
        self,
        *,
        login: str | None = None,
        password: str | None = None,
        token: str | None = None,
    ) -> Credential:
        """Resolve login, password and token, then pick the credential variant."""
        return resolve_credential(
            login=self.resolve(value=login, env_var_name=LOGIN_ENV_VAR, secret=False),
            password=self.resolve(value=password, env_var_name=PASSWORD_ENV_VAR),
            token=self.resolve_token(token),
        )

    def resolve_base_url(self, base_url: str | None = None) -> str:
        """Resolve the API root from the argument or ``GITHUB_API_URL``."""
        return self.resolve(
            value=base_url,
            env_var_name=BASE_URL_ENV_VAR,
            default=DEFAULT_BASE_URL,
            secret=False,
        )
