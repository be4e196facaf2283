"""Users API."""

from urllib.parse import quote

from burr.endpoints.base import Endpoint
from burr.errors.exceptions import InvalidArgumentError
from burr.models.users import User, UserUpdate


class UsersEndpoint(Endpoint):
    """Operations on GitHub user accounts.

    Example:
        ```python
        me = await client.users.get()
        me = await client.users.update(UserUpdate(bio="Hacking on burr"))
        octocat = await client.users.get_user("octocat")
        ```
    """

    async def get(self) -> User:
        """Return the authenticated user.

        Raises:
            AuthenticationRequiredError: If the connection is anonymous.
        """
        self._require_authentication("users.get")
        response = await self._connection.get("/user", User)
        return response.body

    async def update(self, patch: UserUpdate) -> User:
        """Update the authenticated user's profile and return the result.

        Raises:
            InvalidArgumentError: If patch is None.
            AuthenticationRequiredError: If the connection is anonymous.
        """
        if patch is None:
            raise InvalidArgumentError("patch must not be None", argument="patch")
        self._require_authentication("users.update")
        response = await self._connection.patch("/user", patch, User)
        return response.body

    async def get_user(self, login: str) -> User:
        """Return the public profile of ``login``. No authentication needed."""
        if not login:
            raise InvalidArgumentError("login must not be empty", argument="login")
        response = await self._connection.get(f"/users/{quote(login, safe='')}", User)
        return response.body
