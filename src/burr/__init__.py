"""burr - typed async client for the GitHub REST API.

The library is built around a single Connection:
- Credential selection (anonymous, Basic, bearer token)
- Request construction and dispatch through a pluggable transport
- Typed response envelopes and a classified error taxonomy
- Thin resource endpoints (Users) over the Connection

Example:
    ```python
    from burr import Client
    from burr.models import UserUpdate

    async with Client(login="octocat", password="secret") as client:
        me = await client.users.get()
        me = await client.users.update(UserUpdate(name="The Octocat"))
    ```
"""

from burr._version import __version__
from burr.client import Client
from burr.connection import Connection, ConnectionProtocol
from burr.response import RateLimit, Response

__all__ = [
    "Client",
    "Connection",
    "ConnectionProtocol",
    "RateLimit",
    "Response",
    "__version__",
]
