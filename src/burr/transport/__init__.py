"""Transport collaborators for the Connection.

A transport executes one HTTP request and hands back a :class:`RawResponse`.
The Connection never talks to httpx directly, so any object satisfying the
:class:`Transport` protocol can stand in for the network.

Example:
    ```python
    import httpx

    from burr.transport import HttpxTransport

    transport = HttpxTransport(timeout=10.0)
    raw = await transport.execute(
        "GET", "https://api.github.com/users/octocat", {"Accept": "application/vnd.github+json"}
    )
    ```
"""

from burr.transport.base import RawResponse, Transport
from burr.transport.httpx_transport import DEFAULT_TIMEOUT, HttpxTransport

__all__ = ["DEFAULT_TIMEOUT", "HttpxTransport", "RawResponse", "Transport"]
