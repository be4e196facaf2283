"""Resource endpoints bound to a Connection."""

from burr.endpoints.base import Endpoint
from burr.endpoints.users import UsersEndpoint

__all__ = ["Endpoint", "UsersEndpoint"]
