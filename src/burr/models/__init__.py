"""Typed GitHub resources."""

from burr.models.users import User, UserUpdate

__all__ = ["User", "UserUpdate"]
