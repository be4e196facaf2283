"""User resource models."""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any


@dataclass
class User:
    """A GitHub user account.

    Only ``login`` and ``id`` are always present; the rest depends on the
    endpoint and on whether the caller is the user. Unknown keys are kept in
    ``additional_properties``.
    """

    login: str | None = None
    id: int | None = None
    node_id: str | None = None
    type: str | None = None
    site_admin: bool | None = None
    name: str | None = None
    email: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    hireable: bool | None = None
    bio: str | None = None
    twitter_username: str | None = None
    avatar_url: str | None = None
    html_url: str | None = None
    url: str | None = None
    public_repos: int | None = None
    public_gists: int | None = None
    followers: int | None = None
    following: int | None = None
    created_at: str | None = None
    updated_at: str | None = None
    additional_properties: dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, src_dict: Mapping[str, Any]) -> "User":
        d = dict(src_dict)
        known = {f.name for f in fields(cls) if f.name != "additional_properties"}
        kwargs = {name: d.pop(name) for name in list(d) if name in known}
        return cls(**kwargs, additional_properties=d)

    def to_dict(self) -> dict[str, Any]:
        field_dict: dict[str, Any] = dict(self.additional_properties)
        for f in fields(self):
            if f.name != "additional_properties":
                field_dict[f.name] = getattr(self, f.name)
        return field_dict


@dataclass
class UserUpdate:
    """Changes to the authenticated user's profile.

    Fields left as None are not sent, so they stay unchanged on the server.
    """

    name: str | None = None
    email: str | None = None
    blog: str | None = None
    twitter_username: str | None = None
    company: str | None = None
    location: str | None = None
    hireable: bool | None = None
    bio: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}
