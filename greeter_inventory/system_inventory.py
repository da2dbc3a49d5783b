"""Immutable snapshot of the users and sessions offered at login."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class SystemInventory:
    """Regular users and launchable sessions, frozen at construction.

    ``users`` maps display names to system usernames; ``sessions`` maps
    display names to argv tuples. Rebuild a new instance to pick up changes.
    """

    users: Mapping[str, str] = field(default_factory=dict)
    sessions: Mapping[str, Sequence[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Copy the inputs into read-only views."""
        frozen_users = MappingProxyType(dict(self.users))
        frozen_sessions = MappingProxyType(
            {name: tuple(cmd) for name, cmd in self.sessions.items()}
        )
        object.__setattr__(self, "users", frozen_users)
        object.__setattr__(self, "sessions", frozen_sessions)

    def __hash__(self) -> int:
        return hash(
            (frozenset(self.users.items()), frozenset(self.sessions.items()))
        )

    def user_names(self) -> list[str]:
        """Display names of all users, sorted case-insensitively."""
        return sorted(self.users, key=str.lower)

    def session_names(self) -> list[str]:
        """Display names of all sessions, sorted case-insensitively."""
        return sorted(self.sessions, key=str.lower)

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form with sorted keys, suitable for YAML/JSON output."""
        return {
            "users": {name: self.users[name] for name in self.user_names()},
            "sessions": {
                name: list(self.sessions[name]) for name in self.session_names()
            },
        }
