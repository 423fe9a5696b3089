"""Read-only projection of the current authentication context."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """Session roles known to the storefront."""

    GUEST = "guest"
    MEMBER = "member"
    ADMIN = "admin"


@dataclass(frozen=True)
class SessionView:
    """What the storefront may know about the signed-in user."""

    is_privileged_role: bool = False
    is_authenticated: bool = False
    display_name: str | None = None

    @classmethod
    def for_role(cls, role: Role, display_name: str | None = None) -> SessionView:
        """Build the view a session of ``role`` would expose."""
        return cls(
            is_privileged_role=role is Role.ADMIN,
            is_authenticated=role is not Role.GUEST,
            display_name=display_name,
        )


ANONYMOUS = SessionView()
