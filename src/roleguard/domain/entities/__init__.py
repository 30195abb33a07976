"""Domain entities."""

from roleguard.domain.entities.role import Role
from roleguard.domain.entities.user import User

__all__ = [
    "Role",
    "User",
]
