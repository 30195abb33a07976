"""Repository ports."""

from roleguard.application.ports.repositories.role_repository import RoleRepository
from roleguard.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "RoleRepository",
    "UserRepository",
]
