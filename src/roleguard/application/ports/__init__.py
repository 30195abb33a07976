"""Application ports (interfaces for infrastructure)."""

from roleguard.application.ports.repositories import RoleRepository, UserRepository
from roleguard.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "RoleRepository",
    "UnitOfWork",
    "UnitOfWorkFactory",
    "UserRepository",
]
