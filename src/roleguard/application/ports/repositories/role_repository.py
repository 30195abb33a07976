"""Role repository port."""

from typing import Any, Protocol
from uuid import UUID

from roleguard.domain.entities import Role


class RoleRepository(Protocol):
    """Port for role persistence and role membership."""

    async def get_by_slug(self, slug: str) -> Role | None: ...

    async def list_all(self) -> list[Role]: ...

    async def create(self, slug: str, name: str, permissions: dict[str, Any]) -> Role: ...

    async def update(self, role: Role) -> None: ...

    async def delete(self, role_id: UUID) -> None: ...

    async def list_users(self, role_id: UUID) -> list[Any]: ...

    async def attach_user(self, role_id: UUID, user_id: UUID) -> None: ...

    async def detach_user(self, role_id: UUID, user_id: UUID) -> None: ...
