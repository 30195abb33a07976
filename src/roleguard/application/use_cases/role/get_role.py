"""Get role use case."""

from roleguard.application.ports import UnitOfWorkFactory
from roleguard.domain.entities import Role
from roleguard.domain.exceptions import NotFound


class GetRoleUseCase:
    """Load a role by slug, optionally with its users."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, slug: str, with_users: bool = False) -> Role:
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_slug(slug)
            if not role:
                raise NotFound("Role", slug)
            if with_users:
                role.users = await uow.roles.list_users(role.id)
            return role
