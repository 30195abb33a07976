"""Remove permission use case."""

from roleguard.application.ports import UnitOfWorkFactory
from roleguard.domain.entities import Role
from roleguard.domain.exceptions import NotFound


class RemovePermissionUseCase:
    """Drop a permission from a role if it has it."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, slug: str, permission: str) -> Role:
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_slug(slug)
            if not role:
                raise NotFound("Role", slug)

            # store operations swap in a new mapping only on change
            before = role.permissions
            role.remove_permission(permission)
            if role.permissions is not before:
                await uow.roles.update(role)
            return role
