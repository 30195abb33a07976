"""Delete role use case."""

from roleguard.application.ports import UnitOfWorkFactory
from roleguard.domain.exceptions import NotFound


class DeleteRoleUseCase:
    """Delete role by slug; memberships go with it."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, slug: str) -> None:
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_slug(slug)
            if not role:
                raise NotFound("Role", slug)
            await uow.roles.delete(role.id)
