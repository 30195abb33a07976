"""Attach/detach user use cases - role membership."""

from uuid import UUID

from roleguard.application.ports import UnitOfWorkFactory
from roleguard.domain.exceptions import NotFound


class AttachUserUseCase:
    """Give a user the role. Attaching twice is harmless."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, slug: str, user_id: UUID) -> None:
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_slug(slug)
            if not role:
                raise NotFound("Role", slug)
            if not await uow.users.get_by_id(user_id):
                raise NotFound("User", str(user_id))
            await uow.roles.attach_user(role.id, user_id)


class DetachUserUseCase:
    """Take the role away from a user."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, slug: str, user_id: UUID) -> None:
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_slug(slug)
            if not role:
                raise NotFound("Role", slug)
            if not await uow.users.get_by_id(user_id):
                raise NotFound("User", str(user_id))
            await uow.roles.detach_user(role.id, user_id)
