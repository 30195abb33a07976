"""Update permission use case."""

from typing import Any

from roleguard.application.ports import UnitOfWorkFactory
from roleguard.domain.entities import Role
from roleguard.domain.exceptions import NotFound, ValidationError
from roleguard.domain.permissions import GRANT_VALUE_TYPES


class UpdatePermissionUseCase:
    """Change the value of a permission the role already has."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, slug: str, permission: str, value: Any) -> Role:
        if not isinstance(value, GRANT_VALUE_TYPES):
            raise ValidationError("Permission value must be a boolean, number, string or null")

        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_slug(slug)
            if not role:
                raise NotFound("Role", slug)

            # store operations swap in a new mapping only on change
            before = role.permissions
            role.update_permission(permission, value)
            if role.permissions is not before:
                await uow.roles.update(role)
            return role
